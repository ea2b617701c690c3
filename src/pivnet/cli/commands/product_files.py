from typing import Optional

import typer

from ._helpers import PRODUCT_SLUG, RELEASE_VERSION, run_command

PRODUCT_FILE_COLUMNS = [
    ("ID", lambda f: f.id),
    ("Name", lambda f: f.name),
    ("File Version", lambda f: f.file_version),
    ("File Type", lambda f: f.file_type),
    ("AWS Object Key", lambda f: f.aws_object_key),
]

PRODUCT_FILE_ID = typer.Option(..., "--product-file-id", "-i", help="Product file ID.")
OPTIONAL_RELEASE_VERSION = typer.Option(
    None, "--release-version", "-v", "-r", help="Limit to one release."
)


def product_files(
    product_slug: str = PRODUCT_SLUG,
    release_version: Optional[str] = OPTIONAL_RELEASE_VERSION,
) -> None:
    """List product files of a product or of one release."""

    def action(ctx):
        if release_version:
            found = ctx.client.releases.get_by_version(product_slug, release_version)
            files = ctx.client.product_files.list_for_release(product_slug, found.id)
        else:
            files = ctx.client.product_files.list(product_slug)
        ctx.printer.print_records(files, PRODUCT_FILE_COLUMNS)

    run_command(action)


def product_file(
    product_slug: str = PRODUCT_SLUG,
    product_file_id: int = PRODUCT_FILE_ID,
    release_version: Optional[str] = OPTIONAL_RELEASE_VERSION,
) -> None:
    """Show a product file."""

    def action(ctx):
        if release_version:
            found = ctx.client.releases.get_by_version(product_slug, release_version)
            pf = ctx.client.product_files.get_for_release(
                product_slug, found.id, product_file_id
            )
        else:
            pf = ctx.client.product_files.get(product_slug, product_file_id)
        ctx.printer.print_record(pf, PRODUCT_FILE_COLUMNS)

    run_command(action)


def add_product_file(
    product_slug: str = PRODUCT_SLUG,
    release_version: str = RELEASE_VERSION,
    product_file_id: int = PRODUCT_FILE_ID,
) -> None:
    """Attach a product file to a release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        ctx.client.product_files.add_to_release(product_slug, found.id, product_file_id)
        ctx.printer.print_message(
            f"Product file {product_file_id} added to {product_slug}/{release_version}"
        )

    run_command(action)


def remove_product_file(
    product_slug: str = PRODUCT_SLUG,
    release_version: str = RELEASE_VERSION,
    product_file_id: int = PRODUCT_FILE_ID,
) -> None:
    """Detach a product file from a release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        ctx.client.product_files.remove_from_release(
            product_slug, found.id, product_file_id
        )
        ctx.printer.print_message(
            f"Product file {product_file_id} removed from {product_slug}/{release_version}"
        )

    run_command(action)


def delete_product_file(
    product_slug: str = PRODUCT_SLUG,
    product_file_id: int = PRODUCT_FILE_ID,
) -> None:
    """Delete a product file."""

    def action(ctx):
        deleted = ctx.client.product_files.delete(product_slug, product_file_id)
        if ctx.printer.output_format == "table":
            ctx.printer.print_message(f"Product file {deleted.id} deleted successfully")
        else:
            ctx.printer.print_record(deleted, PRODUCT_FILE_COLUMNS)

    run_command(action)
