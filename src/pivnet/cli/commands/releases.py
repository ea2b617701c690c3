from ...utils import truncate_string
from ._helpers import PRODUCT_SLUG, RELEASE_VERSION, run_command

RELEASE_COLUMNS = [
    ("ID", lambda r: r.id),
    ("Version", lambda r: r.version),
    ("Description", lambda r: truncate_string(r.description, 40)),
    ("Release Date", lambda r: r.release_date),
    ("Updated At", lambda r: r.updated_at),
]


def releases(product_slug: str = PRODUCT_SLUG) -> None:
    """List releases of a product."""

    def action(ctx):
        ctx.printer.print_records(ctx.client.releases.list(product_slug), RELEASE_COLUMNS)

    run_command(action)


def release(
    product_slug: str = PRODUCT_SLUG, release_version: str = RELEASE_VERSION
) -> None:
    """Show a release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        ctx.printer.print_record(
            ctx.client.releases.get(product_slug, found.id), RELEASE_COLUMNS
        )

    run_command(action)


def delete_release(
    product_slug: str = PRODUCT_SLUG, release_version: str = RELEASE_VERSION
) -> None:
    """Delete a release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        ctx.client.releases.delete(product_slug, found)
        ctx.printer.print_message(
            f"Release {release_version} deleted successfully for {product_slug}"
        )

    run_command(action)


def release_types() -> None:
    """List release types."""

    def action(ctx):
        ctx.printer.print_values(ctx.client.release_types.list(), "Release Type")

    run_command(action)
