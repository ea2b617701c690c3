import typer

from ._helpers import PRODUCT_SLUG, RELEASE_VERSION, run_command

UPGRADE_PATH_COLUMNS = [
    ("ID", lambda u: u.release.id if u.release else ""),
    ("Version", lambda u: u.release.version if u.release else ""),
]

PREVIOUS_RELEASE_VERSION = typer.Option(
    ...,
    "--previous-release-version",
    "-u",
    help="Version of the release that upgrades to --release-version.",
)


def release_upgrade_paths(
    product_slug: str = PRODUCT_SLUG, release_version: str = RELEASE_VERSION
) -> None:
    """List releases that can upgrade to a release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        paths = ctx.client.release_upgrade_paths.get(product_slug, found.id)
        ctx.printer.print_records(paths, UPGRADE_PATH_COLUMNS)

    run_command(action)


def add_release_upgrade_path(
    product_slug: str = PRODUCT_SLUG,
    release_version: str = RELEASE_VERSION,
    previous_release_version: str = PREVIOUS_RELEASE_VERSION,
) -> None:
    """Add an upgrade path from a previous release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        previous = ctx.client.releases.get_by_version(
            product_slug, previous_release_version
        )
        ctx.client.release_upgrade_paths.add(product_slug, found.id, previous.id)
        ctx.printer.print_message(
            f"Upgrade path {previous_release_version} -> {release_version} "
            f"added for {product_slug}"
        )

    run_command(action)


def remove_release_upgrade_path(
    product_slug: str = PRODUCT_SLUG,
    release_version: str = RELEASE_VERSION,
    previous_release_version: str = PREVIOUS_RELEASE_VERSION,
) -> None:
    """Remove an upgrade path from a previous release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        previous = ctx.client.releases.get_by_version(
            product_slug, previous_release_version
        )
        ctx.client.release_upgrade_paths.remove(product_slug, found.id, previous.id)
        ctx.printer.print_message(
            f"Upgrade path {previous_release_version} -> {release_version} "
            f"removed for {product_slug}"
        )

    run_command(action)
