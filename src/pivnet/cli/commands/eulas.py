import typer

from ._helpers import PRODUCT_SLUG, RELEASE_VERSION, run_command

EULA_COLUMNS = [
    ("ID", lambda e: e.id),
    ("Slug", lambda e: e.slug),
    ("Name", lambda e: e.name),
]


def eulas() -> None:
    """List EULAs."""

    def action(ctx):
        ctx.printer.print_records(ctx.client.eulas.list(), EULA_COLUMNS)

    run_command(action)


def eula(
    eula_slug: str = typer.Option(..., "--eula-slug", "-e", help="EULA slug."),
) -> None:
    """Show an EULA."""

    def action(ctx):
        ctx.printer.print_record(ctx.client.eulas.get(eula_slug), EULA_COLUMNS)

    run_command(action)


def accept_eula(
    product_slug: str = PRODUCT_SLUG, release_version: str = RELEASE_VERSION
) -> None:
    """Accept the EULA of a release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        ctx.client.eulas.accept(product_slug, found.id)
        ctx.printer.print_message(
            f"EULA accepted for {product_slug}/{release_version}"
        )

    run_command(action)
