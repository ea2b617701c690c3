import typer

from ._helpers import run_command

PRODUCT_COLUMNS = [
    ("ID", lambda p: p.id),
    ("Slug", lambda p: p.slug),
    ("Name", lambda p: p.name),
]


def products() -> None:
    """List all products."""

    def action(ctx):
        ctx.printer.print_records(ctx.client.products.list(), PRODUCT_COLUMNS)

    run_command(action)


def product(
    slug: str = typer.Option(..., "--slug", "-s", help="Product slug."),
) -> None:
    """Show a product."""

    def action(ctx):
        ctx.printer.print_record(ctx.client.products.get(slug), PRODUCT_COLUMNS)

    run_command(action)
