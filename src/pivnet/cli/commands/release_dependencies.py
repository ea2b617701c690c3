import typer

from ._helpers import PRODUCT_SLUG, RELEASE_VERSION, run_command

DEPENDENCY_COLUMNS = [
    ("ID", lambda d: d.release.id if d.release else ""),
    ("Version", lambda d: d.release.version if d.release else ""),
    (
        "Product ID",
        lambda d: d.release.product.id if d.release and d.release.product else "",
    ),
    (
        "Product Name",
        lambda d: d.release.product.name if d.release and d.release.product else "",
    ),
]

DEPENDENT_PRODUCT_SLUG = typer.Option(
    ..., "--dependent-product-slug", "-P", help="Product slug of the dependency."
)
DEPENDENT_RELEASE_VERSION = typer.Option(
    ..., "--dependent-release-version", "-R", help="Release version of the dependency."
)


def release_dependencies(
    product_slug: str = PRODUCT_SLUG, release_version: str = RELEASE_VERSION
) -> None:
    """List dependencies of a release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        dependencies = ctx.client.release_dependencies.list(product_slug, found.id)
        ctx.printer.print_records(dependencies, DEPENDENCY_COLUMNS)

    run_command(action)


def _change_dependency(
    add: bool,
    product_slug: str,
    release_version: str,
    dependent_product_slug: str,
    dependent_release_version: str,
) -> None:
    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        dependent = ctx.client.releases.get_by_version(
            dependent_product_slug, dependent_release_version
        )
        if add:
            ctx.client.release_dependencies.add(product_slug, found.id, dependent.id)
            verb = "added to"
        else:
            ctx.client.release_dependencies.remove(product_slug, found.id, dependent.id)
            verb = "removed from"
        ctx.printer.print_message(
            f"Dependency {dependent_product_slug}/{dependent_release_version} "
            f"{verb} {product_slug}/{release_version}"
        )

    run_command(action)


def add_release_dependency(
    product_slug: str = PRODUCT_SLUG,
    release_version: str = RELEASE_VERSION,
    dependent_product_slug: str = DEPENDENT_PRODUCT_SLUG,
    dependent_release_version: str = DEPENDENT_RELEASE_VERSION,
) -> None:
    """Add a release dependency."""
    _change_dependency(
        True, product_slug, release_version, dependent_product_slug, dependent_release_version
    )


def remove_release_dependency(
    product_slug: str = PRODUCT_SLUG,
    release_version: str = RELEASE_VERSION,
    dependent_product_slug: str = DEPENDENT_PRODUCT_SLUG,
    dependent_release_version: str = DEPENDENT_RELEASE_VERSION,
) -> None:
    """Remove a release dependency."""
    _change_dependency(
        False, product_slug, release_version, dependent_product_slug, dependent_release_version
    )
