from typing import List, Optional

import typer

from ._helpers import PRODUCT_SLUG, RELEASE_VERSION, run_command

USER_GROUP_COLUMNS = [
    ("ID", lambda g: g.id),
    ("Name", lambda g: g.name),
    ("Description", lambda g: g.description),
]

USER_GROUP_ID = typer.Option(..., "--user-group-id", "-u", help="User group ID.")


def user_groups(
    product_slug: Optional[str] = typer.Option(
        None, "--product-slug", "-p", help="Product slug (requires --release-version)."
    ),
    release_version: Optional[str] = typer.Option(
        None, "--release-version", "-v", "-r", help="Release version (requires --product-slug)."
    ),
) -> None:
    """List all user groups, or the ones attached to a release."""
    if bool(product_slug) != bool(release_version):
        typer.echo(
            "error: --product-slug and --release-version must be given together",
            err=True,
        )
        raise typer.Exit(code=1)

    def action(ctx):
        if product_slug:
            found = ctx.client.releases.get_by_version(product_slug, release_version)
            groups = ctx.client.user_groups.list_for_release(product_slug, found.id)
        else:
            groups = ctx.client.user_groups.list()
        ctx.printer.print_records(groups, USER_GROUP_COLUMNS)

    run_command(action)


def user_group(user_group_id: int = USER_GROUP_ID) -> None:
    """Show a user group."""

    def action(ctx):
        ctx.printer.print_record(
            ctx.client.user_groups.get(user_group_id),
            USER_GROUP_COLUMNS + [("Members", lambda g: g.members)],
        )

    run_command(action)


def create_user_group(
    name: str = typer.Option(..., "--name", "-n", help="User group name."),
    description: str = typer.Option(
        ..., "--description", "-d", help="User group description."
    ),
    members: Optional[List[str]] = typer.Option(
        None, "--member", "-m", help="Member email; repeat for several members."
    ),
) -> None:
    """Create a user group."""

    def action(ctx):
        created = ctx.client.user_groups.create(name, description, members or [])
        ctx.printer.print_record(created, USER_GROUP_COLUMNS)

    run_command(action)


def delete_user_group(user_group_id: int = USER_GROUP_ID) -> None:
    """Delete a user group."""

    def action(ctx):
        ctx.client.user_groups.delete(user_group_id)
        ctx.printer.print_message(f"User group {user_group_id} deleted successfully")

    run_command(action)


def add_user_group(
    product_slug: str = PRODUCT_SLUG,
    release_version: str = RELEASE_VERSION,
    user_group_id: int = USER_GROUP_ID,
) -> None:
    """Give a user group access to a release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        ctx.client.user_groups.add_to_release(product_slug, found.id, user_group_id)
        ctx.printer.print_message(
            f"User group {user_group_id} added to {product_slug}/{release_version}"
        )

    run_command(action)


def remove_user_group(
    product_slug: str = PRODUCT_SLUG,
    release_version: str = RELEASE_VERSION,
    user_group_id: int = USER_GROUP_ID,
) -> None:
    """Revoke a user group's access to a release."""

    def action(ctx):
        found = ctx.client.releases.get_by_version(product_slug, release_version)
        ctx.client.user_groups.remove_from_release(
            product_slug, found.id, user_group_id
        )
        ctx.printer.print_message(
            f"User group {user_group_id} removed from {product_slug}/{release_version}"
        )

    run_command(action)
