from typing import Callable

import typer

from ...exceptions import PivnetError
from ..context import CLIContext, build_context

PRODUCT_SLUG = typer.Option(
    ..., "--product-slug", "-p", help="Product slug, e.g. 'elastic-runtime'."
)
RELEASE_VERSION = typer.Option(
    ..., "--release-version", "-v", "-r", help="Release version, e.g. '1.2.3'."
)


def run_command(action: Callable[[CLIContext], None]) -> None:
    """Run ``action`` with a fresh context, routing API errors to the error handler."""
    ctx = build_context()
    try:
        action(ctx)
    except PivnetError as e:
        ctx.error_handler.handle_error(e)
