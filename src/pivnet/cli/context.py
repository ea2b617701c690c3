"""Per-invocation objects shared by the CLI commands."""

from dataclasses import dataclass

import typer

from .. import __version__
from ..client import PivnetClient
from ..exceptions import PivnetError
from .config import CLIConfig, get_config
from .errors import ErrorHandler
from .printer import Printer


@dataclass
class CLIContext:
    config: CLIConfig
    client: PivnetClient
    printer: Printer
    error_handler: ErrorHandler


def build_context() -> CLIContext:
    config = get_config()
    error_handler = ErrorHandler(config.output_format)

    if not config.api_token:
        typer.echo(
            "error: an API token is required (--api-token or PIVNET_API_TOKEN)",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        client = PivnetClient(
            token=config.api_token,
            host=config.host,
            user_agent=f"pivnet-cli/{__version__}",
            skip_ssl_validation=config.skip_ssl_validation,
        )
    except PivnetError as e:
        error_handler.handle_error(e)
        raise typer.Exit(code=1)

    return CLIContext(
        config=config,
        client=client,
        printer=Printer(config.output_format),
        error_handler=error_handler,
    )
