"""Error reporting for the command-line interface."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..exceptions import AuthenticationError, PivnetError


class ErrorHandler:
    """
    Reports a failed command and ends the process.

    Args:
        output_format: ``table``, ``json`` or ``yaml``
        console: Console to write to, stderr by default
    """

    def __init__(self, output_format: str = "table", console: Optional[Console] = None):
        self.output_format = output_format
        self.console = console or Console(stderr=True, soft_wrap=True, emoji=False)

    def message_for(self, error: PivnetError) -> str:
        message = str(error)
        if isinstance(error, AuthenticationError):
            message = (
                f"{message} - check your API token "
                "(--api-token or PIVNET_API_TOKEN)"
            )
        return message

    def handle_error(self, error: PivnetError) -> None:
        """Print the error and exit with status 1."""
        message = self.message_for(error)

        if self.output_format in ("json", "yaml"):
            payload = {"message": message}
            if error.status_code is not None:
                payload["status"] = error.status_code
            self.console.print(json.dumps(payload), markup=False, highlight=False)
        else:
            self.console.print(f"[bold red]error:[/bold red] {escape(message)}")

        raise typer.Exit(code=1)
