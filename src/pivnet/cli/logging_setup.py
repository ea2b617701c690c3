"""Logging configuration for the command-line interface."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_path=verbose,
                rich_tracebacks=verbose,
            )
        ],
        force=True,
    )
    # urllib3 is chatty at DEBUG and repeats what the client already logs
    logging.getLogger("urllib3").setLevel(logging.INFO if verbose else logging.WARNING)
