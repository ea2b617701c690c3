"""Command-line interface for pivnet-client."""

from .app import app, main

__all__ = ["app", "main"]
