"""Command-line interface for bloomsieve."""

from bloomsieve.cli.main import cli, main

__all__ = ["cli", "main"]
