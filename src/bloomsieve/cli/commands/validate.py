"""Installation validation command."""

from __future__ import annotations

import sys

import click

from bloomsieve import __version__
from bloomsieve.cli.exit_codes import EXIT_ERROR
from bloomsieve.utils.validators import validate_installation


@click.command()
def validate() -> None:
    """Validate bloomsieve installation and dependencies."""
    click.echo("Validating bloomsieve installation...")

    issues = validate_installation()
    if not issues:
        click.echo("✓ All checks passed!")
        click.echo(f"  bloomsieve version: {__version__}")
    else:
        click.echo("✗ Issues found:")
        for issue in issues:
            click.echo(f"  - {issue}")
        sys.exit(EXIT_ERROR)
