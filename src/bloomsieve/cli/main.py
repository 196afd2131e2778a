"""Click application entrypoint for bloomsieve."""

from __future__ import annotations

import sys

import click

from bloomsieve import __version__
from bloomsieve.cli.exit_codes import EXIT_ERROR, EXIT_SIGINT, EXIT_SUCCESS

from .commands.config import init_config
from .commands.correction import correction
from .commands.validate import validate


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        click.echo(f"bloomsieve {__version__}")
        ctx.exit()


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-V",
    "--version",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_print_version,
    help="Show the version and exit.",
)
def cli() -> None:
    """bloomsieve: threshold correction for minimizer-based Bloom filter search."""


cli.add_command(correction)
cli.add_command(init_config)
cli.add_command(validate)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        cli(argv)
        return EXIT_SUCCESS
    except KeyboardInterrupt:
        return EXIT_SIGINT
    except SystemExit as exc:
        # Preserve explicit exit codes from cli()
        if exc.code is None:
            return EXIT_SUCCESS
        return exc.code if isinstance(exc.code, int) else EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
