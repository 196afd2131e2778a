"""Shared Click options for bloomsieve CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

import click

F = TypeVar("F", bound=Callable[..., None])


def config_option(func: F) -> F:
    """Configuration file option."""
    return click.option(
        "-c",
        "--config",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Configuration file (YAML)",
    )(func)


def verbose_option(func: F) -> F:
    """Verbosity option (-v/--verbose everywhere)."""
    return click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v for INFO, -vv for DEBUG)",
    )(func)


def log_file_option(func: F) -> F:
    """Log file option."""
    return click.option(
        "--log-file",
        type=click.Path(dir_okay=False, path_type=Path),
        help="Path for log file output",
    )(func)


def search_options(func: F) -> F:
    """Options describing the search parameters.

    Every option defaults to None so that unset options fall through to the
    configuration file, then to the built-in defaults. The caching switch is
    a flag pair; whether it was given is read from its parameter source.
    """
    options = [
        click.option(
            "--index",
            "index_file",
            type=click.Path(dir_okay=False, path_type=Path),
            help="Index file; cached corrections are kept in its directory",
        ),
        click.option("--pattern", "pattern_size", type=click.IntRange(min=1), help="Pattern size [default: 100]"),
        click.option("--window", "window_size", type=click.IntRange(min=1), help="Window size [default: 23]"),
        click.option(
            "--kmer",
            "kmer_size",
            type=click.IntRange(1, 32),
            help="k-mer size, mutually exclusive with --shape [default: 19]",
        ),
        click.option("--shape", help="Shape as 01-pattern, mutually exclusive with --kmer"),
        click.option(
            "--fpr",
            type=click.FloatRange(0.0, 1.0, min_open=True, max_open=True),
            help="False positive rate of the index [default: 0.05]",
        ),
        click.option(
            "--p-max",
            "p_max",
            type=click.FloatRange(0.0, 1.0, min_open=True, max_open=True),
            help="Tolerated probability of a spurious match [default: 0.15]",
        ),
        click.option(
            "--threshold",
            type=click.FloatRange(0.0, 1.0),
            help="Manual threshold; disables the correction",
        ),
        click.option(
            "--cache-thresholds/--no-cache-thresholds",
            default=True,
            help="Write computed corrections next to the index [default: on, or from config]",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func
