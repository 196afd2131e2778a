"""`correction` subcommand: print the threshold correction table."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from click.core import ParameterSource

from bloomsieve.cli.common_options import (
    config_option,
    log_file_option,
    search_options,
    verbose_option,
)
from bloomsieve.cli.exit_codes import EXIT_ERROR, EXIT_USAGE
from bloomsieve.config import Config, load_config
from bloomsieve.correction import precompute_correction
from bloomsieve.exceptions import BloomSieveError, ConfigurationError, ContractViolationError
from bloomsieve.utils.logging import get_logger, level_from_verbosity, setup_logging


def _given(name: str) -> bool:
    """Whether option ``name`` was passed on the command line or via the environment."""
    source = click.get_current_context().get_parameter_source(name)
    return source not in (None, ParameterSource.DEFAULT)


def merge_cli_overrides(cfg: Config, index_file: Optional[Path], **search_overrides) -> Config:
    """Apply CLI values on top of ``cfg``; None means "not given"."""
    if index_file is not None:
        cfg.index_file = index_file
    if search_overrides.get("kmer_size") is not None:
        # An explicit k-mer size replaces any shape from the config file
        cfg.search.shape = None
    for key, value in search_overrides.items():
        if value is not None:
            setattr(cfg.search, key, value)
    return cfg


@click.command(name="correction")
@search_options
@click.option("--bounds", "show_bounds", is_flag=True, help="Print the minimizer count range first")
@config_option
@verbose_option
@log_file_option
def correction(
    index_file: Optional[Path],
    pattern_size: Optional[int],
    window_size: Optional[int],
    kmer_size: Optional[int],
    shape: Optional[str],
    fpr: Optional[float],
    p_max: Optional[float],
    threshold: Optional[float],
    cache_thresholds: bool,
    show_bounds: bool,
    config: Optional[Path],
    verbose: int,
    log_file: Optional[Path],
) -> None:
    """Compute or load the threshold correction for a set of search parameters.

    Prints one line per minimizer count: the count and the number of
    false positive hits tolerated for it.
    """
    if kmer_size is not None and shape is not None:
        click.echo("Error: --kmer and --shape are mutually exclusive", err=True)
        sys.exit(EXIT_USAGE)

    try:
        cfg = load_config(config) if config else Config()
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_USAGE)

    default_level = getattr(logging, str(cfg.runtime.log_level).upper(), logging.WARNING)
    setup_logging(
        level=level_from_verbosity(verbose, default=default_level),
        log_file=log_file or cfg.runtime.log_file,
    )
    logger = get_logger("cli")

    merge_cli_overrides(
        cfg,
        index_file,
        pattern_size=pattern_size,
        window_size=window_size,
        kmer_size=kmer_size,
        shape=shape,
        fpr=fpr,
        p_max=p_max,
        threshold=threshold,
        cache_thresholds=cache_thresholds if _given("cache_thresholds") else None,
    )

    try:
        parameters = cfg.to_parameters()
        table = precompute_correction(parameters)
    except (ConfigurationError, ContractViolationError) as exc:
        logger.error(f"Invalid parameters: {exc}")
        sys.exit(EXIT_USAGE)
    except BloomSieveError as exc:
        logger.error(f"Correction failed: {exc}")
        sys.exit(EXIT_ERROR)

    if not table:
        click.echo("Manual threshold set; no correction applied.")
        return

    bounds = parameters.bounds()
    if show_bounds:
        click.echo(f"# minimal={bounds.minimal} maximal={bounds.maximal} entries={bounds.size}")
    for count, value in zip(bounds.counts(), table):
        click.echo(f"{count}\t{value}")
