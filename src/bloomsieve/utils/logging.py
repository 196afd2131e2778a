"""Centralized logging utilities for bloomsieve.

Provides a single place to configure logging and fetch namespaced loggers.
"""

from __future__ import annotations

import logging
import warnings
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

# Log rotation settings
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAMESPACE = "bloomsieve"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> None:
    """Configure logging for the 'bloomsieve' namespace.

    Args:
        level: Logging level for the application logger
        log_file: Optional path for log file output
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)

    Notes:
        - Root logger kept at WARNING to suppress third-party noise
        - Console handler uses concise format; file handler (if any) is detailed at DEBUG
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    app_logger = logging.getLogger(LOGGER_NAMESPACE)
    app_logger.setLevel(level)
    # Avoid duplicate logs if called multiple times
    for h in list(app_logger.handlers):
        app_logger.removeHandler(h)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    app_logger.addHandler(console)

    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            app_logger.addHandler(file_handler)
            # The file handler wants DEBUG even when the console is quieter
            app_logger.setLevel(logging.DEBUG)
        except OSError as e:
            warnings.warn(f"Failed to create log file {log_file}: {e}")

    # Do not propagate to root to avoid double-printing
    app_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger under 'bloomsieve' root."""
    base = logging.getLogger(LOGGER_NAMESPACE)
    return base.getChild(name)


def level_from_verbosity(verbose: int, default: int = logging.WARNING) -> int:
    """Map a -v count onto a logging level (-v INFO, -vv DEBUG)."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return default


class LogTemplates:
    """Standard log message templates for the correction engine.

    Example usage:
        logger.info(LogTemplates.CACHE_HIT.format(path=path, entries=23))
    """

    # Cache lifecycle
    CACHE_HIT = "Loaded correction table from {path} ({entries:,} entries)"
    CACHE_MISS = "No cached correction at {path}"
    CACHE_STORED = "Cached correction table at {path}"
    CACHE_DISABLED = "Threshold caching disabled, not writing {path}"
    CACHE_WRITE_FAILED = "Could not cache correction table at {path}: {error}"

    # Computation
    MANUAL_THRESHOLD = "Manual threshold set, skipping correction"
    COMPUTE_DONE = "Computed correction for {low}..{high} minimizers in {duration:.3f}s"
    UNDERFLOW = "Binomial mass underflowed for {count} minimizers, correction clamped to 0"
    NO_TOLERANCE = (
        "No false positive tolerated for {count} minimizers: P(X = 1) = {mass:.3g} < p_max = {p_max}"
    )
    NOT_MONOTONIC = "Correction decreases at minimizer counts {counts}"
