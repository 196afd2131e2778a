"""Pytest configuration for bloomsieve tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add src directory to Python path
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bloomsieve.correction import SearchParameters  # noqa: E402


@pytest.fixture(autouse=True)
def reset_logging_after_test():
    """Reset bloomsieve logger state after each test.

    setup_logging() sets propagate=False, which breaks caplog in later tests.
    """
    yield
    app_logger = logging.getLogger("bloomsieve")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True


@pytest.fixture
def index_file(tmp_path):
    """Index location inside a fresh directory."""
    return tmp_path / "raptor.index"


@pytest.fixture
def example_parameters(index_file):
    """pattern 50, window 23, k 19, fpr 0.05, p_max 0.01."""
    return SearchParameters.create(
        pattern_size=50,
        window_size=23,
        shape=19,
        fpr=0.05,
        p_max=0.01,
        index_file=index_file,
    )
