"""bloomsieve: threshold correction for approximate minimizer search."""

from bloomsieve.__version__ import __version__
from bloomsieve.correction import (
    CorrectionCache,
    MinimizerBounds,
    SearchParameters,
    Shape,
    precompute_correction,
)

__all__ = [
    "__version__",
    "CorrectionCache",
    "MinimizerBounds",
    "SearchParameters",
    "Shape",
    "precompute_correction",
]
