"""Threshold correction for minimizer-based Bloom filter search."""

from bloomsieve.correction.cache import CorrectionCache, decode_table, encode_table
from bloomsieve.correction.calculator import (
    ThresholdCalculator,
    compute_correction,
    monotonicity_violations,
)
from bloomsieve.correction.engine import correction_for_count, precompute_correction
from bloomsieve.correction.events import CorrectionEvents, EventRecorder
from bloomsieve.correction.fingerprint import correction_filename
from bloomsieve.correction.parameters import MinimizerBounds, SearchParameters, Shape

__all__ = [
    "CorrectionCache",
    "CorrectionEvents",
    "EventRecorder",
    "MinimizerBounds",
    "SearchParameters",
    "Shape",
    "ThresholdCalculator",
    "compute_correction",
    "correction_filename",
    "correction_for_count",
    "decode_table",
    "encode_table",
    "monotonicity_violations",
    "precompute_correction",
]
