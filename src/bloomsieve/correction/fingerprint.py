"""Cache keys for correction tables."""

from __future__ import annotations

from bloomsieve.constants import CORRECTION_PREFIX, CORRECTION_SUFFIX
from bloomsieve.correction.parameters import SearchParameters


def _format_probability(value: float) -> str:
    """Shortest round-tripping rendering of ``value`` without a leading ``0.``.

    Renderings of values in (0, 1) either start with ``0.`` or are in
    exponent form, so dropping the prefix keeps the mapping injective.
    """
    text = repr(float(value))
    if text.startswith("0."):
        text = text[2:]
    return text


def correction_filename(parameters: SearchParameters) -> str:
    """File name of the correction artifact for ``parameters``.

    Integers are written in hexadecimal, probabilities via
    :func:`_format_probability`. Fields are formatted independently.

    >>> from bloomsieve.correction.parameters import SearchParameters
    >>> correction_filename(SearchParameters.create(50, 23, 19, fpr=0.05, p_max=0.01))
    'correction_32_17_7ffff_01_05.bin'
    """
    fields = [
        f"{parameters.pattern_size:x}",
        f"{parameters.window_size:x}",
        f"{parameters.shape.to_int():x}",
        _format_probability(parameters.p_max),
        _format_probability(parameters.fpr),
    ]
    return CORRECTION_PREFIX + "_".join(fields) + CORRECTION_SUFFIX
