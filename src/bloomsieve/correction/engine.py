"""Entry point of the threshold correction."""

from __future__ import annotations

import time
from typing import List, Optional

from bloomsieve.correction.cache import CorrectionCache
from bloomsieve.correction.calculator import ThresholdCalculator, monotonicity_violations
from bloomsieve.correction.events import CorrectionEvents, Observer, notify
from bloomsieve.correction.parameters import SearchParameters
from bloomsieve.utils.logging import LogTemplates, get_logger

logger = get_logger("correction.engine")


def precompute_correction(
    parameters: SearchParameters,
    cache: Optional[CorrectionCache] = None,
    observer: Optional[Observer] = None,
) -> List[int]:
    """Correction table for ``parameters``.

    An empty list means no correction applies because a threshold was set
    manually; in that case the cache is not touched at all. Otherwise the
    table is read from the cache or computed and written back.

    Args:
        parameters: Search parameters
        cache: Cache to consult (defaults to one next to the index file)
        observer: Optional callable receiving :class:`CorrectionEvents`

    Raises:
        ContractViolationError: If the parameters break a precondition
        CacheFormatError: If a cached artifact exists but is malformed
    """
    if parameters.threshold_was_set:
        logger.debug(LogTemplates.MANUAL_THRESHOLD)
        notify(observer, CorrectionEvents.MANUAL_THRESHOLD)
        return []

    bounds = parameters.bounds()
    if cache is None:
        cache = CorrectionCache.for_parameters(parameters)

    path = cache.path_for(parameters)
    cached = cache.try_load(parameters)
    if cached is not None:
        notify(observer, CorrectionEvents.CACHE_HIT, path=path, entries=len(cached))
        return cached
    notify(observer, CorrectionEvents.CACHE_MISS, path=path)

    start = time.perf_counter()
    correction = ThresholdCalculator(parameters, observer=observer).compute()
    elapsed = time.perf_counter() - start
    logger.info(
        LogTemplates.COMPUTE_DONE.format(low=bounds.minimal, high=bounds.maximal, duration=elapsed)
    )
    notify(observer, CorrectionEvents.COMPUTED, elapsed=elapsed, entries=len(correction))

    violations = monotonicity_violations(correction)
    if violations:
        counts = ", ".join(str(bounds.minimal + i) for i in violations)
        logger.warning(LogTemplates.NOT_MONOTONIC.format(counts=counts))

    if not cache.enabled:
        notify(observer, CorrectionEvents.STORE_SKIPPED, path=path)
    elif cache.store(parameters, correction):
        notify(observer, CorrectionEvents.STORED, path=path)
    else:
        notify(observer, CorrectionEvents.STORE_FAILED, path=path)

    return correction


def correction_for_count(
    table: List[int], parameters: SearchParameters, minimizer_count: int
) -> int:
    """Look up the correction for an observed minimizer count.

    Returns 0 for an empty table (manual threshold).
    """
    if not table:
        return 0
    return table[parameters.bounds().index(minimizer_count)]
