"""Derivation of correction values from the binomial false-positive model.

For ``m`` minimizers, the number of spurious hits ``X`` reported by the index
follows ``Binomial(m, fpr)``. The correction for ``m`` is the largest number
of false positives whose probability mass is still at least ``p_max``: up to
that many hits can be explained by chance alone.
"""

from __future__ import annotations

import math
from typing import List, Optional

from bloomsieve.correction.binomial import BinomialTable
from bloomsieve.correction.events import CorrectionEvents, Observer, notify
from bloomsieve.correction.parameters import SearchParameters
from bloomsieve.exceptions import ContractViolationError
from bloomsieve.utils.logging import LogTemplates, get_logger

logger = get_logger("correction.calculator")


def binomial_mass(coefficient: int, fpr: float, trials: int, successes: int) -> float:
    """``P(X = successes)`` for ``X ~ Binomial(trials, fpr)`` given ``C(trials, successes)``."""
    inv_fpr = 1.0 - fpr
    try:
        return coefficient * fpr**successes * inv_fpr ** (trials - successes)
    except OverflowError:
        # Coefficient beyond float range; the mass itself is still representable
        log_mass = (
            math.log(coefficient)
            + successes * math.log(fpr)
            + (trials - successes) * math.log(inv_fpr)
        )
        return math.exp(log_mass)


class ThresholdCalculator:
    """Computes correction tables for one set of search parameters."""

    def __init__(self, parameters: SearchParameters, observer: Optional[Observer] = None):
        self.parameters = parameters
        self.bounds = parameters.bounds()
        self.observer = observer
        self._binomials = BinomialTable()
        self.underflows: List[int] = []
        self.no_tolerance: List[int] = []

    def correction_for(self, number_of_minimizers: int) -> int:
        """Tolerated false positives for ``number_of_minimizers``."""
        fpr = self.parameters.fpr
        p_max = self.parameters.p_max
        row = self._binomials.row(number_of_minimizers)

        number_of_fp = 1
        while (
            number_of_fp <= number_of_minimizers
            and binomial_mass(row[number_of_fp], fpr, number_of_minimizers, number_of_fp) >= p_max
        ):
            number_of_fp += 1

        value = number_of_fp - 1
        if number_of_minimizers >= 1 and number_of_fp == 1:
            # Even a single false positive is implausible at this count
            mass = binomial_mass(row[1], fpr, number_of_minimizers, 1)
            if mass == 0.0:
                self.underflows.append(number_of_minimizers)
                logger.warning(LogTemplates.UNDERFLOW.format(count=number_of_minimizers))
                notify(self.observer, CorrectionEvents.UNDERFLOW, minimizers=number_of_minimizers)
            else:
                self.no_tolerance.append(number_of_minimizers)
                logger.debug(
                    LogTemplates.NO_TOLERANCE.format(
                        count=number_of_minimizers, mass=mass, p_max=p_max
                    )
                )
                notify(
                    self.observer,
                    CorrectionEvents.NO_TOLERANCE,
                    minimizers=number_of_minimizers,
                    mass=mass,
                )
        if value < 0:
            self.underflows.append(number_of_minimizers)
            logger.warning(LogTemplates.UNDERFLOW.format(count=number_of_minimizers))
            notify(self.observer, CorrectionEvents.UNDERFLOW, minimizers=number_of_minimizers)
            value = 0
        return value

    def compute(self) -> List[int]:
        """Correction values for every minimizer count in the parameters' range."""
        correction = [self.correction_for(m) for m in self.bounds.counts()]
        if not correction:
            raise ContractViolationError("Correction table is empty")
        return correction


def compute_correction(
    parameters: SearchParameters, observer: Optional[Observer] = None
) -> List[int]:
    """Convenience wrapper around :class:`ThresholdCalculator`."""
    return ThresholdCalculator(parameters, observer=observer).compute()


def monotonicity_violations(table: List[int]) -> List[int]:
    """Indices at which ``table`` decreases relative to the previous entry."""
    return [i for i in range(1, len(table)) if table[i] < table[i - 1]]
