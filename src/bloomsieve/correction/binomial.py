"""Incrementally grown rows of binomial coefficients."""

from __future__ import annotations

from typing import List


class BinomialTable:
    """Pascal's triangle, advanced one row at a time.

    Only the most recent row is kept. Asking for consecutive ``n`` costs one
    additive step per row; asking for an earlier row restarts from the top.
    Coefficients are Python ints and never overflow.
    """

    def __init__(self) -> None:
        self._n = 0
        self._row: List[int] = [1]

    @property
    def current(self) -> int:
        """Index of the row currently held."""
        return self._n

    def row(self, n: int) -> List[int]:
        """Coefficients ``C(n, 0..n)``."""
        if n < 0:
            raise ValueError(f"Row index must be >= 0, got {n}")
        if n < self._n:
            self._n, self._row = 0, [1]
        while self._n < n:
            previous = self._row
            self._row = [1] + [a + b for a, b in zip(previous, previous[1:])] + [1]
            self._n += 1
        return self._row


def pascal_row(n: int) -> List[int]:
    """Single row of Pascal's triangle."""
    return list(BinomialTable().row(n))
