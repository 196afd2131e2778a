"""Search parameters and the minimizer-count range they imply."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from bloomsieve.constants import MAX_SHAPE_COUNT, MAX_SHAPE_SPAN
from bloomsieve.exceptions import ContractViolationError

_SHAPE_PATTERN = re.compile(r"^[01]+$")


@dataclass(frozen=True)
class Shape:
    """A k-mer mask written as a 01-pattern, e.g. ``11011``.

    The pattern is read as a binary number, so the rightmost character is the
    lowest bit. A shape must start and end with an informative position.
    """

    pattern: str

    def __post_init__(self) -> None:
        if not _SHAPE_PATTERN.match(self.pattern):
            raise ContractViolationError(f"Shape must be a 01-pattern, got {self.pattern!r}")
        if self.pattern[0] != "1" or self.pattern[-1] != "1":
            raise ContractViolationError(
                f"Shape must start and end with 1, got {self.pattern!r}"
            )
        if self.count > MAX_SHAPE_COUNT:
            raise ContractViolationError(
                f"Shape has {self.count} informative positions, at most {MAX_SHAPE_COUNT} allowed"
            )
        if self.span > MAX_SHAPE_SPAN:
            raise ContractViolationError(
                f"Shape spans {self.span} positions, at most {MAX_SHAPE_SPAN} allowed"
            )

    @classmethod
    def from_kmer_size(cls, kmer_size: int) -> "Shape":
        """Ungapped shape of ``kmer_size`` positions."""
        if kmer_size < 1:
            raise ContractViolationError(f"k-mer size must be >= 1, got {kmer_size}")
        return cls("1" * kmer_size)

    @property
    def span(self) -> int:
        """Number of positions covered by the shape."""
        return len(self.pattern)

    @property
    def count(self) -> int:
        """Number of informative positions."""
        return self.pattern.count("1")

    def to_int(self) -> int:
        return int(self.pattern, 2)

    def __str__(self) -> str:
        return self.pattern


@dataclass(frozen=True)
class MinimizerBounds:
    """Range of minimizer counts a pattern can produce."""

    kmers_per_window: int
    kmers_per_pattern: int
    minimal: int
    maximal: int

    @property
    def size(self) -> int:
        """Number of entries a correction table for these bounds holds."""
        return self.maximal - self.minimal + 1

    def counts(self) -> range:
        return range(self.minimal, self.maximal + 1)

    def index(self, minimizer_count: int) -> int:
        """Position of ``minimizer_count`` in a correction table.

        Raises:
            ContractViolationError: If the count is outside ``[minimal, maximal]``
        """
        if not self.minimal <= minimizer_count <= self.maximal:
            raise ContractViolationError(
                f"Minimizer count {minimizer_count} outside [{self.minimal}, {self.maximal}]"
            )
        return minimizer_count - self.minimal


@dataclass(frozen=True)
class SearchParameters:
    """Immutable description of one search configuration.

    Only ``pattern_size``, ``window_size``, ``shape``, ``fpr`` and ``p_max``
    influence the correction values. ``index_file`` locates the cache
    directory, ``threshold_was_set`` disables the correction altogether and
    ``cache_thresholds`` controls whether computed tables are written back.
    """

    pattern_size: int
    window_size: int
    shape: Shape
    fpr: float
    p_max: float
    index_file: Path = Path("index.bin")
    threshold_was_set: bool = False
    cache_thresholds: bool = True

    @classmethod
    def create(
        cls,
        pattern_size: int,
        window_size: int,
        shape: Union[Shape, str, int],
        fpr: float,
        p_max: float,
        index_file: Union[str, Path] = Path("index.bin"),
        threshold_was_set: bool = False,
        cache_thresholds: bool = True,
    ) -> "SearchParameters":
        """Build parameters, accepting a shape pattern or a k-mer size for ``shape``."""
        if isinstance(shape, int):
            shape = Shape.from_kmer_size(shape)
        elif isinstance(shape, str):
            shape = Shape(shape)
        return cls(
            pattern_size=int(pattern_size),
            window_size=int(window_size),
            shape=shape,
            fpr=float(fpr),
            p_max=float(p_max),
            index_file=Path(index_file),
            threshold_was_set=threshold_was_set,
            cache_thresholds=cache_thresholds,
        )

    @property
    def kmer_size(self) -> int:
        return self.shape.span

    @property
    def cache_dir(self) -> Path:
        return self.index_file.parent

    def validate(self) -> None:
        """Check the preconditions of the probabilistic correction.

        Raises:
            ContractViolationError: If any precondition does not hold
        """
        if self.pattern_size < self.kmer_size:
            raise ContractViolationError(
                f"Pattern size ({self.pattern_size}) must be >= k-mer size ({self.kmer_size})"
            )
        if self.window_size < self.kmer_size:
            raise ContractViolationError(
                f"Window size ({self.window_size}) must be >= k-mer size ({self.kmer_size})"
            )
        if self.window_size == self.kmer_size:
            raise ContractViolationError(
                "Window size equals k-mer size: every k-mer is a minimizer and "
                "the probabilistic correction does not apply"
            )
        if not 0.0 < self.fpr < 1.0:
            raise ContractViolationError(f"fpr must be in (0, 1), got {self.fpr}")
        if not 0.0 < self.p_max < 1.0:
            raise ContractViolationError(f"p_max must be in (0, 1), got {self.p_max}")

    def bounds(self) -> MinimizerBounds:
        """Minimizer-count range for these parameters.

        A pattern one base shorter than the window still yields a single
        entry for zero minimizers; anything shorter has no valid range.
        """
        self.validate()
        kmers_per_window = self.window_size - self.kmer_size + 1
        kmers_per_pattern = self.pattern_size - self.kmer_size + 1
        bounds = MinimizerBounds(
            kmers_per_window=kmers_per_window,
            kmers_per_pattern=kmers_per_pattern,
            minimal=kmers_per_pattern // kmers_per_window,
            maximal=self.pattern_size - self.window_size + 1,
        )
        if bounds.size < 1:
            raise ContractViolationError(
                f"Pattern size ({self.pattern_size}) is too short for window size "
                f"({self.window_size}): no minimizer count range"
            )
        return bounds
