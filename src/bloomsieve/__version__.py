"""Version information for bloomsieve."""

__version__ = "0.3.0"
__license__ = "BSD-3-Clause"
__description__ = "Probabilistic threshold correction for minimizer-based Bloom filter search"
