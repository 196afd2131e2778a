"""Unified constants for bloomsieve.

Defaults shared by the configuration layer, the CLI and the correction engine.
"""

# ================== Search Defaults ==================

DEFAULT_PATTERN_SIZE: int = 100
DEFAULT_WINDOW_SIZE: int = 23
DEFAULT_KMER_SIZE: int = 19

# Per-lookup false-positive rate of the index
DEFAULT_FPR: float = 0.05

# Tolerated probability that an accepted match is spurious
DEFAULT_P_MAX: float = 0.15


# ================== Shape Limits ==================

# Informative positions must fit into a 64-bit 2-bit-encoded k-mer hash
MAX_SHAPE_COUNT: int = 32

# The integer encoding of a shape must fit into 64 bits
MAX_SHAPE_SPAN: int = 64


# ================== Cache Artifact ==================

CORRECTION_PREFIX: str = "correction_"
CORRECTION_SUFFIX: str = ".bin"

# Little-endian unsigned 64-bit integers, length prefix first
CORRECTION_DTYPE: str = "<u8"
