"""On-disk cache of correction tables.

Each table lives in its own artifact next to the index, named by
:func:`~bloomsieve.correction.fingerprint.correction_filename`. The artifact
holds little-endian unsigned 64-bit integers: the table length followed by the
entries.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np

from bloomsieve.constants import CORRECTION_DTYPE
from bloomsieve.correction.fingerprint import correction_filename
from bloomsieve.correction.parameters import SearchParameters
from bloomsieve.exceptions import CacheFormatError
from bloomsieve.utils.logging import LogTemplates, get_logger

logger = get_logger("correction.cache")


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def encode_table(table: Sequence[int]) -> bytes:
    """Serialize ``table`` with its length prefix."""
    values = np.asarray([len(table), *table], dtype=np.uint64)
    return values.astype(CORRECTION_DTYPE).tobytes()


def decode_table(data: bytes, path: Optional[Path] = None) -> List[int]:
    """Inverse of :func:`encode_table`.

    Raises:
        CacheFormatError: If ``data`` is not a complete length-prefixed table
    """
    try:
        values = np.frombuffer(data, dtype=CORRECTION_DTYPE)
    except ValueError as e:
        raise CacheFormatError(f"Truncated correction artifact {path}: {e}", path=path) from e
    if values.size == 0:
        raise CacheFormatError(f"Empty correction artifact {path}", path=path)
    declared = int(values[0])
    if declared != values.size - 1:
        raise CacheFormatError(
            f"Correction artifact {path} declares {declared} entries but holds {values.size - 1}",
            path=path,
        )
    return [int(v) for v in values[1:]]


class CorrectionCache:
    """Loads and stores correction tables in a single directory."""

    def __init__(self, directory: Union[str, Path], enabled: bool = True):
        self.directory = Path(directory)
        self.enabled = enabled

    @classmethod
    def for_parameters(cls, parameters: SearchParameters) -> "CorrectionCache":
        """Cache next to the index, honoring ``cache_thresholds``."""
        return cls(parameters.cache_dir, enabled=parameters.cache_thresholds)

    def path_for(self, parameters: SearchParameters) -> Path:
        return self.directory / correction_filename(parameters)

    def try_load(self, parameters: SearchParameters) -> Optional[List[int]]:
        """Return the cached table for ``parameters``, or None if there is none.

        Raises:
            CacheFormatError: If the artifact exists but is unreadable, malformed
                or does not fit the parameters' minimizer range
        """
        path = self.path_for(parameters)
        if not path.exists():
            logger.debug(LogTemplates.CACHE_MISS.format(path=path))
            return None

        try:
            data = path.read_bytes()
        except OSError as e:
            raise CacheFormatError(f"Could not read correction artifact {path}: {e}", path=path) from e
        table = decode_table(data, path=path)
        expected = parameters.bounds().size
        if len(table) != expected:
            raise CacheFormatError(
                f"Correction artifact {path} has {len(table)} entries, expected {expected}",
                path=path,
            )
        logger.info(LogTemplates.CACHE_HIT.format(path=path, entries=len(table)))
        return table

    def store(self, parameters: SearchParameters, table: Sequence[int]) -> bool:
        """Write ``table`` for ``parameters``, replacing any existing artifact.

        Returns:
            True if the artifact was written. False if caching is disabled or
            the write failed; failures are logged, never raised.
        """
        path = self.path_for(parameters)
        if not self.enabled:
            logger.debug(LogTemplates.CACHE_DISABLED.format(path=path))
            return False

        data = encode_table(table)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=self.directory
            )
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            # mkstemp creates 0600; apply the umask as a plain open() would
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, path)
        except OSError as e:
            logger.warning(LogTemplates.CACHE_WRITE_FAILED.format(path=path, error=e))
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False

        logger.info(LogTemplates.CACHE_STORED.format(path=path))
        return True
