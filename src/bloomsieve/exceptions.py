"""Custom exceptions for bloomsieve."""


class BloomSieveError(Exception):
    """Base exception for all bloomsieve errors."""

    pass


class ConfigurationError(BloomSieveError):
    """Raised when configuration is invalid or missing."""

    pass


class ContractViolationError(BloomSieveError):
    """Raised when search parameters break a precondition of the correction.

    These are never retried: the same parameters fail the same way.
    """

    pass


class CacheFormatError(BloomSieveError):
    """Raised when a cached correction artifact cannot be decoded."""

    def __init__(self, message="", path=None):
        """Initialize CacheFormatError.

        Args:
            message: Error message
            path: Artifact that failed to decode
        """
        super().__init__(message)
        self.path = path
