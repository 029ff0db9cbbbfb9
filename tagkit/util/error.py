"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class InvariantViolationError(UtilError, RuntimeError):
    """Raised when an operation that is expected to always succeed fails.

    Unlike domain errors this is not meant to be handled by callers; it
    signals a programming or environment error.
    """

    pass
