"""
Exceptions raised at the boundaries of the SRS core.

The scheduler itself has no runtime failure mode; these cover bad input
arriving from outside (deserialized grades, unknown store flags, missing
configuration).
"""


class SrsError(Exception):
    """Base class for SRS errors."""


class InvalidGradeError(SrsError, ValueError):
    """A grade value that does not map to a known Grade."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid grade: {value!r} (expected FORGOT, HARD or EASY)")


class UnknownFlagError(SrsError, ValueError):
    """A category flag name the item store does not know."""

    def __init__(self, flag_name: str):
        self.flag_name = flag_name
        super().__init__(f"Unknown item flag: {flag_name!r}")


class ConfigurationError(SrsError, RuntimeError):
    """Required configuration is missing."""
