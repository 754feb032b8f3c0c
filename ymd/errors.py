"""Exceptions raised by ymd.

Every error subclasses ValueError as well as YmdError, so callers that only
care about "bad input" can keep catching ValueError.
"""

from typing import Any


class YmdError(Exception):
    """Base exception for all ymd errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize exception with message and optional details.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FormatError(YmdError, ValueError):
    """Input does not have the fixed-width YYYY-MM-DD shape."""

    pass


class InvalidDateError(YmdError, ValueError):
    """Input has the right shape but is not a real calendar date."""

    pass


class RangeOrderError(YmdError, ValueError):
    """A range operation that requires from <= to got them reversed.

    Attributes:
        start: Canonical string of the range start.
        end: Canonical string of the range end.
    """

    start: str
    end: str

    def __init__(self, message: str, start: str, end: str):
        super().__init__(message, details={"from": start, "to": end})
        self.start = start
        self.end = end


class ZoneError(YmdError, ValueError):
    """Time zone identifier could not be resolved."""

    pass
