"""Epoch time exception classes."""

from __future__ import annotations


class TimeError(Exception):
    """Base exception for all epoch time errors."""


class TimeTypeError(TimeError, TypeError):
    """A value that cannot be converted to time was supplied."""


class TimeRangeError(TimeError, ValueError):
    """Value, field combination or result outside the representable time range."""


class TimeOverflowError(TimeError, OverflowError):
    """Checked addition or subtraction on seconds overflowed."""

    operation: str

    def __init__(self, operation: str) -> None:
        super().__init__(f"time_t overflow in Time {operation}")
        self.operation = operation


class UninitializedTimeError(TimeError, RuntimeError):
    """Operation on a time value that was allocated but never initialized."""


class TimeIdentityError(TimeError, TypeError):
    """Copy between incompatible time classes."""


class TimeConfigurationError(TimeError):
    """The platform profile has no representation for the requested result."""
