"""
pyEpochTime: Point-in-time value engine for Python.

This library provides an epoch-based time value with microsecond precision,
UTC/local timezone modes, overflow-checked arithmetic against a configurable
platform integer width, cached calendar projection, and fixed formatting.
"""

from __future__ import annotations

from .core import CalendarConverter, CalendarFields, EpochTime, TimezoneMode, Weekday
from .exceptions import (
    TimeConfigurationError,
    TimeError,
    TimeIdentityError,
    TimeOverflowError,
    TimeRangeError,
    TimeTypeError,
    UninitializedTimeError,
)
from .platform import DEFAULT_PROFILE, TIME32_PROFILE, UNSIGNED32_PROFILE, PlatformProfile

__version__ = "0.1.0"
__author__ = "Tanny Lund Deutsch-Lauritsen"
__email__ = "pymbusmaster@de-la.dk"

__all__ = [
    "__version__",
    "CalendarConverter",
    "CalendarFields",
    "EpochTime",
    "TimezoneMode",
    "Weekday",
    "PlatformProfile",
    "DEFAULT_PROFILE",
    "TIME32_PROFILE",
    "UNSIGNED32_PROFILE",
    "TimeError",
    "TimeTypeError",
    "TimeRangeError",
    "TimeOverflowError",
    "UninitializedTimeError",
    "TimeIdentityError",
    "TimeConfigurationError",
]
