"""Core components of the epoch time value engine.

This package contains the numeric bridge, calendar projection, arithmetic,
comparison and formatting components, and the EpochTime value built on them.
"""

from .common import TimezoneMode, Weekday
from .projection import CalendarConverter, CalendarFields
from .value import EpochTime

__all__ = [
    # Common types
    "TimezoneMode",
    "Weekday",
    # Calendar projection
    "CalendarConverter",
    "CalendarFields",
    # Value
    "EpochTime",
]
