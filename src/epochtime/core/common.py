"""Common types and constants shared across the time core.

This module contains the fundamental types used by every core component.
"""

from enum import Enum, IntEnum

USEC_PER_SEC = 1_000_000
NSEC_PER_USEC = 1_000
NSEC_PER_SEC = 1_000_000_000

SECONDS_PER_MINUTE = 60

TM_YEAR_BASE = 1900  # struct tm counts years from 1900

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class TimezoneMode(Enum):
    """How an instant is projected onto calendar fields.

    Only two modes exist:
    - UTC: Coordinated Universal Time
    - LOCAL: Local time as resolved by the operating system (TZ)
    """

    UTC = 1
    LOCAL = 2


class Weekday(IntEnum):
    """Day of week, zero-based from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
