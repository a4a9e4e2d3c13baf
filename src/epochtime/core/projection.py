"""Calendar projection of epoch seconds.

This module contains the CalendarFields record and the CalendarConverter
capability that turns seconds into calendar fields and back using the
platform's conversion routines:

    project: seconds -> fields   (time.gmtime / time.localtime)
    compose: fields  -> seconds  (calendar.timegm / time.mktime)

Every platform result is copied into an owned, frozen CalendarFields record
before it is returned, so no two time values ever share conversion storage.
"""

from __future__ import annotations

import calendar
import logging
import threading
import time
from dataclasses import dataclass

from ..exceptions import TimeRangeError
from .common import TimezoneMode

logger = logging.getLogger(__name__)

_PLATFORM_ERRORS = (OverflowError, OSError, ValueError)


@dataclass(frozen=True, kw_only=True)
class CalendarFields:
    """Calendar decomposition of an instant under one timezone mode.

    Attributes:
        year: Full year (e.g. 2025)
        month: Month (1-12)
        day: Day of month (1-31)
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-60, 60 for leap seconds)
        weekday: Day of week (0=Sunday .. 6=Saturday)
        yearday: Day of year (1-366)
        is_dst: Daylight saving time in effect
        utc_offset: Offset from UTC in seconds east, None if the platform does not report it
        zone_abbreviation: Platform zone abbreviation (e.g. "CET"), None if not reported
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int
    yearday: int
    is_dst: bool
    utc_offset: int | None = None
    zone_abbreviation: str | None = None

    @classmethod
    def from_struct_time(cls, st: time.struct_time) -> CalendarFields:
        """Copy a platform struct_time into an owned record."""
        return cls(
            year=st.tm_year,
            month=st.tm_mon,
            day=st.tm_mday,
            hour=st.tm_hour,
            minute=st.tm_min,
            second=st.tm_sec,
            weekday=(st.tm_wday + 1) % 7,  # struct_time counts from Monday
            yearday=st.tm_yday,
            is_dst=st.tm_isdst > 0,
            utc_offset=getattr(st, "tm_gmtoff", None),
            zone_abbreviation=getattr(st, "tm_zone", None),
        )


@dataclass(frozen=True, kw_only=True)
class BrokenDownTime:
    """Calendar fields supplied for the forward transform (not yet validated by the platform)."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def to_tuple(self) -> tuple[int, int, int, int, int, int, int, int, int]:
        # Weekday and yearday are ignored by the platform; isdst=-1 lets it decide
        return (self.year, self.month, self.day, self.hour, self.minute, self.second, 0, 0, -1)

    def next_second(self) -> BrokenDownTime:
        return BrokenDownTime(
            year=self.year,
            month=self.month,
            day=self.day,
            hour=self.hour,
            minute=self.minute,
            second=self.second + 1,
        )


class CalendarConverter:
    """Platform calendar conversion behind a copy-out-immediately discipline."""

    _lock: threading.Lock

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def project(self, seconds: int, timezone: TimezoneMode) -> CalendarFields:
        """Decompose seconds into calendar fields.

        Args:
            seconds: Seconds since the epoch
            timezone: UTC or LOCAL projection

        Returns:
            Owned CalendarFields record

        Raises:
            TimeRangeError: If the platform cannot represent seconds
        """
        try:
            with self._lock:
                if timezone is TimezoneMode.UTC:
                    return CalendarFields.from_struct_time(time.gmtime(seconds))
                return CalendarFields.from_struct_time(time.localtime(seconds))
        except _PLATFORM_ERRORS as e:
            logger.debug("Platform rejected %d seconds for %s projection: %s", seconds, timezone.name, e)
            raise TimeRangeError(f"{seconds} out of Time range") from e

    def compose(self, fields: BrokenDownTime, timezone: TimezoneMode) -> int:
        """Turn calendar fields into seconds since the epoch.

        Out-of-range fields (e.g. hour 24) are normalized by the platform.

        Args:
            fields: Calendar fields
            timezone: Interpret fields as UTC or LOCAL time

        Returns:
            Seconds since the epoch

        Raises:
            TimeRangeError: If the platform rejects the fields
        """
        try:
            if timezone is TimezoneMode.UTC:
                return calendar.timegm(fields.to_tuple())
            with self._lock:
                return int(time.mktime(fields.to_tuple()))
        except _PLATFORM_ERRORS as e:
            raise TimeRangeError("Not a valid time") from e


def utc_seconds_of(fields: CalendarFields) -> int:
    """Interpret projected fields as if they were UTC (used to derive zone offsets)."""
    return calendar.timegm((fields.year, fields.month, fields.day, fields.hour, fields.minute, fields.second, 0, 0, 0))
