"""Epoch time value representation.

This module contains the EpochTime class, a point in time stored canonically
as seconds and microseconds since the Unix epoch plus a timezone mode, with:
- Construction from the system clock, numeric seconds, or calendar fields
- Calendar projection (year, month, ..., weekday, yearday, DST) cached per value
- Overflow-checked addition and subtraction
- Total ordering on (seconds, microseconds)
- Canonical and asctime formatting

Platform behaviour (width of the seconds type, float and big integer support),
the calendar converter and the clock are class attributes, so a subclass can
model a different platform:

    class Time32(EpochTime):
        profile = TIME32_PROFILE

    Time32.from_seconds(2**31 - 1, timezone=TimezoneMode.UTC) + 1  # raises TimeOverflowError
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta, timezone
from typing import Any, ClassVar, Self

from ..clock import CoarseClock, SystemClock, default_clock
from ..exceptions import (
    TimeConfigurationError,
    TimeIdentityError,
    TimeRangeError,
    TimeTypeError,
    UninitializedTimeError,
)
from ..platform import DEFAULT_PROFILE, PlatformProfile
from .arithmetic import checked_add, checked_sub, difference, normalize
from .common import TM_YEAR_BASE, TimezoneMode, Weekday
from .comparison import compare as compare_instants
from .comparison import hash_code as hash_instant
from .formatting import format_asctime, format_canonical, format_zone, zone_offset
from .numeric import from_time_t, to_time_t
from .projection import BrokenDownTime, CalendarConverter, CalendarFields

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, 0, 0, 0, tzinfo=UTC)


@dataclass(frozen=True)
class _EpochState:
    """Canonical triple plus the calendar projection derived from it."""

    seconds: int
    microseconds: int
    timezone: TimezoneMode
    calendar: CalendarFields


class EpochTime:
    """Point in time with microsecond precision and a UTC/LOCAL timezone mode.

    Equality, ordering and Python hashing depend on (seconds, microseconds)
    only; the timezone mode decides how the instant is displayed.

    Examples:
        >>> t = EpochTime.from_seconds(1000000000, 500000, TimezoneMode.UTC)
        >>> str(t)
        '2001-09-09 01:46:40 UTC'
        >>> t.asctime()
        'Sun Sep  9 01:46:40 2001'
        >>> EpochTime.gm(1970, 1, 1).to_i()
        0
    """

    profile: ClassVar[PlatformProfile] = DEFAULT_PROFILE
    converter: ClassVar[CalendarConverter] = CalendarConverter()
    clock: ClassVar[SystemClock | CoarseClock] = default_clock()

    # None until initialized (instances created with __new__ alone stay None)
    _state: _EpochState | None = None

    def __init__(
        self,
        year: int | float | None = None,
        month: int | float = 1,
        day: int | float = 1,
        hour: int | float = 0,
        minute: int | float = 0,
        second: int | float = 0,
        microsecond: int | float = 0,
    ) -> None:
        """Initialize to the current time, or to local calendar fields if year is given.

        Args:
            year: Full year; None means "now"
            month: Month (1-12)
            day: Day of month (1-31)
            hour: Hour (0-24, 24 only at minute 0 second 0)
            minute: Minute (0-59)
            second: Second (0-60)
            microsecond: Microseconds, carried into seconds when out of range

        Raises:
            TimeTypeError: If a field is not numeric
            TimeRangeError: If a field is out of range or the time is not representable
        """
        if year is None:
            state = self._current_state()
        else:
            state = self._state_from_fields(
                year, month, day, hour, minute, second, microsecond, TimezoneMode.LOCAL
            )
        self._state = state

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def _make_state(cls, seconds: int, microseconds: int, timezone: TimezoneMode) -> _EpochState:
        seconds, microseconds = normalize(seconds, microseconds, cls.profile)
        return _EpochState(seconds, microseconds, timezone, cls.converter.project(seconds, timezone))

    @classmethod
    def _build(cls, seconds: int, microseconds: int, timezone: TimezoneMode) -> Self:
        instance = cls.__new__(cls)
        instance._state = cls._make_state(seconds, microseconds, timezone)
        return instance

    @classmethod
    def _current_state(cls) -> _EpochState:
        seconds, microseconds = cls.clock.read()
        return cls._make_state(seconds, microseconds, TimezoneMode.LOCAL)

    @classmethod
    def _field(cls, value: object) -> int:
        if isinstance(value, bool):
            raise TimeTypeError(f"expected integer, got {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and cls.profile.has_float:
            if not math.isfinite(value):
                raise TimeRangeError(f"{value} out of range")
            return int(value)
        raise TimeTypeError(f"expected integer, got {value!r}")

    @classmethod
    def _compose(cls, fields: BrokenDownTime, timezone: TimezoneMode) -> int:
        """Forward calendar transform with the epoch-minus-one-second retry.

        Platforms that signal failure with -1 cannot tell an error from
        1969-12-31 23:59:59; one second later must then be exactly the epoch.
        """
        try:
            return cls.converter.compose(fields, timezone)
        except TimeRangeError:
            logger.debug("Forward transform rejected %s, retrying one second later", fields)
            if cls.converter.compose(fields.next_second(), timezone) != 0:
                raise TimeRangeError("Not a valid time") from None
            return -1

    @classmethod
    def _state_from_fields(
        cls,
        year: object,
        month: object,
        day: object,
        hour: object,
        minute: object,
        second: object,
        microsecond: object,
        timezone: TimezoneMode,
    ) -> _EpochState:
        year, month, day, hour, minute, second, microsecond = (
            cls._field(value) for value in (year, month, day, hour, minute, second, microsecond)
        )

        year_offset = year - TM_YEAR_BASE
        if (
            not cls.profile.year_offset_min <= year_offset <= cls.profile.year_offset_max
            or not 1 <= month <= 12
            or not 1 <= day <= 31
            or not 0 <= hour <= 24
            or (hour == 24 and (minute > 0 or second > 0))
            or not 0 <= minute <= 59
            or not 0 <= second <= 60
        ):
            raise TimeRangeError("argument out of range")

        fields = BrokenDownTime(year=year, month=month, day=day, hour=hour, minute=minute, second=second)
        return cls._make_state(cls._compose(fields, timezone), microsecond, timezone)

    @classmethod
    def now(cls) -> Self:
        """Current time from the class clock, in local time."""
        instance = cls.__new__(cls)
        instance._state = cls._current_state()
        return instance

    @classmethod
    def from_seconds(
        cls,
        seconds: int,
        microseconds: int = 0,
        timezone: TimezoneMode = TimezoneMode.LOCAL,
    ) -> Self:
        """Create from canonical seconds and microseconds.

        Microseconds outside [0, 1_000_000) (including negative values) are
        carried into seconds.

        Raises:
            TimeTypeError: If seconds or microseconds is not an integer
            TimeRangeError: If the instant is not representable
        """
        for value in (seconds, microseconds):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TimeTypeError(f"cannot convert {value!r} to time")
        return cls._build(seconds, microseconds, timezone)

    @classmethod
    def at(cls, seconds: object, microseconds: object = 0) -> Self:
        """Create from host numeric seconds (int or float) plus optional microseconds, in local time.

        Raises:
            TimeTypeError: If an argument is not numeric
            TimeRangeError: If an argument or the result is out of range
        """
        whole, fraction = to_time_t(seconds, cls.profile, with_usec=True)
        extra, _ = to_time_t(microseconds, cls.profile)
        return cls._build(whole, fraction + extra, TimezoneMode.LOCAL)

    @classmethod
    def gm(
        cls,
        year: int | float,
        month: int | float = 1,
        day: int | float = 1,
        hour: int | float = 0,
        minute: int | float = 0,
        second: int | float = 0,
        microsecond: int | float = 0,
    ) -> Self:
        """Create from calendar fields interpreted as UTC."""
        instance = cls.__new__(cls)
        instance._state = cls._state_from_fields(
            year, month, day, hour, minute, second, microsecond, TimezoneMode.UTC
        )
        return instance

    @classmethod
    def local(
        cls,
        year: int | float,
        month: int | float = 1,
        day: int | float = 1,
        hour: int | float = 0,
        minute: int | float = 0,
        second: int | float = 0,
        microsecond: int | float = 0,
    ) -> Self:
        """Create from calendar fields interpreted as local time."""
        instance = cls.__new__(cls)
        instance._state = cls._state_from_fields(
            year, month, day, hour, minute, second, microsecond, TimezoneMode.LOCAL
        )
        return instance

    utc_time = gm
    mktime = local

    # =========================================================================
    # State access and mutation
    # =========================================================================

    def _get_state(self) -> _EpochState:
        state = self._state
        if state is None:
            raise UninitializedTimeError("uninitialized time")
        return state

    def to_utc(self) -> Self:
        """Switch to UTC in place and re-derive calendar fields."""
        state = self._get_state()
        self._state = self._make_state(state.seconds, state.microseconds, TimezoneMode.UTC)
        return self

    def to_local(self) -> Self:
        """Switch to local time in place and re-derive calendar fields."""
        state = self._get_state()
        self._state = self._make_state(state.seconds, state.microseconds, TimezoneMode.LOCAL)
        return self

    def as_utc(self) -> Self:
        """New value for the same instant in UTC."""
        state = self._get_state()
        return type(self)._build(state.seconds, state.microseconds, TimezoneMode.UTC)

    def as_local(self) -> Self:
        """New value for the same instant in local time."""
        state = self._get_state()
        return type(self)._build(state.seconds, state.microseconds, TimezoneMode.LOCAL)

    def copy_from(self, other: EpochTime) -> Self:
        """Replace this value with a copy of other.

        Raises:
            TimeIdentityError: If other is not exactly the same class
            UninitializedTimeError: If other was never initialized
        """
        if other is self:
            return self
        if type(other) is not type(self):
            raise TimeIdentityError("wrong argument class")
        state = other._get_state()
        self._state = replace(state, calendar=replace(state.calendar))
        return self

    def __copy__(self) -> Self:
        return type(self).__new__(type(self)).copy_from(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.__copy__()

    # =========================================================================
    # Field readers
    # =========================================================================

    @property
    def calendar(self) -> CalendarFields:
        """Calendar projection under the current timezone mode."""
        return self._get_state().calendar

    @property
    def timezone(self) -> TimezoneMode:
        return self._get_state().timezone

    @property
    def year(self) -> int:
        return self.calendar.year

    @property
    def month(self) -> int:
        """Month (1-12)."""
        return self.calendar.month

    mon = month

    @property
    def day(self) -> int:
        """Day of month (1-31)."""
        return self.calendar.day

    mday = day

    @property
    def hour(self) -> int:
        return self.calendar.hour

    @property
    def minute(self) -> int:
        return self.calendar.minute

    @property
    def second(self) -> int:
        return self.calendar.second

    @property
    def microsecond(self) -> int:
        return self._get_state().microseconds

    @property
    def weekday(self) -> Weekday:
        """Day of week (0=Sunday)."""
        return Weekday(self.calendar.weekday)

    @property
    def yearday(self) -> int:
        """Day of year (1-366)."""
        return self.calendar.yearday

    @property
    def is_dst(self) -> bool:
        return self.calendar.is_dst

    @property
    def is_utc(self) -> bool:
        return self.timezone is TimezoneMode.UTC

    @property
    def utc_offset(self) -> int:
        """Offset from UTC in seconds east (0 for UTC values)."""
        state = self._get_state()
        if state.timezone is TimezoneMode.UTC:
            return 0
        return zone_offset(state.calendar, state.seconds)

    @property
    def zone(self) -> str:
        """Zone designator: "UTC" or ±HHMM."""
        state = self._get_state()
        return format_zone(state.calendar, state.seconds, state.timezone)

    @property
    def zone_abbreviation(self) -> str | None:
        """Platform zone abbreviation (e.g. "CET"), None if the platform reports none."""
        return self.calendar.zone_abbreviation

    @property
    def is_sunday(self) -> bool:
        return self.calendar.weekday == Weekday.SUNDAY

    @property
    def is_monday(self) -> bool:
        return self.calendar.weekday == Weekday.MONDAY

    @property
    def is_tuesday(self) -> bool:
        return self.calendar.weekday == Weekday.TUESDAY

    @property
    def is_wednesday(self) -> bool:
        return self.calendar.weekday == Weekday.WEDNESDAY

    @property
    def is_thursday(self) -> bool:
        return self.calendar.weekday == Weekday.THURSDAY

    @property
    def is_friday(self) -> bool:
        return self.calendar.weekday == Weekday.FRIDAY

    @property
    def is_saturday(self) -> bool:
        return self.calendar.weekday == Weekday.SATURDAY

    # =========================================================================
    # Derived values
    # =========================================================================

    def to_i(self) -> int | float:
        """Whole seconds since the epoch as a host number.

        Raises:
            TimeConfigurationError: If the platform cannot represent the value
        """
        return from_time_t(self._get_state().seconds, self.profile)

    def to_f(self) -> float:
        """Fractional seconds since the epoch.

        Raises:
            TimeConfigurationError: If the platform has no floats
        """
        state = self._get_state()
        if not self.profile.has_float:
            raise TimeConfigurationError("Float is not available on this platform")
        return float(state.seconds) + state.microseconds / 1.0e6

    def __int__(self) -> int:
        return int(self.to_i())

    def __float__(self) -> float:
        return self.to_f()

    def to_datetime(self) -> datetime:
        """Convert to an aware Python datetime in the value's timezone.

        Raises:
            TimeRangeError: If the instant is outside the datetime range
        """
        state = self._get_state()
        tzinfo = UTC if state.timezone is TimezoneMode.UTC else timezone(timedelta(seconds=self.utc_offset))
        try:
            dt_utc = _EPOCH + timedelta(seconds=state.seconds, microseconds=state.microseconds)
            return dt_utc.astimezone(tzinfo)
        except OverflowError as e:
            raise TimeRangeError(f"{state.seconds} out of datetime range") from e

    def hash_code(self) -> int:
        """Hash over the byte representation of seconds, microseconds and timezone mode."""
        state = self._get_state()
        return hash_instant(state.seconds, state.microseconds, state.timezone, self.profile)

    def to_s(self) -> str:
        """Canonical form, e.g. "2001-09-09 01:46:40 UTC"."""
        state = self._get_state()
        return format_canonical(state.calendar, state.seconds, state.timezone)

    inspect = to_s

    def asctime(self) -> str:
        """Fixed-width form, e.g. "Sun Sep  9 01:46:40 2001"."""
        return format_asctime(self.calendar)

    ctime = asctime

    def __str__(self) -> str:
        return self.to_s()

    def __repr__(self) -> str:
        state = self._state
        if state is None:
            return f"<{type(self).__name__} uninitialized>"
        return (
            f"{type(self).__name__}(seconds={state.seconds}, "
            f"microseconds={state.microseconds}, timezone={state.timezone.name})"
        )

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __add__(self, other: object) -> Self:
        """Add a duration in seconds (int or float).

        Raises:
            TimeTypeError: If other is not numeric
            TimeOverflowError: If the result leaves the seconds range
        """
        state = self._get_state()
        seconds, microseconds = to_time_t(other, self.profile, with_usec=True)
        seconds = checked_add(state.seconds, seconds, self.profile)
        return type(self)._build(seconds, state.microseconds + microseconds, state.timezone)

    def __sub__(self, other: object) -> Self | int | float:
        """Subtract another time (giving a duration) or a duration (giving a time).

        Raises:
            TimeTypeError: If other is neither a time nor numeric
            TimeOverflowError: If the result leaves the seconds range
        """
        state = self._get_state()
        if isinstance(other, EpochTime):
            other_state = other._get_state()
            return difference(
                state.seconds, state.microseconds, other_state.seconds, other_state.microseconds, self.profile
            )

        seconds, microseconds = to_time_t(other, self.profile, with_usec=True)
        seconds = checked_sub(state.seconds, seconds, self.profile)
        return type(self)._build(seconds, state.microseconds - microseconds, state.timezone)

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare(self, other: object) -> int | None:
        """Three-way comparison: 1, 0 or -1; None if other is not a time."""
        if not isinstance(other, EpochTime):
            return None
        state = self._get_state()
        other_state = other._get_state()
        return compare_instants(state.seconds, state.microseconds, other_state.seconds, other_state.microseconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EpochTime):
            return NotImplemented
        if self._state is None or other._state is None:
            return False
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EpochTime):
            return NotImplemented
        return self.compare(other) < 0  # type: ignore[operator]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, EpochTime):
            return NotImplemented
        return self.compare(other) <= 0  # type: ignore[operator]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, EpochTime):
            return NotImplemented
        return self.compare(other) > 0  # type: ignore[operator]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, EpochTime):
            return NotImplemented
        return self.compare(other) >= 0  # type: ignore[operator]

    def __hash__(self) -> int:
        state = self._get_state()
        return hash((state.seconds, state.microseconds))
