"""String rendering of epoch values.

Every function reads the cached calendar projection only; nothing here calls
back into the platform's time conversion.

Formats:
    canonical: "2001-09-09 01:46:40 UTC" / "2001-09-09 10:46:40 +0900"
    asctime:   "Sun Sep  9 01:46:40 2001"
    zone:      "UTC" / "+0900"
"""

from __future__ import annotations

from .common import MONTH_NAMES, SECONDS_PER_MINUTE, WEEKDAY_NAMES, TimezoneMode
from .projection import CalendarFields, utc_seconds_of

UTC_DESIGNATOR = "UTC"


def _format_year(year: int) -> str:
    """Year with at least four digits, sign kept in front of the padding."""
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}"


def format_offset(offset_seconds: int) -> str:
    """Render an offset east of UTC as ±HHMM.

    Examples:
        >>> format_offset(32400)
        '+0900'
        >>> format_offset(-12600)
        '-0330'
    """
    sign = "-" if offset_seconds < 0 else "+"
    minutes = abs(offset_seconds) // SECONDS_PER_MINUTE
    return f"{sign}{minutes // 60:02d}{minutes % 60:02d}"


def zone_offset(fields: CalendarFields, seconds: int) -> int:
    """Offset from UTC in seconds for projected fields.

    Uses the platform-reported offset; when the platform has none the offset
    is synthesized from the local fields read back as UTC.
    """
    if fields.utc_offset is not None:
        return fields.utc_offset
    return utc_seconds_of(fields) - seconds


def format_zone(fields: CalendarFields, seconds: int, timezone: TimezoneMode) -> str:
    """Zone designator: "UTC" for UTC values, ±HHMM for local ones."""
    if timezone is TimezoneMode.UTC:
        return UTC_DESIGNATOR
    return format_offset(zone_offset(fields, seconds))


def format_canonical(fields: CalendarFields, seconds: int, timezone: TimezoneMode) -> str:
    """Render "YYYY-MM-DD HH:MM:SS <zone>"."""
    return (
        f"{_format_year(fields.year)}-{fields.month:02d}-{fields.day:02d} "
        f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d} "
        f"{format_zone(fields, seconds, timezone)}"
    )


def format_asctime(fields: CalendarFields) -> str:
    """Render the locale-independent "Www Mmm DD HH:MM:SS YYYY" form."""
    return (
        f"{WEEKDAY_NAMES[fields.weekday]} {MONTH_NAMES[fields.month - 1]} {fields.day:2d} "
        f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d} {_format_year(fields.year)}"
    )
