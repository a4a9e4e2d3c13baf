"""Checked arithmetic on canonical epoch seconds.

All functions work on plain (seconds, microseconds) integers and the platform
profile; none of them touch calendar fields. Results that leave the profile's
seconds range raise instead of wrapping.
"""

from __future__ import annotations

from ..exceptions import TimeOverflowError, TimeRangeError
from ..platform import PlatformProfile
from .common import USEC_PER_SEC


def normalize(seconds: int, microseconds: int, profile: PlatformProfile) -> tuple[int, int]:
    """Carry whole seconds out of microseconds.

    Args:
        seconds: Seconds since the epoch
        microseconds: Microseconds, may be negative or >= 1_000_000
        profile: Platform profile

    Returns:
        (seconds, microseconds) with 0 <= microseconds < 1_000_000

    Raises:
        TimeRangeError: If the carried seconds leave the representable range
    """
    carry, microseconds = divmod(microseconds, USEC_PER_SEC)
    seconds += carry

    if not profile.fits_time(seconds):
        raise TimeRangeError(f"{seconds} out of Time range")

    return seconds, microseconds


def checked_add(seconds: int, delta: int, profile: PlatformProfile) -> int:
    """Add delta to seconds.

    Raises:
        TimeOverflowError: If the sum leaves the representable range ("addition")
    """
    result = seconds + delta
    if not profile.fits_time(result):
        raise TimeOverflowError("addition")
    return result


def checked_sub(seconds: int, delta: int, profile: PlatformProfile) -> int:
    """Subtract delta from seconds.

    Raises:
        TimeOverflowError: If the difference leaves the representable range ("subtraction")
    """
    result = seconds - delta
    if not profile.fits_time(result):
        raise TimeOverflowError("subtraction")
    return result


def difference(
    seconds: int,
    microseconds: int,
    other_seconds: int,
    other_microseconds: int,
    profile: PlatformProfile,
) -> int | float:
    """Elapsed time between two instants.

    Returns:
        Float seconds (fraction from the microsecond difference) if the platform
        has floats, otherwise whole seconds rounded toward negative infinity
    """
    if profile.has_float:
        return float(seconds - other_seconds) + (microseconds - other_microseconds) / 1.0e6

    result = seconds - other_seconds
    if microseconds < other_microseconds:
        result -= 1
    return result
