"""Conversion between host numeric values and canonical epoch seconds.

This module implements the bridge between the three host numeric domains and
the ``(seconds, microseconds)`` pair used by the time core. It provides:

Classes:
    - NumericKind: Tagged variant of host numeric values, each member a conversion arm

Functions:
    - classify: Select the conversion arm for a host value
    - to_time_t: Convert a host value to (seconds, microseconds)
    - from_time_t: Convert seconds back to a host value

Conversion rules per arm:
    INTEGER: Fixed-width host integer, range checked against the seconds range
    FLOAT:   Finite float, kept one unit away from the seconds range boundaries,
             split with floor/trunc when microseconds are requested, otherwise
             rounded half away from zero
    BIGINT:  Integer outside the host integer range, only accepted when big
             integers exist and the seconds type is wider than the host integer
"""

from __future__ import annotations

import logging
import math
from enum import Enum, member

from ..exceptions import TimeConfigurationError, TimeRangeError, TimeTypeError
from ..platform import PlatformProfile
from .common import USEC_PER_SEC

logger = logging.getLogger(__name__)

# =============================================================================
# Conversion Arms
# =============================================================================


def _out_of_range(value: int | float) -> TimeRangeError:
    return TimeRangeError(f"{value} out of Time range")


def _convert_integer(value: int, profile: PlatformProfile, with_usec: bool) -> tuple[int, int]:
    """Convert a fixed-width host integer.

    Args:
        value: Integer inside the host integer range
        profile: Platform profile
        with_usec: Unused, integers carry no fractional part

    Returns:
        (seconds, 0)

    Raises:
        TimeRangeError: If value is outside the seconds range
    """
    if not profile.fits_time(value):
        raise _out_of_range(value)
    return value, 0


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _convert_float(value: float, profile: PlatformProfile, with_usec: bool) -> tuple[int, int]:
    """Convert a float.

    The value must stay one unit inside the seconds range so that rounding
    never lands on an unrepresentable boundary.

    Args:
        value: Float seconds since the epoch
        profile: Platform profile
        with_usec: Keep the fractional part as microseconds instead of rounding

    Returns:
        (seconds, microseconds)

    Raises:
        TimeRangeError: If value is NaN, infinite or outside the seconds range
    """
    if not math.isfinite(value):
        raise _out_of_range(value)

    if value >= float(profile.time_max) - 1.0 or value < float(profile.time_min) + 1.0:
        raise _out_of_range(value)

    if with_usec:
        whole = math.floor(value)
        microseconds = math.trunc((value - whole) * USEC_PER_SEC)
    else:
        whole = _round_half_away(value)
        microseconds = 0

    seconds = int(whole)
    if not profile.fits_time(seconds):
        raise _out_of_range(value)

    return seconds, microseconds


def _convert_bigint(value: int, profile: PlatformProfile, with_usec: bool) -> tuple[int, int]:
    """Convert an integer that does not fit the host's default integer.

    Raises:
        TimeRangeError: If big integers are unsupported, cannot be narrowed,
            or the value is outside the seconds range
    """
    if not profile.has_bigint:
        raise _out_of_range(value)

    if profile.time_bits <= profile.host_int_bits:
        # Would have to narrow to a host integer, which it does not fit
        raise TimeRangeError(f"integer {value} too big to convert to host integer")

    if not profile.fits_time(value):
        raise _out_of_range(value)
    return value, 0


class NumericKind(Enum):
    """Host numeric value kinds, each callable as its conversion arm.

    Usage:
        kind = classify(1.5, profile)
        seconds, microseconds = kind(1.5, profile, with_usec=True)
    """

    INTEGER = member(_convert_integer)
    FLOAT = member(_convert_float)
    BIGINT = member(_convert_bigint)

    def __call__(self, value: int | float, profile: PlatformProfile, with_usec: bool = False) -> tuple[int, int]:
        return self.value(value, profile, with_usec)


# =============================================================================
# Public API
# =============================================================================


def classify(value: object, profile: PlatformProfile) -> NumericKind:
    """Select the conversion arm for a host value.

    Args:
        value: Host value
        profile: Platform profile

    Returns:
        Matching NumericKind

    Raises:
        TimeTypeError: If value is not a time-convertible number
    """
    # bool is an int subclass but never a time value
    if isinstance(value, bool):
        raise TimeTypeError(f"cannot convert {value!r} to time")

    if isinstance(value, int):
        if profile.fits_host_int(value):
            return NumericKind.INTEGER
        return NumericKind.BIGINT

    if isinstance(value, float) and profile.has_float:
        return NumericKind.FLOAT

    raise TimeTypeError(f"cannot convert {value!r} to time")


def to_time_t(value: object, profile: PlatformProfile, with_usec: bool = False) -> tuple[int, int]:
    """Convert a host numeric value to canonical seconds.

    Args:
        value: Host integer or float
        profile: Platform profile
        with_usec: Keep the fractional part of floats as microseconds

    Returns:
        (seconds, microseconds); microseconds is 0 unless with_usec is set
        and value has a fractional part

    Raises:
        TimeTypeError: If value is not numeric
        TimeRangeError: If value is outside the representable seconds range
    """
    kind = classify(value, profile)
    return kind(value, profile, with_usec)  # type: ignore[arg-type]


def from_time_t(seconds: int, profile: PlatformProfile) -> int | float:
    """Convert canonical seconds to a host numeric value.

    Args:
        seconds: Seconds since the epoch
        profile: Platform profile

    Returns:
        int if it fits the host integer or big integers exist, else float

    Raises:
        TimeConfigurationError: If the platform has neither big integers nor floats
            and seconds does not fit the host integer
    """
    if profile.fits_host_int(seconds):
        return seconds

    if profile.has_bigint:
        logger.debug("Promoting %d seconds to big integer", seconds)
        return seconds

    if profile.has_float:
        logger.debug("Promoting %d seconds to float", seconds)
        return float(seconds)

    raise TimeConfigurationError("Time too big")
