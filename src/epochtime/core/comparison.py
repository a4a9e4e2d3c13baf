"""Ordering and hashing of canonical epoch values."""

from __future__ import annotations

import zlib

from ..platform import PlatformProfile
from .common import TimezoneMode

_TIMEZONE_BYTES = 4  # width of the timezone enum in the hashed representation


def compare(seconds: int, microseconds: int, other_seconds: int, other_microseconds: int) -> int:
    """Three-way comparison on (seconds, microseconds).

    Returns:
        1 if the first instant is later, -1 if earlier, 0 if equal
    """
    if seconds != other_seconds:
        return 1 if seconds > other_seconds else -1
    if microseconds != other_microseconds:
        return 1 if microseconds > other_microseconds else -1
    return 0


def hash_code(seconds: int, microseconds: int, timezone: TimezoneMode, profile: PlatformProfile) -> int:
    """Hash the byte representation of seconds, microseconds and timezone.

    Seconds and microseconds are encoded little-endian with the width and
    signedness of the platform seconds type, the timezone as a 4 byte integer.
    Calendar fields do not take part.
    """
    width = profile.time_bits // 8
    hashed = zlib.crc32(seconds.to_bytes(width, "little", signed=profile.time_signed))
    hashed = zlib.crc32(microseconds.to_bytes(width, "little", signed=profile.time_signed), hashed)
    return zlib.crc32(timezone.value.to_bytes(_TIMEZONE_BYTES, "little"), hashed)
