"""Platform profile describing the integer and float capabilities of the host.

The width and signedness of the native seconds type, the width of the host's
default integer, and the availability of floats and big integers decide how
numeric values are converted to time and back, and where arithmetic
overflows. A profile is bound to a time class through its ``profile`` class
attribute.
"""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# Profile Constants
# =============================================================================

SUPPORTED_TIME_BITS = (32, 64)
SUPPORTED_HOST_INT_BITS = (32, 64)

C_INT_MIN = -(1 << 31)  # struct tm fields are C ints
C_INT_MAX = (1 << 31) - 1


@dataclass(frozen=True, kw_only=True)
class PlatformProfile:
    """Integer/float model of the platform a time value runs on.

    Attributes:
        time_bits: Width of the native seconds type (32 or 64)
        time_signed: True if the seconds type is signed (pre-epoch values allowed)
        host_int_bits: Width of the host's default integer (32 or 64)
        has_float: True if the host supports floating point values
        has_bigint: True if the host supports arbitrary-precision integers
    """

    time_bits: int = 64
    time_signed: bool = True
    host_int_bits: int = 64
    has_float: bool = True
    has_bigint: bool = False

    def __post_init__(self) -> None:
        if self.time_bits not in SUPPORTED_TIME_BITS:
            raise ValueError(f"Unsupported time_bits: {self.time_bits} (expected one of {SUPPORTED_TIME_BITS})")
        if self.host_int_bits not in SUPPORTED_HOST_INT_BITS:
            raise ValueError(
                f"Unsupported host_int_bits: {self.host_int_bits} (expected one of {SUPPORTED_HOST_INT_BITS})"
            )

    @property
    def time_min(self) -> int:
        """Smallest representable seconds value."""
        if not self.time_signed:
            return 0
        return -(1 << (self.time_bits - 1))

    @property
    def time_max(self) -> int:
        """Largest representable seconds value."""
        if not self.time_signed:
            return (1 << self.time_bits) - 1
        return (1 << (self.time_bits - 1)) - 1

    @property
    def host_int_min(self) -> int:
        return -(1 << (self.host_int_bits - 1))

    @property
    def host_int_max(self) -> int:
        return (1 << (self.host_int_bits - 1)) - 1

    @property
    def time_fits_host_int(self) -> bool:
        """True if every seconds value fits the host's default integer."""
        return self.host_int_min <= self.time_min and self.time_max <= self.host_int_max

    @property
    def year_offset_min(self) -> int:
        """Lowest accepted ``year - 1900`` for calendar construction."""
        return C_INT_MIN if self.time_signed else 0

    @property
    def year_offset_max(self) -> int:
        return C_INT_MAX

    def fits_time(self, seconds: int) -> bool:
        return self.time_min <= seconds <= self.time_max

    def fits_host_int(self, value: int) -> bool:
        return self.host_int_min <= value <= self.host_int_max


# Common platforms
DEFAULT_PROFILE = PlatformProfile()
TIME32_PROFILE = PlatformProfile(time_bits=32, host_int_bits=32)
UNSIGNED32_PROFILE = PlatformProfile(time_bits=32, time_signed=False)
