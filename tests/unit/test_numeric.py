"""Unit tests for the numeric bridge between host values and epoch seconds."""

from __future__ import annotations

import math

import pytest

from src.epochtime.core.numeric import NumericKind, classify, from_time_t, to_time_t
from src.epochtime.exceptions import TimeConfigurationError, TimeRangeError, TimeTypeError
from src.epochtime.platform import DEFAULT_PROFILE, TIME32_PROFILE, UNSIGNED32_PROFILE, PlatformProfile

# =============================================================================
# Test Constants
# =============================================================================

TEST_INT64_MAX = (1 << 63) - 1
TEST_INT32_MAX = (1 << 31) - 1
TEST_INT32_MIN = -(1 << 31)

WIDE_TIME_BIGINT = PlatformProfile(time_bits=64, host_int_bits=32, has_bigint=True)
WIDE_TIME_NO_BIGINT = PlatformProfile(time_bits=64, host_int_bits=32)
NARROW_TIME_BIGINT = PlatformProfile(time_bits=32, host_int_bits=32, has_bigint=True)
NO_FLOAT = PlatformProfile(has_float=False)
NO_FLOAT_NO_BIGINT_HOST32 = PlatformProfile(time_bits=64, host_int_bits=32, has_float=False)

# =============================================================================
# Classification Tests
# =============================================================================


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        ("value", "profile", "expected_kind"),
        [
            (0, DEFAULT_PROFILE, NumericKind.INTEGER),
            (-5, DEFAULT_PROFILE, NumericKind.INTEGER),
            (1.5, DEFAULT_PROFILE, NumericKind.FLOAT),
            (1 << 63, DEFAULT_PROFILE, NumericKind.BIGINT),
            (TEST_INT32_MAX, TIME32_PROFILE, NumericKind.INTEGER),
            (TEST_INT32_MAX + 1, TIME32_PROFILE, NumericKind.BIGINT),
        ],
    )
    def test_selects_arm(self, value: int | float, profile: PlatformProfile, expected_kind: NumericKind) -> None:
        """Test that host values are routed to the right conversion arm."""
        assert classify(value, profile) is expected_kind

    @pytest.mark.parametrize("value", [True, False, "1", None, b"\x01", [1]])
    def test_non_numeric_raises(self, value: object) -> None:
        """Test that non-numeric values (including bool) raise TimeTypeError."""
        with pytest.raises(TimeTypeError, match="cannot convert"):
            classify(value, DEFAULT_PROFILE)

    def test_float_without_float_support_raises(self) -> None:
        """Test that floats are not time values on a platform without floats."""
        with pytest.raises(TimeTypeError):
            classify(1.5, NO_FLOAT)

    def test_kind_is_callable(self) -> None:
        """Test that a NumericKind member can be called as its conversion arm."""
        assert NumericKind.INTEGER(5, DEFAULT_PROFILE) == (5, 0)
        assert NumericKind.FLOAT(2.25, DEFAULT_PROFILE, with_usec=True) == (2, 250000)


# =============================================================================
# Integer Arm Tests
# =============================================================================


class TestIntegerConversion:
    """Tests for fixed-width integer conversion."""

    @pytest.mark.parametrize("value", [0, 1, -1, 1_000_000_000, TEST_INT64_MAX, -(1 << 63)])
    def test_in_range(self, value: int) -> None:
        """Test that integers in range convert with zero microseconds."""
        assert to_time_t(value, DEFAULT_PROFILE, with_usec=True) == (value, 0)

    @pytest.mark.parametrize("value", [TEST_INT32_MIN, TEST_INT32_MAX])
    def test_time32_boundaries(self, value: int) -> None:
        """Test that the 32-bit boundaries themselves are accepted."""
        assert to_time_t(value, TIME32_PROFILE) == (value, 0)

    def test_negative_on_unsigned_raises(self) -> None:
        """Test that pre-epoch values are rejected with unsigned seconds."""
        with pytest.raises(TimeRangeError, match="out of Time range"):
            to_time_t(-1, UNSIGNED32_PROFILE)

    def test_above_unsigned_max_raises(self) -> None:
        """Test that values above the unsigned 32-bit maximum are rejected."""
        assert to_time_t((1 << 32) - 1, UNSIGNED32_PROFILE) == ((1 << 32) - 1, 0)
        with pytest.raises(TimeRangeError):
            to_time_t(1 << 32, UNSIGNED32_PROFILE)


# =============================================================================
# Float Arm Tests
# =============================================================================


class TestFloatConversion:
    """Tests for floating point conversion."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1.5, (1, 500000)),
            (0.25, (0, 250000)),
            (-1.5, (-2, 500000)),
            (-0.25, (-1, 750000)),
            (1000000000.0, (1000000000, 0)),
        ],
    )
    def test_split_with_microseconds(self, value: float, expected: tuple[int, int]) -> None:
        """Test floor/trunc split into seconds and microseconds."""
        assert to_time_t(value, DEFAULT_PROFILE, with_usec=True) == expected

    @pytest.mark.parametrize(
        ("value", "expected_seconds"),
        [
            (1.25, 1),
            (1.75, 2),
            (2.5, 3),
            (-2.5, -3),
            (-1.25, -1),
            (0.5, 1),
        ],
    )
    def test_round_half_away_from_zero(self, value: float, expected_seconds: int) -> None:
        """Test rounding to whole seconds when microseconds are not requested."""
        assert to_time_t(value, DEFAULT_PROFILE) == (expected_seconds, 0)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, value: float) -> None:
        """Test that NaN and infinities are rejected."""
        with pytest.raises(TimeRangeError):
            to_time_t(value, DEFAULT_PROFILE, with_usec=True)

    @pytest.mark.parametrize("value", [1e19, -1e19, 9.3e18])
    def test_outside_int64_raises(self, value: float) -> None:
        """Test that floats beyond the 64-bit seconds range are rejected."""
        with pytest.raises(TimeRangeError, match="out of Time range"):
            to_time_t(value, DEFAULT_PROFILE)

    @pytest.mark.parametrize("value", [float(TEST_INT32_MAX), float(TEST_INT32_MAX) - 1.0, float(TEST_INT32_MIN)])
    def test_boundary_margin_raises(self, value: float) -> None:
        """Test that floats within one unit of the 32-bit boundaries are rejected."""
        with pytest.raises(TimeRangeError):
            to_time_t(value, TIME32_PROFILE)

    def test_inside_margin_accepted(self) -> None:
        """Test that floats just inside the margin are converted."""
        assert to_time_t(2147483645.5, TIME32_PROFILE, with_usec=True) == (2147483645, 500000)
        assert to_time_t(-2147483646.5, TIME32_PROFILE, with_usec=True) == (-2147483647, 500000)


# =============================================================================
# Big Integer Arm Tests
# =============================================================================


class TestBigIntConversion:
    """Tests for integers beyond the host integer range."""

    def test_without_bigint_support_raises(self) -> None:
        """Test that integers beyond the host range are rejected without big integers."""
        with pytest.raises(TimeRangeError):
            to_time_t(1 << 40, WIDE_TIME_NO_BIGINT)

    def test_wide_time_accepts(self) -> None:
        """Test that big integers convert when seconds are wider than the host integer."""
        assert to_time_t(1 << 40, WIDE_TIME_BIGINT, with_usec=True) == (1 << 40, 0)

    def test_wide_time_out_of_range_raises(self) -> None:
        """Test that big integers are still range checked against the seconds range."""
        with pytest.raises(TimeRangeError, match="out of Time range"):
            to_time_t(1 << 63, WIDE_TIME_BIGINT)

    def test_narrow_time_raises(self) -> None:
        """Test that big integers cannot narrow to a host integer."""
        with pytest.raises(TimeRangeError, match="too big"):
            to_time_t(1 << 40, NARROW_TIME_BIGINT)

    def test_beyond_int64_on_default_raises(self) -> None:
        """Test that Python integers beyond 64 bits are rejected by default."""
        with pytest.raises(TimeRangeError):
            to_time_t(1 << 70, DEFAULT_PROFILE)


# =============================================================================
# Reverse Direction Tests
# =============================================================================


class TestFromTimeT:
    """Tests for from_time_t."""

    @pytest.mark.parametrize("seconds", [0, -1, 1_000_000_000, TEST_INT64_MAX])
    def test_fits_host_int(self, seconds: int) -> None:
        """Test that seconds within the host integer come back as int."""
        result = from_time_t(seconds, DEFAULT_PROFILE)
        assert result == seconds
        assert isinstance(result, int)

    def test_promotes_to_bigint(self) -> None:
        """Test promotion to big integer when supported."""
        result = from_time_t(1 << 40, WIDE_TIME_BIGINT)
        assert result == 1 << 40
        assert isinstance(result, int)

    def test_promotes_to_float(self) -> None:
        """Test promotion to float without big integer support."""
        result = from_time_t(1 << 40, WIDE_TIME_NO_BIGINT)
        assert result == float(1 << 40)
        assert isinstance(result, float)

    def test_no_representation_raises(self) -> None:
        """Test terminal error when neither big integers nor floats exist."""
        with pytest.raises(TimeConfigurationError, match="Time too big"):
            from_time_t(1 << 40, NO_FLOAT_NO_BIGINT_HOST32)

    def test_round_trip(self) -> None:
        """Test that integer seconds survive to_time_t and from_time_t unchanged."""
        for seconds in (0, -86400, 1234567890):
            converted, _ = to_time_t(from_time_t(seconds, DEFAULT_PROFILE), DEFAULT_PROFILE)
            assert converted == seconds
