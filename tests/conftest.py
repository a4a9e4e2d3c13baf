"""Shared test fixtures for pyEpochTime tests."""

from __future__ import annotations

import time
from collections.abc import Callable, Generator

import pytest

# POSIX TZ strings, no zoneinfo database required
TZ_UTC = "UTC0"
TZ_JST = "JST-9"  # UTC+9, no DST
TZ_US_EASTERN = "EST5EDT,M3.2.0,M11.1.0"  # UTC-5, DST UTC-4 from March to November


@pytest.fixture
def local_timezone(monkeypatch: pytest.MonkeyPatch) -> Generator[Callable[[str], None]]:
    """Set the process-local timezone for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    def set_timezone(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield set_timezone

    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def utc_local(local_timezone: Callable[[str], None]) -> None:
    """Make local time identical to UTC."""
    local_timezone(TZ_UTC)


@pytest.fixture
def jst_local(local_timezone: Callable[[str], None]) -> None:
    """Make local time UTC+9 without daylight saving."""
    local_timezone(TZ_JST)


@pytest.fixture
def eastern_local(local_timezone: Callable[[str], None]) -> None:
    """Make local time US Eastern with daylight saving."""
    local_timezone(TZ_US_EASTERN)
