"""System clock readers used to construct the current time."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .core.common import NSEC_PER_SEC, NSEC_PER_USEC

logger = logging.getLogger(__name__)


class SystemClock:
    """Wall clock with nanosecond resolution, truncated to microseconds."""

    def read(self) -> tuple[int, int]:
        """Read the clock.

        Returns:
            (seconds, microseconds) since the epoch
        """
        seconds, nanoseconds = divmod(time.time_ns(), NSEC_PER_SEC)
        return seconds, nanoseconds // NSEC_PER_USEC


class CoarseClock:
    """Whole-second wall clock with a microsecond tie-breaker.

    Two reads within the same second get increasing microsecond values so
    that consecutive values still compare as distinct and ordered.
    """

    source: Callable[[], float]

    _last_seconds: int
    _last_microseconds: int

    def __init__(self, source: Callable[[], float] = time.time) -> None:
        """Initialize clock.

        Args:
            source: Callable returning seconds since the epoch (fraction is ignored)
        """
        self.source = source
        self._last_seconds = 0
        self._last_microseconds = 0

    def read(self) -> tuple[int, int]:
        seconds = int(self.source())
        if seconds != self._last_seconds:
            self._last_seconds = seconds
            self._last_microseconds = 0
        else:
            self._last_microseconds += 1
        return seconds, self._last_microseconds


def default_clock() -> SystemClock | CoarseClock:
    """Return the highest resolution clock available on this interpreter."""
    if hasattr(time, "time_ns"):
        return SystemClock()
    logger.debug("No nanosecond clock available, falling back to whole seconds")
    return CoarseClock()
