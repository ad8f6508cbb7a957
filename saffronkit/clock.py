"""Frame clock measuring time between ticks and since creation."""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable


class Clock:
    """Tracks the time elapsed between ticks and since the clock was made."""

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._now = time_source
        self._start = self._now()
        self._last_tick = self._start
        self._dt = 0.0

    def tick(self) -> None:
        """Record a new frame; the delta becomes the time since the last tick."""
        now = self._now()
        self._dt = now - self._last_tick
        self._last_tick = now

    def delta(self) -> float:
        """Seconds elapsed between the last two ticks."""
        return self._dt

    def delta_duration(self) -> timedelta:
        """Time elapsed between the last two ticks."""
        return timedelta(seconds=self._dt)

    def since_start(self) -> float:
        """Seconds elapsed since the clock was created."""
        return self._now() - self._start

    def since_start_duration(self) -> timedelta:
        """Time elapsed since the clock was created."""
        return timedelta(seconds=self.since_start())


GlobalClock: Clock | None = None


def set_global_clock(clock: Clock) -> Clock:
    """Install the clock used by the rest of the framework and return it."""
    global GlobalClock
    GlobalClock = clock
    return GlobalClock