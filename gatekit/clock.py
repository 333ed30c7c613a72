import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Time source read by gates on every processed value.

    Readings are integer milliseconds. Gates only use differences between
    readings, so the origin does not matter, but a reading that goes
    backwards shrinks the measured hold time.
    """

    @abstractmethod
    def now(self) -> int:
        """Return the current time in milliseconds."""
        ...


class SystemClock(Clock):
    """Wall clock reading milliseconds since the Unix epoch.

    Readings are absolute timestamps, which makes
    ``time_of_last_state_change`` comparable across processes. If the system
    clock is stepped backwards, hold times appear shorter than they are and a
    pending transition waits until the clock has caught up again. Use
    :class:`MonotonicClock` where that matters more than absolute timestamps.
    """

    def now(self) -> int:
        return time.time_ns() // 1_000_000


class MonotonicClock(Clock):
    """Monotonic clock in milliseconds, unaffected by system clock changes.

    The origin is arbitrary, so readings are only meaningful within one process.
    """

    def now(self) -> int:
        return time.monotonic_ns() // 1_000_000


class ManualClock(Clock):
    """Virtual clock that only moves when told to.

    Useful for tests and offline replays of timestamped samples, where
    sleeping for real would be slow and flaky.
    """

    def __init__(self, start: int = 0) -> None:
        self._now = start

    def now(self) -> int:
        return self._now

    def advance(self, millis: int) -> int:
        """Move the clock forward and return the new reading.

        Raises:
            ValueError: If ``millis`` is negative.
        """
        if millis < 0:
            raise ValueError(f"Cannot move a clock backwards (got {millis}ms)")
        self._now += millis
        return self._now

    def set(self, millis: int) -> None:
        if millis < self._now:
            raise ValueError(f"Cannot move a clock backwards from {self._now}ms to {millis}ms")
        self._now = millis
