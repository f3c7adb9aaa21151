from __future__ import annotations

import datetime as dt
import enum
import time
from typing import Callable


class ClockError(RuntimeError):
    """Base class for clock queries made in the wrong clock state."""


class ClockNotStartedError(ClockError):
    pass


class ClockNotStoppedError(ClockError):
    pass


class ClockStatus(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    STOPPED = "stopped"


class SessionClock:
    """Two-event stopwatch: starts on the first keystroke, stops on completion.

    ``now`` is any callable returning seconds from a monotonic source, so tests
    can drive the clock by hand.
    """

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._started_at: float | None = None
        self._elapsed: dt.timedelta | None = None

    @property
    def status(self) -> ClockStatus:
        if self._started_at is None:
            return ClockStatus.NOT_STARTED
        if self._elapsed is None:
            return ClockStatus.RUNNING
        return ClockStatus.STOPPED

    @property
    def is_started(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        # first call wins
        if self._started_at is None:
            self._started_at = self._now()

    def elapsed_since_start(self) -> dt.timedelta:
        if self._started_at is None:
            raise ClockNotStartedError("clock queried before start()")
        if self._elapsed is not None:
            return self._elapsed
        return dt.timedelta(seconds=max(self._now() - self._started_at, 0.0))

    def stop(self) -> dt.timedelta:
        if self._started_at is None:
            raise ClockNotStartedError("stop() called before start()")
        if self._elapsed is None:
            self._elapsed = self.elapsed_since_start()
        return self._elapsed

    def duration(self) -> dt.timedelta:
        if self._elapsed is None:
            raise ClockNotStoppedError("clock has not been stopped")
        return self._elapsed

    def reset(self) -> None:
        self._started_at = None
        self._elapsed = None
