"""Time providers used to read the current moment."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

TimeProvider = Callable[[], datetime]


def system_now() -> datetime:
    """Return naive local wall-clock time."""

    return datetime.now()


class FrozenClock:
    """Callable time provider that only moves when told to.

    Useful to simulate a week passing without waiting for it::

        clock = FrozenClock(datetime(2024, 1, 1, 9, 0))
        manager = AllowanceManager(time_provider=clock)
        clock.advance(days=7)
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime.now()

    def __call__(self) -> datetime:
        return self._now

    def set(self, moment: datetime) -> None:
        self._now = moment

    def advance(self, **delta: float) -> datetime:
        self._now += timedelta(**delta)
        return self._now


__all__ = ["FrozenClock", "TimeProvider", "system_now"]
