from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant for cutoff and past-date checks."""

    def now(self) -> datetime:
        """Return the current timezone-aware instant."""
        ...


class SystemClock:
    """Wall clock in a fixed timezone."""

    def __init__(self, tz: tzinfo | str = "UTC") -> None:
        self.tz = ZoneInfo(tz) if isinstance(tz, str) else tz

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Clock frozen at a given instant; can be moved forward explicitly."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            msg = "FixedClock requires a timezone-aware datetime"
            raise ValueError(msg)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> None:
        self._instant += delta


_clock: Clock = SystemClock()


def get_clock() -> Clock:
    """FastAPI dependency for the clock."""
    return _clock


def set_clock(clock: Clock) -> None:
    """Override the clock (for testing or production wiring)."""
    global _clock
    _clock = clock
