"""Date arithmetic for remote-day validation.

Day boundaries are local to the timezone of the ``now`` instant passed in,
so callers control them through the injected clock.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from datetime import UTC, date, datetime, time, timedelta
from typing import TYPE_CHECKING, overload

from remote_days.models.enums import DayStatus, WeekdayCode

if TYPE_CHECKING:
    from remote_days.store import Store

_WEEKDAY_CODES = tuple(WeekdayCode)  # ISO order: MON=1 .. SUN=7


class InvalidRangeError(ValueError):
    """Raised when a range ends before it starts."""


class DayRange(Sequence[date]):
    """Inclusive, ascending run of calendar dates.

    Days are computed on demand; iterating twice yields the same dates.
    """

    def __init__(self, start: date, end: date) -> None:
        if end < start:
            msg = f"end {end.isoformat()} is before start {start.isoformat()}"
            raise InvalidRangeError(msg)
        self.start = start
        self.end = end

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    @overload
    def __getitem__(self, index: int) -> date: ...

    @overload
    def __getitem__(self, index: slice) -> list[date]: ...

    def __getitem__(self, index: int | slice) -> date | list[date]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("DayRange index out of range")
        return self.start + timedelta(days=index)

    def __iter__(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, date) and not isinstance(value, datetime) and self.start <= value <= self.end

    def __repr__(self) -> str:
        return f"DayRange({self.start.isoformat()}, {self.end.isoformat()})"


def enumerate_days(start: date, end: date) -> DayRange:
    """Return every date from ``start`` to ``end`` inclusive."""
    return DayRange(start, end)


def weekday_code(day: date) -> WeekdayCode:
    """Map a date to MON..SUN using ISO weekday numbering."""
    return _WEEKDAY_CODES[day.isoweekday() - 1]


def start_of_day(day: date, now: datetime) -> datetime:
    """Local midnight of ``day`` in the timezone of ``now``."""
    return datetime.combine(day, time.min, tzinfo=now.tzinfo)


def end_of_day(day: date, now: datetime) -> datetime:
    """Last representable instant of ``day`` in the timezone of ``now``."""
    return datetime.combine(day, time.max, tzinfo=now.tzinfo)


def is_past_date(day: date, now: datetime) -> bool:
    """True once the whole of ``day`` lies before ``now``."""
    return end_of_day(day, now).astimezone(UTC) < now.astimezone(UTC)


def meets_cutoff(day: date, cutoff_hours: int, now: datetime) -> bool:
    """True if ``day`` starts at least ``cutoff_hours`` after ``now``.

    A day that has already begun has zero lead, so it passes only a zero
    cutoff. Days that are already over never pass.
    """
    if is_past_date(day, now):
        return False
    lead = start_of_day(day, now).astimezone(UTC) - now.astimezone(UTC)
    return max(lead, timedelta(0)) >= timedelta(hours=cutoff_hours)


def iso_week_bounds(day: date) -> tuple[date, date]:
    """Monday and Sunday of the ISO week containing ``day``."""
    monday = day - timedelta(days=day.isoweekday() - 1)
    return monday, monday + timedelta(days=6)


def month_bounds(day: date) -> tuple[date, date]:
    """First and last day of the calendar month containing ``day``."""
    first = day.replace(day=1)
    next_month = (first + timedelta(days=32)).replace(day=1)
    return first, next_month - timedelta(days=1)


def count_remote_in_week(store: Store, user_id: str, day: date) -> int:
    """Stored REMOTE days of ``user_id`` in the ISO week of ``day``."""
    start, end = iso_week_bounds(day)
    return len(store.list_calendar_days(user_id, start, end, status=DayStatus.REMOTE))


def count_remote_in_month(store: Store, user_id: str, day: date) -> int:
    """Stored REMOTE days of ``user_id`` in the calendar month of ``day``."""
    start, end = month_bounds(day)
    return len(store.list_calendar_days(user_id, start, end, status=DayStatus.REMOTE))
