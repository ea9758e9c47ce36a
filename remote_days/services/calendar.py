from __future__ import annotations

from typing import TYPE_CHECKING

from remote_days.models.calendar import CalendarDay
from remote_days.models.enums import DaySource, DayStatus, ErrorKind, Role
from remote_days.results import Failure, Ok
from remote_days.schemas.calendar import CalendarDayResponse
from remote_days.services.dates import enumerate_days, iso_week_bounds, month_bounds

if TYPE_CHECKING:
    from datetime import date, datetime

    from remote_days.models.user import User
    from remote_days.results import Result
    from remote_days.store import Store


def build_calendar_day_response(day: CalendarDay) -> CalendarDayResponse:
    return CalendarDayResponse(
        id=day.id,
        user_id=day.user_id,
        date=day.date,
        status=DayStatus(day.status),
        source=DaySource(day.source),
        last_changed_at=day.last_changed_at,
    )


def default_window(today: date) -> tuple[date, date]:
    """The calendar month containing ``today``."""
    return month_bounds(today)


def list_calendar(store: Store, user: User, start: date, end: date) -> Result[list[CalendarDay]]:
    """The user's calendar entries within ``start``..``end`` inclusive, by date."""
    if end < start:
        return Failure(ErrorKind.INVALID_INPUT, "to must be >= from")
    return Ok(store.list_calendar_days(user.id, start, end))


def seed_office_week(store: Store, now: datetime) -> int:
    """Mark every day of the current ISO week as OFFICE for each employee.

    Days that already have an entry are left alone. Returns the number of
    entries created.
    """
    monday, sunday = iso_week_bounds(now.date())
    created = 0
    with store.transaction():
        for user in store.list_users():
            if user.role != Role.EMPLOYEE:
                continue
            for day in enumerate_days(monday, sunday):
                if store.get_calendar_day(user.id, day) is not None:
                    continue
                store.add_calendar_day(
                    CalendarDay(
                        user_id=user.id,
                        date=day,
                        status=DayStatus.OFFICE.value,
                        source=DaySource.POLICY_SEED.value,
                        last_changed_at=now,
                    )
                )
                created += 1
    return created
