# ruff: noqa: B008, TC003
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Query

from remote_days.api.deps import ClockDep, CurrentUserDep
from remote_days.db import StoreDep
from remote_days.exceptions import unwrap
from remote_days.schemas.calendar import CalendarDayResponse
from remote_days.services import calendar as calendar_service

calendar_router = APIRouter(prefix="/calendar", tags=["calendar"])


@calendar_router.get("/my", response_model=list[CalendarDayResponse])
def my_calendar(
    store: StoreDep,
    clock: ClockDep,
    me: CurrentUserDep,
    from_date: date | None = Query(default=None, alias="from"),
    to_date: date | None = Query(default=None, alias="to"),
) -> list[CalendarDayResponse]:
    """The caller's calendar; defaults to the current month."""
    month_start, month_end = calendar_service.default_window(clock.now().date())
    days = unwrap(
        calendar_service.list_calendar(store, me, from_date or month_start, to_date or month_end)
    )
    return [calendar_service.build_calendar_day_response(d) for d in days]
