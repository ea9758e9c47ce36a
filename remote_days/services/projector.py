from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from remote_days.models.calendar import CalendarDay
from remote_days.models.enums import DaySource, DayStatus
from remote_days.services.audit import model_to_audit_dict
from remote_days.services.dates import enumerate_days

if TYPE_CHECKING:
    from datetime import datetime

    from remote_days.models.request import RemoteRequest
    from remote_days.store import Store


@dataclass
class CalendarChange:
    """One calendar write made while projecting a request."""

    day: CalendarDay
    before: dict[str, Any] | None
    after: dict[str, Any]

    @property
    def created(self) -> bool:
        return self.before is None


def apply_request(store: Store, request: RemoteRequest, now: datetime) -> list[CalendarChange]:
    """Write the request's effect onto the owner's calendar, one entry per day.

    Existing entries become REMOTE for SET_REMOTE requests and keep their
    status otherwise; missing entries are created. Re-applying the same
    request leaves status and source unchanged.
    """
    changes: list[CalendarChange] = []
    for day in enumerate_days(request.start_date, request.end_date):
        existing = store.get_calendar_day(request.user_id, day)
        if existing is not None:
            before = model_to_audit_dict(existing)
            if request.has_calendar_effect:
                existing.status = DayStatus.REMOTE.value
            existing.source = DaySource.APPROVED_REQUEST.value
            existing.last_changed_at = now
            entry = store.update_calendar_day(existing)
        else:
            before = None
            entry = store.add_calendar_day(
                CalendarDay(
                    user_id=request.user_id,
                    date=day,
                    status=(DayStatus.REMOTE if request.has_calendar_effect else DayStatus.OFFICE).value,
                    source=DaySource.APPROVED_REQUEST.value,
                    last_changed_at=now,
                )
            )
        changes.append(CalendarChange(day=entry, before=before, after=model_to_audit_dict(entry)))
    return changes
