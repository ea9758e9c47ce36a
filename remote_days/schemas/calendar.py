# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel

from remote_days.models.enums import DaySource, DayStatus


class CalendarDayResponse(BaseModel):
    """Response schema for one calendar entry."""

    id: uuid.UUID
    user_id: str
    date: date
    status: DayStatus
    source: DaySource
    last_changed_at: datetime
