# ruff: noqa: TC003
from __future__ import annotations

import datetime

import sqlalchemy as sa
from sqlmodel import Field

from remote_days.models.base import UUIDBase, instant_field
from remote_days.models.enums import DaySource, DayStatus


class CalendarDay(UUIDBase, table=True):
    """Status of one user on one date."""

    __tablename__ = "calendar_day"
    __table_args__ = (sa.UniqueConstraint("user_id", "date", name="uq_calendar_user_date"),)

    user_id: str = Field(max_length=50, index=True)
    date: datetime.date = Field(index=True)
    status: str = Field(default=DayStatus.OFFICE, max_length=20)
    source: str = Field(default=DaySource.MANUAL, max_length=30)
    last_changed_at: datetime.datetime = instant_field()
