# ruff: noqa: TC003
from __future__ import annotations

from datetime import date, datetime

import sqlalchemy as sa
from sqlmodel import Field

from remote_days.models.base import UUIDBase, instant_field
from remote_days.models.enums import RequestStatus, RequestType


class RemoteRequest(UUIDBase, table=True):
    """An employee's request over an inclusive date range.

    ``created_at`` is the clock's instant at submission. ``seq`` is assigned
    by the store on insert and breaks ties between requests created at the
    same instant.
    """

    __tablename__ = "remote_request"
    __table_args__ = (sa.Index("ix_request_user_status", "user_id", "status"),)

    user_id: str = Field(max_length=50, index=True)
    start_date: date
    end_date: date
    type: str = Field(max_length=50)
    reason: str = ""
    status: str = Field(default=RequestStatus.PENDING, max_length=20, index=True)
    approver_id: str | None = Field(default=None, max_length=50)
    approver_comment: str | None = None
    created_at: datetime = instant_field()
    approved_at: datetime | None = instant_field(nullable=True)
    seq: int | None = Field(default=None, index=True)

    @property
    def has_calendar_effect(self) -> bool:
        return self.type == RequestType.SET_REMOTE
