# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from remote_days.models.enums import RequestStatus

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class CreateRequestPayload(BaseModel):
    """Request body for creating a remote-work request.

    Fields are optional here so that missing values surface as the engine's
    ``InvalidInput`` rather than a schema error.
    """

    start_date: date | None = None
    end_date: date | None = None
    type: str | None = Field(default=None, max_length=50)
    reason: str | None = Field(default=None, max_length=1000)


class DecisionPayload(BaseModel):
    """Request body for approve/reject actions."""

    comment: str | None = Field(default=None, max_length=1000)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class RequestStatusResponse(BaseModel):
    """Id and status of a request after a state change."""

    id: uuid.UUID
    status: RequestStatus


class RequestResponse(BaseModel):
    """Response schema for a single remote-work request."""

    id: uuid.UUID
    user_id: str
    start_date: date
    end_date: date
    type: str
    reason: str
    status: RequestStatus
    approver_id: str | None
    approver_comment: str | None
    created_at: datetime
    approved_at: datetime | None
