# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query, status

from remote_days.api.deps import ClockDep, CurrentUserDep
from remote_days.db import StoreDep
from remote_days.exceptions import unwrap
from remote_days.models.enums import RequestStatus
from remote_days.schemas.request import (
    CreateRequestPayload,
    DecisionPayload,
    RequestResponse,
    RequestStatusResponse,
)
from remote_days.services import approval as approval_service
from remote_days.services import request as request_service

requests_router = APIRouter(prefix="/requests", tags=["requests"])


@requests_router.post("", response_model=RequestStatusResponse, status_code=status.HTTP_201_CREATED)
def create_request(
    store: StoreDep,
    clock: ClockDep,
    me: CurrentUserDep,
    payload: CreateRequestPayload | None = None,
) -> RequestStatusResponse:
    """Create a remote-work request (employees only)."""
    created = unwrap(request_service.submit_request(store, clock, me, payload or CreateRequestPayload()))
    return RequestStatusResponse(id=created.id, status=RequestStatus(created.status))


@requests_router.get("/my", response_model=list[RequestResponse])
def list_my_requests(
    store: StoreDep,
    me: CurrentUserDep,
    status_filter: RequestStatus | None = Query(default=None, alias="status"),
) -> list[RequestResponse]:
    """List the caller's own requests."""
    items = request_service.list_my_requests(store, me, status_filter.value if status_filter else None)
    return [request_service.build_request_response(r) for r in items]


@requests_router.get("/team", response_model=list[RequestResponse])
def list_team_requests(store: StoreDep, me: CurrentUserDep) -> list[RequestResponse]:
    """List pending requests of the manager's team."""
    items = unwrap(request_service.list_team_pending(store, me))
    return [request_service.build_request_response(r) for r in items]


@requests_router.get("/{request_id}", response_model=RequestResponse)
def get_request(request_id: uuid.UUID, store: StoreDep, me: CurrentUserDep) -> RequestResponse:
    """Get a single request."""
    return request_service.build_request_response(unwrap(request_service.get_request(store, me, request_id)))


@requests_router.post("/{request_id}/approve", response_model=RequestStatusResponse)
def approve_request(
    request_id: uuid.UUID,
    store: StoreDep,
    clock: ClockDep,
    me: CurrentUserDep,
    payload: DecisionPayload | None = None,
) -> RequestStatusResponse:
    """Approve a pending request of the manager's team."""
    comment = payload.comment if payload else None
    decided = unwrap(approval_service.approve_request(store, clock, me, request_id, comment))
    return RequestStatusResponse(id=decided.id, status=RequestStatus(decided.status))


@requests_router.post("/{request_id}/reject", response_model=RequestStatusResponse)
def reject_request(
    request_id: uuid.UUID,
    store: StoreDep,
    clock: ClockDep,
    me: CurrentUserDep,
    payload: DecisionPayload | None = None,
) -> RequestStatusResponse:
    """Reject a pending request of the manager's team."""
    comment = payload.comment if payload else None
    decided = unwrap(approval_service.reject_request(store, clock, me, request_id, comment))
    return RequestStatusResponse(id=decided.id, status=RequestStatus(decided.status))
