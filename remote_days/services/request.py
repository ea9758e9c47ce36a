# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from remote_days.models.enums import AuditAction, AuditEntityType, ErrorKind, RequestStatus, Role
from remote_days.models.request import RemoteRequest
from remote_days.results import Failure, Ok
from remote_days.schemas.request import RequestResponse
from remote_days.services.audit import model_to_audit_dict, record_audit
from remote_days.services.validation import validate_request

if TYPE_CHECKING:
    from remote_days.clock import Clock
    from remote_days.models.user import User
    from remote_days.results import Result
    from remote_days.schemas.request import CreateRequestPayload
    from remote_days.store import Store


def build_request_response(request: RemoteRequest) -> RequestResponse:
    """Map a request model to its response schema."""
    return RequestResponse(
        id=request.id,
        user_id=request.user_id,
        start_date=request.start_date,
        end_date=request.end_date,
        type=request.type,
        reason=request.reason,
        status=RequestStatus(request.status),
        approver_id=request.approver_id,
        approver_comment=request.approver_comment,
        created_at=request.created_at,
        approved_at=request.approved_at,
    )


def submit_request(
    store: Store,
    clock: Clock,
    user: User,
    payload: CreateRequestPayload,
) -> Result[RemoteRequest]:
    """Validate a date range and record it as a PENDING request.

    Flow:
    1. Validate role, input and every day of the range against the policy
    2. Create the request (PENDING)
    3. Write the CREATE audit entry

    Nothing is written when validation fails, and the calendar is never
    touched here.
    """
    with store.transaction():
        now = clock.now()
        outcome = validate_request(store, user, payload.start_date, payload.end_date, payload.type, now)
        if isinstance(outcome, Failure):
            return outcome

        remote_request = store.add_request(
            RemoteRequest(
                user_id=user.id,
                start_date=payload.start_date,
                end_date=payload.end_date,
                type=payload.type,
                reason=payload.reason or "",
                status=RequestStatus.PENDING.value,
                created_at=now,
            )
        )
        record_audit(
            store,
            now=now,
            actor_id=user.id,
            entity_type=AuditEntityType.REMOTE_REQUEST,
            entity_id=remote_request.id,
            action=AuditAction.CREATE,
            new_value=model_to_audit_dict(remote_request),
        )
    return Ok(remote_request)


def list_my_requests(store: Store, user: User, status_filter: str | None = None) -> list[RemoteRequest]:
    """The caller's own requests, oldest first."""
    return store.list_requests(user_ids=[user.id], status=status_filter)


def list_team_pending(store: Store, manager: User) -> Result[list[RemoteRequest]]:
    """PENDING requests of the manager's direct reports."""
    if manager.role != Role.MANAGER:
        return Failure(ErrorKind.FORBIDDEN, "Only managers can view team requests")
    team_ids = [u.id for u in store.list_reports(manager.id)]
    if not team_ids:
        return Ok([])
    return Ok(store.list_requests(user_ids=team_ids, status=RequestStatus.PENDING.value))


def get_request(store: Store, user: User, request_id: uuid.UUID) -> Result[RemoteRequest]:
    """Fetch a request visible to the caller.

    Owners see their own requests, managers those of their reports, HR all.
    Anything else is reported as not found.
    """
    remote_request = store.get_request(request_id)
    if remote_request is None:
        return Failure(ErrorKind.NOT_FOUND, "Request not found")

    if user.role == Role.HR or remote_request.user_id == user.id:
        return Ok(remote_request)
    owner = store.get_user(remote_request.user_id)
    if owner is not None and owner.manager_id == user.id:
        return Ok(remote_request)
    return Failure(ErrorKind.NOT_FOUND, "Request not found")
