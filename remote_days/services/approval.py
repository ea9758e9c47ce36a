# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from remote_days.models.enums import AuditAction, AuditEntityType, ErrorKind, RequestStatus, Role
from remote_days.results import Failure, Ok
from remote_days.services.audit import model_to_audit_dict, record_audit
from remote_days.services.projector import apply_request

if TYPE_CHECKING:
    from remote_days.clock import Clock
    from remote_days.models.request import RemoteRequest
    from remote_days.models.user import User
    from remote_days.results import Result
    from remote_days.store import Store


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_decidable(
    store: Store,
    manager: User,
    request_id: uuid.UUID,
    verb: str,
) -> Result[RemoteRequest]:
    """Fetch a request and check the actor may decide it now.

    Checks run in order: existence, actor role and team ownership, then
    lifecycle state.
    """
    remote_request = store.get_request(request_id)
    if remote_request is None:
        return Failure(ErrorKind.NOT_FOUND, "Request not found")

    if manager.role != Role.MANAGER:
        return Failure(ErrorKind.FORBIDDEN, f"Only managers can {verb} requests")

    owner = store.get_user(remote_request.user_id)
    if owner is None or owner.manager_id != manager.id:
        return Failure(ErrorKind.FORBIDDEN, "Not your team request")

    if remote_request.status != RequestStatus.PENDING:
        return Failure(ErrorKind.INVALID_STATE, f"Only PENDING requests can be {verb}d")

    return Ok(remote_request)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def approve_request(
    store: Store,
    clock: Clock,
    manager: User,
    request_id: uuid.UUID,
    comment: str | None = None,
) -> Result[RemoteRequest]:
    """Approve a PENDING request and project it onto the owner's calendar.

    1. Load the request and check authorization and state.
    2. Mark it APPROVED with approver, comment and timestamp.
    3. For SET_REMOTE requests, write every day of the range to the calendar
       and audit each write.
    4. Audit the request transition with before/after snapshots.
    """
    with store.transaction():
        outcome = _load_decidable(store, manager, request_id, "approve")
        if isinstance(outcome, Failure):
            return outcome
        remote_request = outcome.value

        now = clock.now()
        before = model_to_audit_dict(remote_request)

        remote_request.status = RequestStatus.APPROVED.value
        remote_request.approver_id = manager.id
        remote_request.approver_comment = comment or None
        remote_request.approved_at = now
        store.update_request(remote_request)

        if remote_request.has_calendar_effect:
            for change in apply_request(store, remote_request, now):
                record_audit(
                    store,
                    now=now,
                    actor_id=manager.id,
                    entity_type=AuditEntityType.CALENDAR_DAY,
                    entity_id=change.day.id,
                    action=AuditAction.UPDATE_FROM_REQUEST,
                    old_value=change.before,
                    new_value=change.after,
                )

        record_audit(
            store,
            now=now,
            actor_id=manager.id,
            entity_type=AuditEntityType.REMOTE_REQUEST,
            entity_id=remote_request.id,
            action=AuditAction.APPROVE,
            old_value=before,
            new_value=model_to_audit_dict(remote_request),
        )
    return Ok(remote_request)


def reject_request(
    store: Store,
    clock: Clock,
    manager: User,
    request_id: uuid.UUID,
    comment: str | None = None,
) -> Result[RemoteRequest]:
    """Reject a PENDING request. The calendar is left untouched."""
    with store.transaction():
        outcome = _load_decidable(store, manager, request_id, "reject")
        if isinstance(outcome, Failure):
            return outcome
        remote_request = outcome.value

        now = clock.now()
        before = model_to_audit_dict(remote_request)

        remote_request.status = RequestStatus.REJECTED.value
        remote_request.approver_id = manager.id
        remote_request.approver_comment = comment or None
        store.update_request(remote_request)

        record_audit(
            store,
            now=now,
            actor_id=manager.id,
            entity_type=AuditEntityType.REMOTE_REQUEST,
            entity_id=remote_request.id,
            action=AuditAction.REJECT,
            old_value=before,
            new_value=model_to_audit_dict(remote_request),
        )
    return Ok(remote_request)
