# ruff: noqa: TC003
from __future__ import annotations

import uuid
from collections.abc import Iterable
from contextlib import AbstractContextManager
from datetime import date
from typing import Protocol, runtime_checkable

from remote_days.models.audit import AuditEntry
from remote_days.models.calendar import CalendarDay
from remote_days.models.policy import RemotePolicy
from remote_days.models.request import RemoteRequest
from remote_days.models.user import User


@runtime_checkable
class Store(Protocol):
    """Persistence contract used by the engine.

    Lookups return ``None`` when nothing matches. Scans return lists ordered
    by date (calendar), creation time (requests) or id (audit).
    """

    def transaction(self) -> AbstractContextManager[None]:
        """Serialize a read-decide-write sequence. Re-entrant."""
        ...

    # Users

    def add_user(self, user: User) -> User: ...

    def get_user(self, user_id: str) -> User | None: ...

    def list_users(self) -> list[User]: ...

    def list_reports(self, manager_id: str) -> list[User]:
        """Users whose ``manager_id`` equals the given id."""
        ...

    # Policies

    def save_policy(self, policy: RemotePolicy) -> RemotePolicy:
        """Insert or replace the single policy of ``policy.department``."""
        ...

    def get_policy(self, department: str) -> RemotePolicy | None: ...

    # Calendar

    def add_calendar_day(self, day: CalendarDay) -> CalendarDay: ...

    def update_calendar_day(self, day: CalendarDay) -> CalendarDay: ...

    def get_calendar_day(self, user_id: str, on: date) -> CalendarDay | None: ...

    def list_calendar_days(
        self,
        user_id: str,
        start: date,
        end: date,
        status: str | None = None,
    ) -> list[CalendarDay]:
        """Entries of ``user_id`` with ``start <= date <= end``."""
        ...

    # Requests

    def add_request(self, request: RemoteRequest) -> RemoteRequest: ...

    def update_request(self, request: RemoteRequest) -> RemoteRequest: ...

    def get_request(self, request_id: uuid.UUID) -> RemoteRequest | None: ...

    def list_requests(
        self,
        user_ids: Iterable[str] | None = None,
        status: str | None = None,
    ) -> list[RemoteRequest]: ...

    # Audit

    def append_audit(self, entry: AuditEntry) -> AuditEntry:
        """Assign the next id and append the entry."""
        ...

    def list_audit(
        self,
        entity_type: str | None = None,
        entity_id: str | None = None,
    ) -> list[AuditEntry]: ...
