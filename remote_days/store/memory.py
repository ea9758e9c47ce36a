# ruff: noqa: TC003
from __future__ import annotations

import copy
import itertools
import threading
import uuid
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from typing import Any

from sqlmodel import SQLModel

from remote_days.models.audit import AuditEntry
from remote_days.models.calendar import CalendarDay
from remote_days.models.policy import RemotePolicy
from remote_days.models.request import RemoteRequest
from remote_days.models.user import User


def _field_values(obj: SQLModel) -> dict[str, Any]:
    return {name: getattr(obj, name) for name in type(obj).model_fields}


@dataclass
class _Snapshot:
    users: dict[str, User]
    policies: dict[str, RemotePolicy]
    calendar: dict[tuple[str, date], CalendarDay]
    requests: dict[uuid.UUID, RemoteRequest]
    audit_len: int
    fields: list[tuple[SQLModel, dict[str, Any]]]


class InMemoryStore:
    """Dict-backed store. All access is guarded by one re-entrant lock.

    A failed outermost transaction restores the containers and the field
    values of every stored object, matching a SQL rollback.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: dict[str, User] = {}
        self._policies: dict[str, RemotePolicy] = {}
        self._calendar: dict[tuple[str, date], CalendarDay] = {}
        self._requests: dict[uuid.UUID, RemoteRequest] = {}
        self._audit: list[AuditEntry] = []
        self._audit_seq = itertools.count(1)
        self._request_seq = itertools.count(1)
        self._depth = 0

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the lock; on error restore the state seen at the outermost entry."""
        with self._lock:
            snapshot = self._snapshot() if self._depth == 0 else None
            self._depth += 1
            try:
                yield
            except BaseException:
                self._depth -= 1
                if snapshot is not None:
                    self._restore(snapshot)
                raise
            self._depth -= 1

    def _snapshot(self) -> _Snapshot:
        stored: list[SQLModel] = [
            *self._users.values(),
            *self._policies.values(),
            *self._calendar.values(),
            *self._requests.values(),
        ]
        return _Snapshot(
            users=dict(self._users),
            policies=dict(self._policies),
            calendar=dict(self._calendar),
            requests=dict(self._requests),
            audit_len=len(self._audit),
            fields=[(obj, copy.deepcopy(_field_values(obj))) for obj in stored],
        )

    def _restore(self, snapshot: _Snapshot) -> None:
        # Stored objects are handed out by reference, so roll their fields
        # back in place as well as the containers.
        for obj, values in snapshot.fields:
            for name, value in values.items():
                setattr(obj, name, value)
        self._users = snapshot.users
        self._policies = snapshot.policies
        self._calendar = snapshot.calendar
        self._requests = snapshot.requests
        del self._audit[snapshot.audit_len :]

    # Users

    def add_user(self, user: User) -> User:
        with self._lock:
            self._users[user.id] = user
        return user

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def list_users(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def list_reports(self, manager_id: str) -> list[User]:
        with self._lock:
            return [u for u in self._users.values() if u.manager_id == manager_id]

    # Policies

    def save_policy(self, policy: RemotePolicy) -> RemotePolicy:
        with self._lock:
            self._policies[policy.department] = policy
        return policy

    def get_policy(self, department: str) -> RemotePolicy | None:
        return self._policies.get(department)

    # Calendar

    def add_calendar_day(self, day: CalendarDay) -> CalendarDay:
        key = (day.user_id, day.date)
        with self._lock:
            if key in self._calendar:
                msg = f"Calendar entry already exists for {day.user_id} on {day.date}"
                raise ValueError(msg)
            self._calendar[key] = day
        return day

    def update_calendar_day(self, day: CalendarDay) -> CalendarDay:
        with self._lock:
            self._calendar[(day.user_id, day.date)] = day
        return day

    def get_calendar_day(self, user_id: str, on: date) -> CalendarDay | None:
        return self._calendar.get((user_id, on))

    def list_calendar_days(
        self,
        user_id: str,
        start: date,
        end: date,
        status: str | None = None,
    ) -> list[CalendarDay]:
        with self._lock:
            days = [
                d
                for d in self._calendar.values()
                if d.user_id == user_id and start <= d.date <= end and (status is None or d.status == status)
            ]
        return sorted(days, key=lambda d: d.date)

    # Requests

    def add_request(self, request: RemoteRequest) -> RemoteRequest:
        with self._lock:
            request.seq = next(self._request_seq)
            self._requests[request.id] = request
        return request

    def update_request(self, request: RemoteRequest) -> RemoteRequest:
        with self._lock:
            self._requests[request.id] = request
        return request

    def get_request(self, request_id: uuid.UUID) -> RemoteRequest | None:
        return self._requests.get(request_id)

    def list_requests(
        self,
        user_ids: Iterable[str] | None = None,
        status: str | None = None,
    ) -> list[RemoteRequest]:
        wanted = None if user_ids is None else set(user_ids)
        with self._lock:
            items = [
                r
                for r in self._requests.values()
                if (wanted is None or r.user_id in wanted) and (status is None or r.status == status)
            ]
        return sorted(items, key=lambda r: (r.created_at, r.seq))

    # Audit

    def append_audit(self, entry: AuditEntry) -> AuditEntry:
        with self._lock:
            entry.id = next(self._audit_seq)
            self._audit.append(entry)
        return entry

    def list_audit(
        self,
        entity_type: str | None = None,
        entity_id: str | None = None,
    ) -> list[AuditEntry]:
        with self._lock:
            return [
                e
                for e in self._audit
                if (entity_type is None or e.entity_type == entity_type)
                and (entity_id is None or e.entity_id == entity_id)
            ]
