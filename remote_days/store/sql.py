# ruff: noqa: TC003
from __future__ import annotations

import threading
import uuid
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import date
from typing import TYPE_CHECKING, TypeVar

from sqlmodel import Session, SQLModel, col, func, select

from remote_days.models.audit import AuditEntry
from remote_days.models.calendar import CalendarDay
from remote_days.models.policy import RemotePolicy
from remote_days.models.request import RemoteRequest
from remote_days.models.user import User

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

_M = TypeVar("_M", bound=SQLModel)


class SqlStore:
    """Store backed by a SQLModel session.

    A single session is shared and guarded by a re-entrant lock. Writes made
    outside :meth:`transaction` are committed immediately; inside, they are
    flushed and committed when the outermost transaction exits.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session = Session(engine, expire_on_commit=False)
        self._lock = threading.RLock()
        self._depth = 0

    def create_schema(self) -> None:
        SQLModel.metadata.create_all(self._engine)

    def close(self) -> None:
        self._session.close()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            self._depth += 1
            try:
                yield
            except BaseException:
                self._depth -= 1
                if self._depth == 0:
                    self._session.rollback()
                raise
            self._depth -= 1
            if self._depth == 0:
                self._session.commit()

    def _save(self, obj: _M) -> _M:
        with self._lock:
            self._session.add(obj)
            if self._depth == 0:
                self._session.commit()
            else:
                self._session.flush()
        return obj

    # Users

    def add_user(self, user: User) -> User:
        return self._save(user)

    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            return self._session.get(User, user_id)

    def list_users(self) -> list[User]:
        with self._lock:
            return list(self._session.exec(select(User).order_by(col(User.id))).all())

    def list_reports(self, manager_id: str) -> list[User]:
        with self._lock:
            stmt = select(User).where(col(User.manager_id) == manager_id).order_by(col(User.id))
            return list(self._session.exec(stmt).all())

    # Policies

    def save_policy(self, policy: RemotePolicy) -> RemotePolicy:
        with self._lock:
            existing = self.get_policy(policy.department)
            if existing is not None and existing.id != policy.id:
                self._session.delete(existing)
                self._session.flush()
            return self._save(policy)

    def get_policy(self, department: str) -> RemotePolicy | None:
        with self._lock:
            stmt = select(RemotePolicy).where(col(RemotePolicy.department) == department)
            return self._session.exec(stmt).first()

    # Calendar

    def add_calendar_day(self, day: CalendarDay) -> CalendarDay:
        return self._save(day)

    def update_calendar_day(self, day: CalendarDay) -> CalendarDay:
        return self._save(day)

    def get_calendar_day(self, user_id: str, on: date) -> CalendarDay | None:
        with self._lock:
            stmt = select(CalendarDay).where(
                col(CalendarDay.user_id) == user_id,
                col(CalendarDay.date) == on,
            )
            return self._session.exec(stmt).first()

    def list_calendar_days(
        self,
        user_id: str,
        start: date,
        end: date,
        status: str | None = None,
    ) -> list[CalendarDay]:
        filters = [
            col(CalendarDay.user_id) == user_id,
            col(CalendarDay.date) >= start,
            col(CalendarDay.date) <= end,
        ]
        if status is not None:
            filters.append(col(CalendarDay.status) == status)
        with self._lock:
            stmt = select(CalendarDay).where(*filters).order_by(col(CalendarDay.date))
            return list(self._session.exec(stmt).all())

    # Requests

    def add_request(self, request: RemoteRequest) -> RemoteRequest:
        with self._lock:
            last = self._session.exec(select(func.max(RemoteRequest.seq))).one()
            request.seq = (last or 0) + 1
            return self._save(request)

    def update_request(self, request: RemoteRequest) -> RemoteRequest:
        return self._save(request)

    def get_request(self, request_id: uuid.UUID) -> RemoteRequest | None:
        with self._lock:
            return self._session.get(RemoteRequest, request_id)

    def list_requests(
        self,
        user_ids: Iterable[str] | None = None,
        status: str | None = None,
    ) -> list[RemoteRequest]:
        stmt = select(RemoteRequest)
        if user_ids is not None:
            stmt = stmt.where(col(RemoteRequest.user_id).in_(list(user_ids)))
        if status is not None:
            stmt = stmt.where(col(RemoteRequest.status) == status)
        stmt = stmt.order_by(col(RemoteRequest.created_at), col(RemoteRequest.seq))
        with self._lock:
            return list(self._session.exec(stmt).all())

    # Audit

    def append_audit(self, entry: AuditEntry) -> AuditEntry:
        return self._save(entry)

    def list_audit(
        self,
        entity_type: str | None = None,
        entity_id: str | None = None,
    ) -> list[AuditEntry]:
        stmt = select(AuditEntry)
        if entity_type is not None:
            stmt = stmt.where(col(AuditEntry.entity_type) == entity_type)
        if entity_id is not None:
            stmt = stmt.where(col(AuditEntry.entity_id) == entity_id)
        with self._lock:
            return list(self._session.exec(stmt.order_by(col(AuditEntry.id))).all())
