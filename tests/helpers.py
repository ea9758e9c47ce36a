"""Shared test data: the fixed instant, user ids and store builders."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from remote_days.models.calendar import CalendarDay
from remote_days.models.enums import DaySource, DayStatus, Role, WeekdayCode
from remote_days.models.policy import RemotePolicy
from remote_days.models.user import User
from remote_days.store import SqlStore

if TYPE_CHECKING:
    from remote_days.store import Store

# Wednesday 2025-06-04 04:00 UTC. Thursday 2025-06-05 starts 20 hours later.
NOW = datetime(2025, 6, 4, 4, 0, tzinfo=UTC)

EMPLOYEE_ID = "U1"
TEAMMATE_ID = "U2"
MANAGER_ID = "U3"
HR_ID = "U4"
OTHER_MANAGER_ID = "U5"

_USERS = [
    (EMPLOYEE_ID, Role.EMPLOYEE, "Sales", MANAGER_ID),
    (TEAMMATE_ID, Role.EMPLOYEE, "Sales", MANAGER_ID),
    (MANAGER_ID, Role.MANAGER, "Sales", None),
    (HR_ID, Role.HR, "HR", None),
    (OTHER_MANAGER_ID, Role.MANAGER, "Support", None),
]


def seed_users(store: Store) -> None:
    """Sales team reporting to U3, an HR user and a manager with no reports."""
    for user_id, role, department, manager_id in _USERS:
        store.add_user(
            User(
                id=user_id,
                full_name=f"User {user_id}",
                email=f"{user_id.lower()}@example.com",
                role=role,
                department=department,
                manager_id=manager_id,
            )
        )
    store.save_policy(
        RemotePolicy(
            department="Sales",
            weekly_limit=2,
            monthly_limit=8,
            cutoff_hours_before=18,
            required_office_days=[WeekdayCode.MON.value],
        )
    )


def put_day(store: Store, user_id: str, on: date, status: DayStatus = DayStatus.REMOTE) -> CalendarDay:
    """Store a manually set calendar day."""
    return store.add_calendar_day(
        CalendarDay(
            user_id=user_id,
            date=on,
            status=status.value,
            source=DaySource.MANUAL.value,
            last_changed_at=NOW,
        )
    )


def make_sql_store() -> SqlStore:
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    store = SqlStore(engine)
    store.create_schema()
    return store
