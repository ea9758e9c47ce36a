"""Contract tests run against both the in-memory and the SQL store."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from remote_days.models.audit import AuditEntry
from remote_days.models.enums import DayStatus, RequestStatus
from remote_days.models.policy import RemotePolicy
from remote_days.models.request import RemoteRequest
from remote_days.models.user import User
from remote_days.results import Ok
from remote_days.schemas.request import CreateRequestPayload
from remote_days.services.approval import approve_request
from remote_days.services.request import submit_request
from remote_days.store import InMemoryStore, Store

from helpers import EMPLOYEE_ID, MANAGER_ID, NOW, TEAMMATE_ID, make_sql_store, put_day

if TYPE_CHECKING:
    from remote_days.clock import FixedClock


def test_stores_satisfy_protocol() -> None:
    assert isinstance(InMemoryStore(), Store)
    sql_store = make_sql_store()
    assert isinstance(sql_store, Store)
    sql_store.close()


# ---------------------------------------------------------------------------
# Users and policies
# ---------------------------------------------------------------------------


def test_get_user(any_store: Store) -> None:
    user = any_store.get_user(EMPLOYEE_ID)
    assert user is not None
    assert user.manager_id == MANAGER_ID
    assert any_store.get_user("nobody") is None


def test_list_reports(any_store: Store) -> None:
    reports = any_store.list_reports(MANAGER_ID)
    assert sorted(u.id for u in reports) == [EMPLOYEE_ID, TEAMMATE_ID]
    assert any_store.list_reports(EMPLOYEE_ID) == []


def test_one_policy_per_department(any_store: Store) -> None:
    any_store.save_policy(
        RemotePolicy(department="Sales", weekly_limit=3, monthly_limit=10, required_office_days=["TUE", "WED"])
    )
    policy = any_store.get_policy("Sales")
    assert policy is not None
    assert policy.weekly_limit == 3
    assert policy.required_office_days == ["TUE", "WED"]
    assert any_store.get_policy("Marketing") is None


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------


def test_calendar_lookup_and_window_scan(any_store: Store) -> None:
    put_day(any_store, EMPLOYEE_ID, date(2025, 6, 10))
    put_day(any_store, EMPLOYEE_ID, date(2025, 6, 9), DayStatus.OFFICE)
    put_day(any_store, EMPLOYEE_ID, date(2025, 6, 16))
    put_day(any_store, TEAMMATE_ID, date(2025, 6, 10))

    found = any_store.get_calendar_day(EMPLOYEE_ID, date(2025, 6, 10))
    assert found is not None
    assert found.status == DayStatus.REMOTE
    assert any_store.get_calendar_day(EMPLOYEE_ID, date(2025, 6, 11)) is None

    window = any_store.list_calendar_days(EMPLOYEE_ID, date(2025, 6, 9), date(2025, 6, 16))
    assert [d.date for d in window] == [date(2025, 6, 9), date(2025, 6, 10), date(2025, 6, 16)]

    remote = any_store.list_calendar_days(EMPLOYEE_ID, date(2025, 6, 9), date(2025, 6, 15), status=DayStatus.REMOTE)
    assert [d.date for d in remote] == [date(2025, 6, 10)]


def test_calendar_update_by_key(any_store: Store) -> None:
    day = put_day(any_store, EMPLOYEE_ID, date(2025, 6, 10), DayStatus.OFFICE)
    day.status = DayStatus.SICK.value
    any_store.update_calendar_day(day)

    stored = any_store.get_calendar_day(EMPLOYEE_ID, date(2025, 6, 10))
    assert stored is not None
    assert stored.status == DayStatus.SICK


def test_memory_store_rejects_duplicate_day(store: InMemoryStore) -> None:
    put_day(store, EMPLOYEE_ID, date(2025, 6, 10))
    with pytest.raises(ValueError, match="already exists"):
        put_day(store, EMPLOYEE_ID, date(2025, 6, 10))


# ---------------------------------------------------------------------------
# Requests and audit
# ---------------------------------------------------------------------------


def test_request_scans_by_user_and_status(any_store: Store) -> None:
    first = any_store.add_request(
        RemoteRequest(
            user_id=EMPLOYEE_ID,
            start_date=date(2025, 6, 5),
            end_date=date(2025, 6, 5),
            type="SET_REMOTE",
            created_at=NOW,
        )
    )
    second = any_store.add_request(
        RemoteRequest(
            user_id=TEAMMATE_ID,
            start_date=date(2025, 6, 6),
            end_date=date(2025, 6, 6),
            type="SET_REMOTE",
            status=RequestStatus.APPROVED.value,
            created_at=NOW,
        )
    )

    assert any_store.get_request(first.id) is not None
    assert [r.id for r in any_store.list_requests(user_ids=[EMPLOYEE_ID])] == [first.id]
    assert [r.id for r in any_store.list_requests(status=RequestStatus.APPROVED.value)] == [second.id]
    assert {r.id for r in any_store.list_requests()} == {first.id, second.id}
    assert any_store.list_requests(user_ids=[]) == []


def test_requests_with_same_timestamp_keep_insertion_order(any_store: Store) -> None:
    added = [
        any_store.add_request(
            RemoteRequest(
                user_id=EMPLOYEE_ID,
                start_date=date(2025, 6, day),
                end_date=date(2025, 6, day),
                type="SET_REMOTE",
                created_at=NOW,
            )
        )
        for day in (12, 5, 19, 6)
    ]

    listed = any_store.list_requests(user_ids=[EMPLOYEE_ID])

    assert [r.id for r in listed] == [r.id for r in added]
    assert [r.seq for r in listed] == sorted(r.seq for r in listed)


def test_audit_ids_are_monotonic(any_store: Store) -> None:
    entries = [
        any_store.append_audit(
            AuditEntry(
                actor_id=EMPLOYEE_ID,
                entity_type="REMOTE_REQUEST",
                entity_id=f"R{i}",
                action="CREATE",
                created_at=NOW,
            )
        )
        for i in range(3)
    ]
    ids = [e.id for e in entries]
    assert all(i is not None for i in ids)
    assert ids == sorted(ids)
    assert len(set(ids)) == 3
    assert [e.entity_id for e in any_store.list_audit(entity_id="R1")] == ["R1"]


def test_sql_transaction_rolls_back_on_error() -> None:
    sql_store = make_sql_store()
    with pytest.raises(RuntimeError), sql_store.transaction():
        sql_store.add_user(User(id="U9", full_name="Temp", email="t@example.com", department="Sales"))
        raise RuntimeError("boom")
    assert sql_store.get_user("U9") is None
    sql_store.close()


def test_sql_store_persists_policy_json() -> None:
    sql_store = make_sql_store()
    sql_store.save_policy(RemotePolicy(department="Ops", required_office_days=["MON", "FRI"]))
    sql_store.save_policy(RemotePolicy(department="Ops", required_office_days=["WED"]))
    policy = sql_store.get_policy("Ops")
    assert policy is not None
    assert policy.required_office_days == ["WED"]
    sql_store.close()


# ---------------------------------------------------------------------------
# Engine over each backend
# ---------------------------------------------------------------------------


def test_submit_and_approve_flow(any_store: Store, clock: FixedClock) -> None:
    employee = any_store.get_user(EMPLOYEE_ID)
    manager = any_store.get_user(MANAGER_ID)
    assert employee is not None
    assert manager is not None

    payload = CreateRequestPayload(start_date=date(2025, 6, 5), end_date=date(2025, 6, 6), type="SET_REMOTE")
    created = submit_request(any_store, clock, employee, payload)
    assert isinstance(created, Ok)

    approved = approve_request(any_store, clock, manager, created.value.id, "fine")
    assert isinstance(approved, Ok)

    stored = any_store.get_request(created.value.id)
    assert stored is not None
    assert stored.status == RequestStatus.APPROVED
    days = any_store.list_calendar_days(EMPLOYEE_ID, date(2025, 6, 1), date(2025, 6, 30), status=DayStatus.REMOTE)
    assert [d.date for d in days] == [date(2025, 6, 5), date(2025, 6, 6)]
    assert [e.action for e in any_store.list_audit()] == [
        "CREATE",
        "UPDATE_FROM_REQUEST",
        "UPDATE_FROM_REQUEST",
        "APPROVE",
    ]
