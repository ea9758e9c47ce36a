from __future__ import annotations

from typing import TYPE_CHECKING

from remote_days.models.enums import ErrorKind, RequestType, Role
from remote_days.results import Failure, Ok
from remote_days.services.dates import (
    count_remote_in_month,
    count_remote_in_week,
    enumerate_days,
    is_past_date,
    meets_cutoff,
    weekday_code,
)
from remote_days.services.policy import resolve_policy

if TYPE_CHECKING:
    from datetime import date, datetime

    from remote_days.models.policy import RemotePolicy
    from remote_days.models.user import User
    from remote_days.results import Result
    from remote_days.store import Store


def _check_day(
    store: Store,
    user: User,
    policy: RemotePolicy,
    day: date,
    request_type: str,
    now: datetime,
) -> Failure | None:
    """Apply the per-day rules in order; the first failing rule wins."""
    iso_day = day.isoformat()

    if is_past_date(day, now):
        return Failure(ErrorKind.PAST_DATE, f"Cannot change past date: {iso_day}", day)

    if not meets_cutoff(day, policy.cutoff_hours_before, now):
        return Failure(
            ErrorKind.CUTOFF_VIOLATION,
            f"Cutoff {policy.cutoff_hours_before}h not met for {iso_day}",
            day,
        )

    is_remote = request_type == RequestType.SET_REMOTE
    code = weekday_code(day)
    if is_remote and code in policy.required_office_days:
        return Failure(ErrorKind.REQUIRED_OFFICE_DAY, f"Required office day ({code}): {iso_day}", day)

    if not is_remote:
        return None

    # Counts only see what is already stored; earlier days of the same
    # request are not added to the running total.
    if count_remote_in_week(store, user.id, day) + 1 > policy.weekly_limit:
        return Failure(ErrorKind.WEEKLY_LIMIT_EXCEEDED, f"Weekly remote limit exceeded for {iso_day}", day)
    if count_remote_in_month(store, user.id, day) + 1 > policy.monthly_limit:
        return Failure(ErrorKind.MONTHLY_LIMIT_EXCEEDED, f"Monthly remote limit exceeded for {iso_day}", day)
    return None


def validate_request(
    store: Store,
    user: User,
    start_date: date | None,
    end_date: date | None,
    request_type: str | None,
    now: datetime,
) -> Result[RemotePolicy]:
    """Decide whether ``user`` may request ``request_type`` over the range.

    Returns the resolved policy on success. Has no side effects.
    """
    if user.role != Role.EMPLOYEE:
        return Failure(ErrorKind.FORBIDDEN, "Only employees can create requests")

    if start_date is None or end_date is None or not request_type:
        return Failure(ErrorKind.INVALID_INPUT, "start_date, end_date, type required")
    if end_date < start_date:
        return Failure(ErrorKind.INVALID_INPUT, "end_date must be >= start_date")

    policy = resolve_policy(store, user)
    for day in enumerate_days(start_date, end_date):
        failure = _check_day(store, user, policy, day, request_type, now)
        if failure is not None:
            return failure
    return Ok(policy)
