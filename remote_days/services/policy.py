from __future__ import annotations

from typing import TYPE_CHECKING

from remote_days.models.policy import RemotePolicy

if TYPE_CHECKING:
    from remote_days.models.user import User
    from remote_days.store import Store

DEFAULT_WEEKLY_LIMIT = 2
DEFAULT_MONTHLY_LIMIT = 8
DEFAULT_CUTOFF_HOURS_BEFORE = 18


def default_policy(department: str) -> RemotePolicy:
    """Fallback limits for a department without its own policy. Never persisted."""
    return RemotePolicy(
        department=department,
        weekly_limit=DEFAULT_WEEKLY_LIMIT,
        monthly_limit=DEFAULT_MONTHLY_LIMIT,
        cutoff_hours_before=DEFAULT_CUTOFF_HOURS_BEFORE,
        required_office_days=[],
    )


def resolve_policy(store: Store, user: User) -> RemotePolicy:
    """Return the policy of the user's department, or the default one."""
    policy = store.get_policy(user.department)
    if policy is None:
        return default_policy(user.department)
    return policy
