"""Demo data loaded at startup when ``SEED_DEMO_DATA`` is enabled.

Two Sales employees report to one Sales manager; HR has its own user and no
remote policy, so it falls back to the defaults.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from remote_days.models.enums import Role, WeekdayCode
from remote_days.models.policy import RemotePolicy
from remote_days.models.user import User
from remote_days.services.calendar import seed_office_week

if TYPE_CHECKING:
    from remote_days.clock import Clock
    from remote_days.store import Store

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {
        "id": "U1",
        "full_name": "Aygun Aliyeva",
        "email": "aygun@company.az",
        "role": Role.EMPLOYEE,
        "department": "Sales",
        "manager_id": "U3",
    },
    {
        "id": "U2",
        "full_name": "Kamran Gasimov",
        "email": "kamran@company.az",
        "role": Role.EMPLOYEE,
        "department": "Sales",
        "manager_id": "U3",
    },
    {
        "id": "U3",
        "full_name": "Orkhan Mammad",
        "email": "orkhan@company.az",
        "role": Role.MANAGER,
        "department": "Sales",
        "manager_id": None,
    },
    {
        "id": "U4",
        "full_name": "Lala Huseyn",
        "email": "lala@company.az",
        "role": Role.HR,
        "department": "HR",
        "manager_id": None,
    },
]

DEMO_POLICIES = [
    {
        "department": "Sales",
        "weekly_limit": 2,
        "monthly_limit": 8,
        "cutoff_hours_before": 18,
        "required_office_days": [WeekdayCode.MON.value, WeekdayCode.THU.value],
    },
]


def seed_demo_data(store: Store, clock: Clock) -> None:
    """Load demo users, policies and an OFFICE week for every employee."""
    with store.transaction():
        for data in DEMO_USERS:
            if store.get_user(str(data["id"])) is None:
                store.add_user(User(**data))
        for data in DEMO_POLICIES:
            if store.get_policy(str(data["department"])) is None:
                store.save_policy(RemotePolicy(**data))
        created = seed_office_week(store, clock.now())

    logger.info("Seeded %d users, %d policies, %d calendar days", len(DEMO_USERS), len(DEMO_POLICIES), created)
