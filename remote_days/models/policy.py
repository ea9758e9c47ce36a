from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field

from remote_days.models.base import UUIDBase


class RemotePolicy(UUIDBase, table=True):
    """Remote-work limits for one department."""

    __tablename__ = "remote_policy"

    department: str = Field(max_length=100, unique=True)
    weekly_limit: int = 2
    monthly_limit: int = 8
    cutoff_hours_before: int = 18
    required_office_days: list[str] = Field(default_factory=list, sa_type=sa.JSON)
