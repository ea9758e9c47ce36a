# ruff: noqa: TC003
from __future__ import annotations

from datetime import datetime
from typing import Any

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from remote_days.models.base import instant_field


class AuditEntry(SQLModel, table=True):
    """Immutable record of every mutation in the system."""

    __tablename__ = "audit_entry"
    __table_args__ = (sa.Index("ix_audit_entity", "entity_type", "entity_id"),)

    id: int | None = Field(default=None, primary_key=True)
    actor_id: str = Field(max_length=50)
    entity_type: str = Field(max_length=50)
    entity_id: str = Field(max_length=64)
    action: str = Field(max_length=50)
    old_value: dict[str, Any] | None = Field(default=None, sa_type=sa.JSON)
    new_value: dict[str, Any] | None = Field(default=None, sa_type=sa.JSON)
    created_at: datetime = instant_field(index=True)
