from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


def _now_utc() -> datetime:
    return datetime.now(UTC)


def instant_field(*, nullable: bool = False, index: bool = False) -> Any:
    """Timezone-aware timestamp column.

    Engine code always stamps rows with the injected clock's instant; the
    UTC wall-clock default only covers rows built by hand (seeds, tests).
    Nullable instants default to ``None`` instead.
    """
    if nullable:
        return Field(default=None, index=index, sa_type=sa.DateTime(timezone=True))  # ty: ignore[invalid-argument-type]
    return Field(
        default_factory=_now_utc,
        index=index,
        sa_type=sa.DateTime(timezone=True),  # ty: ignore[invalid-argument-type]
    )


class UUIDBase(SQLModel):
    """Rows keyed by a random UUID: policies, calendar days and requests."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, sa_type=sa.Uuid)
