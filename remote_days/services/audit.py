from __future__ import annotations

import uuid
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from remote_days.models.audit import AuditEntry

if TYPE_CHECKING:
    from sqlmodel import SQLModel

    from remote_days.models.enums import AuditAction, AuditEntityType
    from remote_days.store import Store


def model_to_audit_dict(model: SQLModel) -> dict[str, Any]:
    """Serialize a SQLModel instance to a JSON-safe dict for audit logging."""
    data: dict[str, Any] = {}
    for key, value in model.model_dump().items():
        if isinstance(value, uuid.UUID):
            data[key] = str(value)
        elif isinstance(value, (datetime, date)):
            data[key] = value.isoformat()
        elif isinstance(value, Enum):
            data[key] = value.value
        else:
            data[key] = value
    return data


def record_audit(
    store: Store,
    *,
    now: datetime,
    actor_id: str,
    entity_type: AuditEntityType,
    entity_id: uuid.UUID | str,
    action: AuditAction,
    old_value: dict[str, Any] | None = None,
    new_value: dict[str, Any] | None = None,
) -> AuditEntry:
    """Append an immutable audit entry; the store assigns the next id."""
    entry = AuditEntry(
        actor_id=actor_id,
        entity_type=entity_type.value,
        entity_id=str(entity_id),
        action=action.value,
        old_value=old_value,
        new_value=new_value,
        created_at=now,
    )
    return store.append_audit(entry)


def list_audit(
    store: Store,
    entity_type: AuditEntityType | None = None,
    entity_id: uuid.UUID | str | None = None,
) -> list[AuditEntry]:
    """Read the audit log in append order."""
    return store.list_audit(
        entity_type=entity_type.value if entity_type is not None else None,
        entity_id=str(entity_id) if entity_id is not None else None,
    )
