from sqlmodel import SQLModel

from remote_days.models.audit import AuditEntry
from remote_days.models.base import UUIDBase
from remote_days.models.calendar import CalendarDay
from remote_days.models.enums import (
    AuditAction,
    AuditEntityType,
    DaySource,
    DayStatus,
    ErrorKind,
    RequestStatus,
    RequestType,
    Role,
    WeekdayCode,
)
from remote_days.models.policy import RemotePolicy
from remote_days.models.request import RemoteRequest
from remote_days.models.user import User

__all__ = [
    "AuditAction",
    "AuditEntityType",
    "AuditEntry",
    "CalendarDay",
    "DaySource",
    "DayStatus",
    "ErrorKind",
    "RemotePolicy",
    "RemoteRequest",
    "RequestStatus",
    "RequestType",
    "Role",
    "SQLModel",
    "UUIDBase",
    "User",
    "WeekdayCode",
]
