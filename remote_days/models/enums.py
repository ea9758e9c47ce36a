from __future__ import annotations

import enum


class Role(enum.StrEnum):
    """Role of a user within the organisation."""

    EMPLOYEE = "EMPLOYEE"
    MANAGER = "MANAGER"
    HR = "HR"


class WeekdayCode(enum.StrEnum):
    """ISO weekday codes, Monday first."""

    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"
    SUN = "SUN"


class DayStatus(enum.StrEnum):
    """Where a user works on a given calendar day."""

    OFFICE = "OFFICE"
    REMOTE = "REMOTE"
    PTO = "PTO"
    SICK = "SICK"
    HOLIDAY = "HOLIDAY"
    OTHER = "OTHER"


class DaySource(enum.StrEnum):
    """Provenance of the last write to a calendar day."""

    POLICY_SEED = "policy-seed"
    APPROVED_REQUEST = "approved_request"
    MANUAL = "manual"


class RequestType(enum.StrEnum):
    """Request types with known semantics. Other type strings are stored as-is."""

    SET_REMOTE = "SET_REMOTE"


class RequestStatus(enum.StrEnum):
    """State machine for remote-work requests."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class AuditEntityType(enum.StrEnum):
    """Entity type recorded in the audit log."""

    REMOTE_REQUEST = "REMOTE_REQUEST"
    CALENDAR_DAY = "CALENDAR_DAY"


class AuditAction(enum.StrEnum):
    """Action recorded in the audit log."""

    CREATE = "CREATE"
    APPROVE = "APPROVE"
    REJECT = "REJECT"
    UPDATE_FROM_REQUEST = "UPDATE_FROM_REQUEST"


class ErrorKind(enum.StrEnum):
    """Failure taxonomy returned by the engine."""

    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    INVALID_INPUT = "InvalidInput"
    PAST_DATE = "PastDate"
    CUTOFF_VIOLATION = "CutoffViolation"
    REQUIRED_OFFICE_DAY = "RequiredOfficeDay"
    WEEKLY_LIMIT_EXCEEDED = "WeeklyLimitExceeded"
    MONTHLY_LIMIT_EXCEEDED = "MonthlyLimitExceeded"
    NOT_FOUND = "NotFound"
    INVALID_STATE = "InvalidState"

    @property
    def is_policy_rejection(self) -> bool:
        return self in _POLICY_REJECTIONS


_POLICY_REJECTIONS = frozenset(
    {
        ErrorKind.PAST_DATE,
        ErrorKind.CUTOFF_VIOLATION,
        ErrorKind.REQUIRED_OFFICE_DAY,
        ErrorKind.WEEKLY_LIMIT_EXCEEDED,
        ErrorKind.MONTHLY_LIMIT_EXCEEDED,
    }
)
