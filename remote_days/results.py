"""Tagged outcomes returned by engine operations instead of raising."""

# ruff: noqa: TC003
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Generic, TypeVar

from remote_days.models.enums import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying its payload."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome. Policy rejections carry the offending date."""

    kind: ErrorKind
    message: str
    date: date | None = None

    @property
    def ok(self) -> bool:
        return False


Result = Ok[T] | Failure
