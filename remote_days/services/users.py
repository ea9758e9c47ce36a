from __future__ import annotations

from typing import TYPE_CHECKING

from remote_days.models.enums import ErrorKind, Role
from remote_days.results import Failure, Ok
from remote_days.schemas.user import UserResponse

if TYPE_CHECKING:
    from remote_days.models.user import User
    from remote_days.results import Result
    from remote_days.store import Store


def build_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        full_name=user.full_name,
        email=user.email,
        role=Role(user.role),
        department=user.department,
        manager_id=user.manager_id,
    )


def resolve_user(store: Store, user_id: str | None) -> Result[User]:
    """Map a caller-supplied identifier to a user record."""
    user = store.get_user(user_id) if user_id else None
    if user is None:
        return Failure(ErrorKind.UNAUTHORIZED, "Unauthorized: set X-User-Id header")
    return Ok(user)
