from __future__ import annotations

from fastapi import APIRouter

from remote_days.api.deps import CurrentUserDep
from remote_days.schemas.user import UserResponse
from remote_days.services.users import build_user_response

users_router = APIRouter(tags=["users"])


@users_router.get("/me", response_model=UserResponse)
def me(current: CurrentUserDep) -> UserResponse:
    """Return the calling user's profile."""
    return build_user_response(current)
