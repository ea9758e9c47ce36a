from __future__ import annotations

from pydantic import BaseModel

from remote_days.models.enums import Role


class UserResponse(BaseModel):
    """Profile of the calling user."""

    id: str
    full_name: str
    email: str
    role: Role
    department: str
    manager_id: str | None
