from __future__ import annotations

from sqlmodel import Field, SQLModel

from remote_days.models.enums import Role


class User(SQLModel, table=True):
    """A person who can request or decide on remote days.

    ``manager_id`` is a plain id reference; a manager does not own its reports.
    """

    __tablename__ = "app_user"

    id: str = Field(primary_key=True, max_length=50)
    full_name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    role: str = Field(default=Role.EMPLOYEE, max_length=20)
    department: str = Field(max_length=100, index=True)
    manager_id: str | None = Field(default=None, max_length=50, index=True)
