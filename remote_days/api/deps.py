from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header

from remote_days.clock import Clock, get_clock
from remote_days.db import StoreDep
from remote_days.exceptions import unwrap
from remote_days.models.user import User
from remote_days.services.users import resolve_user


def get_current_user(
    store: StoreDep,
    x_user_id: Annotated[str | None, Header()] = None,
) -> User:
    """Resolve the caller from the ``X-User-Id`` header."""
    return unwrap(resolve_user(store, x_user_id))


CurrentUserDep = Annotated[User, Depends(get_current_user)]
ClockDep = Annotated[Clock, Depends(get_clock)]
