from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from remote_days.clock import FixedClock, get_clock
from remote_days.db import get_store
from remote_days.main import app
from remote_days.store import InMemoryStore, SqlStore

from helpers import NOW, make_sql_store, seed_users

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

    from remote_days.store import Store


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def store() -> InMemoryStore:
    """In-memory store seeded with the Sales team and policy."""
    _store = InMemoryStore()
    seed_users(_store)
    return _store


@pytest.fixture(params=["memory", "sql"])
def any_store(request: pytest.FixtureRequest) -> Iterator[Store]:
    """Seeded store for each backend."""
    _store: Store = InMemoryStore() if request.param == "memory" else make_sql_store()
    seed_users(_store)
    yield _store
    if isinstance(_store, SqlStore):
        _store.close()


@pytest.fixture
async def async_client(store: InMemoryStore, clock: FixedClock) -> AsyncIterator[AsyncClient]:
    """Async HTTP client with the store and clock dependencies overridden."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: clock
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
