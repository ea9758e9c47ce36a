from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import Depends
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from remote_days.config import Settings, get_settings
from remote_days.store import InMemoryStore, SqlStore, Store

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

_engine: Engine | None = None
_store: Store | None = None


def get_engine() -> Engine:
    """Return the singleton SQL engine, creating it on first call."""
    global _engine
    if _engine is None:
        settings = get_settings()
        kwargs: dict = {"echo": settings.debug}
        if settings.database_url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if settings.database_url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
        else:
            kwargs["pool_pre_ping"] = True
        _engine = create_engine(settings.database_url, **kwargs)
    return _engine


def build_store(settings: Settings) -> Store:
    """Create the store selected by ``storage_backend``."""
    if settings.storage_backend == "sql":
        store = SqlStore(get_engine())
        store.create_schema()
        return store
    return InMemoryStore()


def get_store() -> Store:
    """FastAPI dependency that returns the process-wide store."""
    global _store
    if _store is None:
        _store = build_store(get_settings())
    return _store


def set_store(store: Store | None) -> None:
    """Override the store (for testing or production wiring)."""
    global _store
    _store = store


def dispose_engine() -> None:
    """Close the SQL store and dispose the engine. Call on app shutdown."""
    global _engine
    if isinstance(_store, SqlStore):
        _store.close()
    if _engine is not None:
        _engine.dispose()
        _engine = None


StoreDep = Annotated[Store, Depends(get_store)]
