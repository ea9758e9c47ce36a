from remote_days.store.base import Store
from remote_days.store.memory import InMemoryStore
from remote_days.store.sql import SqlStore

__all__ = ["InMemoryStore", "SqlStore", "Store"]
