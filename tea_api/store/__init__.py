"""In-memory entity storage."""

from tea_api.store.locking import RWLock
from tea_api.store.memory import MemoryStore

__all__ = ["MemoryStore", "RWLock"]
