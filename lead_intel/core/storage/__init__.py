"""
Snapshot persistence for lead-intel
"""

from .base import IKeyValueStore, StorageKey, StorageResult
from .factory import create_store
from .file_store import FileKeyValueStore
from .memory import InMemoryKeyValueStore
from .redis_store import RedisKeyValueStore
from .snapshot_repository import SnapshotRepository

__all__ = [
    "IKeyValueStore",
    "StorageKey",
    "StorageResult",
    "create_store",
    "FileKeyValueStore",
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
    "SnapshotRepository",
]
