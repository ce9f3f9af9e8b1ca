"""
Store construction from settings
"""

from lead_intel.core.exceptions import ConfigurationError

from .base import IKeyValueStore
from .file_store import FileKeyValueStore
from .memory import InMemoryKeyValueStore
from .redis_store import RedisKeyValueStore


def create_store(storage_settings) -> IKeyValueStore:
    """Build the key-value store selected by ``storage_settings.BACKEND``"""
    backend = storage_settings.BACKEND
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "file":
        return FileKeyValueStore(storage_settings.DIRECTORY)
    if backend == "redis":
        return RedisKeyValueStore.from_settings(storage_settings)
    raise ConfigurationError(
        f"Unsupported storage backend: {backend}",
        setting="storage.BACKEND",
        value=backend,
    )
