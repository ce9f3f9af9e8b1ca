"""
Scoped key-value store abstraction for snapshot persistence
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from lead_intel.core.exceptions import LeadIntelException
from lead_intel.shared.constants.app import STORAGE_KEY_PREFIX

T = TypeVar("T")


class StorageKey:
    """Storage key builder with scope support"""

    def __init__(self, scope: str, prefix: str = STORAGE_KEY_PREFIX):
        self.scope = scope
        self.prefix = prefix

    def build(self, name: str) -> str:
        """Build a namespaced key, e.g. ``lead_intel:default:adaptive-learning-data``"""
        return f"{self.prefix}:{self.scope}:{name}"


@dataclass
class StorageResult(Generic[T]):
    """Outcome of a load or save; failures carry the error instead of raising"""

    ok: bool
    value: Optional[T] = None
    error: Optional[LeadIntelException] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "StorageResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: LeadIntelException) -> "StorageResult[T]":
        return cls(ok=False, error=error)


class IKeyValueStore(ABC):
    """Interface for string key-value stores"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored string or None; raise StorageError on failure"""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a string; raise StorageError on failure"""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key if present; raise StorageError on failure"""
