"""
Snapshot repository: bounded engine state <-> JSON blob in a key-value store
"""

import json
from typing import Generic, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from lead_intel.core.exceptions import SnapshotCorruptedError, StorageError
from lead_intel.core.logging import get_logger

from .base import IKeyValueStore, StorageResult

logger = get_logger(__name__)

SnapshotT = TypeVar("SnapshotT", bound=BaseModel)


class SnapshotRepository(Generic[SnapshotT]):
    """
    Loads and saves one snapshot model under one key.

    Nothing here raises: every outcome is a StorageResult. A missing key is a
    successful load with ``value=None``; unparseable or invalid data is a
    failed load carrying SnapshotCorruptedError.
    """

    def __init__(self, store: IKeyValueStore, key: str, model: Type[SnapshotT]):
        self.store = store
        self.key = key
        self.model = model

    def load(self) -> StorageResult[SnapshotT]:
        try:
            raw = self.store.get(self.key)
        except StorageError as e:
            return StorageResult.failure(e)
        except Exception as e:
            return StorageResult.failure(self._wrap(e, "get"))

        if raw is None:
            logger.debug("No snapshot stored", key=self.key)
            return StorageResult.success(None)

        try:
            snapshot = self.model.model_validate_json(raw)
        except (PydanticValidationError, ValueError) as e:
            return StorageResult.failure(
                SnapshotCorruptedError(
                    f"Stored snapshot is not a valid {self.model.__name__}",
                    key=self.key,
                    cause=e,
                )
            )

        return StorageResult.success(snapshot)

    def save(self, snapshot: SnapshotT) -> StorageResult[None]:
        try:
            payload = json.dumps(snapshot.model_dump(mode="json", by_alias=True))
        except (TypeError, ValueError) as e:
            return StorageResult.failure(
                StorageError(
                    "Snapshot is not JSON serializable",
                    key=self.key,
                    operation="serialize",
                    cause=e,
                )
            )

        try:
            self.store.set(self.key, payload)
        except StorageError as e:
            return StorageResult.failure(e)
        except Exception as e:
            return StorageResult.failure(self._wrap(e, "set"))
        return StorageResult.success()

    def clear(self) -> StorageResult[None]:
        try:
            self.store.delete(self.key)
        except StorageError as e:
            return StorageResult.failure(e)
        except Exception as e:
            return StorageResult.failure(self._wrap(e, "delete"))
        return StorageResult.success()

    def _wrap(self, error: Exception, operation: str) -> StorageError:
        # Third-party stores may raise their own exception types
        return StorageError(
            f"Store {operation} failed: {error}",
            key=self.key,
            operation=operation,
            cause=error,
        )
