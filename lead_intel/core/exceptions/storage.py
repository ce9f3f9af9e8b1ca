"""
Storage-related exceptions
"""

from typing import Optional

from .base import LeadIntelException


class StorageError(LeadIntelException):
    """Raised when a key-value store read or write fails"""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        operation: str = "unknown",
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            error_code="STORAGE_ERROR",
            details={"key": key, "operation": operation},
            cause=cause,
        )
        self.key = key
        self.operation = operation


class SnapshotCorruptedError(StorageError):
    """Raised when a persisted snapshot cannot be parsed or validated"""

    def __init__(
        self, message: str, key: Optional[str] = None, cause: Optional[Exception] = None
    ):
        super().__init__(message=message, key=key, operation="load", cause=cause)
        self.error_code = "SNAPSHOT_CORRUPTED"
