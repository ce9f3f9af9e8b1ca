"""
Custom exceptions for the lead-intel behavioral core
"""

from .base import LeadIntelException
from .config import ConfigurationError
from .messaging import SinkError
from .storage import StorageError, SnapshotCorruptedError

__all__ = [
    "LeadIntelException",
    "ConfigurationError",
    "SinkError",
    "StorageError",
    "SnapshotCorruptedError",
]
