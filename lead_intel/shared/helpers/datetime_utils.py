"""
DateTime utility functions for lead-intel
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Get current UTC datetime"""
    return datetime.now(timezone.utc)


def epoch_millis(value: datetime) -> int:
    """Milliseconds since the epoch for a datetime"""
    return int(value.timestamp() * 1000)
