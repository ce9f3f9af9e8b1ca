"""
Identifier generation helpers
"""

import secrets
import string
from datetime import datetime
from typing import Optional

from .datetime_utils import epoch_millis, now_utc

_BASE36 = string.digits + string.ascii_lowercase


def random_suffix(length: int = 9) -> str:
    """Random base-36 suffix"""
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def generate_time_seeded_id(prefix: str, at: Optional[datetime] = None) -> str:
    """Build an identifier shaped like ``<prefix>_<epoch-ms>_<suffix>``"""
    millis = epoch_millis(at or now_utc())
    return f"{prefix}_{millis}_{random_suffix()}"
