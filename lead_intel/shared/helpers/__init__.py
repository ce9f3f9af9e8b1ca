"""
Shared helper functions for lead-intel
"""

from .buffers import BoundedBuffer
from .datetime_utils import now_utc, epoch_millis
from .id_utils import generate_time_seeded_id, random_suffix
from .payloads import sanitize_event_data, coerce_label

__all__ = [
    "BoundedBuffer",
    "now_utc",
    "epoch_millis",
    "generate_time_seeded_id",
    "random_suffix",
    "sanitize_event_data",
    "coerce_label",
]
