"""
Tag sink exceptions
"""

from typing import Optional

from .base import LeadIntelException


class SinkError(LeadIntelException):
    """Raised when forwarding an event to an external tag sink fails"""

    def __init__(
        self,
        message: str,
        sink: str = "unknown",
        event_type: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            error_code="SINK_ERROR",
            details={"sink": sink, "event_type": event_type},
            cause=cause,
        )
