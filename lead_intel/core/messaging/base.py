"""
Tag sink interface

A tag sink receives every recorded attribution event, e.g. to forward it to
an external tag manager. Sinks may raise; callers treat delivery as
best-effort.
"""

from abc import ABC, abstractmethod

from lead_intel.domains.analytics.models import AttributionEvent


class ITagSink(ABC):
    """Receives attribution events after they are recorded"""

    @abstractmethod
    def record(self, event: AttributionEvent) -> None:
        pass

    def close(self) -> None:
        """Release any held resources"""
        return None
