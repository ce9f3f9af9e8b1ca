"""
Interaction event source

Platform adapters (DOM listeners, web framework middleware, message
consumers) deliver user interactions through an event source instead of the
core attaching global listeners itself.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from lead_intel.core.logging import get_logger
from lead_intel.domains.analytics.models import NavigationContext, TrackedEvent

logger = get_logger(__name__)


class Interaction(BaseModel):
    """
    One user interaction.

    ``context`` updates the navigation context first. ``action`` routes to
    behavior learning; ``kind`` or ``event_type`` route to attribution
    analytics. An interaction may carry both.
    """

    model_config = ConfigDict(frozen=True)

    event_type: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)
    action: Optional[str] = None
    page: Optional[str] = None
    context: Optional[NavigationContext] = None
    kind: Optional[TrackedEvent] = None


InteractionCallback = Callable[[Interaction], None]


class IEventSource(ABC):
    """Capability to subscribe to user interactions"""

    @abstractmethod
    def on_interaction(self, callback: InteractionCallback) -> Callable[[], None]:
        """Register a callback; returns a function that unsubscribes it"""
        pass


class InProcessEventSource(IEventSource):
    """Synchronous in-process fan-out, in subscription order"""

    def __init__(self):
        self._callbacks: List[InteractionCallback] = []

    def on_interaction(self, callback: InteractionCallback) -> Callable[[], None]:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def emit(self, interaction: Interaction) -> None:
        for callback in list(self._callbacks):
            callback(interaction)

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)
