"""
Behavioral Intelligence service

Owns one adaptive learning engine and one analytics engine and is the single
entry point the rest of an application talks to. Construct it once at
application start and pass it where it is needed.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from lead_intel.core.config import Settings, settings as default_settings
from lead_intel.core.diagnostics import EngineDiagnostics
from lead_intel.core.logging import get_logger
from lead_intel.core.messaging import ITagSink, create_sink
from lead_intel.core.storage import IKeyValueStore, create_store
from lead_intel.domains.analytics.models import (
    AnalyticsReport,
    AttributionEvent,
    NavigationContext,
    PageView,
    TrackedEventBase,
)
from lead_intel.domains.analytics.services import (
    EnhancedAnalyticsEngine,
    TagEventTracker,
)
from lead_intel.domains.learning.models import (
    AdaptiveRecommendation,
    BehaviorEvent,
    RecommendationType,
    UserProfile,
)
from lead_intel.domains.learning.services import AdaptiveLearningEngine
from lead_intel.shared.constants.attribution import DEFAULT_CURRENCY
from lead_intel.shared.helpers import now_utc

from .event_source import IEventSource, Interaction

logger = get_logger(__name__)


class BehavioralIntelligence:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[IKeyValueStore] = None,
        sink: Optional[ITagSink] = None,
        event_source: Optional[IEventSource] = None,
        clock: Callable[[], datetime] = now_utc,
        navigation: Optional[NavigationContext] = None,
        scope: Optional[str] = None,
    ):
        self.settings = settings or default_settings
        # Both engines share one store; their snapshots live under different keys
        store = store if store is not None else create_store(self.settings.storage)
        sink = sink if sink is not None else create_sink(self.settings.sink)

        self.learning = AdaptiveLearningEngine(
            store=store, settings=self.settings, clock=clock, scope=scope
        )
        self.analytics = EnhancedAnalyticsEngine(
            store=store,
            settings=self.settings,
            clock=clock,
            sink=sink,
            navigation=navigation,
            scope=scope,
        )
        self.tags = TagEventTracker(self.analytics)

        self._event_source = event_source
        self._unsubscribe: Optional[Callable[[], None]] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def started(self) -> bool:
        return self._unsubscribe is not None

    def start(self) -> None:
        """Attach to the event source and record the initial page view"""
        if self.started:
            return
        if self._event_source is not None:
            self._unsubscribe = self._event_source.on_interaction(self.handle_interaction)
        else:
            self._unsubscribe = lambda: None

        if self.settings.analytics.TRACK_INITIAL_PAGE_VIEW:
            self.analytics.track(PageView())

        logger.info(
            "Behavioral intelligence started",
            session_id=self.analytics.session_id,
            event_source=type(self._event_source).__name__ if self._event_source else None,
        )

    def stop(self) -> None:
        if self._unsubscribe is None:
            return
        self._unsubscribe()
        self._unsubscribe = None
        logger.info("Behavioral intelligence stopped")

    def close(self) -> None:
        """Stop and release the tag sink"""
        self.stop()
        self.analytics.close()

    def reset(self) -> None:
        """Clear both engines and their stored snapshots, start a new session"""
        self.learning.reset()
        self.analytics.reset()

    def diagnostics(self) -> Dict[str, EngineDiagnostics]:
        return {
            "learning": self.learning.diagnostics(),
            "analytics": self.analytics.diagnostics(),
        }

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_interaction(self, interaction: Interaction) -> None:
        if interaction.context is not None:
            self.navigate(interaction.context)

        if interaction.action is not None:
            page = (
                interaction.page
                if interaction.page is not None
                else self.analytics.navigation.path
            )
            self.learning.track_behavior(interaction.action, page, interaction.data)

        if interaction.kind is not None:
            self.analytics.track(interaction.kind)
        elif interaction.event_type is not None:
            self.analytics.track_event(interaction.event_type, interaction.data)

    def navigate(self, context: NavigationContext) -> None:
        self.analytics.navigate(context)

    def track_user_action(
        self, action: Any, page: Any, data: Optional[Mapping[str, Any]] = None
    ) -> BehaviorEvent:
        return self.learning.track_behavior(action, page, data)

    def track_event(
        self, event_type: Any, event_data: Optional[Mapping[str, Any]] = None
    ) -> AttributionEvent:
        return self.analytics.track_event(event_type, event_data)

    def track(self, kind: TrackedEventBase) -> AttributionEvent:
        return self.analytics.track(kind)

    def track_conversion(
        self, value: Optional[float] = None, currency: str = DEFAULT_CURRENCY
    ) -> AttributionEvent:
        return self.analytics.track_conversion(value, currency)

    def set_user_id(self, user_id: Any) -> None:
        self.analytics.set_user_id(user_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def session_id(self) -> str:
        return self.analytics.session_id

    def get_personalized_recommendations(
        self, recommendation_type: Optional[Union[str, RecommendationType]] = None
    ) -> List[AdaptiveRecommendation]:
        return self.learning.get_recommendations(recommendation_type)

    def predict_user_behavior(self, page: Any, action: Any) -> List[str]:
        return self.learning.predict_next_action(page, action)

    def get_user_insights(self) -> UserProfile:
        return self.learning.get_user_profile()

    def get_analytics_report(self) -> AnalyticsReport:
        return self.analytics.get_analytics_report()

    def get_user_journey(self, session_id: Optional[str] = None) -> List[AttributionEvent]:
        return self.analytics.get_user_journey(session_id)
