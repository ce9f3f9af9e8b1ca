"""
Enhanced Analytics Engine

Records attribution events with source and device classification, forwards
them to a tag sink and computes funnel, attribution and channel reports over
the bounded event log.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from lead_intel.core.config import Settings, settings as default_settings
from lead_intel.core.diagnostics import DiagnosticsRecorder, EngineDiagnostics
from lead_intel.core.logging import get_logger
from lead_intel.core.messaging import ITagSink, NullTagSink
from lead_intel.core.storage import (
    IKeyValueStore,
    SnapshotRepository,
    StorageKey,
    create_store,
)
from lead_intel.shared.constants.app import ANALYTICS_SNAPSHOT_KEY
from lead_intel.shared.constants.attribution import DEFAULT_CURRENCY
from lead_intel.shared.decorators import timing
from lead_intel.shared.helpers import (
    BoundedBuffer,
    coerce_label,
    now_utc,
    sanitize_event_data,
)

from ..models import (
    AnalyticsReport,
    AnalyticsSnapshot,
    AttributionEvent,
    AttributionModel,
    ChannelPerformanceRecord,
    Conversion,
    ConversionFunnel,
    NavigationContext,
    PageStats,
    SourceInfo,
    TrackedEventBase,
)
from .attribution_engine import AttributionEngine
from .channel_classifier import ChannelClassifier
from .device_classifier import DeviceClassifier
from .session_context import SessionContext

logger = get_logger(__name__)


class EnhancedAnalyticsEngine:
    """Owns the attribution event log and the session context"""

    def __init__(
        self,
        store: Optional[IKeyValueStore] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = now_utc,
        sink: Optional[ITagSink] = None,
        navigation: Optional[NavigationContext] = None,
        scope: Optional[str] = None,
    ):
        self.settings = settings or default_settings
        analytics_settings = self.settings.analytics

        self._clock = clock
        self._events: BoundedBuffer[AttributionEvent] = BoundedBuffer(
            analytics_settings.MAX_EVENTS
        )
        self._navigation = navigation or NavigationContext()
        self._sink = sink or NullTagSink()
        self.session = SessionContext(clock)
        self.channels = ChannelClassifier(analytics_settings.REAL_ESTATE_PORTALS)
        self.devices = DeviceClassifier(
            analytics_settings.MOBILE_MAX_WIDTH, analytics_settings.TABLET_MAX_WIDTH
        )
        self.attribution = AttributionEngine(analytics_settings.TIME_DECAY_RATE)
        self._diagnostics = DiagnosticsRecorder("enhanced analytics", clock)

        key = StorageKey(scope or self.settings.storage.SCOPE).build(
            ANALYTICS_SNAPSHOT_KEY
        )
        self._repository = SnapshotRepository(
            store if store is not None else create_store(self.settings.storage),
            key,
            AnalyticsSnapshot,
        )

        self._load()

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    @property
    def session_id(self) -> str:
        return self.session.session_id

    @property
    def user_id(self) -> Optional[str]:
        return self.session.user_id

    @property
    def navigation(self) -> NavigationContext:
        return self._navigation

    def navigate(self, context: NavigationContext) -> None:
        """Update the navigation context used for classification"""
        self._navigation = context

    def set_user_id(self, user_id: Any) -> None:
        if self.session.set_user_id(coerce_label(user_id)):
            self.save()

    # ------------------------------------------------------------------
    # Capture
    # ------------------------------------------------------------------

    def _source_info(self) -> SourceInfo:
        navigation = self._navigation
        return SourceInfo(
            channel=self.channels.classify(
                navigation.query_param("utm_source"), navigation.referrer
            ),
            campaign=navigation.query_param("utm_campaign"),
            referrer=navigation.referrer,
            landing_page=navigation.path,
        )

    @timing(threshold_from=lambda engine: engine.settings.logging.SLOW_CALL_THRESHOLD_MS)
    def track_event(
        self, event_type: Any, event_data: Optional[Mapping[str, Any]] = None
    ) -> AttributionEvent:
        """Record one event, forward it to the tag sink and persist"""
        event = AttributionEvent(
            id=self.session.new_event_id(),
            timestamp=self._clock(),
            session_id=self.session.session_id,
            user_id=self.session.user_id,
            event_type=coerce_label(event_type),
            event_data=sanitize_event_data(
                event_data, self.settings.analytics.MAX_EVENT_DATA_KEYS
            ),
            source=self._source_info(),
            device=self.devices.classify(
                self._navigation.viewport_width, self._navigation.user_agent
            ),
        )

        self._events.append(event)
        self._forward(event)
        self.save()

        logger.debug(
            "Analytics event tracked",
            event_type=event.event_type,
            channel=event.channel,
        )
        return event

    def track(self, kind: TrackedEventBase) -> AttributionEvent:
        """Record a typed event kind"""
        return self.track_event(kind.event_type, kind.to_event_data(self._navigation))

    def track_conversion(
        self, value: Optional[float] = None, currency: str = DEFAULT_CURRENCY
    ) -> AttributionEvent:
        return self.track(Conversion(value=value, currency=currency))

    def _forward(self, event: AttributionEvent) -> None:
        try:
            self._sink.record(event)
        except Exception as e:
            # Sink delivery never affects recorded state
            self._diagnostics.record_sink_failure(event.event_type, e)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def events(self) -> List[AttributionEvent]:
        return self._events.to_list()

    def get_conversion_funnel(self) -> ConversionFunnel:
        return self.attribution.conversion_funnel(self._events)

    def get_attribution_model(self) -> AttributionModel:
        return self.attribution.attribution_model(self._events)

    def get_channel_performance(self) -> Dict[str, ChannelPerformanceRecord]:
        return self.attribution.channel_performance(self._events)

    def get_top_pages(self) -> List[PageStats]:
        return self.attribution.top_pages(self._events)

    def get_user_journey(self, session_id: Optional[str] = None) -> List[AttributionEvent]:
        return self.attribution.user_journey(
            self._events, session_id or self.session.session_id
        )

    def get_analytics_report(self) -> AnalyticsReport:
        events = self._events.to_list()
        return AnalyticsReport(
            conversion_funnel=self.attribution.conversion_funnel(events),
            attribution_model=self.attribution.attribution_model(events),
            channel_performance=self.attribution.channel_performance(events),
            top_pages=self.attribution.top_pages(events),
            total_events=len(events),
            unique_sessions=len({event.session_id for event in events}),
        )

    def diagnostics(self) -> EngineDiagnostics:
        return self._diagnostics.snapshot(len(self._events), self._events.evicted)

    # ------------------------------------------------------------------
    # Lifecycle and persistence
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Forget all events, start a new session and remove the stored snapshot"""
        self._events.clear()
        self.session.renew()

        result = self._repository.clear()
        if not result.ok:
            self._diagnostics.record_failure("clear", result.error)
        logger.info("Analytics data reset", session_id=self.session.session_id)

    def save(self) -> bool:
        """Write the bounded snapshot; failures are recorded, never raised"""
        snapshot = AnalyticsSnapshot(
            events=self._events.tail(self.settings.analytics.PERSISTED_EVENTS),
            session_id=self.session.session_id,
            user_id=self.session.user_id,
            last_updated=self._clock(),
        )
        result = self._repository.save(snapshot)
        if not result.ok:
            self._diagnostics.record_failure("save", result.error)
        return result.ok

    def close(self) -> None:
        self._sink.close()

    def _load(self) -> None:
        result = self._repository.load()
        if not result.ok:
            self._diagnostics.record_failure("load", result.error)
            return
        snapshot = result.value
        if snapshot is None:
            return

        self._events.extend(snapshot.events)
        self.session.restore(snapshot.session_id, snapshot.user_id)
        logger.info(
            "Analytics data restored",
            events=len(self._events),
            session_id=self.session.session_id,
        )
