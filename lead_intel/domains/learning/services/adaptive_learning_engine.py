"""
Adaptive Learning Engine

Learns from user behavior and adapts the experience: every tracked behavior
is appended to a bounded history, analyzed for patterns, used to rebuild the
recommendation list and written through to the snapshot store.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union

from lead_intel.core.config import Settings, settings as default_settings
from lead_intel.core.diagnostics import DiagnosticsRecorder, EngineDiagnostics
from lead_intel.core.logging import get_logger
from lead_intel.core.storage import (
    IKeyValueStore,
    SnapshotRepository,
    StorageKey,
    create_store,
)
from lead_intel.shared.constants.app import LEARNING_SNAPSHOT_KEY
from lead_intel.shared.decorators import timing
from lead_intel.shared.helpers import (
    BoundedBuffer,
    coerce_label,
    now_utc,
    sanitize_event_data,
)

from ..models import (
    AdaptiveRecommendation,
    BehaviorEvent,
    LearningPattern,
    LearningSnapshot,
    RecommendationType,
    UserProfile,
)
from .pattern_analyzer import PatternAnalyzer
from .recommendation_engine import RecommendationEngine

logger = get_logger(__name__)


class AdaptiveLearningEngine:
    """Owns behavior history, pattern table and the current recommendations"""

    def __init__(
        self,
        store: Optional[IKeyValueStore] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = now_utc,
        scope: Optional[str] = None,
    ):
        self.settings = settings or default_settings
        learning_settings = self.settings.learning

        self._clock = clock
        self._behaviors: BoundedBuffer[BehaviorEvent] = BoundedBuffer(
            learning_settings.MAX_BEHAVIORS
        )
        self._recommendations: List[AdaptiveRecommendation] = []
        self.analyzer = PatternAnalyzer(learning_settings)
        self.recommender = RecommendationEngine(learning_settings)
        self._diagnostics = DiagnosticsRecorder("adaptive learning", clock)

        key = StorageKey(scope or self.settings.storage.SCOPE).build(
            LEARNING_SNAPSHOT_KEY
        )
        self._repository = SnapshotRepository(
            store if store is not None else create_store(self.settings.storage),
            key,
            LearningSnapshot,
        )

        self._load()
        self._seed_default_patterns()

    # ------------------------------------------------------------------
    # Capture
    # ------------------------------------------------------------------

    @timing(threshold_from=lambda engine: engine.settings.logging.SLOW_CALL_THRESHOLD_MS)
    def track_behavior(
        self,
        action: Any,
        page: Any,
        data: Optional[Dict[str, Any]] = None,
        element: Optional[str] = None,
        duration: Optional[float] = None,
    ) -> BehaviorEvent:
        """Record one behavior, then analyze, recommend and persist"""
        behavior = BehaviorEvent(
            timestamp=self._clock(),
            action=coerce_label(action),
            page=coerce_label(page),
            element=coerce_label(element) if element is not None else None,
            data=sanitize_event_data(data, self.settings.analytics.MAX_EVENT_DATA_KEYS),
            duration=duration if isinstance(duration, (int, float)) else None,
        )

        self._behaviors.append(behavior)
        self.analyzer.analyze(behavior, self._behaviors)
        self._recommendations = self.recommender.generate(self._behaviors)
        self.save()

        logger.debug("Behavior tracked", action=behavior.action, page=behavior.page)
        return behavior

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def behaviors(self) -> List[BehaviorEvent]:
        return self._behaviors.to_list()

    @property
    def patterns(self) -> Dict[str, LearningPattern]:
        return self.analyzer.patterns

    def get_recommendations(
        self, recommendation_type: Optional[Union[str, RecommendationType]] = None
    ) -> List[AdaptiveRecommendation]:
        return self.recommender.rank(self._recommendations, recommendation_type)

    def get_user_profile(self) -> UserProfile:
        return UserProfile(
            interests=self.recommender.analyze_interests(self._behaviors),
            preferred_pages=self.recommender.analyze_preferred_pages(self._behaviors),
            optimal_times=self.recommender.analyze_optimal_times(self._behaviors),
            behavior_patterns=self.analyzer.frequent_patterns(),
        )

    def predict_next_action(self, page: Any, action: Any) -> List[str]:
        return self.analyzer.predict_next_action(coerce_label(page), coerce_label(action))

    def diagnostics(self) -> EngineDiagnostics:
        return self._diagnostics.snapshot(len(self._behaviors), self._behaviors.evicted)

    # ------------------------------------------------------------------
    # Lifecycle and persistence
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Forget everything, remove the stored snapshot and re-seed defaults"""
        self._behaviors.clear()
        self.analyzer.clear()
        self._recommendations = []

        result = self._repository.clear()
        if not result.ok:
            self._diagnostics.record_failure("clear", result.error)

        self._seed_default_patterns()
        logger.info("Adaptive learning data reset")

    def save(self) -> bool:
        """Write the bounded snapshot; failures are recorded, never raised"""
        snapshot = LearningSnapshot(
            behaviors=self._behaviors.tail(self.settings.learning.PERSISTED_BEHAVIORS),
            patterns=self.analyzer.export(),
            recommendations=list(self._recommendations),
            last_updated=self._clock(),
        )
        result = self._repository.save(snapshot)
        if not result.ok:
            self._diagnostics.record_failure("save", result.error)
        return result.ok

    def _load(self) -> None:
        result = self._repository.load()
        if not result.ok:
            # Corrupt or unreadable: start empty, no partial recovery
            self._diagnostics.record_failure("load", result.error)
            return
        snapshot = result.value
        if snapshot is None:
            return

        self._behaviors.extend(snapshot.behaviors)
        self.analyzer.load(snapshot.patterns)
        self._recommendations = list(snapshot.recommendations)
        logger.info(
            "Adaptive learning data restored",
            behaviors=len(self._behaviors),
            patterns=len(self.analyzer),
        )

    def _seed_default_patterns(self) -> None:
        if self.settings.learning.SEED_DEFAULT_PATTERNS:
            self.analyzer.seed_defaults(self._clock())
