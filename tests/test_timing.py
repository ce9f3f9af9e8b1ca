"""
Tests for the slow-call timing decorator
"""

from unittest.mock import patch

from lead_intel.core.config import LearningSettings, LoggingSettings
from lead_intel.domains.analytics.services import EnhancedAnalyticsEngine
from lead_intel.domains.learning.services import AdaptiveLearningEngine
from lead_intel.shared.decorators import timing

from .conftest import build_settings


class _Worker:
    def __init__(self, threshold_ms):
        self.threshold_ms = threshold_ms

    @timing(threshold_from=lambda worker: worker.threshold_ms)
    def run(self):
        return "done"


class TestTiming:
    @patch("lead_intel.shared.decorators.timing.logger")
    def test_threshold_resolved_per_instance(self, mock_logger):
        assert _Worker(threshold_ms=None).run() == "done"
        assert _Worker(threshold_ms=60_000.0).run() == "done"
        mock_logger.warning.assert_not_called()

        _Worker(threshold_ms=0.0).run()

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["threshold_ms"] == 0.0

    @patch("lead_intel.shared.decorators.timing.logger")
    def test_static_threshold(self, mock_logger):
        @timing(threshold_ms=60_000.0)
        def quick():
            return 1

        assert quick() == 1
        mock_logger.warning.assert_not_called()


class TestEngineSlowCallThreshold:
    @patch("lead_intel.shared.decorators.timing.logger")
    def test_learning_engine_uses_injected_threshold(self, mock_logger, store, clock):
        settings = build_settings(
            learning=LearningSettings(SEED_DEFAULT_PATTERNS=False),
            logging=LoggingSettings(SLOW_CALL_THRESHOLD_MS=0.0),
        )
        engine = AdaptiveLearningEngine(store=store, settings=settings, clock=clock)

        engine.track_behavior("view_property", "/listings")

        mock_logger.warning.assert_called_once()
        assert "track_behavior" in mock_logger.warning.call_args.kwargs["function"]

    @patch("lead_intel.shared.decorators.timing.logger")
    def test_analytics_engine_uses_injected_threshold(self, mock_logger, store, clock):
        relaxed = build_settings(logging=LoggingSettings(SLOW_CALL_THRESHOLD_MS=60_000.0))
        engine = EnhancedAnalyticsEngine(store=store, settings=relaxed, clock=clock)

        engine.track_event("custom", {"k": 1})
        mock_logger.warning.assert_not_called()

        strict = build_settings(logging=LoggingSettings(SLOW_CALL_THRESHOLD_MS=0.0))
        engine = EnhancedAnalyticsEngine(store=store, settings=strict, clock=clock)

        engine.track_event("custom", {"k": 1})
        mock_logger.warning.assert_called_once()
