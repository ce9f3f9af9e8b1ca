"""
Tests for pattern learning and next-action prediction
"""

from datetime import datetime, timezone

from lead_intel.core.config import LearningSettings
from lead_intel.domains.learning.models import BehaviorEvent, LearningPattern
from lead_intel.domains.learning.services import PatternAnalyzer

SEEN_AT = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


def _behavior(action, page="/listings", at=SEEN_AT):
    return BehaviorEvent(timestamp=at, action=action, page=page)


def _pattern(key, confidence, frequency, actions):
    return LearningPattern(
        pattern=key,
        confidence=confidence,
        last_seen=SEEN_AT,
        frequency=frequency,
        associated_actions=actions,
    )


class TestPatternKeys:
    def test_first_behavior_has_no_sequence_key(self):
        analyzer = PatternAnalyzer(LearningSettings())
        first = _behavior("view_property")

        assert analyzer.derive_keys(first, [first]) == [
            "/listings:view_property",
            "9:view_property",
        ]

    def test_sequence_key_uses_recent_window(self):
        analyzer = PatternAnalyzer(LearningSettings(SEQUENCE_WINDOW=3))
        history = [_behavior(action) for action in ("a", "b", "c", "d")]

        keys = analyzer.derive_keys(history[-1], history)

        assert keys[0] == "b -> c -> d"


class TestPatternReinforcement:
    def test_confidence_is_monotonic_and_capped(self, learning_engine):
        observed = []
        for _ in range(15):
            learning_engine.track_behavior("view_property", "/listings")
            observed.append(learning_engine.patterns["/listings:view_property"].confidence)

        assert observed == sorted(observed)
        assert observed[0] == 0.1
        assert observed[9] == 1.0
        assert max(observed) == 1.0

    def test_frequency_and_associated_actions(self, learning_engine):
        for _ in range(3):
            learning_engine.track_behavior("view_property", "/listings")

        pattern = learning_engine.patterns["/listings:view_property"]
        assert pattern.frequency == 3
        assert pattern.associated_actions == ["view_property"]
        assert "/listings:view_property" in learning_engine.get_user_profile().behavior_patterns

    def test_pattern_table_is_capped(self, learning_engine):
        for i in range(200):
            learning_engine.track_behavior(f"action_{i}", f"/page/{i}")

        assert len(learning_engine.patterns) == 100
        assert learning_engine.analyzer.rejected > 0

    def test_existing_keys_still_reinforced_when_full(self):
        analyzer = PatternAnalyzer(LearningSettings(MAX_PATTERNS=2))
        first = _behavior("view_property")
        analyzer.analyze(first, [first])
        analyzer.analyze(first, [first])

        assert len(analyzer) == 2
        assert analyzer.get("/listings:view_property").frequency == 2

    def test_seeded_defaults(self):
        analyzer = PatternAnalyzer(LearningSettings())

        assert analyzer.seed_defaults(SEEN_AT) == 4
        assert analyzer.seed_defaults(SEEN_AT) == 0
        seeded = analyzer.get("/listings:view_property")
        assert seeded.confidence == 0.3
        assert seeded.associated_actions == ["contact_agent", "schedule_tour"]


class TestPrediction:
    def test_ranked_by_summed_confidence(self):
        analyzer = PatternAnalyzer(LearningSettings())
        analyzer.load(
            [
                ("x -> a", _pattern("x -> a", 0.9, 5, ["a", "b"])),
                ("x -> c", _pattern("x -> c", 0.4, 5, ["c"])),
                ("x -> d", _pattern("x -> d", 0.6, 5, ["d", "b"])),
                ("x -> e", _pattern("x -> e", 0.95, 1, ["e"])),
            ]
        )

        assert analyzer.predict_next_action("/any", "x") == ["b", "a", "d"]

    def test_prediction_shape_from_learned_history(self, learning_engine):
        cycle = ["view_property", "contact_agent", "schedule_tour", "save_search"]
        for _ in range(10):
            for action in cycle:
                learning_engine.track_behavior(action, "/listings")

        predictions = learning_engine.predict_next_action("/listings", "view_property")

        assert len(predictions) == 3
        assert len(set(predictions)) == 3
        assert set(predictions) == {"contact_agent", "schedule_tour", "save_search"}

    def test_no_prediction_for_unknown_action(self, learning_engine):
        learning_engine.track_behavior("view_property", "/listings")

        assert learning_engine.predict_next_action("/listings", "teleport") == []

    def test_untrusted_seed_patterns_do_not_predict(self):
        analyzer = PatternAnalyzer(LearningSettings())
        analyzer.seed_defaults(SEEN_AT)

        assert analyzer.predict_next_action("/listings", "view_property") == []
