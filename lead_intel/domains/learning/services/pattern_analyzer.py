"""
Pattern Analyzer

Derives sequence, page and hour-of-day pattern keys from each behavior and
reinforces their frequency/confidence. Patterns feed next-action prediction.
"""

from collections import OrderedDict
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from lead_intel.core.logging import get_logger
from lead_intel.shared.constants.learning import (
    DEFAULT_PATTERNS,
    MAX_CONFIDENCE,
    SEED_CONFIDENCE,
    SEQUENCE_SEPARATOR,
)

from ..models import BehaviorEvent, LearningPattern

logger = get_logger(__name__)


class PatternAnalyzer:
    """
    Owns the pattern table.

    The table is capped at ``MAX_PATTERNS`` distinct keys. Once full, new keys
    are rejected; existing keys are never evicted or aged out.
    """

    def __init__(self, learning_settings):
        self.max_patterns = learning_settings.MAX_PATTERNS
        self.pattern_threshold = learning_settings.PATTERN_THRESHOLD
        self.initial_confidence = learning_settings.INITIAL_CONFIDENCE
        self.confidence_step = learning_settings.CONFIDENCE_STEP
        self.sequence_window = learning_settings.SEQUENCE_WINDOW
        self.max_predictions = learning_settings.MAX_PREDICTIONS
        self._patterns: "OrderedDict[str, LearningPattern]" = OrderedDict()
        self.rejected = 0

    @property
    def patterns(self) -> Dict[str, LearningPattern]:
        return dict(self._patterns)

    def get(self, key: str) -> Optional[LearningPattern]:
        return self._patterns.get(key)

    def __len__(self) -> int:
        return len(self._patterns)

    def derive_keys(
        self, behavior: BehaviorEvent, history: Sequence[BehaviorEvent]
    ) -> List[str]:
        """Pattern keys for a behavior; ``history`` already ends with it"""
        keys = []

        recent = list(history)[-self.sequence_window :]
        if len(recent) >= 2:
            keys.append(SEQUENCE_SEPARATOR.join(b.action for b in recent))

        keys.append(f"{behavior.page}:{behavior.action}")
        keys.append(f"{behavior.timestamp.hour}:{behavior.action}")
        return keys

    def analyze(
        self, behavior: BehaviorEvent, history: Sequence[BehaviorEvent]
    ) -> List[str]:
        """Update every pattern the behavior matches; returns the keys touched"""
        touched = []
        for key in self.derive_keys(behavior, history):
            if self.update_pattern(key, behavior):
                touched.append(key)
        return touched

    def update_pattern(self, key: str, behavior: BehaviorEvent) -> bool:
        existing = self._patterns.get(key)
        if existing is not None:
            existing.reinforce(
                behavior.action,
                behavior.timestamp,
                self.confidence_step,
                MAX_CONFIDENCE,
            )
            return True

        if len(self._patterns) >= self.max_patterns:
            self.rejected += 1
            logger.debug("Pattern table full, key rejected", pattern=key)
            return False

        self._patterns[key] = LearningPattern(
            pattern=key,
            confidence=self.initial_confidence,
            last_seen=behavior.timestamp,
            frequency=1,
            associated_actions=[behavior.action],
        )
        return True

    def seed_defaults(self, seen_at: datetime) -> int:
        """Insert bootstrap patterns that are not present yet"""
        seeded = 0
        for entry in DEFAULT_PATTERNS:
            key = entry["key"]
            if key in self._patterns or len(self._patterns) >= self.max_patterns:
                continue
            self._patterns[key] = LearningPattern(
                pattern=key,
                confidence=SEED_CONFIDENCE,
                last_seen=seen_at,
                frequency=1,
                associated_actions=list(entry["actions"]),
            )
            seeded += 1
        return seeded

    def frequent_patterns(self) -> List[str]:
        """Keys observed at least ``PATTERN_THRESHOLD`` times"""
        return [
            key
            for key, pattern in self._patterns.items()
            if pattern.frequency >= self.pattern_threshold
        ]

    def predict_next_action(self, page: str, action: str) -> List[str]:
        """
        Rank likely next actions.

        Every trusted pattern whose key contains ``action`` votes for each of
        its associated actions (except ``action`` itself) with its confidence.
        ``page`` is accepted for interface symmetry; key matching is on the
        action only.
        """
        predictions: Dict[str, float] = {}
        for pattern in self._patterns.values():
            if action not in pattern.pattern:
                continue
            if pattern.frequency < self.pattern_threshold:
                continue
            for associated in pattern.associated_actions:
                if associated != action:
                    predictions[associated] = (
                        predictions.get(associated, 0.0) + pattern.confidence
                    )

        # sorted() is stable, so ties keep first-seen order
        ranked = sorted(predictions.items(), key=lambda item: item[1], reverse=True)
        return [name for name, _ in ranked[: self.max_predictions]]

    def export(self) -> List[Tuple[str, LearningPattern]]:
        return [(key, pattern.model_copy(deep=True)) for key, pattern in self._patterns.items()]

    def load(self, pairs: Iterable[Tuple[str, LearningPattern]]) -> None:
        self._patterns.clear()
        for key, pattern in pairs:
            if len(self._patterns) >= self.max_patterns:
                break
            self._patterns[key] = pattern

    def clear(self) -> None:
        self._patterns.clear()
        self.rejected = 0
