"""
Recommendation Engine

Turns the behavior history into interests, habits and a ranked list of
content, navigation, timing and feature suggestions.
"""

from typing import Dict, List, Optional, Sequence, Union

from lead_intel.shared.constants.learning import INTEREST_KEYWORDS, SEARCH_KEYWORDS

from ..models import (
    AdaptiveRecommendation,
    BehaviorEvent,
    RecommendationType,
)


def _ranked_keys(counts: Dict, minimum: int = 0) -> List:
    """Keys sorted by count descending, ties in first-seen order"""
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [key for key, count in ranked if count >= minimum]


class RecommendationEngine:
    """Stateless scoring over a behavior sequence"""

    def __init__(self, learning_settings):
        self.interest_threshold = learning_settings.INTEREST_THRESHOLD
        self.search_interest_threshold = learning_settings.SEARCH_INTEREST_THRESHOLD

    def analyze_interests(self, behaviors: Sequence[BehaviorEvent]) -> List[str]:
        interests: Dict[str, int] = {}
        for behavior in behaviors:
            for interest, keywords in INTEREST_KEYWORDS.items():
                if any(keyword in behavior.action for keyword in keywords):
                    interests[interest] = interests.get(interest, 0) + 1
        return _ranked_keys(interests, self.interest_threshold)

    def analyze_preferred_pages(self, behaviors: Sequence[BehaviorEvent]) -> List[str]:
        visits: Dict[str, int] = {}
        for behavior in behaviors:
            visits[behavior.page] = visits.get(behavior.page, 0) + 1
        return _ranked_keys(visits)

    def analyze_optimal_times(self, behaviors: Sequence[BehaviorEvent]) -> List[int]:
        hourly: Dict[int, int] = {}
        for behavior in behaviors:
            hour = behavior.timestamp.hour
            hourly[hour] = hourly.get(hour, 0) + 1
        return _ranked_keys(hourly)

    def detect_search_interest(self, behaviors: Sequence[BehaviorEvent]) -> bool:
        searches = sum(
            1
            for behavior in behaviors
            if any(keyword in behavior.action for keyword in SEARCH_KEYWORDS)
        )
        return searches >= self.search_interest_threshold

    def generate(
        self, behaviors: Sequence[BehaviorEvent]
    ) -> List[AdaptiveRecommendation]:
        """Build the recommendation list from scratch"""
        recommendations: List[AdaptiveRecommendation] = []
        interests = self.analyze_interests(behaviors)

        if "luxury" in interests:
            recommendations.append(
                AdaptiveRecommendation(
                    type=RecommendationType.CONTENT,
                    target="luxury-services",
                    reason="User shows interest in luxury services",
                    confidence=0.8,
                    priority=9,
                )
            )

        if "investment" in interests:
            recommendations.append(
                AdaptiveRecommendation(
                    type=RecommendationType.CONTENT,
                    target="market-insights",
                    reason="User interested in investment data",
                    confidence=0.7,
                    priority=8,
                )
            )

        preferred_pages = self.analyze_preferred_pages(behaviors)
        if preferred_pages:
            recommendations.append(
                AdaptiveRecommendation(
                    type=RecommendationType.NAVIGATION,
                    target=preferred_pages[0],
                    reason="Most visited page",
                    confidence=0.6,
                    priority=5,
                )
            )

        optimal_times = self.analyze_optimal_times(behaviors)
        if optimal_times:
            recommendations.append(
                AdaptiveRecommendation(
                    type=RecommendationType.TIMING,
                    target="tour-display",
                    reason=f"Optimal time: {optimal_times[0]}:00",
                    confidence=0.5,
                    priority=3,
                )
            )

        if self.detect_search_interest(behaviors):
            recommendations.append(
                AdaptiveRecommendation(
                    type=RecommendationType.FEATURE,
                    target="advanced-search",
                    reason="User frequently uses search features",
                    confidence=0.75,
                    priority=7,
                )
            )

        return recommendations

    @staticmethod
    def rank(
        recommendations: Sequence[AdaptiveRecommendation],
        recommendation_type: Optional[Union[str, RecommendationType]] = None,
    ) -> List[AdaptiveRecommendation]:
        """Filter by type when given, highest priority first"""
        filtered = [
            r
            for r in recommendations
            if not recommendation_type or r.type == recommendation_type
        ]
        return sorted(filtered, key=lambda r: r.priority, reverse=True)
