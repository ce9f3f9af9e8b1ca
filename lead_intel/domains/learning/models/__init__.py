"""
Adaptive learning models
"""

from .behavior import BehaviorEvent
from .pattern import LearningPattern
from .profile import UserProfile
from .recommendation import AdaptiveRecommendation, RecommendationType
from .snapshot import LearningSnapshot

__all__ = [
    "BehaviorEvent",
    "LearningPattern",
    "UserProfile",
    "AdaptiveRecommendation",
    "RecommendationType",
    "LearningSnapshot",
]
