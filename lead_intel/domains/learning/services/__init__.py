"""
Adaptive learning services
"""

from .adaptive_learning_engine import AdaptiveLearningEngine
from .pattern_analyzer import PatternAnalyzer
from .recommendation_engine import RecommendationEngine

__all__ = ["AdaptiveLearningEngine", "PatternAnalyzer", "RecommendationEngine"]
