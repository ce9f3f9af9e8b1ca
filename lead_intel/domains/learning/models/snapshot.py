"""
Persisted adaptive learning snapshot
"""

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .behavior import BehaviorEvent
from .pattern import LearningPattern
from .recommendation import AdaptiveRecommendation


class LearningSnapshot(BaseModel):
    """``{behaviors[], patterns[[key, value]], recommendations[], lastUpdated}``"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    behaviors: List[BehaviorEvent] = Field(default_factory=list)
    patterns: List[Tuple[str, LearningPattern]] = Field(default_factory=list)
    recommendations: List[AdaptiveRecommendation] = Field(default_factory=list)
    last_updated: Optional[datetime] = None
