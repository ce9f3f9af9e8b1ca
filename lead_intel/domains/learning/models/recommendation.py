"""
Adaptive recommendation models
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RecommendationType(str, Enum):
    """Kinds of adaptive recommendation"""

    CONTENT = "content"
    FEATURE = "feature"
    NAVIGATION = "navigation"
    TIMING = "timing"


class AdaptiveRecommendation(BaseModel):
    """A ranked suggestion for the UI"""

    model_config = ConfigDict(frozen=True)

    type: RecommendationType = Field(..., description="Recommendation kind")
    target: str = Field(..., description="Content id, route or feature name")
    reason: str = Field(..., description="Human readable justification")
    confidence: float = Field(..., ge=0.0, le=1.0)
    priority: int = Field(..., description="Higher ranks first")
