"""
Learning pattern model
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LearningPattern(BaseModel):
    """A recurring action key scored by frequency and confidence"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    pattern: str = Field(..., description="Pattern key")
    confidence: float = Field(..., ge=0.0, le=1.0)
    last_seen: datetime = Field(..., description="Last observation time")
    frequency: int = Field(default=1, ge=1)
    associated_actions: List[str] = Field(
        default_factory=list, description="Distinct actions, first-seen order"
    )

    def reinforce(
        self, action: str, seen_at: datetime, step: float, cap: float = 1.0
    ) -> None:
        """Record another observation of this pattern"""
        self.frequency += 1
        self.last_seen = seen_at
        # round() keeps repeated 0.1 steps from drifting past exact tenths
        self.confidence = min(round(self.confidence + step, 10), cap)
        if action not in self.associated_actions:
            self.associated_actions.append(action)
