"""
Derived user profile
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserProfile(BaseModel):
    """Interests and habits derived from the behavior history"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    interests: List[str] = Field(default_factory=list)
    preferred_pages: List[str] = Field(default_factory=list)
    optimal_times: List[int] = Field(default_factory=list)
    behavior_patterns: List[str] = Field(default_factory=list)
