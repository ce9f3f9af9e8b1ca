"""
Persisted analytics snapshot
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .attribution_event import AttributionEvent


class AnalyticsSnapshot(BaseModel):
    """``{events[], sessionId, userId, lastUpdated}``"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    events: List[AttributionEvent] = Field(default_factory=list)
    session_id: Optional[str] = None
    user_id: Optional[str] = None
    last_updated: Optional[datetime] = None
