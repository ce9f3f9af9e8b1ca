"""
Behavior event model for adaptive learning
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BehaviorEvent(BaseModel):
    """One user interaction recorded for pattern learning"""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    timestamp: datetime = Field(..., description="When the action happened")
    action: str = Field(..., description="Short free-text action label")
    page: str = Field(..., description="Route path the action happened on")
    element: Optional[str] = Field(None, description="UI element identifier")
    data: Dict[str, Any] = Field(
        default_factory=dict, description="Flat map of primitive extras"
    )
    duration: Optional[float] = Field(None, description="Duration in seconds")
