"""
Attribution event model
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class SourceInfo(_CamelModel):
    """Acquisition source, classified once at event creation"""

    channel: str = Field(..., description="Acquisition channel label")
    campaign: Optional[str] = Field(None, description="utm_campaign value")
    referrer: Optional[str] = Field(None, description="Document referrer")
    landing_page: str = Field(..., description="Path the event happened on")


class DeviceInfo(_CamelModel):
    """Coarse client classification"""

    type: str = Field(..., description="mobile, tablet or desktop")
    browser: str = Field(..., description="Browser family")
    os: str = Field(..., description="Operating system family")


class LocationInfo(_CamelModel):
    """Geographic location (not resolved by the core)"""

    country: str
    region: str
    city: str


class AttributionEvent(_CamelModel):
    """One interaction recorded for marketing attribution"""

    id: str = Field(..., description="Unique event identifier")
    timestamp: datetime = Field(..., description="Event time")
    session_id: str = Field(..., description="Session identifier")
    user_id: Optional[str] = Field(None, description="External user identifier")
    event_type: str = Field(..., description="Event type label")
    event_data: Dict[str, Any] = Field(
        default_factory=dict, description="Flat map of primitive values"
    )
    source: SourceInfo
    device: DeviceInfo
    location: Optional[LocationInfo] = None

    @property
    def is_conversion(self) -> bool:
        return self.event_data.get("conversion") is True

    @property
    def channel(self) -> str:
        return self.source.channel
