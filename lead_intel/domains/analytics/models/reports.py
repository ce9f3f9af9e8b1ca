"""
Derived analytics reports
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConversionFunnel(_ReportModel):
    """Independent event counts per funnel stage"""

    awareness: int = 0
    interest: int = 0
    consideration: int = 0
    intent: int = 0
    purchase: int = 0
    retention: int = 0


class AttributionModel(_ReportModel):
    """Credit per channel under four attribution models"""

    first_touch: Dict[str, float] = Field(default_factory=dict)
    last_touch: Dict[str, float] = Field(default_factory=dict)
    multi_touch: Dict[str, float] = Field(default_factory=dict)
    time_decay: Dict[str, float] = Field(default_factory=dict)


class ChannelPerformanceRecord(_ReportModel):
    visits: int = 0
    conversions: int = 0
    conversion_rate: float = 0.0
    avg_session_duration: float = Field(0.0, description="Seconds")


class PageStats(_ReportModel):
    page: str
    views: int
    bounce_rate: float


class AnalyticsReport(_ReportModel):
    conversion_funnel: ConversionFunnel
    attribution_model: AttributionModel
    channel_performance: Dict[str, ChannelPerformanceRecord]
    top_pages: List[PageStats]
    total_events: int
    unique_sessions: int
