"""
Attribution analytics models
"""

from .attribution_event import AttributionEvent, DeviceInfo, LocationInfo, SourceInfo
from .event_kinds import (
    ButtonClick,
    Conversion,
    FormFieldFocus,
    FormSubmit,
    OutboundLinkClick,
    PageView,
    ScrollMilestone,
    TrackedEvent,
    TrackedEventBase,
    UserLogin,
)
from .navigation import NavigationContext
from .reports import (
    AnalyticsReport,
    AttributionModel,
    ChannelPerformanceRecord,
    ConversionFunnel,
    PageStats,
)
from .snapshot import AnalyticsSnapshot

__all__ = [
    "AttributionEvent",
    "DeviceInfo",
    "LocationInfo",
    "SourceInfo",
    "ButtonClick",
    "Conversion",
    "FormFieldFocus",
    "FormSubmit",
    "OutboundLinkClick",
    "PageView",
    "ScrollMilestone",
    "TrackedEvent",
    "TrackedEventBase",
    "UserLogin",
    "NavigationContext",
    "AnalyticsReport",
    "AttributionModel",
    "ChannelPerformanceRecord",
    "ConversionFunnel",
    "PageStats",
    "AnalyticsSnapshot",
]
