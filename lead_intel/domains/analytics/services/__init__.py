"""
Attribution analytics services
"""

from .analytics_engine import EnhancedAnalyticsEngine
from .attribution_engine import AttributionEngine
from .channel_classifier import ChannelClassifier, referrer_host
from .device_classifier import DeviceClassifier
from .session_context import SessionContext
from .tag_events import TagEventTracker

__all__ = [
    "EnhancedAnalyticsEngine",
    "AttributionEngine",
    "ChannelClassifier",
    "referrer_host",
    "DeviceClassifier",
    "SessionContext",
    "TagEventTracker",
]
