"""
lead-intel: behavioral learning and marketing attribution core
"""

from lead_intel.core.config import Settings
from lead_intel.domains.analytics.models import NavigationContext
from lead_intel.domains.analytics.services import EnhancedAnalyticsEngine
from lead_intel.domains.intelligence import (
    BehavioralIntelligence,
    InProcessEventSource,
    Interaction,
)
from lead_intel.domains.learning.services import AdaptiveLearningEngine
from lead_intel.shared.constants.app import VERSION

__version__ = VERSION

__all__ = [
    "AdaptiveLearningEngine",
    "BehavioralIntelligence",
    "EnhancedAnalyticsEngine",
    "InProcessEventSource",
    "Interaction",
    "NavigationContext",
    "Settings",
]
