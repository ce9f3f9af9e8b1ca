"""
Behavioral intelligence service facade
"""

from .event_source import IEventSource, InProcessEventSource, Interaction
from .service import BehavioralIntelligence

__all__ = [
    "BehavioralIntelligence",
    "IEventSource",
    "InProcessEventSource",
    "Interaction",
]
