"""
Shared constants for lead-intel
"""

from .attribution import Channel, EventType

__all__ = ["Channel", "EventType"]
