"""
Configuration module for lead-intel
"""

from .settings import settings, Settings
from .settings import (
    LearningSettings,
    AnalyticsSettings,
    StorageSettings,
    SinkSettings,
    LoggingSettings,
)

__all__ = [
    "settings",
    "Settings",
    "LearningSettings",
    "AnalyticsSettings",
    "StorageSettings",
    "SinkSettings",
    "LoggingSettings",
]
