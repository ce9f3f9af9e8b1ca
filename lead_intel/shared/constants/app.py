"""
Application constants for lead-intel
"""

PROJECT_NAME = "lead-intel"
VERSION = "0.1.0"

ENV_PREFIX = "LEAD_INTEL_"

# Storage
STORAGE_KEY_PREFIX = "lead_intel"
DEFAULT_STORAGE_SCOPE = "default"
DEFAULT_STORAGE_DIRECTORY = ".lead_intel"
STORAGE_BACKENDS = ["memory", "file", "redis"]

# Tag sink
SINK_BACKENDS = ["none", "log", "http"]
DEFAULT_SINK_TIMEOUT_SECONDS = 0.25
DEFAULT_SINK_CONNECT_TIMEOUT_SECONDS = 0.1

# Snapshot slots
LEARNING_SNAPSHOT_KEY = "adaptive-learning-data"
ANALYTICS_SNAPSHOT_KEY = "enhanced-analytics-data"
