"""
Adaptive learning constants
"""

# History and pattern bounds
MAX_BEHAVIORS = 1000
PERSISTED_BEHAVIORS = 100
MAX_PATTERNS = 100
PATTERN_THRESHOLD = 3  # minimum occurrences before a pattern is trusted
SEQUENCE_WINDOW = 10
SEQUENCE_SEPARATOR = " -> "

# Confidence scoring
INITIAL_CONFIDENCE = 0.1
CONFIDENCE_STEP = 0.1
MAX_CONFIDENCE = 1.0
SEED_CONFIDENCE = 0.3

# Interest detection
INTEREST_THRESHOLD = 2
SEARCH_INTEREST_THRESHOLD = 3
MAX_PREDICTIONS = 3

INTEREST_KEYWORDS = {
    "luxury": ("luxury", "concierge"),
    "investment": ("investment", "market"),
    "search": ("search", "filter"),
    "location": ("neighborhood", "location"),
}

SEARCH_KEYWORDS = ("search", "filter")

# Bootstrap patterns seeded into an empty engine
DEFAULT_PATTERNS = [
    {"key": "/listings:view_property", "actions": ["contact_agent", "schedule_tour"]},
    {
        "key": "/neighborhoods:view_area",
        "actions": ["search_properties", "contact_agent"],
    },
    {"key": "search:filter_applied", "actions": ["view_property", "save_search"]},
    {"key": "tour_completed", "actions": ["view_listings", "contact_concierge"]},
]
