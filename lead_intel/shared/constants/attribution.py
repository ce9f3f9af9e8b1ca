"""
Attribution and channel classification constants
"""


class Channel:
    """Acquisition channel labels"""

    DIRECT = "direct"
    ORGANIC_SEARCH = "organic_search"
    SOCIAL_MEDIA = "social_media"
    PAID_SEARCH = "paid_search"
    EMAIL = "email"
    REFERRAL = "referral"
    REAL_ESTATE_PORTAL = "real_estate_portal"
    UNKNOWN = "unknown"


class EventType:
    """Analytics event types with a defined meaning in the funnel"""

    PAGE_VIEW = "page_view"
    SCROLL_MILESTONE = "scroll_milestone"
    BUTTON_CLICK = "button_click"
    FORM_FIELD_FOCUS = "form_field_focus"
    FORM_SUBMIT = "form_submit"
    OUTBOUND_LINK_CLICK = "outbound_link_click"
    CONVERSION = "conversion"
    USER_LOGIN = "user_login"


# History bounds
MAX_EVENTS = 10000
PERSISTED_EVENTS = 1000
MAX_EVENT_DATA_KEYS = 32

# Time decay attribution
TIME_DECAY_RATE = 0.5

# utm_source substrings, checked in order
UTM_SOURCE_CHANNELS = [
    (("google", "bing", "yahoo"), Channel.ORGANIC_SEARCH),
    (("facebook", "instagram", "twitter"), Channel.SOCIAL_MEDIA),
    (("email", "mail"), Channel.EMAIL),
]

SEARCH_ENGINE_HOSTS = ("google.com",)
SOCIAL_HOSTS = ("facebook.com", "instagram.com")
REAL_ESTATE_PORTAL_HOSTS = ["zillow.com", "realtor.com"]

# Funnel stage membership
AWARENESS_EVENTS = (EventType.PAGE_VIEW, EventType.SCROLL_MILESTONE)
INTEREST_EVENTS = (EventType.BUTTON_CLICK, EventType.FORM_FIELD_FOCUS)
CONTACT_FORM_MARKER = "contact"

# Device classification
MOBILE_MAX_WIDTH = 768
TABLET_MAX_WIDTH = 1024
DEFAULT_VIEWPORT_WIDTH = 1280

BROWSER_SIGNATURES = [
    ("Chrome", "Chrome"),
    ("Firefox", "Firefox"),
    ("Safari", "Safari"),
    ("Edge", "Edge"),
]

OS_SIGNATURES = [
    ("Windows", "Windows"),
    ("Mac", "macOS"),
    ("Linux", "Linux"),
    ("Android", "Android"),
    ("iOS", "iOS"),
]

UNKNOWN_AGENT = "Unknown"
DEFAULT_CURRENCY = "USD"
