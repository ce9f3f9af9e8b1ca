"""
Device, browser and operating system classification
"""

from lead_intel.shared.constants.attribution import (
    BROWSER_SIGNATURES,
    MOBILE_MAX_WIDTH,
    OS_SIGNATURES,
    TABLET_MAX_WIDTH,
    UNKNOWN_AGENT,
)

from ..models import DeviceInfo


class DeviceClassifier:
    """Viewport breakpoints plus first-match user agent signatures"""

    def __init__(
        self, mobile_max_width: int = MOBILE_MAX_WIDTH, tablet_max_width: int = TABLET_MAX_WIDTH
    ):
        self.mobile_max_width = mobile_max_width
        self.tablet_max_width = tablet_max_width

    def device_type(self, viewport_width: int) -> str:
        if viewport_width <= self.mobile_max_width:
            return "mobile"
        if viewport_width <= self.tablet_max_width:
            return "tablet"
        return "desktop"

    @staticmethod
    def browser(user_agent: str) -> str:
        for signature, name in BROWSER_SIGNATURES:
            if signature in user_agent:
                return name
        return UNKNOWN_AGENT

    @staticmethod
    def operating_system(user_agent: str) -> str:
        for signature, name in OS_SIGNATURES:
            if signature in user_agent:
                return name
        return UNKNOWN_AGENT

    def classify(self, viewport_width: int, user_agent: str) -> DeviceInfo:
        return DeviceInfo(
            type=self.device_type(viewport_width),
            browser=self.browser(user_agent),
            os=self.operating_system(user_agent),
        )
