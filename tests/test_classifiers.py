"""
Tests for channel and device classification
"""

import pytest

from lead_intel.domains.analytics.services import ChannelClassifier, DeviceClassifier
from lead_intel.shared.constants.attribution import Channel

CHROME_WINDOWS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
FIREFOX_LINUX = "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"


class TestChannelClassifier:
    @pytest.fixture
    def classifier(self):
        return ChannelClassifier()

    @pytest.mark.parametrize(
        "utm_source,expected",
        [
            ("google", Channel.ORGANIC_SEARCH),
            ("Bing_Ads", Channel.ORGANIC_SEARCH),
            ("facebook", Channel.SOCIAL_MEDIA),
            ("twitter", Channel.SOCIAL_MEDIA),
            ("newsletter_email", Channel.EMAIL),
            ("partner_site", Channel.PAID_SEARCH),
        ],
    )
    def test_utm_source(self, classifier, utm_source, expected):
        assert classifier.classify(utm_source, None) == expected

    @pytest.mark.parametrize(
        "referrer,expected",
        [
            ("https://www.google.com/search?q=homes", Channel.ORGANIC_SEARCH),
            ("https://m.facebook.com/", Channel.SOCIAL_MEDIA),
            ("https://www.instagram.com/p/abc", Channel.SOCIAL_MEDIA),
            ("https://www.zillow.com/homedetails/1", Channel.REAL_ESTATE_PORTAL),
            ("www.realtor.com/listing", Channel.REAL_ESTATE_PORTAL),
            ("https://neighborhood-blog.org/post", Channel.REFERRAL),
            ("http://[::1", Channel.REFERRAL),
        ],
    )
    def test_referrer(self, classifier, referrer, expected):
        assert classifier.classify(None, referrer) == expected

    def test_direct_without_source(self, classifier):
        assert classifier.classify(None, None) == Channel.DIRECT
        assert classifier.classify(None, "") == Channel.DIRECT

    def test_utm_source_wins_over_referrer(self, classifier):
        assert (
            classifier.classify("facebook", "https://www.google.com/")
            == Channel.SOCIAL_MEDIA
        )

    def test_custom_portal_hosts(self):
        classifier = ChannelClassifier(["Redfin.com"])

        assert classifier.classify(None, "https://www.redfin.com/x") == Channel.REAL_ESTATE_PORTAL
        assert classifier.classify(None, "https://www.zillow.com/x") == Channel.REFERRAL


class TestDeviceClassifier:
    @pytest.mark.parametrize(
        "width,expected",
        [(375, "mobile"), (768, "mobile"), (769, "tablet"), (1024, "tablet"), (1025, "desktop")],
    )
    def test_breakpoints(self, width, expected):
        assert DeviceClassifier().device_type(width) == expected

    def test_user_agent_signatures(self):
        device = DeviceClassifier().classify(1440, CHROME_WINDOWS)

        assert device.type == "desktop"
        assert device.browser == "Chrome"
        assert device.os == "Windows"

    def test_firefox_on_linux(self):
        device = DeviceClassifier().classify(1440, FIREFOX_LINUX)

        assert device.browser == "Firefox"
        assert device.os == "Linux"

    def test_unknown_agent(self):
        device = DeviceClassifier().classify(1440, "")

        assert device.browser == "Unknown"
        assert device.os == "Unknown"
