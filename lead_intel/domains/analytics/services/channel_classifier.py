"""
Acquisition channel classification
"""

from typing import Iterable, Optional
from urllib.parse import urlsplit

from lead_intel.shared.constants.attribution import (
    REAL_ESTATE_PORTAL_HOSTS,
    SEARCH_ENGINE_HOSTS,
    SOCIAL_HOSTS,
    UTM_SOURCE_CHANNELS,
    Channel,
)


def referrer_host(referrer: str) -> str:
    """Lowercased host of a referrer; bare hosts without a scheme are accepted"""
    candidate = referrer.strip()
    if "//" not in candidate:
        candidate = f"//{candidate}"
    try:
        return (urlsplit(candidate).hostname or "").lower()
    except ValueError:
        return ""


class ChannelClassifier:
    """
    Classifies an event's channel, in precedence order:

    1. ``utm_source`` present: substring match on the source name
    2. referrer present: host match
    3. neither: direct
    """

    def __init__(self, portal_hosts: Optional[Iterable[str]] = None):
        self.portal_hosts = tuple(
            host.lower()
            for host in (
                portal_hosts if portal_hosts is not None else REAL_ESTATE_PORTAL_HOSTS
            )
        )

    def classify(self, utm_source: Optional[str], referrer: Optional[str]) -> str:
        if not referrer and utm_source is None:
            return Channel.DIRECT

        if utm_source is not None:
            return self._classify_utm_source(utm_source)

        if referrer:
            return self._classify_referrer(referrer)

        return Channel.UNKNOWN

    def _classify_utm_source(self, utm_source: str) -> str:
        source = utm_source.lower()
        for needles, channel in UTM_SOURCE_CHANNELS:
            if any(needle in source for needle in needles):
                return channel
        # Tagged traffic from an unrecognized source is treated as paid
        return Channel.PAID_SEARCH

    def _classify_referrer(self, referrer: str) -> str:
        host = referrer_host(referrer)
        if not host:
            return Channel.REFERRAL
        if any(known in host for known in SEARCH_ENGINE_HOSTS):
            return Channel.ORGANIC_SEARCH
        if any(known in host for known in SOCIAL_HOSTS):
            return Channel.SOCIAL_MEDIA
        if any(known in host for known in self.portal_hosts):
            return Channel.REAL_ESTATE_PORTAL
        return Channel.REFERRAL
