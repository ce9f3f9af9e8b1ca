"""
Shared fixtures for lead-intel tests
"""

from datetime import datetime, timedelta, timezone

import pytest

from lead_intel.core.config import (
    AnalyticsSettings,
    LearningSettings,
    Settings,
    SinkSettings,
    StorageSettings,
)
from lead_intel.core.storage import InMemoryKeyValueStore
from lead_intel.domains.analytics.models import NavigationContext
from lead_intel.domains.analytics.services import EnhancedAnalyticsEngine
from lead_intel.domains.learning.services import AdaptiveLearningEngine


class FakeClock:
    """Deterministic clock; ``advance`` moves time forward"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def build_settings(**sections) -> Settings:
    """Settings isolated from the environment's storage and sink choices"""
    defaults = {
        "storage": StorageSettings(BACKEND="memory", SCOPE="test"),
        "sink": SinkSettings(BACKEND="none"),
    }
    defaults.update(sections)
    return Settings(**defaults)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 5, 1, 14, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def settings():
    return build_settings()


@pytest.fixture
def unseeded_settings():
    return build_settings(learning=LearningSettings(SEED_DEFAULT_PATTERNS=False))


@pytest.fixture
def quiet_settings():
    """No initial page view, small persisted tails"""
    return build_settings(
        analytics=AnalyticsSettings(TRACK_INITIAL_PAGE_VIEW=False, PERSISTED_EVENTS=10),
        learning=LearningSettings(SEED_DEFAULT_PATTERNS=False),
    )


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def learning_engine(store, unseeded_settings, clock):
    return AdaptiveLearningEngine(store=store, settings=unseeded_settings, clock=clock)


@pytest.fixture
def analytics_engine(store, settings, clock):
    return EnhancedAnalyticsEngine(
        store=store,
        settings=settings,
        clock=clock,
        navigation=NavigationContext(url="https://example-realty.com/"),
    )
