"""
Attribution Engine

Funnel, multi-model attribution, channel performance and page statistics.
Everything is recomputed from the full event log on demand; nothing here is
maintained incrementally.
"""

import math
from collections import Counter, defaultdict
from typing import Dict, List, Sequence

from lead_intel.shared.constants.attribution import (
    AWARENESS_EVENTS,
    CONTACT_FORM_MARKER,
    INTEREST_EVENTS,
    TIME_DECAY_RATE,
    EventType,
)

from ..models import (
    AttributionEvent,
    AttributionModel,
    ChannelPerformanceRecord,
    ConversionFunnel,
    PageStats,
)


def _is_contact_form_submit(event: AttributionEvent) -> bool:
    form_id = event.event_data.get("formId")
    return (
        event.event_type == EventType.FORM_SUBMIT
        and isinstance(form_id, str)
        and CONTACT_FORM_MARKER in form_id
    )


def _add(credits: Dict[str, float], channel: str, amount: float) -> None:
    credits[channel] = credits.get(channel, 0) + amount


class AttributionEngine:
    """Pure functions over an ordered event log"""

    def __init__(self, decay_rate: float = TIME_DECAY_RATE):
        self.decay_rate = decay_rate

    def conversion_funnel(self, events: Sequence[AttributionEvent]) -> ConversionFunnel:
        """Stage counts; stages are independent, an event may count in several"""
        funnel = ConversionFunnel()
        for event in events:
            if event.event_type in AWARENESS_EVENTS:
                funnel.awareness += 1
            if event.event_type in INTEREST_EVENTS:
                funnel.interest += 1
            if event.event_type == EventType.FORM_SUBMIT:
                funnel.consideration += 1
            if _is_contact_form_submit(event):
                funnel.intent += 1
            if event.is_conversion:
                funnel.purchase += 1
            if event.event_type == EventType.USER_LOGIN:
                funnel.retention += 1
        return funnel

    def touchpoints(
        self, events: Sequence[AttributionEvent], conversion: AttributionEvent
    ) -> List[AttributionEvent]:
        """Same-session events up to the conversion time, ordered by time"""
        path = [
            event
            for event in events
            if event.session_id == conversion.session_id
            and event.timestamp <= conversion.timestamp
        ]
        # Stable sort: equal timestamps keep log order
        return sorted(path, key=lambda event: event.timestamp)

    def attribution_model(self, events: Sequence[AttributionEvent]) -> AttributionModel:
        model = AttributionModel()

        for conversion in (event for event in events if event.is_conversion):
            path = self.touchpoints(events, conversion)
            if not path:
                continue

            _add(model.first_touch, path[0].channel, 1)
            _add(model.last_touch, path[-1].channel, 1)

            unique_channels = list(dict.fromkeys(event.channel for event in path))
            for channel in unique_channels:
                _add(model.multi_touch, channel, 1 / len(unique_channels))

            # Most recent touch weighs 1, each step back decays by exp(-rate)
            last_index = len(path) - 1
            for index, event in enumerate(path):
                weight = math.exp(-self.decay_rate * (last_index - index))
                _add(model.time_decay, event.channel, weight)

        return model

    def channel_performance(
        self, events: Sequence[AttributionEvent]
    ) -> Dict[str, ChannelPerformanceRecord]:
        visits: Counter = Counter()
        conversions: Counter = Counter()
        first_seen = {}
        last_seen = {}

        for event in events:
            channel = event.channel
            first_seen.setdefault(channel, event.timestamp)
            last_seen[channel] = event.timestamp
            if event.event_type == EventType.PAGE_VIEW:
                visits[channel] += 1
            if event.is_conversion:
                conversions[channel] += 1

        performance = {}
        for channel in first_seen:
            channel_visits = visits[channel]
            channel_conversions = conversions[channel]
            performance[channel] = ChannelPerformanceRecord(
                visits=channel_visits,
                conversions=channel_conversions,
                conversion_rate=(
                    channel_conversions / channel_visits * 100 if channel_visits > 0 else 0
                ),
                avg_session_duration=(
                    last_seen[channel] - first_seen[channel]
                ).total_seconds(),
            )
        return performance

    def top_pages(self, events: Sequence[AttributionEvent]) -> List[PageStats]:
        """Page views and bounce rate, most viewed first"""
        session_sizes = Counter(event.session_id for event in events)
        views: Dict[str, int] = defaultdict(int)
        bounces: Dict[str, int] = defaultdict(int)

        for event in events:
            if event.event_type != EventType.PAGE_VIEW:
                continue
            page = event.event_data.get("url") or event.source.landing_page
            page = str(page)
            views[page] += 1
            # A session with a single event of any type is a bounce
            if session_sizes[event.session_id] == 1:
                bounces[page] += 1

        stats = [
            PageStats(
                page=page,
                views=count,
                bounce_rate=bounces[page] / count * 100 if count > 0 else 0,
            )
            for page, count in views.items()
        ]
        return sorted(stats, key=lambda s: s.views, reverse=True)

    @staticmethod
    def user_journey(
        events: Sequence[AttributionEvent], session_id: str
    ) -> List[AttributionEvent]:
        journey = [event for event in events if event.session_id == session_id]
        return sorted(journey, key=lambda event: event.timestamp)
