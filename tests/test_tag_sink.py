"""
Tests for tag sink implementations
"""

import json
from datetime import datetime, timezone
from types import SimpleNamespace

import httpx
import pytest

from lead_intel.core.config import SinkSettings
from lead_intel.core.exceptions import ConfigurationError, SinkError
from lead_intel.core.messaging import (
    HttpTagSink,
    LoggingTagSink,
    NullTagSink,
    create_sink,
)
from lead_intel.domains.analytics.models import AttributionEvent, DeviceInfo, SourceInfo

ENDPOINT = "https://tags.example-realty.com/collect"


@pytest.fixture
def event():
    return AttributionEvent(
        id="event_1714564800000_abc123xyz",
        timestamp=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        session_id="session_1714564800000_def456uvw",
        user_id="lead-5",
        event_type="button_click",
        event_data={"buttonText": "Schedule"},
        source=SourceInfo(channel="email", campaign="spring", landing_page="/"),
        device=DeviceInfo(type="desktop", browser="Chrome", os="Windows"),
    )


def _sink_with(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpTagSink(ENDPOINT, client=client)


class TestHttpTagSink:
    def test_posts_event(self, event):
        captured = []

        def handler(request):
            captured.append(request)
            return httpx.Response(204)

        _sink_with(handler).record(event)

        assert len(captured) == 1
        assert str(captured[0].url) == ENDPOINT
        body = json.loads(captured[0].content)
        assert body["name"] == "button_click"
        assert body["params"] == {
            "buttonText": "Schedule",
            "session_id": event.session_id,
            "channel": "email",
            "event_id": event.id,
            "user_id": "lead-5",
            "campaign": "spring",
        }

    def test_error_status_raises_sink_error(self, event):
        sink = _sink_with(lambda request: httpx.Response(503))

        with pytest.raises(SinkError) as exc_info:
            sink.record(event)

        assert exc_info.value.details == {"sink": "http", "event_type": "button_click"}

    def test_transport_error_raises_sink_error(self, event):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(SinkError):
            _sink_with(handler).record(event)

    def test_default_timeouts_stay_short(self):
        sink = HttpTagSink(ENDPOINT)

        assert sink.timeout.read == 0.25
        assert sink.timeout.connect == 0.1
        assert SinkSettings().TIMEOUT_SECONDS == 0.25
        sink.close()

    def test_connect_timeout_never_exceeds_total(self):
        sink = HttpTagSink(ENDPOINT, timeout=0.05)

        assert sink.timeout.connect == 0.05
        assert sink.timeout.read == 0.05
        sink.close()


class TestSinkFactory:
    def test_backends(self):
        assert isinstance(create_sink(SimpleNamespace(BACKEND="none")), NullTagSink)
        assert isinstance(create_sink(SimpleNamespace(BACKEND="log")), LoggingTagSink)
        sink = create_sink(
            SimpleNamespace(BACKEND="http", ENDPOINT=ENDPOINT, TIMEOUT_SECONDS=1.0)
        )
        assert isinstance(sink, HttpTagSink)
        sink.close()

    def test_http_requires_endpoint(self):
        with pytest.raises(ConfigurationError):
            create_sink(SimpleNamespace(BACKEND="http", ENDPOINT=None, TIMEOUT_SECONDS=1.0))

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError):
            create_sink(SimpleNamespace(BACKEND="kafka"))
