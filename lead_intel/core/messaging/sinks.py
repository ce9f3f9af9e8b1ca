"""
Tag sink implementations
"""

from typing import Any, Dict, Optional

import httpx

from lead_intel.core.exceptions import SinkError
from lead_intel.core.logging import get_logger
from lead_intel.domains.analytics.models import AttributionEvent
from lead_intel.shared.constants.app import (
    DEFAULT_SINK_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_SINK_TIMEOUT_SECONDS,
    PROJECT_NAME,
    VERSION,
)

from .base import ITagSink

logger = get_logger(__name__)


class NullTagSink(ITagSink):
    """Discards everything"""

    def record(self, event: AttributionEvent) -> None:
        return None


class LoggingTagSink(ITagSink):
    """Writes each event to the log at debug level"""

    def record(self, event: AttributionEvent) -> None:
        logger.debug(
            "Tag event",
            name=event.event_type,
            session_id=event.session_id,
            channel=event.channel,
        )


class HttpTagSink(ITagSink):
    """
    Posts events as JSON to a collection endpoint.

    Body shape: ``{"name": <event type>, "params": {...}}`` where params holds
    the flat event data plus session, user and channel identifiers.

    The post runs inline on the tracking call, so a slow endpoint delays
    each tracked event by up to the timeout. Connects are capped tighter
    than reads.
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_SINK_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ):
        self.endpoint = endpoint
        self.timeout = httpx.Timeout(
            timeout, connect=min(timeout, DEFAULT_SINK_CONNECT_TIMEOUT_SECONDS)
        )
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.timeout)

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": f"{PROJECT_NAME}/{VERSION}",
        }

    @staticmethod
    def build_payload(event: AttributionEvent) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            **event.event_data,
            "session_id": event.session_id,
            "channel": event.channel,
            "event_id": event.id,
        }
        if event.user_id:
            params["user_id"] = event.user_id
        if event.source.campaign:
            params["campaign"] = event.source.campaign
        return {"name": event.event_type, "params": params}

    def record(self, event: AttributionEvent) -> None:
        try:
            response = self._client.post(
                self.endpoint,
                json=self.build_payload(event),
                headers=self._get_headers(),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SinkError(
                f"Tag endpoint returned {e.response.status_code}",
                sink="http",
                event_type=event.event_type,
                cause=e,
            )
        except httpx.HTTPError as e:
            raise SinkError(
                f"Tag endpoint unreachable: {e}",
                sink="http",
                event_type=event.event_type,
                cause=e,
            )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
