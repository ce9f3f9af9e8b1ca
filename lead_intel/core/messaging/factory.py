"""
Tag sink construction from settings
"""

from lead_intel.core.exceptions import ConfigurationError

from .base import ITagSink
from .sinks import HttpTagSink, LoggingTagSink, NullTagSink


def create_sink(sink_settings) -> ITagSink:
    """Build the tag sink selected by ``sink_settings.BACKEND``"""
    backend = sink_settings.BACKEND
    if backend == "none":
        return NullTagSink()
    if backend == "log":
        return LoggingTagSink()
    if backend == "http":
        if not sink_settings.ENDPOINT:
            raise ConfigurationError(
                "HTTP tag sink requires an endpoint",
                setting="sink.ENDPOINT",
                value=sink_settings.ENDPOINT,
            )
        return HttpTagSink(sink_settings.ENDPOINT, sink_settings.TIMEOUT_SECONDS)
    raise ConfigurationError(
        f"Unsupported tag sink backend: {backend}",
        setting="sink.BACKEND",
        value=backend,
    )
