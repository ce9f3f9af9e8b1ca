"""
Tag sink package
"""

from .base import ITagSink
from .factory import create_sink
from .sinks import HttpTagSink, LoggingTagSink, NullTagSink

__all__ = [
    "ITagSink",
    "create_sink",
    "HttpTagSink",
    "LoggingTagSink",
    "NullTagSink",
]
