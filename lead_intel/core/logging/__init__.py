"""
Logging module for lead-intel
"""

from .logger import get_logger, setup_logging, StructuredLogger
from .formatters import JSONFormatter, ConsoleFormatter, SimpleFormatter
from .handlers import FileHandler, ConsoleHandler
from .config import LoggingConfig

__all__ = [
    "get_logger",
    "setup_logging",
    "StructuredLogger",
    "JSONFormatter",
    "ConsoleFormatter",
    "SimpleFormatter",
    "FileHandler",
    "ConsoleHandler",
    "LoggingConfig",
]
