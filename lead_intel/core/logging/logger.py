"""
Main logging module for lead-intel
"""

import logging
from typing import Any, Dict, Optional

from .config import LoggingConfig
from .handlers import ConsoleHandler, FileHandler

# Global logger cache
_loggers: Dict[str, logging.Logger] = {}


class StructuredLogger:
    """Wrapper around standard Python logger that supports structured logging with keyword arguments"""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured data as key=value pairs"""
        if not kwargs:
            return message

        structured_parts = []
        for key, value in kwargs.items():
            if value is None:
                continue
            if isinstance(value, (dict, list)):
                structured_parts.append(f"{key}={str(value)}")
            elif isinstance(value, str) and " " in value:
                structured_parts.append(f'{key}="{value}"')
            else:
                structured_parts.append(f"{key}={value}")

        if structured_parts:
            return f"{message} | {' | '.join(structured_parts)}"
        return message

    def _extra(self, kwargs) -> Dict[str, Any]:
        """Non-null fields, attached to the record for the JSON formatter"""
        return {"extra_fields": {k: v for k, v in kwargs.items() if v is not None}}

    def debug(self, message: str, **kwargs):
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                self._format_message(message, **kwargs), extra=self._extra(kwargs)
            )

    def info(self, message: str, **kwargs):
        self._logger.info(self._format_message(message, **kwargs), extra=self._extra(kwargs))

    def warning(self, message: str, **kwargs):
        self._logger.warning(
            self._format_message(message, **kwargs), extra=self._extra(kwargs)
        )

    def error(self, message: str, **kwargs):
        self._logger.error(self._format_message(message, **kwargs), extra=self._extra(kwargs))

    def exception(self, message: str, **kwargs):
        self._logger.exception(
            self._format_message(message, **kwargs), extra=self._extra(kwargs)
        )

    def log(self, level: int, message: str, **kwargs):
        self._logger.log(level, self._format_message(message, **kwargs), extra=self._extra(kwargs))


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Setup logging configuration for the application"""
    if config is None:
        config = LoggingConfig()

    level = getattr(logging, config.level.upper(), logging.INFO)

    # Only the package logger is configured, the host application owns the root
    package_logger = logging.getLogger("lead_intel")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level)
    package_logger.propagate = False

    if config.file.enabled:
        package_logger.addHandler(
            FileHandler.create_app_handler(
                log_dir=config.file.log_dir,
                max_bytes=config.file.max_file_size,
                backup_count=config.file.backup_count,
                level=level,
                formatter_type=config.format,
            )
        )
        if config.file.error_log_enabled:
            package_logger.addHandler(
                FileHandler.create_error_handler(
                    log_dir=config.file.log_dir,
                    max_bytes=config.file.max_file_size,
                    backup_count=config.file.backup_count,
                    formatter_type=config.format,
                )
            )

    if config.console.enabled:
        package_logger.addHandler(
            ConsoleHandler.create_handler(
                level=getattr(logging, config.console.level.upper(), logging.INFO),
                formatter_type=config.format,
            )
        )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    package_logger.debug("Logging system initialized")


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance"""
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return StructuredLogger(_loggers[name])
