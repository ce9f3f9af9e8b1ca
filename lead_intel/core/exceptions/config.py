"""
Configuration-related exceptions
"""

from typing import Any, Optional

from .base import LeadIntelException


class ConfigurationError(LeadIntelException):
    """Raised when the configuration is invalid or unsupported"""

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None,
        value: Optional[Any] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details={"setting": setting, "value": value},
            cause=cause,
        )
