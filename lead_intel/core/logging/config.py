"""
Logging configuration for lead-intel
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass
class FileHandlerConfig:
    """File handler configuration"""

    enabled: bool = False
    log_dir: str = "logs"
    max_file_size: int = 10485760  # 10MB
    backup_count: int = 5
    error_log_enabled: bool = True


@dataclass
class ConsoleHandlerConfig:
    """Console handler configuration"""

    enabled: bool = True
    level: str = "INFO"


class LoggingConfig(BaseModel):
    """Complete logging configuration"""

    level: str = "INFO"
    format: str = "console"  # json or console

    file: FileHandlerConfig = Field(default_factory=FileHandlerConfig)
    console: ConsoleHandlerConfig = Field(default_factory=ConsoleHandlerConfig)

    @classmethod
    def from_settings(cls, logging_settings) -> "LoggingConfig":
        """Build a logging config from the LoggingSettings section"""
        return cls(
            level=logging_settings.LEVEL,
            format=logging_settings.FORMAT,
            file=FileHandlerConfig(
                enabled=logging_settings.FILE_ENABLED,
                log_dir=logging_settings.DIRECTORY,
                max_file_size=logging_settings.MAX_FILE_SIZE,
                backup_count=logging_settings.BACKUP_COUNT,
            ),
            console=ConsoleHandlerConfig(level=logging_settings.LEVEL),
        )
