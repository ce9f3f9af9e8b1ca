"""
Application settings and configuration management
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lead_intel.shared.constants import app as app_constants
from lead_intel.shared.constants import attribution as attribution_constants
from lead_intel.shared.constants import learning as learning_constants
from lead_intel.core.exceptions import ConfigurationError


class LearningSettings(BaseSettings):
    """Adaptive learning (patterns and recommendations) settings"""

    model_config = SettingsConfigDict(env_prefix="LEAD_INTEL_LEARNING_")

    MAX_BEHAVIORS: int = Field(default=learning_constants.MAX_BEHAVIORS, gt=0)
    PERSISTED_BEHAVIORS: int = Field(
        default=learning_constants.PERSISTED_BEHAVIORS, ge=0
    )
    MAX_PATTERNS: int = Field(default=learning_constants.MAX_PATTERNS, gt=0)
    PATTERN_THRESHOLD: int = Field(default=learning_constants.PATTERN_THRESHOLD, ge=1)
    INITIAL_CONFIDENCE: float = Field(
        default=learning_constants.INITIAL_CONFIDENCE, ge=0.0, le=1.0
    )
    CONFIDENCE_STEP: float = Field(
        default=learning_constants.CONFIDENCE_STEP, ge=0.0, le=1.0
    )
    SEQUENCE_WINDOW: int = Field(default=learning_constants.SEQUENCE_WINDOW, ge=2)
    INTEREST_THRESHOLD: int = Field(
        default=learning_constants.INTEREST_THRESHOLD, ge=1
    )
    SEARCH_INTEREST_THRESHOLD: int = Field(
        default=learning_constants.SEARCH_INTEREST_THRESHOLD, ge=1
    )
    MAX_PREDICTIONS: int = Field(default=learning_constants.MAX_PREDICTIONS, ge=1)
    SEED_DEFAULT_PATTERNS: bool = Field(default=True)


class AnalyticsSettings(BaseSettings):
    """Attribution analytics settings"""

    model_config = SettingsConfigDict(env_prefix="LEAD_INTEL_ANALYTICS_")

    MAX_EVENTS: int = Field(default=attribution_constants.MAX_EVENTS, gt=0)
    PERSISTED_EVENTS: int = Field(default=attribution_constants.PERSISTED_EVENTS, ge=0)
    TIME_DECAY_RATE: float = Field(default=attribution_constants.TIME_DECAY_RATE, ge=0.0)
    MAX_EVENT_DATA_KEYS: int = Field(
        default=attribution_constants.MAX_EVENT_DATA_KEYS, gt=0
    )
    MOBILE_MAX_WIDTH: int = Field(default=attribution_constants.MOBILE_MAX_WIDTH)
    TABLET_MAX_WIDTH: int = Field(default=attribution_constants.TABLET_MAX_WIDTH)
    REAL_ESTATE_PORTALS: List[str] = Field(
        default_factory=lambda: list(attribution_constants.REAL_ESTATE_PORTAL_HOSTS)
    )
    TRACK_INITIAL_PAGE_VIEW: bool = Field(default=True)


class StorageSettings(BaseSettings):
    """Snapshot storage settings"""

    model_config = SettingsConfigDict(env_prefix="LEAD_INTEL_STORAGE_")

    BACKEND: str = Field(default="memory")
    SCOPE: str = Field(default=app_constants.DEFAULT_STORAGE_SCOPE)
    DIRECTORY: str = Field(default=app_constants.DEFAULT_STORAGE_DIRECTORY)

    REDIS_HOST: str = Field(default="localhost")
    REDIS_PORT: int = Field(default=6379)
    REDIS_DB: int = Field(default=0)
    REDIS_PASSWORD: str = Field(default="")
    REDIS_TLS: bool = Field(default=False)

    @field_validator("BACKEND")
    @classmethod
    def validate_backend(cls, v):
        v = (v or "memory").lower()
        if v not in app_constants.STORAGE_BACKENDS:
            raise ValueError(
                f"Storage backend must be one of {app_constants.STORAGE_BACKENDS}"
            )
        return v

    @field_validator("SCOPE")
    @classmethod
    def validate_scope(cls, v):
        if not v:
            return app_constants.DEFAULT_STORAGE_SCOPE
        return v


class SinkSettings(BaseSettings):
    """Tag sink (external analytics mirroring) settings"""

    model_config = SettingsConfigDict(env_prefix="LEAD_INTEL_SINK_")

    BACKEND: str = Field(default="none")
    ENDPOINT: Optional[str] = Field(default=None)
    TIMEOUT_SECONDS: float = Field(
        default=app_constants.DEFAULT_SINK_TIMEOUT_SECONDS, gt=0
    )

    @field_validator("BACKEND")
    @classmethod
    def validate_backend(cls, v):
        v = (v or "none").lower()
        if v not in app_constants.SINK_BACKENDS:
            raise ValueError(f"Sink backend must be one of {app_constants.SINK_BACKENDS}")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration settings"""

    model_config = SettingsConfigDict(env_prefix="LEAD_INTEL_LOG_")

    LEVEL: str = Field(default="INFO")
    FORMAT: str = Field(default="console")
    FILE_ENABLED: bool = Field(default=False)
    DIRECTORY: str = Field(default="logs")
    MAX_FILE_SIZE: int = Field(default=10485760)  # 10MB
    BACKUP_COUNT: int = Field(default=5)
    SLOW_CALL_THRESHOLD_MS: float = Field(default=50.0)


class Settings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_prefix=app_constants.ENV_PREFIX,
        env_file=[".env.local", ".env"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    PROJECT_NAME: str = app_constants.PROJECT_NAME
    VERSION: str = app_constants.VERSION
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="development")

    # Sub-settings
    learning: LearningSettings = Field(default_factory=LearningSettings)
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    sink: SinkSettings = Field(default_factory=SinkSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def validate_configuration(self) -> None:
        """Validate cross-field constraints of the complete configuration"""
        if self.learning.PERSISTED_BEHAVIORS > self.learning.MAX_BEHAVIORS:
            raise ConfigurationError(
                "Persisted behavior tail cannot exceed the in-memory bound",
                setting="learning.PERSISTED_BEHAVIORS",
                value=self.learning.PERSISTED_BEHAVIORS,
            )
        if self.analytics.PERSISTED_EVENTS > self.analytics.MAX_EVENTS:
            raise ConfigurationError(
                "Persisted event tail cannot exceed the in-memory bound",
                setting="analytics.PERSISTED_EVENTS",
                value=self.analytics.PERSISTED_EVENTS,
            )
        if self.analytics.MOBILE_MAX_WIDTH > self.analytics.TABLET_MAX_WIDTH:
            raise ConfigurationError(
                "Mobile width breakpoint must not exceed the tablet breakpoint",
                setting="analytics.MOBILE_MAX_WIDTH",
                value=self.analytics.MOBILE_MAX_WIDTH,
            )
        if self.sink.BACKEND == "http" and not self.sink.ENDPOINT:
            raise ConfigurationError(
                "HTTP tag sink requires an endpoint",
                setting="sink.ENDPOINT",
                value=self.sink.ENDPOINT,
            )


# Create settings instance
settings = Settings()

# Validate configuration on import
settings.validate_configuration()
