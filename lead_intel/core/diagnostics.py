"""
Failure bookkeeping for engines that degrade instead of raising
"""

from datetime import datetime
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field

from lead_intel.core.exceptions import LeadIntelException
from lead_intel.core.logging import get_logger

logger = get_logger(__name__)


class EngineDiagnostics(BaseModel):
    """Read-only health view of one engine"""

    engine: str = Field(..., description="Engine name")
    records: int = Field(default=0, description="Records currently held in memory")
    evicted: int = Field(default=0, description="Records dropped by FIFO eviction")
    failures: int = Field(default=0, description="Persistence failures so far")
    sink_failures: int = Field(default=0, description="Tag sink failures so far")
    last_error: Optional[Dict[str, Any]] = Field(
        default=None, description="Most recent persistence error"
    )
    last_error_at: Optional[datetime] = None


class DiagnosticsRecorder:
    """Logs persistence failures as warnings and keeps the last one for inspection"""

    def __init__(self, engine_name: str, clock: Callable[[], datetime]):
        self.engine_name = engine_name
        self._clock = clock
        self.failures = 0
        self.sink_failures = 0
        self.last_error: Optional[LeadIntelException] = None
        self.last_error_at: Optional[datetime] = None

    def record_failure(self, operation: str, error: LeadIntelException) -> None:
        self.failures += 1
        self.last_error = error
        self.last_error_at = self._clock()
        logger.warning(
            f"Failed to {operation} {self.engine_name} data",
            error=error.message,
            error_code=error.error_code,
            cause=str(error.cause) if error.cause else None,
        )

    def record_sink_failure(self, event_type: str, error: Exception) -> None:
        self.sink_failures += 1
        logger.warning(
            "Tag sink rejected event",
            engine=self.engine_name,
            event_type=event_type,
            error=str(error),
        )

    def snapshot(self, records: int, evicted: int) -> EngineDiagnostics:
        return EngineDiagnostics(
            engine=self.engine_name,
            records=records,
            evicted=evicted,
            failures=self.failures,
            sink_failures=self.sink_failures,
            last_error=self.last_error.to_dict() if self.last_error else None,
            last_error_at=self.last_error_at,
        )
