"""
Timing decorators for performance monitoring
"""

import functools
import time
from typing import Any, Callable, Optional

from lead_intel.core.logging import get_logger

logger = get_logger(__name__)


def timing(
    threshold_ms: Optional[float] = None,
    threshold_from: Optional[Callable[[Any], Optional[float]]] = None,
):
    """
    Timing decorator for synchronous functions

    Args:
        threshold_ms: Log warning if execution time exceeds this threshold (in milliseconds)
        threshold_from: Resolve the threshold per call from the bound instance
            (first positional argument). Takes precedence over threshold_ms.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                execution_time = (time.perf_counter() - start_time) * 1000
                threshold = threshold_ms
                if threshold_from is not None and args:
                    threshold = threshold_from(args[0])
                if threshold is not None and execution_time > threshold:
                    logger.warning(
                        "Function execution time exceeded threshold",
                        function=func.__qualname__,
                        execution_time_ms=round(execution_time, 3),
                        threshold_ms=threshold,
                    )

        return wrapper

    return decorator
