"""
Normalization of caller-supplied event payloads
"""

from typing import Any, Dict, Mapping, Optional

PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def _normalize_value(value: Any) -> Any:
    if isinstance(value, PRIMITIVE_TYPES):
        return value
    if isinstance(value, (list, tuple)) and all(
        isinstance(item, PRIMITIVE_TYPES) for item in value
    ):
        return list(value)
    # Anything nested or exotic is flattened to its string form
    return str(value)


def sanitize_event_data(
    data: Optional[Mapping[Any, Any]], max_keys: int
) -> Dict[str, Any]:
    """
    Flatten a payload into a bounded map of primitive values.

    Keys beyond ``max_keys`` are dropped in insertion order. Non-mapping
    payloads are stored under a single ``value`` key.
    """
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        return {"value": _normalize_value(data)}

    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if len(sanitized) >= max_keys:
            break
        sanitized[str(key)] = _normalize_value(value)
    return sanitized


def coerce_label(value: Any) -> str:
    """Coerce an action or page identifier to a string"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
