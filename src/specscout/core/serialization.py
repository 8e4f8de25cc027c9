"""JSON serialization utilities for specscout.

Output is deterministic: keys keep model field order and nothing depends on
wall-clock time, so the same document always renders to the same bytes.
"""

import json
from typing import Any

from pydantic import BaseModel


def to_json(obj: Any, pretty: bool = True, sort_keys: bool = False) -> str:
    """Convert an object to a JSON string.

    Args:
        obj: Model, dict, list or primitive to serialize
        pretty: Whether to pretty-print with indentation (default: True)
        sort_keys: Whether to sort dictionary keys (default: False)

    Returns:
        JSON string representation

    Example:
        >>> from specscout.core.models import HealthCheckStatus
        >>> to_json(HealthCheckStatus(ok=True, latency_ms=12), pretty=False)
        '{"ok": true, "latencyMs": 12}'
    """
    data = to_serializable(obj)

    if pretty:
        return json.dumps(data, indent=2, sort_keys=sort_keys, ensure_ascii=False)
    else:
        return json.dumps(data, sort_keys=sort_keys, ensure_ascii=False)


def to_serializable(obj: Any) -> Any:
    """Convert an object to a JSON-serializable format.

    - Pydantic models -> camelCase dict
    - Lists, tuples -> list
    - Dicts -> dict (with serialized values)
    - Primitives (str, int, float, bool, None) -> as-is
    """
    if obj is None:
        return None

    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True, mode="json")

    if isinstance(obj, dict):
        return {key: to_serializable(value) for key, value in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [to_serializable(item) for item in obj]

    if isinstance(obj, (str, int, float, bool)):
        return obj

    return str(obj)
