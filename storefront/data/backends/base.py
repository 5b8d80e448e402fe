from __future__ import annotations

from typing import Any, Dict, List

from ..errors import ResourceLoadError


def ensure_records(payload: Any, resource: str, source: str) -> List[Dict[str, Any]]:
    """Check that a decoded payload is a JSON array of objects."""
    if not isinstance(payload, list):
        raise ResourceLoadError(resource, source, f"expected a JSON array, got {type(payload).__name__}")
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ResourceLoadError(resource, source, f"item {position} is not a JSON object")
    return payload
