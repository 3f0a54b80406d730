"""
Data Utilities Module
Helpers for turning report data into JSON.
"""

import json
from collections.abc import Mapping
from typing import Any


def convert_map_to_object(value: Any) -> Any:
    """Return a plain dict for any mapping; other values come back unchanged."""
    if isinstance(value, Mapping) and not isinstance(value, dict):
        return dict(value)
    return value


def _default(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def jsonify_data(data: Any) -> str:
    """Serialize report data as JSON indented by two spaces."""
    return json.dumps(convert_map_to_object(data), indent=2, default=_default)
