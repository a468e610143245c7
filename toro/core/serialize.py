"""JSON normalization for payloads sent to the browser runtime.

Builders accept the values callers naturally have at hand (numpy arrays
from a DataFrame column, tuples, dates) and normalize them here so every
payload is plain JSON: dict, list, str, int, float, bool, None.
"""

import datetime
import re
from typing import Any

import numpy as np

_CAMEL_BOUNDARY = re.compile(r"_([a-z0-9])")


def to_json_value(value: Any) -> Any:
    """Recursively convert a value to JSON-native Python types.

    Examples:
        to_json_value(np.array([1, 2]))      -> [1, 2]
        to_json_value((0.5, np.float64(1)))  -> [0.5, 1.0]
        to_json_value(date(2025, 1, 31))     -> "2025-01-31"
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, dict):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    if isinstance(value, np.ndarray):
        return [to_json_value(v) for v in value.tolist()]
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    raise TypeError(f"Cannot serialize {type(value).__name__} for the map runtime")


def to_camel_case(name: str) -> str:
    """Translate a snake_case option name to camelCase.

    Names already in camelCase pass through unchanged, so create_map() accepts
    both min_zoom=4 and minZoom=4.
    """
    return _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), name)
