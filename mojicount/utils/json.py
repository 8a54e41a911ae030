"""JSON helpers for values kept in the kv_store table."""

import json
from typing import Any


def parse_json_object(raw: str | dict | None) -> dict[str, Any] | None:
    """Parse a stored JSON object, returning None on failure.

    Returns None for: None, empty string, invalid JSON, non-object JSON.
    An empty object is returned as ``{}`` so callers can merge it over defaults.
    """
    if raw is None:
        return None
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, str):
        if not raw:
            return None
        try:
            parsed = json.loads(raw)
        except (ValueError, TypeError):
            return None
        if isinstance(parsed, dict):
            return parsed
    return None


def dump_json(value: Any, *, indent: int | None = None) -> str:
    """Serialize without escaping non-ASCII, so Japanese text stays readable."""
    return json.dumps(value, ensure_ascii=False, indent=indent)
