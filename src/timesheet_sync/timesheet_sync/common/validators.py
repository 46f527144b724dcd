from __future__ import annotations

import json
from typing import Any

from ..core.exceptions import ConfigurationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ConfigurationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_int(value: Any, field_name: str, *, allow_zero: bool = False) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{field_name} must be an integer, got {value!r}") from None
    if number < 0 or (number == 0 and not allow_zero):
        raise ConfigurationError(f"{field_name} must be {'>= 0' if allow_zero else '> 0'}, got {number}")
    return number


def require_json_object(value: Any, field_name: str) -> dict[str, str]:
    """Decode a JSON object of string -> string (e.g. USER_GROUP_MAP)."""
    if isinstance(value, dict):
        data = value
    else:
        try:
            data = json.loads(value or "{}")
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"{field_name} is not valid JSON: {exc}") from None
    if not isinstance(data, dict):
        raise ConfigurationError(f"{field_name} must be a JSON object")
    for key, item in data.items():
        if not isinstance(key, str) or not isinstance(item, str) or not item.strip():
            raise ConfigurationError(f"{field_name} entry {key!r} must map to a non-empty string")
    return dict(data)


TRUE_FLAGS = {"1", "true", "yes", "on"}
FALSE_FLAGS = {"0", "false", "no", "off", ""}


def require_flag(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = "" if value is None else str(value).strip().lower()
    if text in TRUE_FLAGS:
        return True
    if text in FALSE_FLAGS:
        return False
    raise ConfigurationError(f"{field_name} must be a flag (1/0, true/false), got {value!r}")
