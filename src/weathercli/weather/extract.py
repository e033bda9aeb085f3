# src/weathercli/weather/extract.py
"""
Field-by-field extraction from provider JSON.

Every helper returns None instead of raising when the value is missing or has
the wrong type, so each metric of a record is tolerated independently.
"""
from __future__ import annotations
from datetime import datetime
from typing import Any

from weathercli.utils.timewindow import from_epoch


def dig(obj: Any, *path: Any) -> Any:
    """
    Walk nested dicts/lists. String steps index dicts, int steps index lists.
    ex) dig(payload, "weather", 0, "main")
    """
    for step in path:
        if isinstance(step, int):
            if not isinstance(obj, list) or not -len(obj) <= step < len(obj):
                return None
            obj = obj[step]
        else:
            if not isinstance(obj, dict):
                return None
            obj = obj.get(step)
        if obj is None:
            return None
    return obj


def as_float(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def as_uint(value: Any) -> int | None:
    """Non-negative JSON integer only. 1012.5 or -3 are rejected."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def as_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def as_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def as_flag(value: Any) -> bool | None:
    """0/1 integer flags (WeatherAPI will_it_rain etc.)."""
    number = as_uint(value)
    if number is None:
        return None
    return number == 1


def as_epoch(value: Any) -> datetime | None:
    seconds = as_int(value)
    if seconds is None:
        return None
    return from_epoch(seconds)


def as_object(value: Any) -> dict | None:
    return value if isinstance(value, dict) else None


def as_list(value: Any) -> list | None:
    return value if isinstance(value, list) else None
