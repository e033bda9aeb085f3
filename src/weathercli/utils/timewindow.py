# src/weathercli/utils/timewindow.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Protocol, Sequence, TypeVar

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S (%z)"


class Timestamped(Protocol):
    timestamp: datetime


T = TypeVar("T", bound=Timestamped)


def parse_local(value: str, fmt: str) -> datetime:
    """
    Parse a wall-clock string and pin it to the local time zone.
    Raises ValueError when the string doesn't match `fmt`, or when the local
    time is skipped or repeated by a DST change.
    """
    naive = datetime.strptime(value, fmt)
    earlier = naive.replace(fold=0).astimezone()
    later = naive.replace(fold=1).astimezone()
    if earlier.replace(tzinfo=None) != naive or earlier.utcoffset() != later.utcoffset():
        raise ValueError("local time is ambiguous or does not exist")
    return earlier


def from_epoch(seconds: int) -> datetime | None:
    """UTC epoch seconds -> local aware datetime. None when out of range."""
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone()
    except (OverflowError, OSError, ValueError):
        return None


def format_local(dt: datetime | None) -> str:
    if dt is None:
        return "None"
    return dt.strftime(DISPLAY_FORMAT)


def distance_seconds(a: datetime, b: datetime) -> int:
    return abs(int((a - b).total_seconds()))


def nearest_record(target: datetime, records: Sequence[T]) -> T | None:
    """
    Record whose timestamp is closest to `target`, in whole seconds.
    On a tie the earlier record in input order wins. Empty input -> None.
    """
    best: T | None = None
    best_diff = 0
    for record in records:
        diff = distance_seconds(record.timestamp, target)
        if best is None or diff < best_diff:
            best, best_diff = record, diff
    return best
