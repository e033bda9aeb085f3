# src/weathercli/weather/types.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Tuple

from weathercli.models.schemas import GeoPosition
from weathercli.utils.timewindow import format_local
from weathercli.utils.wind import describe_wind

# Secret strings of one provider, fixed length per provider. None = not configured.
Credentials = Tuple[str, ...] | None

SEPARATOR = "-" * 40
LABEL_WIDTH = 29


@dataclass
class ForecastRecord:
    """One normalized data point. Metrics live in the provider subclasses."""
    timestamp: datetime
    requested_address: str
    geo: GeoPosition

    def lines(self) -> List[str]:
        raise NotImplementedError


# ===== Display helpers =====
def row(label: str, value: str) -> str:
    return f"{label:<{LABEL_WIDTH}}: {value}"


def fmt_float(value: float | None, unit: str = "") -> str:
    if value is None:
        return "None"
    return f"{value:.1f} {unit}".rstrip()


def fmt_int(value: int | None, unit: str = "") -> str:
    if value is None:
        return "None"
    return f"{value} {unit}".rstrip()


def fmt_value(value: Any) -> str:
    return "None" if value is None else str(value)


def fmt_time(value: datetime | None) -> str:
    return format_local(value)


def fmt_wind(degree: int | None) -> str:
    return describe_wind(degree)


def section(title: str) -> List[str]:
    return [SEPARATOR, title, SEPARATOR]
