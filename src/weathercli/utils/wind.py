# src/weathercli/utils/wind.py
from __future__ import annotations
from enum import Enum


class WindDirection(str, Enum):
    NONE = "None"
    UNKNOWN = "Unknown"
    N = "North"
    NNE = "North-northeast"
    NE = "Northeast"
    ENE = "East-northeast"
    E = "East"
    ESE = "East-southeast"
    SE = "Southeast"
    SSE = "South-southeast"
    S = "South"
    SSW = "South-southwest"
    SW = "Southwest"
    WSW = "West-southwest"
    W = "West"
    WNW = "West-northwest"
    NW = "Northwest"
    NNW = "North-northwest"


# Upper bound (inclusive) of each 22.5° sector, starting right after North
_SECTORS = [
    (33, WindDirection.NNE),
    (56, WindDirection.NE),
    (78, WindDirection.ENE),
    (101, WindDirection.E),
    (123, WindDirection.ESE),
    (146, WindDirection.SE),
    (168, WindDirection.SSE),
    (191, WindDirection.S),
    (213, WindDirection.SSW),
    (236, WindDirection.SW),
    (258, WindDirection.WSW),
    (281, WindDirection.W),
    (303, WindDirection.WNW),
    (326, WindDirection.NW),
    (348, WindDirection.NNW),
]


def wind_direction(degree: int | None) -> WindDirection:
    """Meteorological degrees -> 16-point compass direction."""
    if degree is None:
        return WindDirection.NONE
    if degree < 0 or degree > 360:
        return WindDirection.UNKNOWN
    if degree <= 11 or degree >= 349:
        return WindDirection.N
    for upper, direction in _SECTORS:
        if degree <= upper:
            return direction
    return WindDirection.UNKNOWN


def describe_wind(degree: int | None) -> str:
    """ex) 200 -> "South-southwest (200°)" """
    deg = "None" if degree is None else f"{degree}°"
    return f"{wind_direction(degree).value} ({deg})"
