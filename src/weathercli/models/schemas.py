# src/weathercli/models/schemas.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

# ===== Date =====
class DateKind(str, Enum):
    NOW = "now"
    ERROR = "error"
    SET = "set"


@dataclass(frozen=True)
class DateSpec:
    """
    Requested forecast date.
    - NOW: current conditions
    - ERROR: the date token could not be parsed
    - SET: explicit local, timezone-aware instant in `value`
    """
    kind: DateKind
    value: datetime | None = None

    @classmethod
    def now(cls) -> "DateSpec":
        return cls(DateKind.NOW)

    @classmethod
    def error(cls) -> "DateSpec":
        return cls(DateKind.ERROR)

    @classmethod
    def at(cls, value: datetime) -> "DateSpec":
        return cls(DateKind.SET, value)

    @property
    def is_now(self) -> bool:
        return self.kind is DateKind.NOW

    @property
    def is_error(self) -> bool:
        return self.kind is DateKind.ERROR


# ===== Commands =====
@dataclass(frozen=True)
class ListCommand:
    """Show the providers and pick the default one."""


@dataclass(frozen=True)
class ConfigureCommand:
    provider: str


@dataclass(frozen=True)
class GetCommand:
    provider: str | None
    address: str
    date: DateSpec


@dataclass(frozen=True)
class HelpCommand:
    error: bool = False


Command = ListCommand | ConfigureCommand | GetCommand | HelpCommand


# ===== Geocoding =====
class GeoPosition(BaseModel):
    """One geocoding match. Nominatim returns the coordinates as strings."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    latitude: str = Field(..., alias="lat", description="latitude")
    longitude: str = Field(..., alias="lon", description="longitude")
    label: str = Field(..., alias="display_name", description="full address found")
