# src/weathercli/core/urls.py
from __future__ import annotations
import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

# Base domains can be overridden from .env
OPENWEATHER_BASE: Final[str] = os.getenv("OPENWEATHER_BASE", "https://api.openweathermap.org")
WEATHERAPI_BASE: Final[str] = os.getenv("WEATHERAPI_BASE", "https://api.weatherapi.com")
ACCUWEATHER_BASE: Final[str] = os.getenv("ACCUWEATHER_BASE", "https://dataservice.accuweather.com")
AERISWEATHER_BASE: Final[str] = os.getenv("AERISWEATHER_BASE", "https://api.aerisapi.com")
NOMINATIM_BASE: Final[str] = os.getenv("NOMINATIM_BASE", "https://nominatim.openstreetmap.org")

# Path constants, kept apart from the domains
OPENWEATHER_PATHS = {
    "current": "/data/2.5/weather",
    # 5 days / 3 hours
    "forecast": "/data/2.5/forecast",
}

WEATHERAPI_PATHS = {
    "current": "/v1/current.json",
    # hourly forecast for a single day (dt=YYYY-MM-DD)
    "forecast": "/v1/forecast.json",
}

ACCUWEATHER_PATHS = {
    "location": "/locations/v1/cities/geoposition/search",
    "current": "/currentconditions/v1/{location_key}",
    "forecast": "/forecasts/v1/daily/5day/{location_key}",
}

AERISWEATHER_PATHS = {
    "current": "/observations/{lat},{lon}",
    "forecast": "/forecasts/{lat},{lon}",
}

NOMINATIM_PATHS = {
    "search": "/search",
}


def ow_url(path_key: str) -> str:
    """
    OpenWeather endpoint builder.
    ex) ow_url("forecast") -> "https://api.openweathermap.org/data/2.5/forecast"
    """
    return f"{OPENWEATHER_BASE}{OPENWEATHER_PATHS[path_key]}"


def weatherapi_url(path_key: str) -> str:
    return f"{WEATHERAPI_BASE}{WEATHERAPI_PATHS[path_key]}"


def accuweather_url(path_key: str, **kwargs: str) -> str:
    """
    AccuWeather endpoint builder. Current and forecast paths need the location key.
    ex) accuweather_url("current", location_key="324505")
        -> "https://dataservice.accuweather.com/currentconditions/v1/324505"
    """
    return f"{ACCUWEATHER_BASE}{ACCUWEATHER_PATHS[path_key].format(**kwargs)}"


def aeris_url(path_key: str, *, lat: str, lon: str) -> str:
    return f"{AERISWEATHER_BASE}{AERISWEATHER_PATHS[path_key].format(lat=lat, lon=lon)}"


def nominatim_url(path_key: str = "search") -> str:
    return f"{NOMINATIM_BASE}{NOMINATIM_PATHS[path_key]}"
