# src/weathercli/weather/accuweather.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from weathercli.core.errors import DecodeError, NoForecastDataError
from weathercli.core.urls import accuweather_url
from weathercli.models.schemas import GeoPosition
from weathercli.weather.base import WeatherProvider
from weathercli.weather.extract import as_bool, as_epoch, as_float, as_list, as_object, as_str, as_uint, dig
from weathercli.weather.types import (
    ForecastRecord,
    fmt_float,
    fmt_int,
    fmt_time,
    fmt_value,
    fmt_wind,
    row,
    section,
)


@dataclass
class AccuWeatherCurrent(ForecastRecord):
    weather_text: str | None = None
    has_precipitation: bool | None = None
    precipitation_type: str | None = None
    temperature: float | None = None       # °C
    real_feel: float | None = None         # °C
    humidity: int | None = None            # %
    dew_point: float | None = None         # °C
    wind_deg: int | None = None
    wind_speed: float | None = None        # km/h
    wind_gust: float | None = None         # km/h
    uv_index: float | None = None
    visibility: float | None = None        # km
    cloud_cover: int | None = None         # %
    pressure: float | None = None          # hPa

    def lines(self) -> List[str]:
        return [
            row("Description of weather", fmt_value(self.weather_text)),
            row("Presence of precipitation", fmt_value(self.has_precipitation)),
            row("The type of precipitation", fmt_value(self.precipitation_type)),
            row("Temperature", fmt_float(self.temperature, "°C")),
            row("Real feel temperature", fmt_float(self.real_feel, "°C")),
            row("Humidity", fmt_int(self.humidity, "%")),
            row("Atmospheric pressure", fmt_float(self.pressure, "hPa")),
            row("Dew point temperature", fmt_float(self.dew_point, "°C")),
            row("Wind direction and degrees", fmt_wind(self.wind_deg)),
            row("Wind speed", fmt_float(self.wind_speed, "km/h")),
            row("Wind gust", fmt_float(self.wind_gust, "km/h")),
            row("UV index", fmt_float(self.uv_index)),
            row("Visibility", fmt_float(self.visibility, "km")),
            row("Cloud cover", fmt_int(self.cloud_cover, "%")),
        ]


@dataclass
class HalfDay:
    """Day or night part of a daily forecast."""
    has_precipitation: bool | None = None
    precipitation_type: str | None = None
    long_phrase: str | None = None
    rain_probability: int | None = None    # %
    snow_probability: int | None = None    # %
    wind_speed: float | None = None        # km/h
    wind_deg: int | None = None
    wind_gust: float | None = None         # km/h
    rain: float | None = None              # mm
    snow: float | None = None              # cm
    cloud_cover: int | None = None         # %

    def lines(self) -> List[str]:
        return [
            row("Description of weather", fmt_value(self.long_phrase)),
            row("Presence of precipitation", fmt_value(self.has_precipitation)),
            row("The type of precipitation", fmt_value(self.precipitation_type)),
            row("Rain probability", fmt_int(self.rain_probability, "%")),
            row("Rain volume", fmt_float(self.rain, "mm")),
            row("Snow probability", fmt_int(self.snow_probability, "%")),
            row("Snow volume", fmt_float(self.snow, "cm")),
            row("Wind direction and degrees", fmt_wind(self.wind_deg)),
            row("Wind speed", fmt_float(self.wind_speed, "km/h")),
            row("Wind gust", fmt_float(self.wind_gust, "km/h")),
            row("Cloud cover", fmt_int(self.cloud_cover, "%")),
        ]


@dataclass
class AccuWeatherDaily(ForecastRecord):
    sunrise: datetime | None = None
    sunset: datetime | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    real_feel_min: float | None = None
    real_feel_max: float | None = None
    day: HalfDay = field(default_factory=HalfDay)
    night: HalfDay = field(default_factory=HalfDay)

    def lines(self) -> List[str]:
        return [
            row("Sunrise time", fmt_time(self.sunrise)),
            row("Sunset time", fmt_time(self.sunset)),
            row("Temperature min", fmt_float(self.temp_min, "°C")),
            row("Temperature max", fmt_float(self.temp_max, "°C")),
            row("Real feel temperature min", fmt_float(self.real_feel_min, "°C")),
            row("Real feel temperature max", fmt_float(self.real_feel_max, "°C")),
            *section("Daytime forecast"),
            *self.day.lines(),
            *section("Night forecast"),
            *self.night.lines(),
        ]


class AccuWeatherProvider(WeatherProvider):
    """
    AccuWeather works on its own location keys, so every request first
    resolves the coordinates to a key.
    """
    name = "AccuWeather"

    def location_key(self, geo: GeoPosition) -> int:
        (key,) = self.credentials
        data = self._get_json(accuweather_url("location"), {"apikey": key, "q": f"{geo.latitude},{geo.longitude}"})
        location = as_str(dig(data, "Key"))
        try:
            return int(location or "")
        except ValueError as e:
            raise DecodeError(f"The {self.name} server did not return a location key for ({geo.latitude},{geo.longitude})") from e

    def fetch_current(self, geo: GeoPosition, address: str) -> ForecastRecord:
        location = self.location_key(geo)
        (key,) = self.credentials
        data = self._get_json(
            accuweather_url("current", location_key=str(location)),
            {"details": "true", "apikey": key},
        )
        item = as_object(dig(data, 0))
        if item is None:
            raise NoForecastDataError(self.name)
        record = parse_current(item, geo, address)
        if record is None:
            raise DecodeError("It is not possible to determine the date of the weather forecast sent by the provider")
        return record

    def fetch_forecast(self, geo: GeoPosition, address: str, target: datetime) -> List[ForecastRecord]:
        location = self.location_key(geo)
        (key,) = self.credentials
        data = self._get_json(
            accuweather_url("forecast", location_key=str(location)),
            {"details": "true", "metric": "true", "apikey": key},
        )
        days = as_list(dig(data, "DailyForecasts"))
        if days is None:
            raise NoForecastDataError(self.name)

        records: List[ForecastRecord] = []
        for it in days:
            item = as_object(it)
            if item is None:
                continue
            record = parse_daily(item, geo, address)
            if record is not None:
                records.append(record)
        return records


def parse_current(item: Dict[str, Any], geo: GeoPosition, address: str) -> AccuWeatherCurrent | None:
    timestamp = as_epoch(item.get("EpochTime"))
    if timestamp is None:
        return None

    return AccuWeatherCurrent(
        timestamp=timestamp,
        requested_address=address,
        geo=geo,
        weather_text=as_str(item.get("WeatherText")),
        has_precipitation=as_bool(item.get("HasPrecipitation")),
        precipitation_type=as_str(item.get("PrecipitationType")),
        temperature=as_float(dig(item, "Temperature", "Metric", "Value")),
        real_feel=as_float(dig(item, "RealFeelTemperature", "Metric", "Value")),
        humidity=as_uint(item.get("RelativeHumidity")),
        dew_point=as_float(dig(item, "DewPoint", "Metric", "Value")),
        wind_deg=as_uint(dig(item, "Wind", "Direction", "Degrees")),
        wind_speed=as_float(dig(item, "Wind", "Speed", "Metric", "Value")),
        wind_gust=as_float(dig(item, "WindGust", "Speed", "Metric", "Value")),
        uv_index=as_float(item.get("UVIndex")),
        visibility=as_float(dig(item, "Visibility", "Metric", "Value")),
        cloud_cover=as_uint(item.get("CloudCover")),
        pressure=as_float(dig(item, "Pressure", "Metric", "Value")),
    )


def parse_half_day(part: Dict[str, Any]) -> HalfDay:
    return HalfDay(
        has_precipitation=as_bool(part.get("HasPrecipitation")),
        precipitation_type=as_str(part.get("PrecipitationType")),
        long_phrase=as_str(part.get("LongPhrase")),
        rain_probability=as_uint(part.get("RainProbability")),
        snow_probability=as_uint(part.get("SnowProbability")),
        wind_speed=as_float(dig(part, "Wind", "Speed", "Value")),
        wind_deg=as_uint(dig(part, "Wind", "Direction", "Degrees")),
        wind_gust=as_float(dig(part, "WindGust", "Speed", "Value")),
        rain=as_float(dig(part, "Rain", "Value")),
        snow=as_float(dig(part, "Snow", "Value")),
        cloud_cover=as_uint(part.get("CloudCover")),
    )


def parse_daily(item: Dict[str, Any], geo: GeoPosition, address: str) -> AccuWeatherDaily | None:
    """`EpochDate`, `Day` and `Night` are required; the rest is optional."""
    timestamp = as_epoch(item.get("EpochDate"))
    day = as_object(item.get("Day"))
    night = as_object(item.get("Night"))
    if timestamp is None or day is None or night is None:
        return None

    return AccuWeatherDaily(
        timestamp=timestamp,
        requested_address=address,
        geo=geo,
        sunrise=as_epoch(dig(item, "Sun", "EpochRise")),
        sunset=as_epoch(dig(item, "Sun", "EpochSet")),
        temp_min=as_float(dig(item, "Temperature", "Minimum", "Value")),
        temp_max=as_float(dig(item, "Temperature", "Maximum", "Value")),
        real_feel_min=as_float(dig(item, "RealFeelTemperature", "Minimum", "Value")),
        real_feel_max=as_float(dig(item, "RealFeelTemperature", "Maximum", "Value")),
        day=parse_half_day(day),
        night=parse_half_day(night),
    )
