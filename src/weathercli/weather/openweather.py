# src/weathercli/weather/openweather.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List

from weathercli.core.errors import DecodeError, NoForecastDataError
from weathercli.core.urls import ow_url
from weathercli.models.schemas import GeoPosition
from weathercli.weather.base import WeatherProvider
from weathercli.weather.extract import as_epoch, as_float, as_list, as_object, as_str, as_uint, dig
from weathercli.weather.types import ForecastRecord, fmt_float, fmt_int, fmt_time, fmt_value, fmt_wind, row


@dataclass
class OpenWeatherRecord(ForecastRecord):
    group: str | None = None            # Rain, Snow, Extreme ...
    temp: float | None = None           # °C
    feels_like: float | None = None     # °C
    pressure: int | None = None         # hPa
    humidity: int | None = None         # %
    visibility: int | None = None       # meter
    wind_speed: float | None = None     # meter/sec
    wind_deg: int | None = None
    wind_gust: float | None = None      # meter/sec
    rain_1h: float | None = None        # mm
    rain_3h: float | None = None
    snow_1h: float | None = None
    snow_3h: float | None = None
    sunrise: datetime | None = None
    sunset: datetime | None = None

    def lines(self) -> List[str]:
        return [
            row("Group of weather parameters", fmt_value(self.group)),
            row("Temperature", fmt_float(self.temp, "°C")),
            row("Human perception temperature", fmt_float(self.feels_like, "°C")),
            row("Atmospheric pressure", fmt_int(self.pressure, "hPa")),
            row("Humidity", fmt_int(self.humidity, "%")),
            row("Wind speed", fmt_float(self.wind_speed, "meter/sec")),
            row("Wind direction and degrees", fmt_wind(self.wind_deg)),
            row("Wind gust", fmt_float(self.wind_gust, "meter/sec")),
            row("Rain volume (last 1 hour)", fmt_float(self.rain_1h, "mm")),
            row("Rain volume (last 3 hour)", fmt_float(self.rain_3h, "mm")),
            row("Snow volume (last 1 hour)", fmt_float(self.snow_1h, "mm")),
            row("Snow volume (last 3 hour)", fmt_float(self.snow_3h, "mm")),
            row("Visibility", fmt_int(self.visibility, "meter")),
            row("Sunrise time", fmt_time(self.sunrise)),
            row("Sunset time", fmt_time(self.sunset)),
        ]


class OpenWeatherProvider(WeatherProvider):
    """
    OpenWeather free plan: current weather + 5 days / 3 hours forecast.
    URLs come from core.urls.
    """
    name = "OpenWeather"

    def _get(self, path_key: str, geo: GeoPosition) -> Dict[str, Any]:
        (key,) = self.credentials
        params = {"lat": geo.latitude, "lon": geo.longitude, "appid": key, "units": "metric"}
        data = self._get_json(ow_url(path_key), params)
        if not isinstance(data, dict):
            raise DecodeError("Unable to recognize json response from server. Expected an object.")
        return data

    def fetch_current(self, geo: GeoPosition, address: str) -> ForecastRecord:
        data = self._get("current", geo)
        record = parse_item(data, geo, address)
        if record is None:
            raise DecodeError("It is not possible to determine the date of the weather forecast sent by the provider")
        return record

    def fetch_forecast(self, geo: GeoPosition, address: str, target: datetime) -> List[ForecastRecord]:
        data = self._get("forecast", geo)
        # sunrise/sunset come once per city in the forecast payload, not per slot
        sunrise = as_epoch(dig(data, "city", "sunrise"))
        sunset = as_epoch(dig(data, "city", "sunset"))

        slots = as_list(data.get("list"))
        if slots is None:
            raise NoForecastDataError(self.name)

        records: List[ForecastRecord] = []
        for it in slots:
            item = as_object(it)
            if item is None:
                continue
            record = parse_item(item, geo, address, sunrise=sunrise, sunset=sunset)
            if record is not None:
                records.append(record)
        return records


def parse_item(
    item: Dict[str, Any],
    geo: GeoPosition,
    address: str,
    sunrise: datetime | None = None,
    sunset: datetime | None = None,
) -> OpenWeatherRecord | None:
    """One current-weather payload or one forecast slot. `dt` is required."""
    timestamp = as_epoch(item.get("dt"))
    if timestamp is None:
        return None

    return OpenWeatherRecord(
        timestamp=timestamp,
        requested_address=address,
        geo=geo,
        group=as_str(dig(item, "weather", 0, "main")),
        temp=as_float(dig(item, "main", "temp")),
        feels_like=as_float(dig(item, "main", "feels_like")),
        pressure=as_uint(dig(item, "main", "pressure")),
        humidity=as_uint(dig(item, "main", "humidity")),
        visibility=as_uint(item.get("visibility")),
        wind_speed=as_float(dig(item, "wind", "speed")),
        wind_deg=as_uint(dig(item, "wind", "deg")),
        wind_gust=as_float(dig(item, "wind", "gust")),
        rain_1h=as_float(dig(item, "rain", "1h")),
        rain_3h=as_float(dig(item, "rain", "3h")),
        snow_1h=as_float(dig(item, "snow", "1h")),
        snow_3h=as_float(dig(item, "snow", "3h")),
        sunrise=sunrise or as_epoch(dig(item, "sys", "sunrise")),
        sunset=sunset or as_epoch(dig(item, "sys", "sunset")),
    )
