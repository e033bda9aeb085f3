# src/weathercli/weather/aerisweather.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List

from weathercli.core.errors import DecodeError, NoForecastDataError
from weathercli.core.urls import aeris_url
from weathercli.models.schemas import GeoPosition
from weathercli.weather.base import WeatherProvider
from weathercli.weather.extract import as_epoch, as_float, as_list, as_object, as_str, as_uint, dig
from weathercli.weather.types import ForecastRecord, fmt_float, fmt_int, fmt_time, fmt_value, fmt_wind, row


@dataclass
class AerisWeatherRecord(ForecastRecord):
    weather: str | None = None
    # observations carry tempC, forecast periods may only carry min/max
    temp: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    dewpoint: float | None = None         # °C
    humidity: int | None = None           # %
    pressure: int | None = None           # mbar
    wind_speed: float | None = None       # km/hour
    wind_deg: int | None = None
    wind_gust: float | None = None        # km/hour
    visibility: float | None = None       # km
    feelslike: float | None = None        # °C
    snow_depth: float | None = None       # cm
    precip: float | None = None           # mm
    uvi: int | None = None
    sky: int | None = None                # cloud cover %
    sunrise: datetime | None = None
    sunset: datetime | None = None

    def temperature_lines(self) -> List[str]:
        if self.temp is not None:
            return [row("Temperature", fmt_float(self.temp, "°C"))]
        if self.temp_min is not None and self.temp_max is not None:
            return [
                row("Temperature min", fmt_float(self.temp_min, "°C")),
                row("Temperature max", fmt_float(self.temp_max, "°C")),
            ]
        return [row("Temperature", "None")]

    def lines(self) -> List[str]:
        return [
            row("Sunrise time", fmt_time(self.sunrise)),
            row("Sunset time", fmt_time(self.sunset)),
            row("Weather description", fmt_value(self.weather)),
            *self.temperature_lines(),
            row("Dew point", fmt_float(self.dewpoint, "°C")),
            row("Humidity", fmt_int(self.humidity, "%")),
            row("Atmospheric pressure", fmt_int(self.pressure, "mbar")),
            row("Wind speed", fmt_float(self.wind_speed, "km/hour")),
            row("Wind direction and degrees", fmt_wind(self.wind_deg)),
            row("Wind gust", fmt_float(self.wind_gust, "km/hour")),
            row("Visibility", fmt_float(self.visibility, "km")),
            row("Human perception temperature", fmt_float(self.feelslike, "°C")),
            row("Snow depth", fmt_float(self.snow_depth, "cm")),
            row("Precipitation depth", fmt_float(self.precip, "mm")),
            row("UV Index", fmt_int(self.uvi)),
            row("Cloud cover", fmt_int(self.sky, "%")),
        ]


class AerisWeatherProvider(WeatherProvider):
    """Xweather (AerisWeather) API, authenticated with a client id/secret pair."""
    name = "AerisWeather"
    credential_fields = ("client_id", "client_secret")

    def _get(self, path_key: str, geo: GeoPosition) -> Any:
        client_id, client_secret = self.credentials
        params = {"format": "json", "client_id": client_id, "client_secret": client_secret}
        return self._get_json(aeris_url(path_key, lat=geo.latitude, lon=geo.longitude), params)

    def fetch_current(self, geo: GeoPosition, address: str) -> ForecastRecord:
        data = self._get("current", geo)
        ob = as_object(dig(data, "response", "ob"))
        if ob is None:
            raise NoForecastDataError(self.name)
        record = parse_item(ob, geo, address)
        if record is None:
            raise DecodeError("It is not possible to determine the date of the weather forecast sent by the provider")
        return record

    def fetch_forecast(self, geo: GeoPosition, address: str, target: datetime) -> List[ForecastRecord]:
        data = self._get("forecast", geo)
        periods = as_list(dig(data, "response", 0, "periods"))
        if periods is None:
            raise NoForecastDataError(self.name)

        records: List[ForecastRecord] = []
        for it in periods:
            item = as_object(it)
            if item is None:
                continue
            record = parse_item(item, geo, address)
            if record is not None:
                records.append(record)
        return records


def parse_item(item: Dict[str, Any], geo: GeoPosition, address: str) -> AerisWeatherRecord | None:
    timestamp = as_epoch(item.get("timestamp"))
    if timestamp is None:
        return None

    return AerisWeatherRecord(
        timestamp=timestamp,
        requested_address=address,
        geo=geo,
        weather=as_str(item.get("weather")),
        temp=as_float(item.get("tempC")),
        temp_min=as_float(item.get("minTempC")),
        temp_max=as_float(item.get("maxTempC")),
        dewpoint=as_float(item.get("dewpointC")),
        humidity=as_uint(item.get("humidity")),
        pressure=as_uint(item.get("pressureMB")),
        wind_speed=as_float(item.get("windSpeedKPH")),
        wind_deg=as_uint(item.get("windDirDEG")),
        wind_gust=as_float(item.get("windGustKPH")),
        visibility=as_float(item.get("visibilityKM")),
        feelslike=as_float(item.get("feelslikeC")),
        snow_depth=as_float(item.get("snowDepthCM")),
        precip=as_float(item.get("precipMM")),
        uvi=as_uint(item.get("uvi")),
        sky=as_uint(item.get("sky")),
        sunrise=as_epoch(item.get("sunrise")),
        sunset=as_epoch(item.get("sunset")),
    )
