# src/weathercli/weather/weatherapi.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List

from weathercli.core.errors import DecodeError, NoForecastDataError
from weathercli.core.urls import weatherapi_url
from weathercli.models.schemas import GeoPosition
from weathercli.weather.base import WeatherProvider
from weathercli.weather.extract import as_epoch, as_flag, as_float, as_list, as_object, as_str, as_uint, dig
from weathercli.weather.types import ForecastRecord, fmt_float, fmt_int, fmt_value, fmt_wind, row


@dataclass
class WeatherAPIRecord(ForecastRecord):
    condition: str | None = None
    temp: float | None = None            # °C
    feelslike: float | None = None
    windchill: float | None = None
    heatindex: float | None = None
    dewpoint: float | None = None
    wind: float | None = None            # km/hour
    wind_degree: int | None = None
    gust: float | None = None            # km/hour
    pressure: float | None = None        # mbar
    precip: float | None = None          # mm
    humidity: int | None = None          # %
    cloud: int | None = None             # %
    will_it_rain: bool | None = None
    chance_of_rain: int | None = None    # %
    will_it_snow: bool | None = None
    chance_of_snow: int | None = None    # %
    vis: float | None = None             # km
    uv: float | None = None

    def lines(self) -> List[str]:
        return [
            row("Weather condition text", fmt_value(self.condition)),
            row("Temperature", fmt_float(self.temp, "°C")),
            row("Feels like temperature", fmt_float(self.feelslike, "°C")),
            row("Windchill temperature", fmt_float(self.windchill, "°C")),
            row("Heat index", fmt_float(self.heatindex, "°C")),
            row("Dew point", fmt_float(self.dewpoint, "°C")),
            row("Wind speed", fmt_float(self.wind, "km/hour")),
            row("Wind direction in degrees", fmt_wind(self.wind_degree)),
            row("Wind gust", fmt_float(self.gust, "km/hour")),
            row("Atmospheric pressure", fmt_float(self.pressure, "mbar")),
            row("Precipitation amount", fmt_float(self.precip, "mm")),
            row("Humidity", fmt_int(self.humidity, "%")),
            row("Cloud cover", fmt_int(self.cloud, "%")),
            row("Will it rain or not", fmt_value(self.will_it_rain)),
            row("Chance of rain", fmt_int(self.chance_of_rain, "%")),
            row("Will it snow or not", fmt_value(self.will_it_snow)),
            row("Chance of snow", fmt_int(self.chance_of_snow, "%")),
            row("Visibility", fmt_float(self.vis, "km")),
            row("UV Index", fmt_float(self.uv)),
        ]


class WeatherAPIProvider(WeatherProvider):
    """weatherapi.com: `current` for now, hourly slots of one day for a date."""
    name = "WeatherAPI"

    def _get(self, path_key: str, geo: GeoPosition, day: str | None = None) -> Dict[str, Any]:
        (key,) = self.credentials
        params = {"key": key, "q": f"{geo.latitude},{geo.longitude}"}
        if day is not None:
            params["dt"] = day
        data = self._get_json(weatherapi_url(path_key), params)
        if not isinstance(data, dict):
            raise DecodeError("Unable to recognize json response from server. Expected an object.")
        return data

    def fetch_current(self, geo: GeoPosition, address: str) -> ForecastRecord:
        data = self._get("current", geo)
        current = as_object(data.get("current"))
        if current is None:
            raise NoForecastDataError(self.name)
        record = parse_item(current, geo, address)
        if record is None:
            raise DecodeError("It is not possible to determine the date of the weather forecast sent by the provider")
        return record

    def fetch_forecast(self, geo: GeoPosition, address: str, target: datetime) -> List[ForecastRecord]:
        data = self._get("forecast", geo, day=target.strftime("%Y-%m-%d"))
        hours = as_list(dig(data, "forecast", "forecastday", 0, "hour"))
        if hours is None:
            raise NoForecastDataError(self.name)

        records: List[ForecastRecord] = []
        for it in hours:
            item = as_object(it)
            if item is None:
                continue
            record = parse_item(item, geo, address)
            if record is not None:
                records.append(record)
        return records


def parse_item(item: Dict[str, Any], geo: GeoPosition, address: str) -> WeatherAPIRecord | None:
    """Hourly slots carry `time_epoch`, the current block `last_updated_epoch`."""
    timestamp = as_epoch(item.get("time_epoch")) or as_epoch(item.get("last_updated_epoch"))
    if timestamp is None:
        return None

    return WeatherAPIRecord(
        timestamp=timestamp,
        requested_address=address,
        geo=geo,
        condition=as_str(dig(item, "condition", "text")),
        temp=as_float(item.get("temp_c")),
        feelslike=as_float(item.get("feelslike_c")),
        windchill=as_float(item.get("windchill_c")),
        heatindex=as_float(item.get("heatindex_c")),
        dewpoint=as_float(item.get("dewpoint_c")),
        wind=as_float(item.get("wind_kph")),
        wind_degree=as_uint(item.get("wind_degree")),
        gust=as_float(item.get("gust_kph")),
        pressure=as_float(item.get("pressure_mb")),
        precip=as_float(item.get("precip_mm")),
        humidity=as_uint(item.get("humidity")),
        cloud=as_uint(item.get("cloud")),
        will_it_rain=as_flag(item.get("will_it_rain")),
        chance_of_rain=as_uint(item.get("chance_of_rain")),
        will_it_snow=as_flag(item.get("will_it_snow")),
        chance_of_snow=as_uint(item.get("chance_of_snow")),
        vis=as_float(item.get("vis_km")),
        uv=as_float(item.get("uv")),
    )
