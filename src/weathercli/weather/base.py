# src/weathercli/weather/base.py
from __future__ import annotations
import logging
import time
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Dict, List, Tuple

import httpx

from weathercli.core.errors import (
    AddressNotFoundError,
    CredentialsMissingError,
    DecodeError,
    TransportError,
    WeatherCliError,
)
from weathercli.core.settings import HTTP_TIMEOUT
from weathercli.geo.nominatim import search_address
from weathercli.models.schemas import DateSpec, GeoPosition
from weathercli.utils.timewindow import format_local, nearest_record
from weathercli.weather.types import SEPARATOR, Credentials, ForecastRecord

logger = logging.getLogger(__name__)

Geocode = Callable[[str], List[GeoPosition]]

DAMAGED = "The data file structure is damaged for {name}. Its credentials were not loaded."


class WeatherProvider(ABC):
    """
    Base class for every weather source.

    Subclasses set `name` and `credential_fields` and implement the two fetch
    methods; credentials, configuration prompts, geocoding, HTTP and output are
    shared here.
    """

    name: str = ""
    # One prompt and one stored field per entry
    credential_fields: Tuple[str, ...] = ("API key",)

    def __init__(
        self,
        geocode: Geocode | None = None,
        transport: httpx.BaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self.credentials: Credentials = None
        self._geocode = geocode or search_address
        self._transport = transport
        self._timeout = timeout or HTTP_TIMEOUT

    # ===============================================================
    # Provider-specific part
    # ===============================================================
    @abstractmethod
    def fetch_current(self, geo: GeoPosition, address: str) -> ForecastRecord:
        """Current conditions for `geo`. Raises WeatherCliError on failure."""

    @abstractmethod
    def fetch_forecast(self, geo: GeoPosition, address: str, target: datetime) -> List[ForecastRecord]:
        """Every parseable forecast item for `geo`; unusable items are skipped."""

    # ===============================================================
    # Credentials
    # ===============================================================
    @property
    def is_configured(self) -> bool:
        return self.credentials is not None

    def serialize(self) -> str:
        values = self.credentials or ("",) * len(self.credential_fields)
        return ":".join((self.name, *values))

    def deserialize(self, data: str) -> bool:
        """
        Accept a `<name>:<field>...` line addressed to this provider.
        Lines for other providers are ignored silently; a damaged line for this
        provider is reported and leaves the credentials untouched.
        """
        parts = data.split(":")
        if parts[0] != self.name:
            return False

        values = parts[1:]
        if len(values) != len(self.credential_fields):
            print(DAMAGED.format(name=self.name))
            return False
        if not any(values):
            self.credentials = None
            return True
        if not all(values):
            # half of a credential pair
            print(DAMAGED.format(name=self.name))
            return False

        self.credentials = tuple(values)
        return True

    def configure(self) -> None:
        """
        Prompt for each credential field in turn.
        An empty first answer removes the credentials; an empty later answer
        aborts without changing anything.
        """
        print(f"Configure credentials for {self.name}: \n")
        answers: List[str] = []
        for index, field in enumerate(self.credential_fields):
            current = f" Current {field}={self.credentials[index]}" if self.credentials else ""
            answer = self._ask(f"Please enter the {field} to access the weather forecast.{current}: ")
            if answer is None:
                print(f"Failed to set {field}.")
                return
            if not answer:
                if index == 0:
                    self.credentials = None
                    print(f"✅ The {' and '.join(self.credential_fields)} was removed successfully.")
                else:
                    print(f"The {field} can't be empty.")
                return
            if ":" in answer:
                print(f"⛔️ The {field} can't contain ':'. Nothing was changed.")
                return
            answers.append(answer)

        self.credentials = tuple(answers)
        joined = " and ".join(f"{f} '{v}'" for f, v in zip(self.credential_fields, answers))
        print(f"✅ The {joined} was set successfully.")

    @staticmethod
    def _ask(prompt: str) -> str | None:
        try:
            return input(prompt).strip()
        except EOFError:
            print()
            return None

    # ===============================================================
    # Weather
    # ===============================================================
    def get_weather(self, address: str, date: DateSpec) -> None:
        """Geocode, fetch, normalize, select and print. Every outcome is printed."""
        if date.is_error:
            return

        try:
            if not self.is_configured:
                raise CredentialsMissingError(self.name)
            geo = self.locate(address)
            # provider round-trip only, geocoding excluded
            start = time.perf_counter()
            if date.is_now:
                record: ForecastRecord | None = self.fetch_current(geo, address)
            else:
                record = nearest_record(date.value, self.fetch_forecast(geo, address, date.value))
        except WeatherCliError as e:
            print(e)
            return
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.debug("%s answered in %d ms", self.name, elapsed_ms)

        if record is None:
            print(f"The {self.name} provider did not supply usable forecast data.")
            return
        label = "now" if date.is_now else format_local(date.value)
        self.show(record, elapsed_ms, label)

    def locate(self, address: str) -> GeoPosition:
        matches = self._geocode(address)
        if not matches:
            raise AddressNotFoundError(address)
        return matches[0]

    def show(self, record: ForecastRecord, elapsed_ms: int, label: str) -> None:
        geo = record.geo
        print(f"Weather for '{label}'. {self.name} server. Request time {elapsed_ms} ms.")
        print(f"Request address: {record.requested_address}.")
        print(f"Found address: {geo.label} ({geo.latitude},{geo.longitude}).")
        print(f"Forecast date on the server: {format_local(record.timestamp)}")
        print(SEPARATOR)
        for line in record.lines():
            print(line)

    def _get_json(self, url: str, params: Dict[str, Any]) -> Any:
        # params carry the secrets, so only the bare url is logged / shown
        logger.debug("%s GET %s", self.name, url)
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                r = client.get(url, params=params)
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(f"Error connecting to {url}. Status code: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Error connecting to {url}. Error text: {e}") from e

        try:
            return r.json()
        except ValueError as e:
            raise DecodeError(f"Unable to recognize json response from server. Error text: {e}") from e
