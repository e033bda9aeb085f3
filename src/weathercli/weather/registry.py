# src/weathercli/weather/registry.py
from __future__ import annotations
import logging
from typing import List, Sequence

import httpx

from weathercli.core.settings import KEY_FILE
from weathercli.models.schemas import DateSpec
from weathercli.storage.credentials import CredentialStore
from weathercli.weather.accuweather import AccuWeatherProvider
from weathercli.weather.aerisweather import AerisWeatherProvider
from weathercli.weather.base import Geocode, WeatherProvider
from weathercli.weather.openweather import OpenWeatherProvider
from weathercli.weather.weatherapi import WeatherAPIProvider

logger = logging.getLogger(__name__)

# Registry order is also the order of the lines in the key file
PROVIDER_CLASSES = (
    OpenWeatherProvider,
    WeatherAPIProvider,
    AccuWeatherProvider,
    AerisWeatherProvider,
)


def build_providers(
    geocode: Geocode | None = None,
    transport: httpx.BaseTransport | None = None,
) -> List[WeatherProvider]:
    return [cls(geocode=geocode, transport=transport) for cls in PROVIDER_CLASSES]


class ProviderRegistry:
    """Owns the providers, the default provider and the key file."""

    def __init__(self, providers: Sequence[WeatherProvider], store: CredentialStore) -> None:
        if not providers:
            raise ValueError("at least one provider is required")
        self.providers = list(providers)
        self.store = store
        self.default = 0

    @classmethod
    def create(
        cls,
        key_file: str | None = None,
        geocode: Geocode | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> "ProviderRegistry":
        registry = cls(build_providers(geocode, transport), CredentialStore(key_file or KEY_FILE))
        registry.load()
        return registry

    @property
    def default_provider(self) -> WeatherProvider:
        return self.providers[self.default]

    def find(self, name: str) -> WeatherProvider | None:
        for provider in self.providers:
            if provider.name == name:
                return provider
        return None

    def load(self) -> None:
        index = self.store.load(self.providers)
        if index is not None:
            self.default = index
        logger.debug("default provider: %s", self.default_provider.name)

    def save(self) -> bool:
        return self.store.save(self.providers, self.default)

    # ===============================================================
    # Commands
    # ===============================================================
    def list(self) -> None:
        """Show the providers and let the user pick a new default."""
        count = len(self.providers)
        print("Weather can be obtained through the following providers:")
        for index, provider in enumerate(self.providers):
            marker = "*" if index == self.default else " "
            print(f"  {marker}{index + 1} - {provider.name}")
        print("* - default provider.")

        try:
            answer = input(f"Please set the new default provider [Integer from 1 to {count}]: ").strip()
        except EOFError:
            print(f"\nThe key must be only integer from 1 to {count}. No input was given.")
            return

        if not answer:
            print(f"The '{self.default_provider.name}' provider was successfully left as the default.")
            return
        try:
            number = int(answer)
        except ValueError:
            print(f"⛔️ The key must be only integer from 1 to {count}. Got: {answer}.")
            return
        if not 1 <= number <= count:
            print(f"⛔️ The key must be only integer from 1 to {count}.")
            return

        self.default = number - 1
        print(f"✅ The '{self.default_provider.name}' provider was successfully installed by default.")
        self.save()

    def configure(self, name: str) -> None:
        provider = self.find(name)
        if provider is None:
            print(f"Weather provider {name} not found.")
        else:
            provider.configure()
        # written even when nothing changed
        self.save()

    def get(self, name: str | None, address: str, date: DateSpec) -> None:
        if name is None:
            self.default_provider.get_weather(address, date)
            return
        provider = self.find(name)
        if provider is None:
            print(f"Weather provider {name} not found.")
            return
        provider.get_weather(address, date)
