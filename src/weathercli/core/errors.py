# src/weathercli/core/errors.py
from __future__ import annotations


class WeatherCliError(Exception):
    """Base error. The message is what the user gets to see."""


class TransportError(WeatherCliError):
    """Connect failure, timeout or non-success HTTP status."""


class DecodeError(WeatherCliError):
    """Malformed JSON, or a required field is missing or mistyped."""


class GeocodingError(WeatherCliError):
    pass


class AddressNotFoundError(GeocodingError):
    def __init__(self, address: str) -> None:
        super().__init__(f"Sorry, we couldn't find your address: {address}")
        self.address = address


class CredentialsMissingError(WeatherCliError):
    def __init__(self, provider: str) -> None:
        super().__init__(f"{provider} server API access key is not set. Please install it first.")
        self.provider = provider


class NoForecastDataError(WeatherCliError):
    def __init__(self, provider: str) -> None:
        super().__init__(f"The {provider} server did not provide weather forecast data")
        self.provider = provider
