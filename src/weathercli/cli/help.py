# src/weathercli/cli/help.py
from __future__ import annotations

from weathercli import __version__
from weathercli.weather.registry import PROVIDER_CLASSES

USAGE = """weather: CLI weather forecast v:{version}
Usage: weather help | configure [provider] | get [provider=<name>] <address> [date=format]

Displays weather information for an address using one of several providers:

  help                      - Shows this help message
  configure                 - Displays a list of available providers and allows to set the default
  configure <provider>      - Configures credentials for the selected provider
  get <address>             - Displays weather for the provided address using the default provider
  get provider=<name> <address>
                            - Displays weather for the provided address using the specified provider
      [date=format]         - Displays weather for the specified date

  format = now | yyyy-mm-dd | yyyy-mm-ddThh:mm:ss
    now                     - Current date and time
    yyyy-mm-dd              - The specified date and the current time
    yyyy-mm-ddThh:mm:ss     - The specified date and time

Providers: {providers}

Examples:
  weather get Kyiv, Ukraine
  weather get provider=AccuWeather Kyiv, Ukraine date=2023-05-11
  weather get provider=AccuWeather Kyiv, Ukraine date=2023-05-11T11:00:20

Note:
  Not every provider has a forecast for every moment, so the forecast closest
  to the requested date is shown."""


def render_help(error: bool, args: str) -> str:
    if error:
        return f'weather: {args}: unrecognized command\nFor help information, type: "weather help"'
    providers = ", ".join(cls.name for cls in PROVIDER_CLASSES)
    return USAGE.format(version=__version__, providers=providers)


def show_help(error: bool, args: str) -> None:
    print(render_help(error, args))
