# src/weathercli/cli/parser.py
from __future__ import annotations
from datetime import datetime
from typing import List, Sequence, Tuple

from weathercli.models.schemas import (
    Command,
    ConfigureCommand,
    DateSpec,
    GetCommand,
    HelpCommand,
    ListCommand,
)
from weathercli.utils.timewindow import parse_local

PROVIDER = "provider="
DATE = "date="

# Full timestamp accepted on the command line; a bare date gets the current time appended
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
BARE_DATE_LEN = len("YYYY-MM-DD")


def parse_args(tokens: Sequence[str]) -> Command:
    """
    Turn the launch tokens (already whitespace-split) into a command.
    ex) ["get", "provider=AccuWeather", "Kyiv,", "Ukraine", "date=2023-05-11"]
    """
    if not tokens:
        return HelpCommand(error=False)

    first = tokens[0]
    if first == "help":
        return HelpCommand(error=False)
    if first == "configure":
        if len(tokens) < 2:
            return ListCommand()
        return ConfigureCommand(provider=tokens[1])
    if first == "get":
        parsed = parse_get_command(tokens[1:])
        if parsed is None:
            return HelpCommand(error=True)
        provider, address, date = parsed
        return GetCommand(provider=provider, address=address, date=date)
    return HelpCommand(error=True)


def parse_get_command(parts: Sequence[str]) -> Tuple[str | None, str, DateSpec] | None:
    """
    Split the tokens after `get` into (provider, address, date).

    `provider=` is only recognized as the first token and `date=` only as the
    last one; everything in between is the address. Returns None when the
    tokens don't leave an address or the date can't be parsed.
    """
    n = len(parts)
    if n == 0:
        return None

    first = parts[0]
    if n == 1:
        if first.startswith(PROVIDER) or first.startswith(DATE):
            return None
        return None, first, DateSpec.now()

    last = parts[-1]
    if n == 2:
        if first.startswith(PROVIDER):
            if last.startswith(DATE):
                return None  # no address between the markers
            return parse_provider(first), last, DateSpec.now()
        if last.startswith(DATE):
            return _with_date(None, first, last)
        return None, f"{first} {last}", DateSpec.now()

    middle = " ".join(parts[1:-1])
    if first.startswith(PROVIDER):
        if last.startswith(DATE):
            return _with_date(parse_provider(first), middle, last)
        return parse_provider(first), f"{middle} {last}", DateSpec.now()
    if last.startswith(DATE):
        return _with_date(None, f"{first} {middle}", last)
    return None, f"{first} {middle} {last}", DateSpec.now()


def _with_date(provider: str | None, address: str, token: str) -> Tuple[str | None, str, DateSpec] | None:
    date = parse_date(token)
    if date.is_error:
        return None
    return provider, address, date


def parse_provider(token: str) -> str | None:
    """`provider=` alone means "no override"."""
    name = token[len(PROVIDER):]
    return name or None


def parse_date(token: str) -> DateSpec:
    value = token[len(DATE):] if token.startswith(DATE) else token
    if not value or value.lower() == "now":
        return DateSpec.now()

    if len(value) == BARE_DATE_LEN:
        value += datetime.now().strftime("T%H:%M:%S")

    try:
        return DateSpec.at(parse_local(value, DATE_FORMAT))
    except ValueError as e:
        print(f"Unable to determine date: {value}. Error: {e}.")
        return DateSpec.error()


def split_tokens(argv: Sequence[str]) -> List[str]:
    """Re-split the raw argv on whitespace so quoted addresses behave like unquoted ones."""
    return " ".join(argv).split()
