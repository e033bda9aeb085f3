# src/weathercli/main.py
from __future__ import annotations
import logging
import sys
from typing import Sequence

from weathercli.cli.help import show_help
from weathercli.cli.parser import parse_args, split_tokens
from weathercli.core.settings import LOG_LEVEL
from weathercli.models.schemas import ConfigureCommand, GetCommand, HelpCommand, ListCommand
from weathercli.weather.registry import ProviderRegistry

EXIT_OK = 0
EXIT_USAGE = 2


def main(argv: Sequence[str] | None = None, registry: ProviderRegistry | None = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    tokens = split_tokens(sys.argv[1:] if argv is None else argv)
    command = parse_args(tokens)

    if isinstance(command, HelpCommand):
        show_help(command.error, " ".join(tokens))
        return EXIT_USAGE if command.error else EXIT_OK

    if registry is None:
        registry = ProviderRegistry.create()
    if isinstance(command, ListCommand):
        registry.list()
    elif isinstance(command, ConfigureCommand):
        registry.configure(command.provider)
    elif isinstance(command, GetCommand):
        registry.get(command.provider, command.address, command.date)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
