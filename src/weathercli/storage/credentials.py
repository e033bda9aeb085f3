# src/weathercli/storage/credentials.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


class CredentialHolder(Protocol):
    name: str

    def serialize(self) -> str: ...

    def deserialize(self, data: str) -> bool: ...


class CredentialStore:
    """
    Flat text file with provider secrets.

        line 1     default provider name
        line 2..N  <provider>:<field>:<field>...   (one per provider, registry order)

    Single process, single writer: the whole file is rewritten on every save.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self, providers: Sequence[CredentialHolder]) -> int | None:
        """
        Feed every stored line to the providers. Returns the index of the
        default provider when its line was loaded, otherwise None.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            print(f"Could not read the key file. Error: {e}.")
            return None

        lines = text.splitlines()
        if not lines:
            return None

        default_name = lines[0].strip()
        known = {p.name for p in providers}
        default_index: int | None = None
        for raw in lines[1:]:
            line = raw.strip()
            if not line:
                continue
            name = line.split(":", 1)[0]
            if name not in known:
                logger.warning("skipping unrecognized credential line for %r", name)
                continue
            for index, provider in enumerate(providers):
                if provider.deserialize(line):
                    if provider.name == default_name:
                        default_index = index
                    break
        return default_index

    def save(self, providers: Sequence[CredentialHolder], default_index: int) -> bool:
        data = [providers[default_index].name]
        data.extend(p.serialize() for p in providers)
        try:
            self.path.write_text("\n".join(data), encoding="utf-8")
        except OSError as e:
            print(f"An error occurred while writing the keys to the file. Error: {e}.")
            return False
        logger.debug("saved %d provider line(s) to %s", len(providers), self.path)
        return True
