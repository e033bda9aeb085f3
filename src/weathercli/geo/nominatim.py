# src/weathercli/geo/nominatim.py
from __future__ import annotations
import logging
from typing import List

import requests
from pydantic import TypeAdapter, ValidationError

from weathercli.core.errors import DecodeError, TransportError
from weathercli.core.settings import HTTP_TIMEOUT, USER_AGENT
from weathercli.core.urls import nominatim_url
from weathercli.models.schemas import GeoPosition

logger = logging.getLogger(__name__)

_MATCHES = TypeAdapter(List[GeoPosition])


def search_address(
    address: str,
    limit: int = 1,
    timeout: float | None = None,
) -> List[GeoPosition]:
    """
    OpenStreetMap Nominatim search.
    - returns at most `limit` matches, best first
    - an empty list means the address is unknown, which is not an error
    - Nominatim's usage policy requires an identifying User-Agent
    """
    url = nominatim_url("search")
    params = {"q": address, "format": "json", "limit": limit}
    headers = {"User-Agent": USER_AGENT}

    try:
        resp = requests.get(url, params=params, headers=headers, timeout=timeout or HTTP_TIMEOUT)
    except requests.RequestException as e:
        raise TransportError(f"Error connecting to {url}. Error text: {e}") from e

    if not resp.ok:
        raise TransportError(f"Error connecting to {url}. Status code: {resp.status_code}")

    try:
        data = resp.json()
    except ValueError as e:
        raise DecodeError(f"Unable to recognize json response from server. Error text: {e}") from e

    try:
        matches = _MATCHES.validate_python(data)
    except ValidationError as e:
        raise DecodeError(f"Unexpected geocoding response for '{address}': {e.error_count()} invalid field(s)") from e

    logger.debug("geocoded %r -> %d match(es)", address, len(matches))
    return matches
