"""Shared fixtures: a fixed geocoding match and a temporary key file."""

from typing import Callable, List

import pytest

from weathercli.models.schemas import GeoPosition
from weathercli.tests.test_data import dummy_nominatim


@pytest.fixture
def geo() -> GeoPosition:
    return GeoPosition.model_validate(dummy_nominatim[0])


@pytest.fixture
def geocode(geo: GeoPosition) -> Callable[[str], List[GeoPosition]]:
    """Geocoder that knows every address."""
    return lambda address: [geo]


@pytest.fixture
def no_geocode() -> Callable[[str], List[GeoPosition]]:
    """Geocoder that knows no address."""
    return lambda address: []


@pytest.fixture
def key_file(tmp_path):
    return tmp_path / "key.txt"
