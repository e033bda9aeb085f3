"""Tests for Nominatim geocoding."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from weathercli.core.errors import DecodeError, TransportError
from weathercli.geo.nominatim import search_address
from weathercli.tests.test_data import dummy_nominatim


def response(status=200, payload=None, bad_json=False):
    resp = MagicMock()
    resp.ok = status < 400
    resp.status_code = status
    if bad_json:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = payload
    return resp


class TestSearchAddress:
    def test_match_is_validated(self):
        with patch("weathercli.geo.nominatim.requests.get", return_value=response(payload=dummy_nominatim)) as get:
            matches = search_address("Kyiv, Ukraine")

        assert len(matches) == 1
        assert matches[0].latitude == "50.4500336"
        assert matches[0].longitude == "30.5241361"
        assert matches[0].label == "Київ, Україна"

        _, kwargs = get.call_args
        assert kwargs["params"] == {"q": "Kyiv, Ukraine", "format": "json", "limit": 1}
        assert kwargs["headers"]["User-Agent"]
        assert kwargs["timeout"] > 0

    def test_no_match_is_empty(self):
        with patch("weathercli.geo.nominatim.requests.get", return_value=response(payload=[])):
            assert search_address("Atlantis") == []

    def test_error_status(self):
        with patch("weathercli.geo.nominatim.requests.get", return_value=response(status=503)):
            with pytest.raises(TransportError, match="Status code: 503"):
                search_address("Kyiv")

    def test_connection_error(self):
        with patch("weathercli.geo.nominatim.requests.get", side_effect=requests.ConnectionError("down")):
            with pytest.raises(TransportError):
                search_address("Kyiv")

    def test_invalid_json(self):
        with patch("weathercli.geo.nominatim.requests.get", return_value=response(bad_json=True)):
            with pytest.raises(DecodeError):
                search_address("Kyiv")

    def test_unexpected_shape(self):
        with patch("weathercli.geo.nominatim.requests.get", return_value=response(payload=[{"lat": "1"}])):
            with pytest.raises(DecodeError):
                search_address("Kyiv")
