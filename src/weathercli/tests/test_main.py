"""Tests for the `weather` entry point."""

from unittest.mock import MagicMock, patch

from weathercli import __version__
from weathercli.main import EXIT_OK, EXIT_USAGE, main
from weathercli.models.schemas import DateSpec
from weathercli.weather.registry import ProviderRegistry


class TestHelp:
    def test_no_arguments_shows_usage(self, capsys):
        assert main([]) == EXIT_OK
        out = capsys.readouterr().out
        assert f"v:{__version__}" in out
        assert "OpenWeather, WeatherAPI, AccuWeather, AerisWeather" in out

    def test_help(self, capsys):
        assert main(["help"]) == EXIT_OK
        assert "Usage: weather" in capsys.readouterr().out

    def test_unrecognized_command(self, capsys):
        assert main(["forecast", "Kyiv"]) == EXIT_USAGE
        out = capsys.readouterr().out
        assert "weather: forecast Kyiv: unrecognized command" in out
        assert 'For help information, type: "weather help"' in out

    def test_help_does_not_touch_registry(self):
        with patch("weathercli.main.ProviderRegistry") as registry_cls:
            main(["help"])
        registry_cls.create.assert_not_called()


class TestDispatch:
    def test_configure_lists(self):
        registry = MagicMock()
        assert main(["configure"], registry=registry) == EXIT_OK
        registry.list.assert_called_once_with()

    def test_configure_provider(self):
        registry = MagicMock()
        assert main(["configure", "AccuWeather"], registry=registry) == EXIT_OK
        registry.configure.assert_called_once_with("AccuWeather")

    def test_get(self):
        registry = MagicMock()
        assert main(["get", "provider=WeatherAPI", "Kyiv,", "Ukraine"], registry=registry) == EXIT_OK
        registry.get.assert_called_once_with("WeatherAPI", "Kyiv, Ukraine", DateSpec.now())

    def test_quoted_address_is_resplit(self):
        registry = MagicMock()
        main(["get", "Kyiv,  Ukraine"], registry=registry)
        registry.get.assert_called_once_with(None, "Kyiv, Ukraine", DateSpec.now())

    def test_operation_failure_still_exits_ok(self, key_file, capsys):
        registry = ProviderRegistry.create(key_file=str(key_file), geocode=lambda address: [])
        assert main(["get", "provider=Nope", "Kyiv"], registry=registry) == EXIT_OK
        assert "Weather provider Nope not found." in capsys.readouterr().out

    def test_bad_date_is_usage_error(self, capsys):
        registry = MagicMock()
        assert main(["get", "Kyiv", "date=someday"], registry=registry) == EXIT_USAGE
        registry.get.assert_not_called()
        assert "Unable to determine date: someday." in capsys.readouterr().out
