"""Tests for command-line parsing."""

import time
from datetime import datetime, timedelta

import pytest

from weathercli.cli.parser import parse_args, parse_date, parse_get_command, split_tokens
from weathercli.models.schemas import (
    ConfigureCommand,
    DateKind,
    GetCommand,
    HelpCommand,
    ListCommand,
)


class TestTopLevel:
    """Dispatch on the first token."""

    def test_no_arguments_is_help(self):
        assert parse_args([]) == HelpCommand(error=False)

    def test_help(self):
        assert parse_args(["help"]) == HelpCommand(error=False)

    def test_configure_without_provider_lists(self):
        assert parse_args(["configure"]) == ListCommand()

    def test_configure_with_provider(self):
        assert parse_args(["configure", "AccuWeather"]) == ConfigureCommand(provider="AccuWeather")

    def test_configure_ignores_extra_tokens(self):
        assert parse_args(["configure", "WeatherAPI", "extra"]) == ConfigureCommand(provider="WeatherAPI")

    @pytest.mark.parametrize("tokens", [["bogus"], ["Help"], ["get"], ["GET", "Kyiv"]])
    def test_unrecognized_is_help_error(self, tokens):
        assert parse_args(tokens) == HelpCommand(error=True)


class TestGetCommand:
    """Positional grammar of `get`."""

    def test_single_address_token(self):
        command = parse_args(["get", "Kyiv"])
        assert command == GetCommand(provider=None, address="Kyiv", date=command.date)
        assert command.date.is_now

    def test_multi_token_address_joined_with_single_spaces(self):
        command = parse_args(["get", "Kyiv,", "Ukraine"])
        assert command.address == "Kyiv, Ukraine"
        assert command.provider is None

    def test_provider_and_address(self):
        command = parse_args(["get", "provider=AccuWeather", "Kyiv,", "Ukraine"])
        assert command.provider == "AccuWeather"
        assert command.address == "Kyiv, Ukraine"
        assert command.date.is_now

    def test_provider_address_and_full_date(self):
        command = parse_args(["get", "provider=AccuWeather", "Kyiv,", "Ukraine", "date=2023-05-11T11:00:20"])
        assert command.provider == "AccuWeather"
        assert command.address == "Kyiv, Ukraine"
        assert command.date.kind is DateKind.SET
        assert command.date.value == datetime(2023, 5, 11, 11, 0, 20).astimezone()

    def test_two_tokens_address_and_date(self):
        command = parse_args(["get", "Kyiv", "date=2023-05-11T08:30:00"])
        assert command.provider is None
        assert command.address == "Kyiv"
        assert command.date.value.hour == 8

    def test_bare_date_keeps_calendar_day(self):
        command = parse_args(["get", "Kyiv", "date=2023-05-11"])
        assert command.date.kind is DateKind.SET
        assert command.date.value.date().isoformat() == "2023-05-11"

    def test_provider_marker_only_recognized_first(self):
        command = parse_args(["get", "Kyiv", "provider=OpenWeather"])
        assert command.provider is None
        assert command.address == "Kyiv provider=OpenWeather"

    def test_date_marker_only_recognized_last(self):
        command = parse_args(["get", "date=2023-05-11", "Kyiv", "Ukraine"])
        assert command.address == "date=2023-05-11 Kyiv Ukraine"
        assert command.date.is_now

    def test_empty_provider_means_default(self):
        command = parse_args(["get", "provider=", "Kyiv"])
        assert command.provider is None
        assert command.address == "Kyiv"

    def test_empty_provider_and_empty_date(self):
        command = parse_args(["get", "provider=", "some", "address", "date="])
        assert command == GetCommand(provider=None, address="some address", date=command.date)
        assert command.date.is_now

    @pytest.mark.parametrize("token", ["date=now", "date=NOW", "date=Now", "date="])
    def test_now_variants(self, token):
        command = parse_args(["get", "Kyiv", token])
        assert command.date.is_now

    @pytest.mark.parametrize(
        "parts",
        [
            ["provider=AccuWeather"],
            ["date=2023-05-11"],
            ["provider=AccuWeather", "date=2023-05-11"],
        ],
    )
    def test_no_address_is_help_error(self, parts):
        assert parse_get_command(parts) is None
        assert parse_args(["get", *parts]) == HelpCommand(error=True)

    def test_bad_date_is_help_error(self, capsys):
        assert parse_args(["get", "Kyiv", "date=2023-13-45"]) == HelpCommand(error=True)
        assert "Unable to determine date: 2023-13-45" in capsys.readouterr().out


# Kyiv rules: 03:00 -> 04:00 on the last Sunday of March, 04:00 -> 03:00 on the last Sunday of October
KYIV_TZ = "EET-2EEST,M3.5.0/3,M10.5.0/4"


@pytest.fixture
def kyiv_tz(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available")
    monkeypatch.setenv("TZ", KYIV_TZ)
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


class TestParseDate:
    """The `date=` value alone."""

    def test_result_is_timezone_aware(self):
        date = parse_date("date=2023-05-11T11:00:20")
        assert date.value.tzinfo is not None

    def test_garbage_is_error(self, capsys):
        assert parse_date("date=tomorrow").is_error
        assert "Unable to determine date: tomorrow." in capsys.readouterr().out

    def test_wrong_separator_is_error(self):
        assert parse_date("date=2023-05-11 11:00:20").is_error


class TestSplitTokens:
    def test_quoted_argument_is_resplit(self):
        assert split_tokens(["get", "Kyiv,   Ukraine"]) == ["get", "Kyiv,", "Ukraine"]

    def test_empty(self):
        assert split_tokens([]) == []


class TestDaylightSaving:
    """Wall-clock times skipped or repeated by a DST change are rejected."""

    def test_regular_time(self, kyiv_tz):
        date = parse_date("date=2023-05-11T11:00:20")
        assert date.kind is DateKind.SET
        assert date.value.utcoffset() == timedelta(hours=3)
        assert (date.value.hour, date.value.minute) == (11, 0)

    def test_skipped_time_is_error(self, kyiv_tz, capsys):
        assert parse_date("date=2023-03-26T03:30:00").is_error
        assert "Unable to determine date: 2023-03-26T03:30:00." in capsys.readouterr().out

    def test_repeated_time_is_error(self, kyiv_tz):
        assert parse_date("date=2023-10-29T03:30:00").is_error

    def test_skipped_time_makes_get_a_help_error(self, kyiv_tz):
        assert parse_args(["get", "Kyiv", "date=2023-03-26T03:30:00"]) == HelpCommand(error=True)
