"""Tests for forecast selection and local-time helpers."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from itertools import permutations

import pytest

from weathercli.utils.timewindow import (
    distance_seconds,
    format_local,
    from_epoch,
    nearest_record,
    parse_local,
)

TARGET = datetime(2023, 5, 11, 12, 0, 0).astimezone()


@dataclass
class Slot:
    timestamp: datetime
    tag: str


def slot(offset_seconds: int, tag: str) -> Slot:
    return Slot(TARGET + timedelta(seconds=offset_seconds), tag)


class TestNearestRecord:
    """Closest-timestamp selection."""

    @pytest.mark.parametrize("order", list(permutations(range(3))))
    def test_closest_wins_in_any_order(self, order):
        slots = [slot(500, "a"), slot(-50, "b"), slot(4000, "c")]
        picked = nearest_record(TARGET, [slots[i] for i in order])
        assert picked.tag == "b"

    def test_tie_keeps_first_in_input_order(self):
        assert nearest_record(TARGET, [slot(100, "late"), slot(-100, "early")]).tag == "late"
        assert nearest_record(TARGET, [slot(-100, "early"), slot(100, "late")]).tag == "early"

    def test_exact_match(self):
        assert nearest_record(TARGET, [slot(3600, "x"), slot(0, "hit")]).tag == "hit"

    def test_empty(self):
        assert nearest_record(TARGET, []) is None

    def test_single(self):
        assert nearest_record(TARGET, [slot(-86400, "only")]).tag == "only"


class TestTimeHelpers:
    def test_distance_is_symmetric_whole_seconds(self):
        a = TARGET
        b = TARGET + timedelta(seconds=90, milliseconds=400)
        assert distance_seconds(a, b) == distance_seconds(b, a) == 90

    def test_parse_local_is_aware(self):
        dt = parse_local("2023-05-11T11:00:20", "%Y-%m-%dT%H:%M:%S")
        assert dt.tzinfo is not None
        assert (dt.hour, dt.minute, dt.second) == (11, 0, 20)

    def test_parse_local_rejects_mismatch(self):
        with pytest.raises(ValueError):
            parse_local("11/05/2023", "%Y-%m-%dT%H:%M:%S")

    def test_from_epoch_is_local_and_aware(self):
        dt = from_epoch(1683799200)
        assert dt.tzinfo is not None
        assert dt.timestamp() == 1683799200

    def test_from_epoch_out_of_range(self):
        assert from_epoch(10 ** 20) is None

    def test_format_local(self):
        assert format_local(None) == "None"
        text = format_local(datetime(2023, 5, 11, 11, 0, 20).astimezone())
        assert text.startswith("2023-05-11 11:00:20 (")
