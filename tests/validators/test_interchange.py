"""Tests for the interchange validator."""

import pytest

from metro_validator.schema.models import Station
from metro_validator.validators.base import Severity
from metro_validator.validators.interchange import check_interchanges


def make_station(station_id="rajiv-chowk", is_interchange=False) -> Station:
    return Station(
        id=station_id,
        city_id="delhi",
        name=station_id,
        latitude=28.63,
        longitude=77.22,
        is_interchange=is_interchange,
    )


class TestInterchangeValidator:
    def test_consistent_network(self, network):
        result = check_interchanges(network.stations, network.lines_per_station)

        assert result.passed == 3
        assert result.issues == []

    def test_flagged_on_one_line(self):
        station = make_station(is_interchange=True)
        result = check_interchanges([station], {"rajiv-chowk": ["yellow"]})

        assert result.failed == 1
        assert [i.message for i in result.issues] == [
            "Marked as interchange but only on 1 line(s)"
        ]

    def test_unflagged_on_two_lines_is_warning(self):
        station = make_station(is_interchange=False)
        result = check_interchanges([station], {"rajiv-chowk": ["yellow", "blue"]})

        assert result.passed == 1
        assert result.failed == 0
        assert result.warnings == 1
        assert len(result.issues) == 1
        assert result.issues[0].severity == Severity.WARNING
        assert result.issues[0].message == "On 2 lines but not marked as interchange"

    def test_orphan(self):
        result = check_interchanges([make_station()], {})

        assert result.failed == 1
        assert [i.message for i in result.issues] == [
            "Station is not assigned to any line (orphan)"
        ]

    def test_flagged_orphan_gets_both_errors(self):
        station = make_station(is_interchange=True)
        result = check_interchanges([station], {"rajiv-chowk": []})

        assert [i.message for i in result.issues] == [
            "Marked as interchange but only on 0 line(s)",
            "Station is not assigned to any line (orphan)",
        ]
        assert result.failed == 1

    def test_repeated_line_counts_once(self):
        station = make_station(is_interchange=True)
        result = check_interchanges([station], {"rajiv-chowk": ["yellow", "yellow"]})

        assert result.failed == 1

    @pytest.mark.parametrize("flag,lines,errors,warnings", [
        (True, ["a", "b"], 0, 0),
        (True, ["a", "b", "c"], 0, 0),
        (False, ["a"], 0, 0),
        (False, ["a", "b", "c"], 0, 1),
        (True, ["a"], 1, 0),
        (False, [], 1, 0),
        (True, [], 2, 0),
    ])
    def test_flag_rules(self, flag, lines, errors, warnings):
        station = make_station(is_interchange=flag)
        result = check_interchanges([station], {"rajiv-chowk": lines})

        assert len(result.errors) == errors
        assert len(result.warning_issues) == warnings
