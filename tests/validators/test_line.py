"""Tests for the line validator."""

import pytest

from metro_validator.schema.models import Line
from metro_validator.validators.base import Severity
from metro_validator.validators.line import check_lines


def make_line(**overrides) -> Line:
    data = {
        "id": "yellow",
        "city_id": "delhi",
        "name": "Yellow Line",
        "color": "#FFCC00",
        "display_order": 1,
    }
    data.update(overrides)
    return Line(**data)


class TestLineValidator:
    def test_valid_lines(self, network):
        result = check_lines(network.lines, network.cities, network.station_counts)

        assert result.passed == 2
        assert result.failed == 0
        assert result.issues == []

    def test_duplicate_id(self, delhi):
        result = check_lines([make_line(), make_line()], [delhi], {"yellow": 5})

        assert result.passed == 1
        assert result.failed == 1
        assert result.issues[0].message == "Duplicate line ID"

    def test_missing_city(self, delhi):
        result = check_lines([make_line(city_id="noida")], [delhi], {"yellow": 5})

        assert result.failed == 1
        assert result.issues[0].message == "CityID 'noida' does not exist"

    def test_blank_name(self, delhi):
        result = check_lines([make_line(name=" ")], [delhi], {"yellow": 5})

        assert result.issues[0].message == "Line name is empty"

    @pytest.mark.parametrize("color", ["#ffcc00", "#FFCC00", "#a1B2c3"])
    def test_color_case_insensitive(self, delhi, color):
        result = check_lines([make_line(color=color)], [delhi], {"yellow": 5})

        assert result.issues == []

    @pytest.mark.parametrize("color", ["FFCC00", "#FFF", "#FFCC000", "#GGCC00", "yellow", "", "#FFCC00\n"])
    def test_invalid_color(self, delhi, color):
        result = check_lines([make_line(color=color)], [delhi], {"yellow": 5})

        assert result.failed == 1
        assert "Invalid hex color" in result.issues[0].message

    def test_negative_display_order_is_warning(self, delhi):
        result = check_lines([make_line(display_order=-3)], [delhi], {"yellow": 5})

        assert result.passed == 1
        assert result.warnings == 1
        assert result.issues[0].severity == Severity.WARNING
        assert result.issues[0].message == "Display order -3 is negative"

    def test_line_absent_from_counts(self, delhi):
        result = check_lines([make_line()], [delhi], {})

        assert result.failed == 1
        assert [i.message for i in result.issues] == ["Line has no stations"]

    def test_line_with_one_station(self, delhi):
        result = check_lines([make_line()], [delhi], {"yellow": 1})

        assert result.failed == 1
        assert [i.message for i in result.issues] == [
            "Line has only 1 station(s), minimum is 2"
        ]

    def test_line_with_zero_count_entry(self, delhi):
        result = check_lines([make_line()], [delhi], {"yellow": 0})

        assert [i.message for i in result.issues] == [
            "Line has only 0 station(s), minimum is 2"
        ]

    def test_two_stations_is_enough(self, delhi):
        result = check_lines([make_line()], [delhi], {"yellow": 2})

        assert result.passed == 1

    def test_multiple_errors_count_once(self, delhi):
        line = make_line(city_id="x", name="", color="red", display_order=-1)
        result = check_lines([line], [delhi], {})

        assert len(result.errors) == 4
        assert result.failed == 1
        assert result.warnings == 1
