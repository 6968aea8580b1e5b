"""Tests for snapshot record models."""

import pytest
from pydantic import ValidationError

from metro_validator.schema.errors import CoordinateParseError
from metro_validator.schema.models import City, Coordinate, Line, NetworkSnapshot


class TestCity:
    def test_parse_map_center(self):
        city = City(id="delhi", map_center='{"lat": 28.6, "lng": 77.2}')

        assert city.parse_map_center() == Coordinate(lat=28.6, lng=77.2)

    def test_map_center_mapping_is_stored_as_json(self):
        city = City.model_validate({"id": "delhi", "map_center": {"lat": 28.6, "lng": 77.2}})

        assert isinstance(city.map_center, str)
        assert city.parse_map_center().lng == 77.2

    @pytest.mark.parametrize("raw", [
        "",
        "{",
        "null",
        "42",
        '{"lat": "north", "lng": 1}',
        '{"lng": 1}',
        '{"lat": "28.6", "lng": "77.2"}',
        '{"lat": true, "lng": 77}',
    ])
    def test_bad_map_center(self, raw):
        city = City(id="delhi", map_center=raw)

        with pytest.raises(CoordinateParseError):
            city.parse_map_center()

    def test_records_are_frozen(self):
        city = City(id="delhi")

        with pytest.raises(ValidationError):
            city.name = "Dilli"


class TestLine:
    def test_defaults(self):
        line = Line(id="red")

        assert line.display_order == 0
        assert line.color == ""


class TestNetworkSnapshot:
    def test_empty(self):
        snapshot = NetworkSnapshot()

        assert snapshot.cities == []
        assert snapshot.station_counts == {}
        assert snapshot.stats.connections == 0
