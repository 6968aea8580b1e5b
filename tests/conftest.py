"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from metro_validator.schema.loader import parse_snapshot_from_string


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def network_yaml() -> str:
    """Return a small, fully consistent network YAML string."""
    return """
cities:
  - id: delhi
    name: Delhi
    display_name: Delhi NCR
    country: India
    timezone: Asia/Kolkata
    map_center: {lat: 28.6139, lng: 77.2090}

lines:
  - {id: yellow, city_id: delhi, name: Yellow Line, color: "#FFCC00", display_order: 1}
  - {id: blue, city_id: delhi, name: Blue Line, color: "#0066cc", display_order: 2}

stations:
  - {id: rajiv-chowk, city_id: delhi, name: Rajiv Chowk, latitude: 28.6328, longitude: 77.2197, is_interchange: true}
  - {id: kashmere-gate, city_id: delhi, name: Kashmere Gate, latitude: 28.6675, longitude: 77.2285}
  - {id: mandi-house, city_id: delhi, name: Mandi House, latitude: 28.6258, longitude: 77.2343}

line_stations:
  - {id: 1, line_id: yellow, station_id: kashmere-gate, sequence_number: 1, direction: up}
  - {id: 2, line_id: yellow, station_id: rajiv-chowk, sequence_number: 2, direction: up}
  - {id: 3, line_id: blue, station_id: rajiv-chowk, sequence_number: 1, direction: up}
  - {id: 4, line_id: blue, station_id: mandi-house, sequence_number: 2, direction: up}

connections:
  - {id: 1, from_station_id: kashmere-gate, to_station_id: rajiv-chowk, line_id: yellow, travel_time_seconds: 180, stop_time_seconds: 30}
  - {id: 2, from_station_id: rajiv-chowk, to_station_id: kashmere-gate, line_id: yellow, travel_time_seconds: 180, stop_time_seconds: 30}
  - {id: 3, from_station_id: rajiv-chowk, to_station_id: mandi-house, line_id: blue, travel_time_seconds: 120, stop_time_seconds: 20}
  - {id: 4, from_station_id: mandi-house, to_station_id: rajiv-chowk, line_id: blue, travel_time_seconds: 120, stop_time_seconds: 20}
"""


@pytest.fixture
def network(network_yaml):
    """Return the parsed consistent network snapshot."""
    return parse_snapshot_from_string(network_yaml)


@pytest.fixture
def delhi(network):
    """Return the Delhi city record."""
    return network.cities[0]
