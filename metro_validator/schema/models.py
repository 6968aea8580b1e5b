"""Pydantic models for metro network records."""

import json

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import CoordinateParseError


class Record(BaseModel):
    """Base for immutable snapshot records."""

    model_config = ConfigDict(frozen=True)


class Coordinate(Record):
    """A latitude/longitude pair in degrees."""

    lat: float
    lng: float


class City(Record):
    """A city served by one or more metro lines."""

    id: str
    name: str = ""
    display_name: str = ""
    country: str = ""
    timezone: str = ""
    map_center: str = ""  # JSON text: {"lat": 28.6, "lng": 77.2}
    is_active: bool = True

    @model_validator(mode="before")
    @classmethod
    def normalize_map_center(cls, data: dict) -> dict:
        """Accept map_center as a mapping and store it as JSON text."""
        if isinstance(data, dict) and isinstance(data.get("map_center"), dict):
            data = dict(data)
            data["map_center"] = json.dumps(data["map_center"])
        return data

    def parse_map_center(self) -> Coordinate:
        """Decode the stored map center.

        Raises:
            CoordinateParseError: If the text is not a JSON object with
                numeric lat and lng.
        """
        try:
            raw = json.loads(self.map_center)
        except ValueError as e:
            raise CoordinateParseError(str(e)) from e

        if not isinstance(raw, dict):
            raise CoordinateParseError(
                f"expected object, got {type(raw).__name__}"
            )

        try:
            return Coordinate.model_validate(raw, strict=True)
        except ValidationError as e:
            fields = ", ".join(".".join(str(x) for x in err["loc"]) for err in e.errors())
            raise CoordinateParseError(f"bad field(s) {fields}") from e


class Line(Record):
    """A metro line belonging to a city."""

    id: str
    city_id: str = ""
    name: str = ""
    color: str = ""
    display_order: int = 0


class Station(Record):
    """A metro station."""

    id: str
    city_id: str = ""
    name: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    is_interchange: bool = False


class LineStation(Record):
    """Membership of a station on a line."""

    id: int = 0
    line_id: str
    station_id: str
    sequence_number: int = 0
    direction: str = ""


class Connection(Record):
    """A directed hop between two stations on a line."""

    id: int
    from_station_id: str
    to_station_id: str
    line_id: str
    travel_time_seconds: int = 0
    stop_time_seconds: int = 0


class NetworkStats(Record):
    """Entity counts for a snapshot."""

    cities: int = 0
    lines: int = 0
    stations: int = 0
    connections: int = 0


class NetworkSnapshot(Record):
    """All records loaded for one validation run."""

    cities: list[City] = Field(default_factory=list)
    lines: list[Line] = Field(default_factory=list)
    stations: list[Station] = Field(default_factory=list)
    line_stations: list[LineStation] = Field(default_factory=list)
    connections: list[Connection] = Field(default_factory=list)
    station_counts: dict[str, int] = Field(default_factory=dict)
    lines_per_station: dict[str, list[str]] = Field(default_factory=dict)
    stats: NetworkStats = Field(default_factory=NetworkStats)
