"""Snapshot loading from YAML files and SQLite databases."""

import logging
import sqlite3
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import SnapshotLoadError, SnapshotValidationError
from .models import NetworkSnapshot, NetworkStats

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")

_QUERIES = {
    "cities": """
        SELECT id, name, display_name, country, timezone, map_center, is_active
        FROM cities
    """,
    "lines": """
        SELECT id, city_id, name, color, display_order
        FROM metro_lines
    """,
    "stations": """
        SELECT id, city_id, name, latitude, longitude, is_interchange
        FROM metro_stations
    """,
    "line_stations": """
        SELECT id, line_id, station_id, sequence_number, direction
        FROM line_stations
    """,
    "connections": """
        SELECT id, from_station_id, to_station_id, line_id,
               travel_time_seconds, stop_time_seconds
        FROM station_connections
    """,
}

_STATION_COUNTS_QUERY = """
    SELECT line_id, COUNT(DISTINCT station_id) AS count
    FROM line_stations
    GROUP BY line_id
"""

_LINES_PER_STATION_QUERY = """
    SELECT station_id, line_id
    FROM line_stations
    GROUP BY station_id, line_id
"""

_STATS_TABLES = {
    "cities": "cities",
    "lines": "metro_lines",
    "stations": "metro_stations",
    "connections": "station_connections",
}


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file and return the raw data.

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed YAML data as a dictionary.

    Raises:
        SnapshotLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SnapshotLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SnapshotLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SnapshotLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SnapshotLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SnapshotLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def load_snapshot(path: str | Path) -> NetworkSnapshot:
    """Load a snapshot from a YAML file or a SQLite database.

    The store is picked from the file suffix: ``.yaml``/``.yml`` files are
    read as YAML, anything else is opened as SQLite.

    Raises:
        SnapshotLoadError: If the store cannot be read.
        SnapshotValidationError: If its records fail validation.
    """
    path = Path(path)
    if path.suffix.lower() in YAML_SUFFIXES:
        return load_snapshot_yaml(path)
    return load_snapshot_sqlite(path)


def load_snapshot_yaml(path: str | Path) -> NetworkSnapshot:
    """Load and parse a YAML snapshot file."""
    data = load_yaml(path)
    snapshot = snapshot_from_data(data)
    logger.debug("Loaded YAML snapshot %s: %s", path, snapshot.stats)
    return snapshot


def parse_snapshot_from_string(yaml_string: str) -> NetworkSnapshot:
    """Parse a YAML string into a NetworkSnapshot.

    Raises:
        SnapshotLoadError: If the YAML cannot be parsed.
        SnapshotValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise SnapshotLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise SnapshotLoadError(f"Expected YAML mapping at root, got {type(data).__name__}")

    return snapshot_from_data(data)


def snapshot_from_data(data: dict) -> NetworkSnapshot:
    """Build a snapshot from raw collections.

    Aggregates and stats missing from ``data`` are derived from the
    collections themselves.

    Raises:
        SnapshotValidationError: If the data fails validation.
    """
    data = {key: value for key, value in data.items() if value is not None}
    snapshot = _validate_snapshot(data)

    derived = {}
    if "station_counts" not in data or "lines_per_station" not in data:
        from ..graph.builder import build_graph

        graph = build_graph(snapshot.line_stations)
        if "station_counts" not in data:
            derived["station_counts"] = graph.station_counts()
        if "lines_per_station" not in data:
            derived["lines_per_station"] = graph.lines_per_station()

    if "stats" not in data:
        derived["stats"] = NetworkStats(
            cities=len(snapshot.cities),
            lines=len(snapshot.lines),
            stations=len(snapshot.stations),
            connections=len(snapshot.connections),
        )

    if derived:
        snapshot = snapshot.model_copy(update=derived)
    return snapshot


def load_snapshot_sqlite(path: str | Path) -> NetworkSnapshot:
    """Load a snapshot from a SQLite database opened read-only.

    Raises:
        SnapshotLoadError: If the database cannot be opened or queried.
        SnapshotValidationError: If its rows fail validation.
    """
    path = Path(path)

    if not path.is_file():
        raise SnapshotLoadError(f"Database not found: {path}", str(path))

    try:
        conn = sqlite3.connect(f"{path.resolve().as_uri()}?mode=ro", uri=True)
    except sqlite3.Error as e:
        raise SnapshotLoadError(f"Failed to open database: {e}", str(path)) from e

    conn.row_factory = sqlite3.Row
    try:
        stats = {
            name: _query_scalar(conn, f"SELECT COUNT(*) FROM {table}", "stats", path)
            for name, table in _STATS_TABLES.items()
        }

        data: dict = {"stats": stats}
        for name, query in _QUERIES.items():
            data[name] = [dict(row) for row in _query(conn, query, name, path)]

        data["station_counts"] = {
            row["line_id"]: row["count"]
            for row in _query(conn, _STATION_COUNTS_QUERY, "station counts", path)
        }

        lines_per_station: dict[str, list[str]] = {}
        for row in _query(conn, _LINES_PER_STATION_QUERY, "lines per station", path):
            lines_per_station.setdefault(row["station_id"], []).append(row["line_id"])
        data["lines_per_station"] = lines_per_station
    finally:
        conn.close()

    snapshot = _validate_snapshot(data)
    logger.debug("Loaded SQLite snapshot %s: %s", path, snapshot.stats)
    return snapshot


def _query(conn: sqlite3.Connection, query: str, what: str, path: Path) -> list:
    try:
        return conn.execute(query).fetchall()
    except sqlite3.Error as e:
        raise SnapshotLoadError(f"Failed to load {what}: {e}", str(path)) from e


def _query_scalar(conn: sqlite3.Connection, query: str, what: str, path: Path) -> int:
    return _query(conn, query, what, path)[0][0]


def _validate_snapshot(data: dict) -> NetworkSnapshot:
    """Validate raw data into a NetworkSnapshot.

    Raises:
        SnapshotValidationError: If the data fails validation.
    """
    try:
        return NetworkSnapshot.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SnapshotValidationError(
            f"Snapshot validation failed with {len(errors)} error(s)", errors
        ) from e
