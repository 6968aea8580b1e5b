"""Schema layer for loading metro network snapshots."""

from .errors import CoordinateParseError, SnapshotLoadError, SnapshotValidationError
from .models import (
    City,
    Connection,
    Coordinate,
    Line,
    LineStation,
    NetworkSnapshot,
    NetworkStats,
    Station,
)
from .loader import (
    load_snapshot,
    load_snapshot_sqlite,
    load_snapshot_yaml,
    load_yaml,
    parse_snapshot_from_string,
    snapshot_from_data,
)

__all__ = [
    "CoordinateParseError",
    "SnapshotLoadError",
    "SnapshotValidationError",
    "City",
    "Connection",
    "Coordinate",
    "Line",
    "LineStation",
    "NetworkSnapshot",
    "NetworkStats",
    "Station",
    "load_snapshot",
    "load_snapshot_sqlite",
    "load_snapshot_yaml",
    "load_yaml",
    "parse_snapshot_from_string",
    "snapshot_from_data",
]
