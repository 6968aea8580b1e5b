"""Connection validator."""

from ..config import DEFAULT_CONFIG, ValidationConfig
from ..graph.builder import build_graph
from ..schema.models import Connection, Line, LineStation, Station
from .base import ValidationResult


def check_connections(
    connections: list[Connection],
    stations: list[Station],
    lines: list[Line],
    line_stations: list[LineStation],
    config: ValidationConfig = DEFAULT_CONFIG,
) -> ValidationResult:
    """Check connection records against stations, lines and membership.

    This validator checks:
    - Both endpoint stations and the line exist
    - The connection is not a self-loop
    - Both endpoints are members of the connection's line
    - Travel and stop times are within the expected ranges (warning)
    - The reverse connection exists on the same line (warning)

    The membership check for an endpoint is skipped when that station is
    not on any line at all.

    Args:
        connections: The connection records.
        stations: The station records.
        lines: The line records.
        line_stations: Station-on-line membership records.
        config: Validation thresholds.

    Returns:
        ValidationResult with category ``connection``.
    """
    result = ValidationResult(category="connection")

    station_ids = {station.id for station in stations}
    line_ids = {line.id for line in lines}
    graph = build_graph(line_stations, connections)

    for conn in connections:
        with result.check(str(conn.id)) as check:
            if conn.from_station_id not in station_ids:
                check.error(f"FromStationID '{conn.from_station_id}' does not exist")

            if conn.to_station_id not in station_ids:
                check.error(f"ToStationID '{conn.to_station_id}' does not exist")

            if conn.line_id not in line_ids:
                check.error(f"LineID '{conn.line_id}' does not exist")

            if conn.from_station_id == conn.to_station_id:
                check.error("Self-connection detected (from == to)")

            from_lines = graph.lines_for_station(conn.from_station_id)
            if from_lines and conn.line_id not in from_lines:
                check.error(
                    f"FromStation '{conn.from_station_id}' does not belong to "
                    f"line '{conn.line_id}'"
                )

            to_lines = graph.lines_for_station(conn.to_station_id)
            if to_lines and conn.line_id not in to_lines:
                check.error(
                    f"ToStation '{conn.to_station_id}' does not belong to "
                    f"line '{conn.line_id}'"
                )

            _check_timings(check, conn, config)

            if not graph.has_connection(conn.to_station_id, conn.from_station_id, conn.line_id):
                check.warning(
                    f"Missing reverse connection: {conn.to_station_id} -> "
                    f"{conn.from_station_id} on {conn.line_id}"
                )

    return result


def _check_timings(check, conn: Connection, config: ValidationConfig) -> None:
    if conn.travel_time_seconds < config.min_travel_time_seconds:
        check.warning(
            f"Travel time {conn.travel_time_seconds}s is below minimum "
            f"{config.min_travel_time_seconds}s"
        )
    if conn.travel_time_seconds > config.max_travel_time_seconds:
        check.warning(
            f"Travel time {conn.travel_time_seconds}s exceeds recommended maximum "
            f"{config.max_travel_time_seconds}s"
        )

    if conn.stop_time_seconds < config.min_stop_time_seconds:
        check.warning(
            f"Stop time {conn.stop_time_seconds}s is below minimum "
            f"{config.min_stop_time_seconds}s"
        )
    if conn.stop_time_seconds > config.max_stop_time_seconds:
        check.warning(
            f"Stop time {conn.stop_time_seconds}s exceeds recommended maximum "
            f"{config.max_stop_time_seconds}s"
        )
