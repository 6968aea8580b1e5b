"""Builder for converting snapshot records to a NetworkGraph."""

from collections.abc import Iterable

from ..schema.models import Connection, LineStation
from .network_graph import NetworkGraph


def build_graph(
    line_stations: Iterable[LineStation],
    connections: Iterable[Connection] = (),
) -> NetworkGraph:
    """Build a NetworkGraph from membership and connection records.

    Args:
        line_stations: Station-on-line membership records.
        connections: Directed connection records.

    Returns:
        A NetworkGraph representing the network.
    """
    graph = NetworkGraph()

    for ls in line_stations:
        graph.add_membership(
            ls.station_id,
            ls.line_id,
            sequence_number=ls.sequence_number,
            direction=ls.direction,
        )

    for conn in connections:
        graph.add_connection(
            conn.from_station_id,
            conn.to_station_id,
            conn.line_id,
            connection_id=conn.id,
            travel_time_seconds=conn.travel_time_seconds,
            stop_time_seconds=conn.stop_time_seconds,
        )

    return graph
