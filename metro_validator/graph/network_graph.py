"""NetworkGraph wrapper around networkx for metro networks."""

from typing import Any

import networkx as nx

from .node_types import NodeType, EdgeType


def station_node(station_id: str) -> str:
    return f"station:{station_id}"


def line_node(line_id: str) -> str:
    return f"line:{line_id}"


class NetworkGraph:
    """A graph representation of a metro network.

    Wraps a networkx MultiDiGraph. Stations and lines are nodes; a station's
    membership on a line is a ``member_of`` edge from the station to the
    line, and each directed connection is a ``connection`` edge between two
    stations keyed by its line. Nodes are created for every referenced ID,
    whether or not a matching record exists.
    """

    def __init__(self):
        """Initialize an empty network graph."""
        self._graph = nx.MultiDiGraph()

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Node management
    # -------------------------------------------------------------------------

    def add_membership(
        self,
        station_id: str,
        line_id: str,
        sequence_number: int = 0,
        direction: str = "",
    ) -> None:
        """Add a membership edge from a station to a line.

        A station may appear several times on the same line (once per
        direction or sequence position); each appearance is its own edge.
        """
        from_id = self._ensure(station_id, NodeType.STATION)
        to_id = self._ensure(line_id, NodeType.LINE)

        self._graph.add_edge(
            from_id,
            to_id,
            key=(EdgeType.MEMBER_OF, direction, sequence_number),
            edge_type=EdgeType.MEMBER_OF,
            sequence_number=sequence_number,
            direction=direction,
        )

    def add_connection(
        self,
        from_station_id: str,
        to_station_id: str,
        line_id: str,
        **attrs: Any,
    ) -> None:
        """Add a directed connection edge between two stations.

        Args:
            from_station_id: The source station ID.
            to_station_id: The target station ID.
            line_id: The line the hop runs on.
            **attrs: Additional edge attributes (travel/stop times, id).
        """
        from_id = self._ensure(from_station_id, NodeType.STATION)
        to_id = self._ensure(to_station_id, NodeType.STATION)

        self._graph.add_edge(
            from_id,
            to_id,
            key=(EdgeType.CONNECTION, line_id),
            edge_type=EdgeType.CONNECTION,
            line=line_id,
            **attrs,
        )

    def _ensure(self, name: str, node_type: NodeType) -> str:
        if node_type == NodeType.STATION:
            node_id = station_node(name)
        else:
            node_id = line_node(name)
        if not self._graph.has_node(node_id):
            self._graph.add_node(node_id, node_type=node_type, name=name)
        return node_id

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def lines_for_station(self, station_id: str) -> set[str]:
        """Get the distinct lines a station belongs to."""
        node_id = station_node(station_id)
        if not self._graph.has_node(node_id):
            return set()

        return {
            self._graph.nodes[target]["name"]
            for _, target, data in self._graph.out_edges(node_id, data=True)
            if data.get("edge_type") == EdgeType.MEMBER_OF
        }

    def stations_for_line(self, line_id: str) -> set[str]:
        """Get the distinct stations that belong to a line."""
        node_id = line_node(line_id)
        if not self._graph.has_node(node_id):
            return set()

        return {
            self._graph.nodes[source]["name"]
            for source, _, data in self._graph.in_edges(node_id, data=True)
            if data.get("edge_type") == EdgeType.MEMBER_OF
        }

    def has_connection(self, from_station_id: str, to_station_id: str, line_id: str) -> bool:
        """Check if the directed hop (from, to, line) exists."""
        return self._graph.has_edge(
            station_node(from_station_id),
            station_node(to_station_id),
            key=(EdgeType.CONNECTION, line_id),
        )

    def station_counts(self) -> dict[str, int]:
        """Get the distinct station count for every line with members.

        Lines without any member station are absent from the mapping.
        """
        counts = {}
        for line_id in self._names(NodeType.LINE):
            stations = self.stations_for_line(line_id)
            if stations:
                counts[line_id] = len(stations)
        return counts

    def lines_per_station(self) -> dict[str, list[str]]:
        """Get the sorted distinct lines for every station with memberships."""
        mapping = {}
        for station_id in self._names(NodeType.STATION):
            lines = self.lines_for_station(station_id)
            if lines:
                mapping[station_id] = sorted(lines)
        return mapping

    def _names(self, node_type: NodeType) -> list[str]:
        return [
            data["name"]
            for _, data in self._graph.nodes(data=True)
            if data.get("node_type") == node_type
        ]
