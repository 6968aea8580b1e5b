"""Tests for NetworkGraph and its builder."""

from metro_validator.graph.builder import build_graph
from metro_validator.graph.network_graph import NetworkGraph
from metro_validator.graph.node_types import EdgeType, NodeType
from metro_validator.schema.models import Connection, LineStation


class TestNetworkGraph:
    def test_membership_creates_typed_nodes(self):
        graph = NetworkGraph()
        graph.add_membership("s1", "red")

        assert graph.graph.nodes["station:s1"]["node_type"] == NodeType.STATION
        assert graph.graph.nodes["line:red"]["node_type"] == NodeType.LINE

    def test_station_and_line_ids_do_not_collide(self):
        graph = NetworkGraph()
        graph.add_membership("red", "red")

        assert graph.lines_for_station("red") == {"red"}
        assert graph.stations_for_line("red") == {"red"}

    def test_membership_is_distinct_per_line(self):
        graph = NetworkGraph()
        graph.add_membership("s1", "red", sequence_number=1, direction="up")
        graph.add_membership("s1", "red", sequence_number=9, direction="down")
        graph.add_membership("s1", "blue", sequence_number=1, direction="up")

        assert graph.lines_for_station("s1") == {"red", "blue"}
        assert graph.lines_for_station("s2") == set()

    def test_connections(self):
        graph = NetworkGraph()
        graph.add_connection("a", "b", "red")

        assert graph.has_connection("a", "b", "red")
        assert not graph.has_connection("b", "a", "red")
        assert not graph.has_connection("a", "b", "blue")

    def test_connection_edges_do_not_imply_membership(self):
        graph = NetworkGraph()
        graph.add_connection("a", "b", "red")

        assert graph.lines_for_station("a") == set()

    def test_parallel_connections_on_different_lines(self):
        graph = NetworkGraph()
        graph.add_connection("a", "b", "red")
        graph.add_connection("a", "b", "blue")

        edges = graph.graph.get_edge_data("station:a", "station:b")
        assert {data["edge_type"] for data in edges.values()} == {EdgeType.CONNECTION}
        assert len(edges) == 2


class TestAggregates:
    def test_station_counts_and_lines_per_station(self, network):
        graph = build_graph(network.line_stations)

        assert graph.station_counts() == {"yellow": 2, "blue": 2}
        assert graph.lines_per_station() == {
            "kashmere-gate": ["yellow"],
            "rajiv-chowk": ["blue", "yellow"],
            "mandi-house": ["blue"],
        }

    def test_repeated_station_counted_once(self):
        graph = build_graph([
            LineStation(line_id="red", station_id="a", sequence_number=1, direction="up"),
            LineStation(line_id="red", station_id="a", sequence_number=2, direction="down"),
        ])

        assert graph.station_counts() == {"red": 1}

    def test_builder_adds_connections(self):
        graph = build_graph(
            [],
            [Connection(id=7, from_station_id="a", to_station_id="b", line_id="red")],
        )

        assert graph.has_connection("a", "b", "red")
        data = graph.graph.get_edge_data("station:a", "station:b")
        assert next(iter(data.values()))["connection_id"] == 7

    def test_empty(self):
        graph = build_graph([])

        assert graph.station_counts() == {}
        assert graph.lines_per_station() == {}
