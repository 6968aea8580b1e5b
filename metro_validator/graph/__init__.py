"""Graph layer for representing the metro network as a networkx graph."""

from .node_types import NodeType, EdgeType
from .network_graph import NetworkGraph
from .builder import build_graph

__all__ = [
    "NodeType",
    "EdgeType",
    "NetworkGraph",
    "build_graph",
]
