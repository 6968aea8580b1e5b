"""Node and edge type definitions for the network graph."""

from enum import Enum


class NodeType(str, Enum):
    """Types of nodes in the network graph."""

    STATION = "station"
    LINE = "line"


class EdgeType(str, Enum):
    """Types of edges in the network graph."""

    MEMBER_OF = "member_of"  # Station -> Line
    CONNECTION = "connection"  # Station -> Station, keyed by line
