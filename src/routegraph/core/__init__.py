"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    DuplicatedNeighborError,
    DuplicateResourceError,
    GraphOperationError,
    InvalidOperationError,
    NegativeCostError,
    NeighborNotFoundError,
    NodeAlreadyExistsError,
    NodeNotFoundError,
    ResourceNotFoundError,
    SmallGraphError,
)
from .node import Node
from .semantics import DirectedEdges, EdgeSemantics, GraphKind, UndirectedEdges
from .graph import DirectedGraph, Graph, UndirectedGraph
from .graph_paths import Dijkstra, PerformanceMetrics, RelaxationOrder, SearchConfig

__all__ = [
    "ConfigurationError",
    "Dijkstra",
    "DirectedEdges",
    "DirectedGraph",
    "DuplicatedNeighborError",
    "DuplicateResourceError",
    "EdgeSemantics",
    "Graph",
    "GraphKind",
    "GraphOperationError",
    "InvalidOperationError",
    "NegativeCostError",
    "NeighborNotFoundError",
    "Node",
    "NodeAlreadyExistsError",
    "NodeNotFoundError",
    "PerformanceMetrics",
    "RelaxationOrder",
    "ResourceNotFoundError",
    "SearchConfig",
    "SmallGraphError",
    "UndirectedEdges",
    "UndirectedGraph",
]
