"""
Routegraph - In-memory weighted graphs with shortest path queries

This package provides directed and undirected weighted graphs built from
identity-keyed nodes, together with a Dijkstra engine that computes minimum
cost paths between any two members of a fully built graph.
"""

__version__ = "0.1.0"
__author__ = "Routegraph Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("Routegraph requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core.graph import DirectedGraph, Graph, UndirectedGraph
from .core.graph_paths import Dijkstra, SearchConfig
from .core.node import Node

__all__ = [
    "Dijkstra",
    "DirectedGraph",
    "Graph",
    "Node",
    "SearchConfig",
    "UndirectedGraph",
]
