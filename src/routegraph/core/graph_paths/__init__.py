"""Shortest path functionality."""

from .config import RelaxationOrder, SearchConfig
from .dijkstra import Dijkstra
from .models import PerformanceMetrics

__all__ = [
    "Dijkstra",
    "PerformanceMetrics",
    "RelaxationOrder",
    "SearchConfig",
]
