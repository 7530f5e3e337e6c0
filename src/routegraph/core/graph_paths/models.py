"""
Data models for shortest path queries.

PerformanceMetrics records what a single query did, so callers can inspect
how much of the graph a search touched without enabling debug logging.

Example:
    >>> metrics = PerformanceMetrics(operation="dijkstra", start_time=time())
    >>> # ... run the query ...
    >>> metrics.end_time = time()
    >>> print(f"Query took {metrics.duration:.2f}ms")
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union


@dataclass
class PerformanceMetrics:
    """
    Container for shortest path query metrics.

    Attributes:
        operation: Name of the operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Number of nodes in the returned path (if completed)
        nodes_explored: Number of nodes visited during relaxation
        edges_examined: Number of adjacencies considered
        relaxations: Number of times a better cost was recorded
        max_memory_used: Peak process memory during the query (bytes)
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: int = 0
    edges_examined: int = 0
    relaxations: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if not isinstance(self.end_time, (int, float)):
            raise TypeError("end_time must be a numeric value")

        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

        for name in ("nodes_explored", "edges_examined", "relaxations"):
            value = getattr(self, name)
            if not isinstance(value, int):
                raise TypeError(f"{name} must be an integer")
            if value < 0:
                raise ValueError(f"{name} cannot be negative")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "edges_examined": self.edges_examined,
            "relaxations": self.relaxations,
            "max_memory_used": self.max_memory_used,
        }
