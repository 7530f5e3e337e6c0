"""
Edge semantics for directed and undirected graphs.

A graph's kind is fixed when it is created and selects one of the edge
semantics below. The semantics decide how an edge is written into node
adjacencies and what has to be cleaned up when a node leaves the graph.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from enum import Enum
from typing import Generator, Iterable, List, Tuple

from .exceptions import DuplicatedNeighborError
from .node import Node

logger = logging.getLogger(__name__)


class GraphKind(Enum):
    """Enumeration of supported graph kinds."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class EdgeSemantics(ABC):
    """Abstract base class for edge behavior of a graph kind."""

    kind: GraphKind

    @abstractmethod
    def apply_edge(self, from_node: Node, to_node: Node, cost: int) -> None:
        """Write an edge into the adjacency of its endpoint(s)."""
        pass

    @abstractmethod
    def remove_node_cleanup(self, removed: Node, remaining: Iterable[Node]) -> None:
        """Clean up adjacencies after ``removed`` has left the member set."""
        pass

    @abstractmethod
    def has_edge(self, from_node: Node, to_node: Node) -> bool:
        """Check if an edge exists between two nodes."""
        pass

    @abstractmethod
    def count_edges(self, members: Iterable[Node]) -> int:
        """Count the edges connecting member nodes."""
        pass


class DirectedEdges(EdgeSemantics):
    """An edge only affects the adjacency of its source node."""

    kind = GraphKind.DIRECTED

    def apply_edge(self, from_node: Node, to_node: Node, cost: int) -> None:
        from_node.add_neighbor(to_node, cost)

    def remove_node_cleanup(self, removed: Node, remaining: Iterable[Node]) -> None:
        # Incoming adjacencies on other nodes are left in place.
        pass

    def has_edge(self, from_node: Node, to_node: Node) -> bool:
        return from_node.has_neighbor(to_node)

    def count_edges(self, members: Iterable[Node]) -> int:
        members = list(members)
        member_set = set(members)
        return sum(
            1 for node in members for neighbor in node.get_neighbors() if neighbor in member_set
        )


class UndirectedEdges(EdgeSemantics):
    """
    An edge is stored as two reciprocal adjacencies with the same cost.

    Adding an edge is all-or-nothing: both directions are checked before
    anything is written, and a failure while writing the second direction
    rolls back the first.
    """

    kind = GraphKind.UNDIRECTED

    @contextmanager
    def transaction(self) -> Generator[List[Tuple[Node, Node]], None, None]:
        """Context manager that undoes the adjacencies it recorded on failure."""
        applied: List[Tuple[Node, Node]] = []
        try:
            yield applied
        except Exception:
            for owner, neighbor in reversed(applied):
                owner.remove_neighbor(neighbor)
            logger.debug("Rolled back %d adjacencies", len(applied))
            raise

    def apply_edge(self, from_node: Node, to_node: Node, cost: int) -> None:
        if from_node.has_neighbor(to_node):
            raise DuplicatedNeighborError(
                f"Edge '{from_node.value}' -> '{to_node.value}' already exists"
            )
        if to_node.has_neighbor(from_node):
            raise DuplicatedNeighborError(
                f"Edge '{to_node.value}' -> '{from_node.value}' already exists"
            )

        with self.transaction() as applied:
            from_node.add_neighbor(to_node, cost)
            applied.append((from_node, to_node))
            # A self-loop is a single adjacency
            if to_node is not from_node:
                to_node.add_neighbor(from_node, cost)
                applied.append((to_node, from_node))

    def remove_node_cleanup(self, removed: Node, remaining: Iterable[Node]) -> None:
        for node in remaining:
            if node.has_neighbor(removed):
                node.remove_neighbor(removed)
                logger.debug("Scrubbed reference to %r from %r", removed, node)
        for neighbor in list(removed.get_neighbors()):
            removed.remove_neighbor(neighbor)
        logger.debug("Cleared adjacencies of removed node %r", removed)

    def has_edge(self, from_node: Node, to_node: Node) -> bool:
        return from_node.has_neighbor(to_node) and to_node.has_neighbor(from_node)

    def count_edges(self, members: Iterable[Node]) -> int:
        members = list(members)
        member_set = set(members)
        adjacencies = 0
        self_loops = 0
        for node in members:
            for neighbor in node.get_neighbors():
                if neighbor is node:
                    self_loops += 1
                elif neighbor in member_set:
                    adjacencies += 1
        return adjacencies // 2 + self_loops


def semantics_for(kind: GraphKind) -> EdgeSemantics:
    """Create the edge semantics for a graph kind."""
    if kind is GraphKind.DIRECTED:
        return DirectedEdges()
    if kind is GraphKind.UNDIRECTED:
        return UndirectedEdges()
    raise ValueError(f"Unsupported graph kind: {kind!r}")
