"""
Core graph data structure over identity-keyed nodes.

This module provides the Graph class, which owns the membership of a set of
nodes and delegates edge behavior to the EdgeSemantics selected by its kind.
Adjacency itself lives on the nodes; the graph is the authority on whether a
node takes part in it.

Each member is given an integer handle when it is added. Handles increase
monotonically and are never reused within a graph, so they can index flat
bookkeeping arrays in algorithms that snapshot the graph.

Example:
    >>> graph = UndirectedGraph()
    >>> a, b = Node("A"), Node("B")
    >>> graph.add_nodes([a, b])
    >>> graph.add_edge(a, b, 5)
    >>> b.get_cost_to(a)
    5
"""

import logging
from typing import Dict, Iterable, Iterator, List

from .exceptions import NodeAlreadyExistsError, NodeNotFoundError
from .node import Node
from .semantics import EdgeSemantics, GraphKind, semantics_for

logger = logging.getLogger(__name__)


class Graph:
    """
    Weighted graph over Node objects.

    Attributes:
        _handles (Dict[Node, int]): Member node -> handle, in insertion order
        _next_handle (int): Handle given to the next added node
        _semantics (EdgeSemantics): Edge behavior for the graph kind
    """

    def __init__(self, kind: GraphKind = GraphKind.DIRECTED):
        """
        Create an empty graph.

        Args:
            kind (GraphKind): Selects directed or undirected edge semantics
        """
        self._handles: Dict[Node, int] = {}
        self._next_handle = 0
        self._semantics: EdgeSemantics = semantics_for(kind)

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, node: object) -> bool:
        return node in self._handles

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._handles))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={len(self._handles)}, kind={self.kind.value})"

    @property
    def kind(self) -> GraphKind:
        """Kind selected at construction."""
        return self._semantics.kind

    def add_node(self, node: Node) -> None:
        """
        Add a node to the graph.

        Raises:
            NodeAlreadyExistsError: If this node object is already a member
        """
        if node in self._handles:
            raise NodeAlreadyExistsError(f"Node '{node.value}' already exists in the graph")
        self._handles[node] = self._next_handle
        self._next_handle += 1
        logger.debug("Added node %r with handle %d", node, self._handles[node])

    def add_nodes(self, nodes: Iterable[Node]) -> None:
        """
        Add multiple nodes, all or none.

        Raises:
            NodeAlreadyExistsError: If any node is already a member or is
                repeated in ``nodes``
        """
        nodes = list(nodes)
        seen = set()
        for node in nodes:
            if node in self._handles or node in seen:
                raise NodeAlreadyExistsError(f"Node '{node.value}' already exists in the graph")
            seen.add(node)
        for node in nodes:
            self.add_node(node)

    def has_node(self, node: Node) -> bool:
        """Check if a node is a member of the graph."""
        return node in self._handles

    def get_nodes(self) -> List[Node]:
        """Get all member nodes in insertion order."""
        return list(self._handles)

    def get_node_by_value(self, value: str) -> Node:
        """
        Get the first member node, in insertion order, whose value matches.

        Raises:
            NodeNotFoundError: If no member carries ``value``
        """
        for node in self._handles:
            if node.value == value:
                return node
        raise NodeNotFoundError(f"No node with value '{value}' found in the graph")

    def get_count(self) -> int:
        """Get the number of member nodes."""
        return len(self._handles)

    def get_handle(self, node: Node) -> int:
        """
        Get the integer handle assigned to a member node.

        Raises:
            NodeNotFoundError: If the node is not a member
        """
        self._require_member(node)
        return self._handles[node]

    def add_edge(self, from_node: Node, to_node: Node, cost: int) -> None:
        """
        Add an edge between two member nodes.

        Directed graphs record ``from_node -> to_node``. Undirected graphs
        record both directions with the same cost, or neither.

        Raises:
            NodeNotFoundError: If either endpoint is not a member
            DuplicatedNeighborError: If the edge (or, for undirected graphs,
                either of its directions) already exists
        """
        self._require_member(from_node, "Source")
        self._require_member(to_node, "Target")
        self._semantics.apply_edge(from_node, to_node, cost)
        logger.debug("Added %s edge %r -> %r (cost %s)", self.kind.value, from_node, to_node, cost)

    def remove_node(self, node: Node) -> None:
        """
        Remove a member node.

        Undirected graphs also drop every adjacency that other members hold
        to the removed node. Directed graphs keep them.

        Raises:
            NodeNotFoundError: If the node is not a member
        """
        self._require_member(node)
        del self._handles[node]
        self._semantics.remove_node_cleanup(node, self._handles)
        logger.debug("Removed node %r", node)

    def has_edge(self, from_node: Node, to_node: Node) -> bool:
        """Check if an edge exists between two member nodes."""
        if from_node not in self._handles or to_node not in self._handles:
            return False
        return self._semantics.has_edge(from_node, to_node)

    def get_edge_count(self) -> int:
        """Get the number of edges between member nodes."""
        return self._semantics.count_edges(self._handles)

    def _require_member(self, node: Node, role: str = "Node") -> None:
        if node not in self._handles:
            raise NodeNotFoundError(f"{role} node '{node.value}' not found in the graph")


class DirectedGraph(Graph):
    """Graph whose edges only affect the adjacency of their source node."""

    def __init__(self) -> None:
        super().__init__(GraphKind.DIRECTED)


class UndirectedGraph(Graph):
    """Graph whose edges are stored symmetrically on both endpoints."""

    def __init__(self) -> None:
        super().__init__(GraphKind.UNDIRECTED)
