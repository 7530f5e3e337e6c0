"""
Node model for the routegraph library.

A node is a vertex identified by object identity. It carries an opaque value,
used by graphs for lookups, and a weighted adjacency map to its neighbors.
Two nodes created with the same value remain distinct entities.
"""

import logging
from typing import Dict, Set

from .exceptions import DuplicatedNeighborError, NeighborNotFoundError

logger = logging.getLogger(__name__)


class Node:
    """
    Graph vertex with an identifier and weighted outgoing adjacencies.

    Equality and hashing are inherited from ``object``, so nodes are compared
    and stored by identity.

    Attributes:
        _value (str): Identifier given at construction, never reassigned
        _neighbors (Dict[Node, int]): Neighbor -> edge cost
    """

    __slots__ = ("_value", "_neighbors")

    def __init__(self, value: str):
        """
        Create a standalone node with no neighbors.

        Args:
            value (str): Identifier for the node. Not required to be unique.
        """
        self._value = value
        self._neighbors: Dict["Node", int] = {}

    def __repr__(self) -> str:
        return f"Node({self._value!r})"

    @property
    def value(self) -> str:
        """Identifier given at construction."""
        return self._value

    def get_value(self) -> str:
        """Return the node identifier."""
        return self._value

    def add_neighbor(self, neighbor: "Node", cost: int) -> None:
        """
        Record a directed adjacency to ``neighbor``.

        Costs are not validated. Negative costs break the optimality of
        shortest path queries and are the caller's responsibility.

        Args:
            neighbor (Node): Target of the adjacency
            cost (int): Edge cost

        Raises:
            DuplicatedNeighborError: If ``neighbor`` is already adjacent
        """
        if neighbor in self._neighbors:
            raise DuplicatedNeighborError(
                f"Node '{self._value}' already has neighbor '{neighbor.value}'"
            )
        self._neighbors[neighbor] = cost
        logger.debug("Added neighbor %r -> %r (cost %s)", self, neighbor, cost)

    def remove_neighbor(self, neighbor: "Node") -> None:
        """
        Remove the adjacency to ``neighbor``.

        Raises:
            NeighborNotFoundError: If ``neighbor`` is not adjacent
        """
        if neighbor not in self._neighbors:
            raise NeighborNotFoundError(
                f"Node '{self._value}' has no neighbor '{neighbor.value}'"
            )
        del self._neighbors[neighbor]
        logger.debug("Removed neighbor %r -> %r", self, neighbor)

    def has_neighbor(self, neighbor: "Node") -> bool:
        """Check if ``neighbor`` is adjacent to this node."""
        return neighbor in self._neighbors

    def get_cost_to(self, neighbor: "Node") -> int:
        """
        Get the cost of the adjacency to ``neighbor``.

        Raises:
            NeighborNotFoundError: If ``neighbor`` is not adjacent
        """
        try:
            return self._neighbors[neighbor]
        except KeyError:
            raise NeighborNotFoundError(
                f"Node '{self._value}' has no neighbor '{neighbor.value}'"
            ) from None

    def get_neighbors(self) -> Set["Node"]:
        """Get all neighbors of this node."""
        return set(self._neighbors)

    def get_neighbor_costs(self) -> Dict["Node", int]:
        """Get neighbor -> cost in the order the adjacencies were added."""
        return dict(self._neighbors)  # defensive copy

    def get_degree(self) -> int:
        """Get the number of outgoing adjacencies."""
        return len(self._neighbors)
