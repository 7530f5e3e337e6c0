"""
Custom exceptions for the routegraph library.

This module defines the hierarchy of exceptions raised by graph construction and
shortest path queries. Every exception signals a violated precondition detected
before any mutation takes place, so none of them is retried or swallowed by the
library itself.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This is the common base for all failures raised while building or querying
    a graph, so callers can catch a single type when they do not care about
    the specific cause.

    Examples:
        * Invalid node operations
        * Edge creation failures
        * Shortest path preconditions not met
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(GraphOperationError):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Neighbor not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a node is not a member of the graph.

    Examples:
        * Node lookup by a value no member carries
        * Edge endpoint that was never added to the graph
        * Removal of a node that is not a member
        * Shortest path query endpoint outside the graph
    """


class NeighborNotFoundError(ResourceNotFoundError):
    """
    Raised when a node has no adjacency entry for the requested neighbor.

    Examples:
        * Removing a neighbor that was never added
        * Reading the cost to a node that is not adjacent
    """


class DuplicateResourceError(GraphOperationError):
    """
    Raised when attempting to create a duplicate resource.

    Examples:
        * Duplicate node insertion
        * Duplicate edge creation
    """


class NodeAlreadyExistsError(DuplicateResourceError):
    """Raised when adding a node object that is already a graph member."""


class DuplicatedNeighborError(DuplicateResourceError):
    """
    Raised when adding an adjacency that already exists.

    Undirected graphs check both directions of an edge before applying it.
    """


class InvalidOperationError(GraphOperationError):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Shortest path engine built over a graph that is too small
        * Negative edge costs when the search is configured to reject them
    """


class SmallGraphError(InvalidOperationError):
    """Raised when a shortest path engine is built over fewer than two nodes."""


class NegativeCostError(InvalidOperationError):
    """Raised when negative edge costs are found and the search rejects them."""


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown relaxation order
        * Non-positive memory limit
    """
