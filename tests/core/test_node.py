"""
Tests for the Node model.
"""

import pytest

from routegraph.core.exceptions import DuplicatedNeighborError, NeighborNotFoundError
from routegraph.core.node import Node


@pytest.fixture
def node() -> Node:
    """Fixture providing a node without neighbors."""
    return Node("initialValue")


@pytest.fixture
def neighbor() -> Node:
    """Fixture providing a second standalone node."""
    return Node("neighbor")


def test_value_is_returned(node):
    """Test that the value given at construction is returned."""
    assert node.get_value() == "initialValue"
    assert node.value == "initialValue"


def test_new_node_has_no_neighbors(node):
    """Test that a new node starts with an empty adjacency."""
    assert node.get_neighbors() == set()
    assert node.get_degree() == 0


def test_add_neighbor(node, neighbor):
    """Test adding a neighbor records it with its cost."""
    node.add_neighbor(neighbor, 5)

    assert node.has_neighbor(neighbor)
    assert node.get_neighbors() == {neighbor}
    assert node.get_cost_to(neighbor) == 5
    assert node.get_degree() == 1


def test_adjacency_is_directed(node, neighbor):
    """Test that adding a neighbor does not touch the neighbor's adjacency."""
    node.add_neighbor(neighbor, 5)

    assert not neighbor.has_neighbor(node)


def test_zero_cost_neighbor(node, neighbor):
    """Test that zero cost adjacencies are allowed."""
    node.add_neighbor(neighbor, 0)
    assert node.get_cost_to(neighbor) == 0


def test_duplicate_neighbor_is_rejected(node, neighbor):
    """Test that adding an existing neighbor fails and keeps the first cost."""
    node.add_neighbor(neighbor, 5)

    with pytest.raises(DuplicatedNeighborError, match="already has neighbor 'neighbor'"):
        node.add_neighbor(neighbor, 9)

    assert node.get_cost_to(neighbor) == 5


def test_unknown_neighbor_is_not_recognized(node, neighbor):
    """Test has_neighbor for a node that was never added."""
    assert not node.has_neighbor(neighbor)


def test_remove_neighbor(node, neighbor):
    """Test removing a neighbor clears the adjacency."""
    node.add_neighbor(neighbor, 0)

    node.remove_neighbor(neighbor)

    assert not node.has_neighbor(neighbor)
    assert node.get_neighbors() == set()


def test_remove_missing_neighbor_raises(node, neighbor):
    """Test removing a neighbor that was never added."""
    with pytest.raises(NeighborNotFoundError):
        node.remove_neighbor(neighbor)

    assert node.get_neighbors() == set()


def test_cost_to_missing_neighbor_raises(node, neighbor):
    """Test reading the cost to a node that is not adjacent."""
    with pytest.raises(NeighborNotFoundError, match="has no neighbor 'neighbor'"):
        node.get_cost_to(neighbor)


def test_nodes_compare_by_identity():
    """Test that nodes sharing a value remain distinct."""
    first = Node("same")
    second = Node("same")

    assert first != second
    assert len({first, second}) == 2

    first.add_neighbor(second, 1)
    assert first.has_neighbor(second)
    assert not first.has_neighbor(first)


def test_neighbor_costs_keep_insertion_order(node):
    """Test that neighbor costs are returned in the order they were added."""
    others = [Node(value) for value in ("c", "a", "b")]
    for cost, other in enumerate(others):
        node.add_neighbor(other, cost)

    costs = node.get_neighbor_costs()
    assert list(costs) == others
    assert list(costs.values()) == [0, 1, 2]


def test_neighbor_views_are_copies(node, neighbor):
    """Test that returned collections do not alias the adjacency."""
    node.add_neighbor(neighbor, 3)

    node.get_neighbors().clear()
    node.get_neighbor_costs().clear()

    assert node.get_cost_to(neighbor) == 3


def test_repr_shows_value(node):
    """Test the node representation."""
    assert repr(node) == "Node('initialValue')"
