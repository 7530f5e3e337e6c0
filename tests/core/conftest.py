"""Shared test fixtures."""

from dataclasses import dataclass
from typing import Callable, Dict, Type

import pytest

from routegraph.core.graph import DirectedGraph, Graph, UndirectedGraph
from routegraph.core.node import Node

CITY_NAMES = [
    "New York",
    "Chicago",
    "San Francisco",
    "Denver",
    "Los Angeles",
    "Dallas",
    "Miami",
    "San Diego",
]

CITY_EDGES = [
    ("New York", "Chicago", 75),
    ("New York", "Denver", 100),
    ("New York", "Dallas", 125),
    ("New York", "Miami", 90),
    ("Chicago", "San Francisco", 25),
    ("Chicago", "Denver", 20),
    ("San Francisco", "Los Angeles", 45),
    ("San Diego", "Los Angeles", 45),
    ("Dallas", "San Diego", 90),
    ("Dallas", "Los Angeles", 80),
    ("Miami", "Dallas", 50),
    ("Denver", "Los Angeles", 100),
]


@dataclass
class CityNetwork:
    """A built city graph together with its nodes by name."""

    graph: Graph
    cities: Dict[str, Node]

    def __getitem__(self, name: str) -> Node:
        return self.cities[name]


def build_city_network(graph_type: Type[Graph]) -> CityNetwork:
    """Build the city network on a new graph of the given type."""
    graph = graph_type()
    cities = {name: Node(name) for name in CITY_NAMES}
    graph.add_nodes(cities.values())
    for from_name, to_name, cost in CITY_EDGES:
        graph.add_edge(cities[from_name], cities[to_name], cost)
    return CityNetwork(graph=graph, cities=cities)


@pytest.fixture(params=[DirectedGraph, UndirectedGraph], ids=["directed", "undirected"])
def graph_type(request) -> Type[Graph]:
    """Fixture providing each concrete graph class."""
    return request.param


@pytest.fixture
def city_network(graph_type) -> CityNetwork:
    """Fixture providing the city network for each graph kind."""
    return build_city_network(graph_type)


@pytest.fixture
def two_node_graph() -> Graph:
    """Fixture providing a directed graph with two unconnected nodes."""
    graph = DirectedGraph()
    graph.add_nodes([Node("someValue"), Node("otherValue")])
    return graph


@pytest.fixture
def city_network_factory() -> Callable[[Type[Graph]], CityNetwork]:
    """Fixture providing the city network builder for a chosen graph type."""
    return build_city_network
