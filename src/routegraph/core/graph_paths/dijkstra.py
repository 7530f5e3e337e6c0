"""
Single-source shortest paths with Dijkstra's algorithm.

The engine snapshots the membership of a fully built graph and gives every
member a dense slot. Costs and predecessors are flat lists indexed by slot,
reset and recomputed on every query.
"""

from contextlib import contextmanager
import logging
from time import time
from typing import Callable, Dict, Iterable, List, Optional

from ..exceptions import (
    GraphOperationError,
    NegativeCostError,
    NodeNotFoundError,
    SmallGraphError,
)
from ..graph import Graph
from ..node import Node
from .config import RelaxationOrder, SearchConfig
from .models import PerformanceMetrics
from .utils import INFINITE_COST, MemoryManager, PriorityQueue, is_better_cost

logger = logging.getLogger(__name__)


class Dijkstra:
    """
    Shortest path engine over a snapshot of a graph.

    The graph must be fully built before the engine is created: nodes and
    edges added afterwards are not seen by queries. An instance is not safe
    for concurrent queries, since each query overwrites the shared cost and
    predecessor lists.

    Attributes:
        graph (Graph): Graph the engine was built from
        config (SearchConfig): Search options
        last_metrics (Optional[PerformanceMetrics]): Metrics of the latest query
    """

    def __init__(self, graph: Graph, config: Optional[SearchConfig] = None):
        """
        Initialize the engine.

        Raises:
            SmallGraphError: If the graph has fewer than two nodes
        """
        if graph.get_count() < 2:
            raise SmallGraphError(
                "Graph must have at least two nodes to calculate minimum path between nodes"
            )

        self.graph = graph
        self.config = config or SearchConfig()
        self.memory_manager = MemoryManager(self.config.max_memory_mb)
        self.last_metrics: Optional[PerformanceMetrics] = None

        self._nodes: List[Node] = graph.get_nodes()
        self._slots: Dict[Node, int] = {node: slot for slot, node in enumerate(self._nodes)}
        self._costs: List[float] = []
        self._routes: List[Optional[int]] = []
        self._initialize_costs()
        self._initialize_routes()

    @contextmanager
    def _search_context(self):
        """Context manager for search state."""
        try:
            yield
        finally:
            self.memory_manager.reset_peak_memory()

    def get_minimum_path_between(self, source: Node, destination: Node) -> List[Node]:
        """
        Find the minimum cost path between two nodes.

        Args:
            source (Node): Start of the path
            destination (Node): End of the path

        Returns:
            List[Node]: Nodes from ``source`` to ``destination`` inclusive, or
                an empty list if ``destination`` is unreachable or is ``source``

        Raises:
            NodeNotFoundError: If either node was not a graph member when the
                engine was built
            NegativeCostError: If negative costs are rejected by the config
                and the graph carries one
        """
        self._validate_nodes(source, destination)
        metrics = PerformanceMetrics(operation="minimum_path", start_time=time())
        self.last_metrics = metrics

        with self._search_context():
            try:
                self._find_minimum_path_from(self._slots[source], metrics)

                destination_slot = self._slots[destination]
                if self._routes[destination_slot] is None:
                    logger.debug("No path from %r to %r", source, destination)
                    metrics.path_length = 0
                    return []

                path = self._get_path_to(self._slots[source], destination_slot)
                metrics.path_length = len(path)
                logger.debug(
                    "Minimum path %r -> %r: %s (cost %s)",
                    source,
                    destination,
                    [node.value for node in path],
                    self._costs[destination_slot],
                )
                return path
            finally:
                metrics.end_time = time()
                self.memory_manager.sample_memory()
                metrics.max_memory_used = self.memory_manager.peak_memory

    def get_minimum_cost_between(self, source: Node, destination: Node) -> float:
        """
        Get the minimum cost from ``source`` to ``destination``.

        Returns ``math.inf`` if ``destination`` is unreachable and ``0`` if it
        is ``source``.

        Raises:
            NodeNotFoundError: If either node was not a graph member when the
                engine was built
        """
        self._validate_nodes(source, destination)
        metrics = PerformanceMetrics(operation="minimum_cost", start_time=time())
        self.last_metrics = metrics

        with self._search_context():
            try:
                self._find_minimum_path_from(self._slots[source], metrics)
                return self._costs[self._slots[destination]]
            finally:
                metrics.end_time = time()
                self.memory_manager.sample_memory()
                metrics.max_memory_used = self.memory_manager.peak_memory

    def get_path_cost(self, path: Iterable[Node]) -> int:
        """
        Sum the edge costs along a path.

        Returns:
            int: Total cost, ``0`` for an empty path

        Raises:
            NeighborNotFoundError: If two consecutive nodes are not adjacent
        """
        nodes = list(path)
        if not nodes:
            return 0

        path_cost = 0
        current = nodes[0]
        for following in nodes[1:]:
            path_cost += current.get_cost_to(following)
            current = following
        return path_cost

    def _validate_nodes(self, source: Node, destination: Node) -> None:
        """Validate that nodes exist in the graph snapshot."""
        if source not in self._slots:
            raise NodeNotFoundError(f"Source node '{source.value}' not found in the graph")
        if destination not in self._slots:
            raise NodeNotFoundError(
                f"Destination node '{destination.value}' not found in the graph"
            )

    def _initialize_costs(self) -> None:
        self._costs = [INFINITE_COST] * len(self._nodes)

    def _initialize_routes(self) -> None:
        self._routes = [None] * len(self._nodes)

    def _check_negative_costs(self) -> None:
        for node in self._nodes:
            for neighbor, cost in node.get_neighbor_costs().items():
                if cost < 0:
                    raise NegativeCostError(
                        f"Negative cost {cost} found on edge {node.value} -> {neighbor.value}"
                    )

    def _find_minimum_path_from(self, source_slot: int, metrics: PerformanceMetrics) -> None:
        if self.config.reject_negative_costs:
            self._check_negative_costs()

        self._initialize_costs()
        self._initialize_routes()
        self._costs[source_slot] = 0

        logger.debug(
            "Starting %s relaxation from %r",
            self.config.relaxation_order.value,
            self._nodes[source_slot],
        )
        if self.config.relaxation_order is RelaxationOrder.SINGLE_PASS:
            self._relax_single_pass(source_slot, metrics)
        else:
            self._relax_by_priority(source_slot, metrics)

    def _relax_by_priority(self, source_slot: int, metrics: PerformanceMetrics) -> None:
        """Visit nodes in non-decreasing best cost, settling each once."""
        pq = PriorityQueue()
        pq.add_or_update(source_slot, 0)
        settled = set()

        def enqueue(slot: int) -> None:
            if slot not in settled:
                pq.add_or_update(slot, self._costs[slot])

        while not pq.empty():
            self.memory_manager.check_memory()

            current = pq.pop()
            if current is None:
                break
            _, slot = current
            settled.add(slot)
            metrics.nodes_explored += 1
            self._find_minimum_cost_for(slot, metrics, enqueue)

    def _relax_single_pass(self, source_slot: int, metrics: PerformanceMetrics) -> None:
        """Visit the source, then every other node in graph order, once each."""
        order = [source_slot]
        order.extend(slot for slot in range(len(self._nodes)) if slot != source_slot)

        for slot in order:
            self.memory_manager.check_memory()
            metrics.nodes_explored += 1
            self._find_minimum_cost_for(slot, metrics)

    def _find_minimum_cost_for(
        self,
        slot: int,
        metrics: PerformanceMetrics,
        on_relaxed: Optional[Callable[[int], None]] = None,
    ) -> None:
        current_cost = self._costs[slot]
        if current_cost == INFINITE_COST:
            return

        node = self._nodes[slot]
        for neighbor, edge_cost in node.get_neighbor_costs().items():
            metrics.edges_examined += 1
            neighbor_slot = self._slots.get(neighbor)
            if neighbor_slot is None:
                # Adjacency to a node outside the snapshot
                continue

            candidate = current_cost + edge_cost
            if not is_better_cost(candidate, self._costs[neighbor_slot]):
                continue

            self._costs[neighbor_slot] = candidate
            self._routes[neighbor_slot] = slot
            metrics.relaxations += 1
            if on_relaxed is not None:
                on_relaxed(neighbor_slot)

    def _get_path_to(self, source_slot: int, destination_slot: int) -> List[Node]:
        minimum_path: List[Node] = []
        current: Optional[int] = destination_slot

        while current is not None and current != source_slot:
            minimum_path.append(self._nodes[current])
            if len(minimum_path) > len(self._nodes):
                raise GraphOperationError("Predecessor cycle detected while rebuilding path")
            current = self._routes[current]

        minimum_path.append(self._nodes[source_slot])
        minimum_path.reverse()
        return minimum_path
