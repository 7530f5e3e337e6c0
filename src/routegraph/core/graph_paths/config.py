"""Configuration for shortest path searches."""

from enum import Enum
from typing import Optional

from ..exceptions import ConfigurationError


class RelaxationOrder(Enum):
    """Order in which nodes are visited during relaxation."""

    PRIORITY = "priority"  # Min-heap by best known cost, optimal
    SINGLE_PASS = "single_pass"  # Source, then insertion order, one visit each


class SearchConfig:
    """
    Configuration for the Dijkstra engine.

    Attributes:
        relaxation_order: Visitation order used while relaxing edges
        max_memory_mb: Memory growth allowed during a query, unlimited if None
        reject_negative_costs: Whether to refuse graphs carrying negative costs
    """

    def __init__(
        self,
        relaxation_order: RelaxationOrder = RelaxationOrder.PRIORITY,
        max_memory_mb: Optional[float] = None,
        reject_negative_costs: bool = False,
    ):
        if not isinstance(relaxation_order, RelaxationOrder):
            raise ConfigurationError(f"Unknown relaxation order: {relaxation_order!r}")
        if max_memory_mb is not None:
            if not isinstance(max_memory_mb, (int, float)) or isinstance(max_memory_mb, bool):
                raise ConfigurationError("max_memory_mb must be a numeric value")
            if max_memory_mb <= 0:
                raise ConfigurationError("max_memory_mb must be positive")
        if not isinstance(reject_negative_costs, bool):
            raise ConfigurationError("reject_negative_costs must be a boolean")

        self.relaxation_order = relaxation_order
        self.max_memory_mb = max_memory_mb
        self.reject_negative_costs = reject_negative_costs

    def __repr__(self) -> str:
        return (
            f"SearchConfig(relaxation_order={self.relaxation_order.value}, "
            f"max_memory_mb={self.max_memory_mb}, "
            f"reject_negative_costs={self.reject_negative_costs})"
        )
