"""
Utility functions for shortest path operations.
"""

import gc
import logging
import math
import os
import time
from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

import psutil

logger = logging.getLogger(__name__)

INFINITE_COST = math.inf


def is_better_cost(new_cost: float, old_cost: float) -> bool:
    """
    Compare costs strictly.

    Equal costs are never better, so the first predecessor found for a given
    cost is kept.
    """
    return new_cost < old_cost


class PriorityQueue:
    """Min-priority queue of node handles with decrease-key."""

    def __init__(self) -> None:
        self._queue: List[Tuple[float, int, int]] = []
        self._entry_finder: Dict[int, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties

    def add_or_update(self, item: int, priority: float) -> None:
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            # Only update if new priority is lower (better)
            if not is_better_cost(priority, old_priority):
                return

        entry = (priority, self._counter, item)
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, entry)
        self._counter += 1

    def pop(self) -> Optional[Tuple[float, int]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            stored_priority, stored_count = self._entry_finder.get(item, (None, None))
            if stored_priority == priority and stored_count == count:
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


class MemoryManager:
    """Memory guard for graph searches."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = 0.1  # Check memory every 100ms

    def check_memory(self) -> None:
        """
        Sample memory and check growth against the limit, if one is set.

        Raises:
            MemoryError: If growth since the last reset is over the limit
                after a garbage collection
        """
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = self.sample_memory()
        if not self.max_memory:
            return

        if current - self.start_memory > self.max_memory:
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    def sample_memory(self) -> int:
        """Read current memory usage and fold it into the peak."""
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        return current

    @property
    def peak_memory(self) -> int:
        """Peak memory seen since the last reset, in bytes."""
        return self._peak_memory

    def reset_peak_memory(self) -> None:
        """Reset peak memory tracking."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = time.time()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
