"""
Utility functions for path finding operations.
"""

import gc
import logging
import math
import os
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import psutil

from ..exceptions import NegativeWeightError
from ..models import Edge, Node
from .models import PathStep
from .types import WeightFunc

logger = logging.getLogger(__name__)

MAX_QUEUE_SIZE = 100000  # Maximum number of pending candidates in a search

# (start label, end label, path type)
CacheKey = Tuple[str, str, str]


def path_cache_key(start_node: str, end_node: str, path_type: str = "shortest") -> CacheKey:
    """Cache key for a path query; labels are kept apart, never joined."""
    return (start_node, end_node, path_type)


def get_edge_weight(edge: Edge, weight_func: Optional[WeightFunc] = None) -> float:
    """
    Get the weight of an edge, optionally through a weight function.

    Raises:
        NegativeWeightError: If the weight is negative
        ValueError: If the weight is not a finite number
    """
    weight = edge.weight if weight_func is None else weight_func(edge)
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ValueError("Weight must be numeric")
    if math.isnan(weight) or math.isinf(weight):
        raise ValueError("Edge weight must be finite number")
    if weight < 0:
        raise NegativeWeightError(
            f"Negative weight {weight} found on edge "
            f"{edge.source_label} -> {edge.destination_label}"
        )
    return float(weight)


def representative_edges(
    node: Node, weight_func: Optional[WeightFunc] = None
) -> Dict[str, Tuple[float, Edge]]:
    """
    Pick one outgoing edge per destination.

    Among parallel edges to the same destination the cheapest wins, and on
    equal weight the smallest label.

    Returns:
        Mapping of destination label to (weight, edge)
    """
    best: Dict[str, Tuple[float, Edge]] = {}
    for edge in node.get_outgoing():
        weight = get_edge_weight(edge, weight_func)
        current = best.get(edge.destination_label)
        if current is None or (weight, edge.label) < (current[0], current[1].label):
            best[edge.destination_label] = (weight, edge)
    return best


@dataclass
class SearchState:
    """Link in the chain of hops that reached a node."""

    __slots__ = ("node", "prev_edge", "prev_state", "step_weight", "total_weight")

    node: Node
    prev_edge: Optional[Edge]
    prev_state: Optional["SearchState"]
    step_weight: float
    total_weight: float

    def get_steps(self) -> List[PathStep]:
        """Reconstruct the path from the state chain."""
        steps = []
        current = self
        while current.prev_edge is not None and current.prev_state is not None:
            steps.append(
                PathStep(
                    source=current.prev_state.node,
                    destination=current.node,
                    edge=current.prev_edge,
                    weight=current.step_weight,
                    cumulative_weight=current.total_weight,
                )
            )
            current = current.prev_state
        steps.reverse()
        return steps


class MemoryManager:
    """Memory ceiling for a search, measured as growth in process RSS."""

    def __init__(self, max_memory_mb: Optional[float] = None, check_interval: float = 0.1):
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check: Optional[float] = None
        self._check_interval = check_interval

    def check_memory(self) -> None:
        """
        Sample memory usage and check it against the limit.

        The first call always samples; later calls sample at most once per
        ``check_interval`` seconds.

        Raises:
            MemoryError: If growth since the start of the search is over the limit
                even after a garbage collection
        """
        now = time.monotonic()
        if self._last_check is not None and now - self._last_check < self._check_interval:
            return
        self._last_check = now

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        if not self.max_memory or current - self.start_memory <= self.max_memory:
            return
        gc.collect()
        current = get_memory_usage()
        if current - self.start_memory > self.max_memory:
            raise MemoryError(
                f"Memory usage {current / 1024 / 1024:.1f}MB exceeds "
                f"limit of {self.max_memory / 1024 / 1024:.1f}MB"
            )

    @property
    def peak_memory(self) -> int:
        """Peak RSS seen during the search, in bytes."""
        return self._peak_memory


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    return psutil.Process(os.getpid()).memory_info().rss
