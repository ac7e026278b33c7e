"""
Deterministic shortest path search.

Dijkstra's algorithm over a label graph. Candidate paths are ordered by

1. cumulative weight,
2. the sequence of edge labels used so far, compared lexicographically,
3. the sequence of node labels visited, compared lexicographically,

so among several cheapest routes the one with the smallest edge-label sequence
is returned, and the same graph always yields the same path. A node is
finalized the first time it is popped and is never reopened.
"""

import logging
from heapq import heappop, heappush
from itertools import count
from time import time
from typing import Dict, List, Optional, Tuple

from ...graph import Graph
from ..base import PathFinder
from ..models import PathResult, PerformanceMetrics
from ..types import PathStatus, WeightFunc
from ..utils import (
    MAX_QUEUE_SIZE,
    MemoryManager,
    SearchState,
    path_cache_key,
    representative_edges,
)

logger = logging.getLogger(__name__)

# (cost, edge labels, node labels)
SearchKey = Tuple[float, Tuple[str, ...], Tuple[str, ...]]


class ShortestPathFinder(PathFinder[PathResult]):
    """Lowest-total-weight path search with lexicographic tie-breaking."""

    def __init__(
        self,
        graph: Graph,
        max_memory_mb: Optional[float] = None,
        max_queue_size: int = MAX_QUEUE_SIZE,
    ):
        """
        Initialize finder.

        Args:
            graph: Graph to search; it is only read
            max_memory_mb: Optional ceiling on memory growth during a search
            max_queue_size: Maximum number of pending candidates
        """
        super().__init__(graph)
        self.max_memory_mb = max_memory_mb
        self.max_queue_size = max_queue_size
        self.last_metrics: Optional[PerformanceMetrics] = None

    def find_path(
        self,
        start_node: str,
        end_node: str,
        weight_func: Optional[WeightFunc] = None,
    ) -> PathResult:
        """
        Find the shortest path from ``start_node`` to ``end_node``.

        Results for the default edge weights are looked up in, and stored to,
        the graph's path cache. Queries with a custom ``weight_func`` bypass it.

        Args:
            start_node: Label of the start node
            end_node: Label of the destination node
            weight_func: Optional override for ``edge.weight``

        Returns:
            A PathResult whose status tells found, trivial, no path, unknown
            start or unknown destination apart

        Raises:
            NegativeWeightError: If a weight met during the search is negative
            MemoryError: If the memory ceiling or the queue size limit is exceeded
        """
        metrics = PerformanceMetrics(operation="shortest_path", start_time=time())
        try:
            cache_key = None
            if weight_func is None:
                cache_key = path_cache_key(start_node, end_node)
                cached = self.graph.path_cache.get(cache_key)
                if cached is not None:
                    metrics.cache_hit = True
                    metrics.path_length = len(cached)
                    return cached

            result = self.check_endpoints(start_node, end_node)
            if result is None:
                result = self._dijkstra(start_node, end_node, weight_func, metrics)
            metrics.path_length = len(result)

            if cache_key is not None:
                self.graph.path_cache.put(cache_key, result)
            return result
        finally:
            metrics.end_time = time()
            self.last_metrics = metrics
            logger.debug("Search metrics %s -> %s: %s", start_node, end_node, metrics.to_dict())

    def _dijkstra(
        self,
        start_node: str,
        end_node: str,
        weight_func: Optional[WeightFunc],
        metrics: PerformanceMetrics,
    ) -> PathResult:
        """Dijkstra's algorithm with a lazily pruned binary heap."""
        logger.debug("Starting shortest path search from %s to %s", start_node, end_node)
        memory = MemoryManager(self.max_memory_mb)

        start = self.graph.require_node(start_node)
        tiebreak = count()
        start_key: SearchKey = (0.0, (), (start_node,))
        heap: List[Tuple[SearchKey, int, SearchState]] = [
            (start_key, next(tiebreak), SearchState(start, None, None, 0.0, 0.0))
        ]
        best: Dict[str, SearchKey] = {start_node: start_key}
        finalized = set()

        try:
            while heap:
                memory.check_memory()
                key, _, state = heappop(heap)
                label = state.node.label
                if label in finalized:
                    continue
                finalized.add(label)
                metrics.nodes_explored += 1
                logger.debug("Finalized %s at cost %s", label, key[0])

                if label == end_node:
                    logger.debug("Found path %s with cost %s", key[2], key[0])
                    return PathResult.found(start_node, end_node, state.get_steps())

                cost, edge_labels, node_labels = key
                for destination, (weight, edge) in representative_edges(
                    state.node, weight_func
                ).items():
                    if destination in finalized:
                        continue
                    candidate: SearchKey = (
                        cost + weight,
                        edge_labels + (edge.label,),
                        node_labels + (destination,),
                    )
                    known = best.get(destination)
                    if known is not None and known <= candidate:
                        continue
                    best[destination] = candidate
                    heappush(
                        heap,
                        (
                            candidate,
                            next(tiebreak),
                            SearchState(edge.destination, edge, state, weight, candidate[0]),
                        ),
                    )
                    if len(heap) > self.max_queue_size:
                        raise MemoryError(
                            f"Search queue exceeded maximum size of {self.max_queue_size}"
                        )

            logger.debug("No path exists between %s and %s", start_node, end_node)
            return PathResult.failure(PathStatus.NO_PATH, start_node, end_node)
        finally:
            metrics.max_memory_used = memory.peak_memory
