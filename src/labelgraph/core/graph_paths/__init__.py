"""Graph path finding functionality."""

import logging
from typing import Optional

from ..graph import Graph
from .algorithms.shortest_path import ShortestPathFinder
from .base import PathFinder
from .models import PathResult, PathStep, PathValidationError, PerformanceMetrics
from .types import PathStatus, WeightFunc
from .utils import MAX_QUEUE_SIZE, CacheKey, get_edge_weight, path_cache_key, representative_edges

logger = logging.getLogger(__name__)

__all__ = [
    "PathFinding",
    "PathFinder",
    "ShortestPathFinder",
    "PathResult",
    "PathStep",
    "PathStatus",
    "PathValidationError",
    "PerformanceMetrics",
    "WeightFunc",
    "get_edge_weight",
    "representative_edges",
    "path_cache_key",
    "MAX_QUEUE_SIZE",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def get_cache_key(start_node: str, end_node: str, path_type: str = "shortest") -> CacheKey:
        """Generate a cache key for path queries."""
        return path_cache_key(start_node, end_node, path_type)

    @staticmethod
    def shortest_path(
        graph: Graph,
        start_node: str,
        end_node: str,
        weight_func: Optional[WeightFunc] = None,
        max_memory_mb: Optional[float] = None,
    ) -> PathResult:
        """
        Find the shortest path between two labelled nodes.

        Results for the default edge weights are cached on the graph until its
        next mutation. Queries with a custom ``weight_func`` are never cached.
        """
        finder = ShortestPathFinder(graph, max_memory_mb=max_memory_mb)
        result = finder.find_path(start_node, end_node, weight_func=weight_func)
        if finder.last_metrics is not None and finder.last_metrics.cache_hit:
            logger.debug("Path cache hit for %s -> %s", start_node, end_node)
        return result

    @staticmethod
    def get_cache_metrics(graph: Graph) -> dict:
        """Get cache performance metrics for a graph."""
        return graph.get_path_cache_stats()
