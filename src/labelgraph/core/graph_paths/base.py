from abc import ABC, abstractmethod
from typing import Optional

from ..graph import Graph
from .models import PathResult
from .types import PathStatus, WeightFunc


class PathFinder[T: PathResult](ABC):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: Graph):
        """Initialize finder with graph."""
        if not isinstance(graph, Graph):
            raise TypeError("graph must be a Graph instance")
        self.graph = graph

    @abstractmethod
    def find_path(
        self,
        start_node: str,
        end_node: str,
        weight_func: Optional[WeightFunc] = None,
    ) -> T:
        """Find path between nodes."""

    def check_endpoints(self, start_node: str, end_node: str) -> Optional[PathResult]:
        """
        Resolve the outcomes that need no search.

        Returns:
            An unknown-start, unknown-destination or trivial result, or None
            when a search is required. The start is checked first.
        """
        for name, value in (("start_node", start_node), ("end_node", end_node)):
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string label")
        if not self.graph.has_node(start_node):
            return PathResult.failure(PathStatus.UNKNOWN_START, start_node, end_node)
        if not self.graph.has_node(end_node):
            return PathResult.failure(PathStatus.UNKNOWN_DESTINATION, start_node, end_node)
        if start_node == end_node:
            return PathResult.trivial(start_node)
        return None
