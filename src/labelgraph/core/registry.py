"""
Named graph registry.

Drivers that juggle several graphs (the CLI, interactive sessions) keep them in
a GraphRegistry passed around explicitly.
"""

import logging
from typing import Dict, Iterator, List, Optional

from .exceptions import DuplicateResourceError, GraphNotFoundError
from .graph import Graph

logger = logging.getLogger(__name__)


class GraphRegistry:
    """Maps graph names to Graph instances."""

    def __init__(self):
        self._graphs: Dict[str, Graph] = {}

    def create(self, name: str) -> Graph:
        """Create an empty graph under ``name``."""
        return self.put(name, Graph())

    def put(self, name: str, graph: Graph, replace: bool = False) -> Graph:
        """
        Register ``graph`` under ``name``.

        Raises:
            DuplicateResourceError: If the name is taken and ``replace`` is False
        """
        if not replace and name in self._graphs:
            raise DuplicateResourceError(f"graph {name!r} already exists")
        self._graphs[name] = graph
        logger.debug("Registered graph %r: %r", name, graph)
        return graph

    def get(self, name: str) -> Graph:
        """
        Get the graph registered under ``name``.

        Raises:
            GraphNotFoundError: If no graph has that name
        """
        graph = self._graphs.get(name)
        if graph is None:
            raise GraphNotFoundError(f"graph {name!r} not found")
        return graph

    def find(self, name: str) -> Optional[Graph]:
        return self._graphs.get(name)

    def remove(self, name: str) -> None:
        if self._graphs.pop(name, None) is None:
            raise GraphNotFoundError(f"graph {name!r} not found")

    def names(self) -> List[str]:
        return sorted(self._graphs)

    def __contains__(self, name: object) -> bool:
        return name in self._graphs

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._graphs)
