"""
Core graph processing package.

Nodes, edges, the label graph container and deterministic shortest path search.
"""

from .exceptions import (
    DuplicateEdgeError,
    DuplicateNodeError,
    DuplicateResourceError,
    GraphOperationError,
    NodeNotFoundError,
    NoPathFoundError,
    UnknownDestinationNodeError,
    UnknownStartNodeError,
    ValidationError,
)
from .graph import Graph
from .graph_paths import PathFinding, PathResult, PathStatus, PathStep, ShortestPathFinder
from .models import Edge, Node
from .registry import GraphRegistry

__all__ = [
    "Edge",
    "Node",
    "Graph",
    "GraphRegistry",
    "PathFinding",
    "ShortestPathFinder",
    "PathResult",
    "PathStatus",
    "PathStep",
    "DuplicateResourceError",
    "DuplicateNodeError",
    "DuplicateEdgeError",
    "GraphOperationError",
    "NodeNotFoundError",
    "NoPathFoundError",
    "UnknownStartNodeError",
    "UnknownDestinationNodeError",
    "ValidationError",
]
