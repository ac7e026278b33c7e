"""
labelgraph - label-addressed weighted multigraph with deterministic path search

This package provides:

- Node, Edge and Graph: a mutable directed multigraph keyed by unique labels
- PathFinding / ShortestPathFinder: Dijkstra search with a fixed tie-break
  so the same graph always yields the same path
- Loaders for co-occurrence tables (comic characters by book) and campus maps
  (buildings and walkways)
"""

__version__ = "0.1.0"

import sys

if sys.version_info < (3, 12):
    raise RuntimeError("labelgraph requires Python 3.12 or higher")

from .core.graph import Graph
from .core.graph_paths import PathFinding, PathResult, PathStatus
from .core.models import Edge, Node

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "PathFinding",
    "PathResult",
    "PathStatus",
]
