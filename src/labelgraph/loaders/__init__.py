"""
Loaders that turn raw datasets into graphs.

Each dataset is validated against its JSON schema before any node or edge is
created.
"""

from typing import Any, Mapping

from ..core.exceptions import ValidationError
from ..core.graph import Graph
from .campus import build_campus_graph
from .cooccurrence import build_cooccurrence_graph, invert_appearances

__all__ = [
    "build_campus_graph",
    "build_cooccurrence_graph",
    "invert_appearances",
    "load_dataset",
]


def load_dataset(data: Mapping[str, Any]) -> Graph:
    """
    Build a graph from a dataset tagged with its kind.

    ``{"kind": "cooccurrence", "contexts": {...}}`` or
    ``{"kind": "campus", "buildings": [...], "paths": [...]}``.
    """
    if not isinstance(data, Mapping):
        raise ValidationError("dataset must be a JSON object")
    kind = data.get("kind")
    if kind == "cooccurrence":
        return build_cooccurrence_graph(data.get("contexts", {}))
    if kind == "campus":
        return build_campus_graph({k: v for k, v in data.items() if k != "kind"})
    raise ValidationError(f"unknown dataset kind: {kind!r}")
