"""
Campus route graph loader.

Buildings become nodes carrying their map coordinates; walkways become a pair
of edges, one per direction, weighted by their length.
"""

import logging
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from ..core.graph import Graph
from ..core.models import Edge, Node
from .schemas import default_validator

logger = logging.getLogger(__name__)


def walkway_label(start: str, end: str) -> str:
    """Default label for a walkway between two buildings."""
    return f"{start}-{end}"


def build_campus_graph(data: Mapping[str, Any], graph: Optional[Graph] = None) -> Graph:
    """
    Build a campus graph from a dataset.

    Args:
        data: ``{"buildings": [{"short_name", "long_name", "x", "y"}],
            "paths": [{"start", "end", "distance", "label"?}]}``
        graph: Graph to extend; a new one is created when omitted

    Returns:
        The populated graph

    Raises:
        ValidationError: If the dataset is malformed or a walkway names an
            unknown building. The graph is not modified in that case.
    """
    result = default_validator().validate("campus", data)
    if not result.is_valid:
        raise ValidationError("; ".join(result.errors))

    known = {building["short_name"] for building in data["buildings"]}
    if graph is not None:
        known.update(node.label for node in graph.list_nodes())
    for path in data["paths"]:
        for end in ("start", "end"):
            if path[end] not in known:
                raise ValidationError(f"walkway refers to unknown building {path[end]!r}")

    graph = graph if graph is not None else Graph()
    with graph.transaction():
        for building in data["buildings"]:
            graph.add_node(
                Node(
                    building["short_name"],
                    attributes={
                        "long_name": building.get("long_name", building["short_name"]),
                        "x": building["x"],
                        "y": building["y"],
                    },
                )
            )
        for path in data["paths"]:
            start = graph.require_node(path["start"])
            end = graph.require_node(path["end"])
            forward = path.get("label") or walkway_label(start.label, end.label)
            backward = path.get("label") or walkway_label(end.label, start.label)
            graph.add_edge(Edge(forward, start, end, weight=path["distance"]))
            if start is not end:
                graph.add_edge(Edge(backward, end, start, weight=path["distance"]))

    logger.info(
        "Loaded campus graph with %d buildings and %d walkways",
        len(data["buildings"]),
        len(data["paths"]),
    )
    return graph
