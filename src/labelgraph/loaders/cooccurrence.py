"""
Co-occurrence graph loader.

Builds a graph from a mapping of context id (for example a comic book) to the
labels that occur in it (the characters appearing in that book). Every label
becomes a node; every ordered pair of distinct labels sharing a context becomes
an edge labelled with the context id, so each pair is linked in both directions.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..core.exceptions import ValidationError
from ..core.graph import Graph
from ..core.models import Edge
from .schemas import default_validator

logger = logging.getLogger(__name__)


def invert_appearances(rows: Iterable[Tuple[str, str]]) -> Dict[str, List[str]]:
    """
    Group (label, context) rows by context.

    Args:
        rows: Pairs such as (character, book)

    Returns:
        Mapping of context id to labels in first-seen order, without repeats
    """
    contexts: Dict[str, List[str]] = defaultdict(list)
    for label, context in rows:
        if label not in contexts[context]:
            contexts[context].append(label)
    return dict(contexts)


def build_cooccurrence_graph(
    contexts: Mapping[str, Sequence[str]],
    graph: Optional[Graph] = None,
) -> Graph:
    """
    Build (or extend) a graph from co-occurrence contexts.

    Args:
        contexts: Mapping of context id to the labels occurring in it
        graph: Graph to extend; a new one is created when omitted

    Returns:
        The populated graph

    Raises:
        ValidationError: If ``contexts`` is not a mapping of id to label lists.
            The graph is not modified in that case.
    """
    result = default_validator().validate("cooccurrence", contexts)
    if not result.is_valid:
        raise ValidationError("; ".join(result.errors))

    graph = graph if graph is not None else Graph()
    added = 0
    with graph.transaction():
        for context, labels in contexts.items():
            members = [graph.get_or_add_node(label) for label in dict.fromkeys(labels)]
            for source in members:
                for destination in members:
                    if source is destination:
                        continue
                    edge = Edge(label=context, source=source, destination=destination)
                    if source.has_outgoing(edge):
                        continue
                    graph.add_edge(edge)
                    added += 1

    logger.info(
        "Loaded %d contexts into %d nodes and %d new edges",
        len(contexts),
        graph.node_count(),
        added,
    )
    return graph
