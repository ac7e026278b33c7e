"""
Node model for the label graph system.

A node is a mutable vertex identified by its label. It owns two edge
collections, incoming and outgoing, each kept sorted in edge order and free of
duplicates. Two nodes with the same label are the same vertex: equality and
hashing use the label alone.
"""

import logging
from bisect import insort
from functools import total_ordering
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional, Set, Tuple

from ..exceptions import DuplicateEdgeError
from .base import validate_label

if TYPE_CHECKING:
    from .edge import Edge

logger = logging.getLogger(__name__)


def _check_edge(edge: Any) -> "Edge":
    from .edge import Edge

    if edge is None:
        raise ValueError("edge must not be None")
    if not isinstance(edge, Edge):
        raise TypeError(f"expected an Edge, got {type(edge).__name__}")
    return edge


class _EdgeSet:
    """Sorted, duplicate-free edge collection."""

    __slots__ = ("_edges", "_keys")

    def __init__(self):
        self._edges: List["Edge"] = []
        self._keys: Set[Tuple[str, str, str]] = set()

    def __contains__(self, edge: "Edge") -> bool:
        return edge.sort_key in self._keys

    def __len__(self) -> int:
        return len(self._edges)

    def add(self, edge: "Edge") -> None:
        if edge.sort_key in self._keys:
            raise DuplicateEdgeError(
                f"edge {edge.label!r} from {edge.source_label!r} to "
                f"{edge.destination_label!r} already exists"
            )
        insort(self._edges, edge)
        self._keys.add(edge.sort_key)

    def discard(self, edge: "Edge") -> None:
        if edge.sort_key in self._keys:
            self._keys.remove(edge.sort_key)
            self._edges.remove(edge)

    def view(self) -> Tuple["Edge", ...]:
        return tuple(self._edges)


@total_ordering
class Node:
    """
    A vertex in a label graph.

    Attributes:
        label (str): Unique key of the node within one graph
        attributes (Dict[str, Any]): Free-form data such as map coordinates;
            not part of the node's identity
    """

    def __init__(
        self,
        label: str,
        incoming: Optional[Iterable["Edge"]] = None,
        outgoing: Optional[Iterable["Edge"]] = None,
        attributes: Optional[Dict[str, Any]] = None,
    ):
        """
        Create a node, optionally seeded with edge collections.

        Args:
            label: Label of this node
            incoming: Edges ending at this node
            outgoing: Edges starting at this node
            attributes: Extra data carried by the node

        Raises:
            DuplicateEdgeError: If a seed collection holds the same edge twice
        """
        validate_label("label", label)
        self._label = label
        self.attributes: Dict[str, Any] = dict(attributes or {})
        self._incoming = _EdgeSet()
        self._outgoing = _EdgeSet()
        self._watchers: List[Callable[[], None]] = []
        for edge in incoming or ():
            self.add_incoming(edge)
        for edge in outgoing or ():
            self.add_outgoing(edge)

    @property
    def label(self) -> str:
        return self._label

    def _watch(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` whenever an edge is added to this node."""
        self._watchers.append(callback)

    def _unwatch(self, callback: Callable[[], None]) -> None:
        if callback in self._watchers:
            self._watchers.remove(callback)

    def _changed(self) -> None:
        for callback in self._watchers:
            callback()

    def add_incoming(self, edge: "Edge") -> None:
        """
        Add an edge that points to this node.

        Raises:
            ValueError: If ``edge`` is None or does not end at this node
            DuplicateEdgeError: If an equal edge is already present
        """
        edge = _check_edge(edge)
        if edge.destination_label != self._label:
            raise ValueError(
                f"incoming edge {edge.label!r} ends at {edge.destination_label!r}, "
                f"not {self._label!r}"
            )
        self._incoming.add(edge)
        self._changed()

    def add_outgoing(self, edge: "Edge") -> None:
        """
        Add an edge that points away from this node.

        Raises:
            ValueError: If ``edge`` is None or does not start at this node
            DuplicateEdgeError: If an equal edge is already present
        """
        edge = _check_edge(edge)
        if edge.source_label != self._label:
            raise ValueError(
                f"outgoing edge {edge.label!r} starts at {edge.source_label!r}, "
                f"not {self._label!r}"
            )
        self._outgoing.add(edge)
        self._changed()

    def has_incoming(self, edge: "Edge") -> bool:
        return edge in self._incoming

    def has_outgoing(self, edge: "Edge") -> bool:
        return edge in self._outgoing

    def _discard_incoming(self, edge: "Edge") -> None:
        self._incoming.discard(edge)

    def _discard_outgoing(self, edge: "Edge") -> None:
        self._outgoing.discard(edge)

    def get_incoming(self) -> Tuple["Edge", ...]:
        """Edges ending at this node, in edge order."""
        return self._incoming.view()

    def get_outgoing(self) -> Tuple["Edge", ...]:
        """Edges starting at this node, in edge order."""
        return self._outgoing.view()

    def out_degree(self) -> int:
        return len(self._outgoing)

    def get_children(self) -> List["Node"]:
        """Distinct destinations of the outgoing edges, sorted by label."""
        children = {edge.destination_label: edge.destination for edge in self._outgoing.view()}
        return [children[label] for label in sorted(children)]

    def find_edges(self, other: "Node") -> List["Edge"]:
        """All outgoing edges that lead to ``other``, in edge order."""
        return [edge for edge in self._outgoing.view() if edge.destination_label == other.label]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._label == other._label

    def __lt__(self, other: "Node") -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._label < other._label

    def __hash__(self) -> int:
        return hash(self._label)

    def __repr__(self) -> str:
        return (
            f"Node({self._label!r}, in={len(self._incoming)}, out={len(self._outgoing)})"
        )
