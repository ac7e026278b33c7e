"""
Edge model for the label graph system.

An edge is an immutable, directed, labelled and weighted connection between two
nodes. Several edges may join the same pair of nodes as long as their labels
differ. Edges compare and sort by (label, source label, destination label); the
weight takes no part in identity.
"""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Tuple

from .base import DEFAULT_WEIGHT, validate_dataclass, validate_label, validate_weight
from .node import Node


@total_ordering
@validate_dataclass
@dataclass(frozen=True, eq=False)
class Edge:
    """
    A directed connection between two nodes.

    The edge does not own its endpoints; the graph does. Edges added to a graph
    must be built from the node instances that graph holds.

    Attributes:
        label (str): Display annotation, e.g. the comic book both characters appear in
        source (Node): Node the edge leaves
        destination (Node): Node the edge enters
        weight (float): Non-negative traversal cost, 1.0 unless the domain supplies one
    """

    label: str
    source: Node
    destination: Node
    weight: float = DEFAULT_WEIGHT
    sort_key: Tuple[str, str, str] = field(init=False, repr=False)

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_label("label", self.label)
        if self.source is None or self.destination is None:
            raise ValueError("edge endpoints must not be None")
        if not isinstance(self.source, Node) or not isinstance(self.destination, Node):
            raise TypeError("edge endpoints must be Node instances")
        object.__setattr__(self, "weight", validate_weight(self.weight))
        object.__setattr__(
            self, "sort_key", (self.label, self.source.label, self.destination.label)
        )

    @property
    def source_label(self) -> str:
        return self.source.label

    @property
    def destination_label(self) -> str:
        return self.destination.label

    @property
    def is_self_loop(self) -> bool:
        return self.source.label == self.destination.label

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __hash__(self) -> int:
        return hash(self.sort_key)

    def __repr__(self) -> str:
        return (
            f"Edge({self.label!r}, {self.source.label!r} -> {self.destination.label!r}, "
            f"weight={self.weight:g})"
        )
