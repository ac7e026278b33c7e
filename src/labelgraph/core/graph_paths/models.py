"""
Data models for graph path finding.

This module provides the result structures returned by the path finders:
- PathStep: one hop of a path, annotated with the edge used and its cost
- PathResult: the whole answer to a query, including failure outcomes
- PerformanceMetrics: timing and exploration counters for a search

Every query produces a PathResult. Failures such as an unknown start node are
reported through ``PathResult.status`` rather than raised, so presentation code
can say "unknown character X" instead of crashing. ``raise_for_status`` turns a
failure into the matching exception when that is more convenient.

Example:
    >>> result = PathFinding.shortest_path(graph, "P", "R")
    >>> result.status
    <PathStatus.FOUND: 'found'>
    >>> [step.edge_label for step in result]
    ['c1', 'c1']
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from ..exceptions import (
    NoPathFoundError,
    UnknownDestinationNodeError,
    UnknownStartNodeError,
)
from ..models import Edge, Node
from ...utils.validation import validate_dataclass
from .types import PathStatus


class PathValidationError(Exception):
    """
    Raised when a path result is internally inconsistent.

    This exception indicates issues such as:
    - Discontinuities in the path (steps not properly connected)
    - A path that does not start at the query's start node
    - Steps attached to a failure outcome
    """


def _node_dict(node: Node) -> Union[str, Dict[str, Any]]:
    """Node as JSON data; nodes with map coordinates become objects."""
    if "x" in node.attributes and "y" in node.attributes:
        return {"label": node.label, "x": node.attributes["x"], "y": node.attributes["y"]}
    return node.label


@validate_dataclass
@dataclass(frozen=True)
class PathStep:
    """
    One hop of a path.

    Attributes:
        source: Node the hop leaves
        destination: Node reached by the hop
        edge: Edge used; among parallel edges the cheapest, then smallest label
        weight: Cost of this hop
        cumulative_weight: Cost from the start up to and including this hop
    """

    source: Node
    destination: Node
    edge: Edge
    weight: float
    cumulative_weight: float

    def __post_init__(self):
        if self.edge.source_label != self.source.label:
            raise PathValidationError(
                f"edge {self.edge.label!r} does not start at {self.source.label!r}"
            )
        if self.edge.destination_label != self.destination.label:
            raise PathValidationError(
                f"edge {self.edge.label!r} does not end at {self.destination.label!r}"
            )

    @property
    def edge_label(self) -> str:
        return self.edge.label

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": _node_dict(self.source),
            "end": _node_dict(self.destination),
            "label": self.edge.label,
            "cost": self.weight,
        }


@dataclass(frozen=True)
class PathResult:
    """
    Container for path finding results.

    Results are immutable so a cached answer can be handed to several callers.

    Attributes:
        status: Outcome of the query
        start: Start label as given in the query
        end: Destination label as given in the query
        steps: Hops from start to end, empty unless ``status`` is FOUND
        total_weight: Sum of the step weights
    """

    status: PathStatus
    start: str
    end: str
    steps: Tuple[PathStep, ...] = ()
    total_weight: float = 0.0

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.status, PathStatus):
            raise TypeError("status must be a PathStatus")
        if isinstance(self.steps, list):
            object.__setattr__(self, "steps", tuple(self.steps))
        if not isinstance(self.steps, tuple):
            raise TypeError("steps must be a sequence of PathStep objects")
        if not all(isinstance(step, PathStep) for step in self.steps):
            raise TypeError("steps must contain only PathStep objects")

        if self.status is not PathStatus.FOUND:
            if self.steps:
                raise PathValidationError(f"a {self.status.value} result cannot carry steps")
            if self.status is PathStatus.TRIVIAL and self.start != self.end:
                raise PathValidationError("a trivial path must start and end at the same node")
            return

        if not self.steps:
            raise PathValidationError("a found path must have at least one step")
        if self.steps[0].source.label != self.start:
            raise PathValidationError(
                f"path starts at {self.steps[0].source.label!r}, expected {self.start!r}"
            )
        for i in range(len(self.steps) - 1):
            if self.steps[i].destination.label != self.steps[i + 1].source.label:
                raise PathValidationError(
                    f"Path discontinuity between steps {i} and {i + 1}: "
                    f"{self.steps[i].destination.label} != {self.steps[i + 1].source.label}"
                )
        if self.steps[-1].destination.label != self.end:
            raise PathValidationError(
                f"path ends at {self.steps[-1].destination.label!r}, expected {self.end!r}"
            )

    @classmethod
    def trivial(cls, label: str) -> "PathResult":
        return cls(status=PathStatus.TRIVIAL, start=label, end=label)

    @classmethod
    def failure(cls, status: PathStatus, start: str, end: str) -> "PathResult":
        if status in (PathStatus.FOUND, PathStatus.TRIVIAL):
            raise ValueError(f"{status.value} is not a failure status")
        return cls(status=status, start=start, end=end)

    @classmethod
    def found(cls, start: str, end: str, steps: Sequence[PathStep]) -> "PathResult":
        total = steps[-1].cumulative_weight if steps else 0.0
        return cls(
            status=PathStatus.FOUND, start=start, end=end, steps=tuple(steps), total_weight=total
        )

    def __len__(self) -> int:
        """Return the number of steps in the path."""
        return len(self.steps)

    def __getitem__(self, index: int) -> PathStep:
        return self.steps[index]

    def __iter__(self) -> Iterator[PathStep]:
        return iter(self.steps)

    @property
    def is_success(self) -> bool:
        """True for a found or trivial path."""
        return self.status in (PathStatus.FOUND, PathStatus.TRIVIAL)

    @property
    def nodes(self) -> List[Node]:
        """Nodes reached, excluding the start and including the destination."""
        return [step.destination for step in self.steps]

    @property
    def node_labels(self) -> List[str]:
        """Labels of every node on the path, start included."""
        if not self.steps:
            return [self.start] if self.is_success else []
        return [self.start] + [step.destination.label for step in self.steps]

    @property
    def edge_labels(self) -> List[str]:
        return [step.edge.label for step in self.steps]

    def raise_for_status(self) -> "PathResult":
        """
        Raise the exception matching a failure status.

        Returns:
            This result, when the query succeeded

        Raises:
            UnknownStartNodeError, UnknownDestinationNodeError, NoPathFoundError
        """
        if self.status is PathStatus.UNKNOWN_START:
            raise UnknownStartNodeError(self.start)
        if self.status is PathStatus.UNKNOWN_DESTINATION:
            raise UnknownDestinationNodeError(self.end)
        if self.status is PathStatus.NO_PATH:
            raise NoPathFoundError(f"No path exists between {self.start} and {self.end}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form of the result."""
        return {
            "start": self.start,
            "end": self.end,
            "status": self.status.value,
            "cost": self.total_weight,
            "path": [step.to_dict() for step in self.steps],
        }

    def format_lines(self, noun: str = "character") -> List[str]:
        """
        Render the result as text lines.

        The first line is ``path from <start> to <end>:``; it is followed by one
        ``<a> to <b> via <label>`` line per step, or by a line describing the
        failure, e.g. ``unknown character <label>``.
        """
        lines = [f"path from {self.start} to {self.end}:"]
        if self.status is PathStatus.UNKNOWN_START:
            lines.append(f"unknown {noun} {self.start}")
        elif self.status is PathStatus.UNKNOWN_DESTINATION:
            lines.append(f"unknown {noun} {self.end}")
        elif self.status is PathStatus.NO_PATH:
            lines.append("no path found")
        else:
            lines.extend(
                f"{step.source.label} to {step.destination.label} via {step.edge.label}"
                for step in self.steps
            )
        return lines


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Number of steps in the found path (if any)
        cache_hit: Whether result was from cache
        nodes_explored: Number of nodes finalized during search
        max_memory_used: Peak memory usage during operation (bytes)
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    cache_hit: bool = False
    nodes_explored: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, bool, None]]:
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "cache_hit": self.cache_hit,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }
