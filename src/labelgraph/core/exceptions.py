"""
Custom exceptions for the label graph system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle various error conditions in a structured and meaningful way. Graph
mutation failures (duplicates, missing nodes) are raised locally and leave the
graph untouched. Path finding failures are normally reported through the status of
a ``PathResult``; the exception types below exist for callers that prefer to
receive them as exceptions via ``PathResult.raise_for_status()``.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as dataset schema validation performed by the loaders.

    Examples:
        * Campus dataset missing its ``buildings`` list
        * Path record with a negative distance
        * Co-occurrence context that is not a list of labels
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the graph structure encounter
    errors, such as invalid node/edge operations or graph integrity violations.
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node lookup by a label the graph does not hold
        * Named graph missing from a registry
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Also raised by ``Graph.add_edge`` when an edge endpoint is not the node
    instance the graph holds for that label.
    """


class GraphNotFoundError(ResourceNotFoundError):
    """Raised when a named graph is not present in a registry."""


class DuplicateResourceError(Exception):
    """
    Raised when attempting to create a duplicate resource.

    This exception is raised when attempting to create a resource that
    already exists, violating uniqueness constraints.
    """


class DuplicateNodeError(DuplicateResourceError):
    """Raised when a node whose label already exists is added to a graph."""


class DuplicateEdgeError(DuplicateResourceError):
    """
    Raised when an edge equal to one already attached is added.

    Two edges are equal when their label, source label and destination label
    all match.
    """


class PathFindingError(GraphOperationError):
    """Base class for path finding failures."""


class UnknownNodeError(PathFindingError):
    """Raised when a path query names a label that is absent from the graph."""

    def __init__(self, label: str):
        super().__init__(f"unknown node {label!r}")
        self.label = label


class UnknownStartNodeError(UnknownNodeError):
    """The start label of a path query is not in the graph."""


class UnknownDestinationNodeError(UnknownNodeError):
    """The destination label of a path query is not in the graph."""


class NoPathFoundError(PathFindingError):
    """Raised when both nodes exist but no route connects them."""


class NegativeWeightError(GraphOperationError):
    """Raised when negative weights are detected during a search."""
