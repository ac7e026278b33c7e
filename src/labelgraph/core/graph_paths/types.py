"""Type definitions for graph path finding."""

from enum import Enum
from typing import Callable

from ..models import Edge


class PathStatus(Enum):
    """Outcome of a path query."""

    FOUND = "found"
    TRIVIAL = "trivial"  # start == end, zero-length path
    NO_PATH = "no_path"
    UNKNOWN_START = "unknown_start"
    UNKNOWN_DESTINATION = "unknown_destination"


# Type alias for weight functions; the default weight is ``edge.weight``
WeightFunc = Callable[[Edge], float]
