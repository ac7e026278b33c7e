"""
Core domain models package for the label graph system.

This package provides the node and edge data structures that graphs are built from.
"""

from .base import DEFAULT_WEIGHT, validate_label, validate_weight
from .node import Node
from .edge import Edge

__all__ = [
    "DEFAULT_WEIGHT",
    "validate_label",
    "validate_weight",
    "Node",
    "Edge",
]
