"""
Core domain models base module for the label graph system.

Common validation helpers shared by the node and edge models.
"""

import math
from typing import Any

from ...utils.validation import validate_dataclass

DEFAULT_WEIGHT = 1.0

__all__ = ["DEFAULT_WEIGHT", "validate_dataclass", "validate_label", "validate_weight"]


def validate_label(name: str, value: Any) -> None:
    """Validate that a label is a non-empty string."""
    if value is None:
        raise ValueError(f"{name} must not be None")
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise ValueError(f"{name} must be a non-empty string")


def validate_weight(value: Any) -> float:
    """Validate an edge weight and return it as a float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("weight must be a numeric value")
    if math.isnan(value) or math.isinf(value):
        raise ValueError("weight must be a finite number")
    if value < 0:
        raise ValueError("weight must be non-negative")
    return float(value)
