"""
Validation package for the label graph system.

This package provides runtime type checking for the core dataclasses and
JSON schema validation for the datasets the loaders accept.
"""

from .base import DataclassRule, ValidationResult, validate_dataclass
from .schema import SchemaValidator

__all__ = [
    "ValidationResult",
    "DataclassRule",
    "validate_dataclass",
    "SchemaValidator",
]
