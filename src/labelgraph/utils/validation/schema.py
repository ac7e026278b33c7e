"""
Schema Validation Components for the label graph system.

This module provides JSON schema-based validation for the raw datasets that the
loaders turn into graphs. Loader input is checked here, before any node or edge
is created, so a graph never receives a half-formed record.
"""

from typing import Any, Dict, List

from jsonschema import Draft7Validator
from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .base import ValidationResult


class SchemaValidator:
    """
    JSON Schema-based validator for loader datasets.

    Schemas are registered under a dataset kind (``"cooccurrence"``,
    ``"campus"``) and instances are validated against the schema for their kind.

    Attributes:
        schemas (Dict[str, Dict[str, Any]]): Registered schemas keyed by dataset kind
    """

    def __init__(self):
        self.schemas: Dict[str, Dict[str, Any]] = {}

    def register_schema(self, kind: str, schema: Dict[str, Any]) -> None:
        """
        Register a JSON schema for a dataset kind.

        Args:
            kind: Dataset kind this schema applies to
            schema: JSON schema definition as a dictionary

        Raises:
            jsonschema.SchemaError: If the schema itself is malformed
        """
        Draft7Validator.check_schema(schema)
        self.schemas[kind] = schema

    def validate(self, kind: str, instance: Any) -> ValidationResult:
        """
        Validate a dataset against the schema registered for its kind.

        If no schema is registered for the kind, a warning is included in the
        result and the instance is treated as valid.

        Args:
            kind: Dataset kind
            instance: Decoded JSON value to check

        Returns:
            ValidationResult containing validation details and any errors or warnings
        """
        errors: List[str] = []
        warnings: List[str] = []

        schema = self.schemas.get(kind)
        if schema is None:
            warnings.append(f"No schema registered for dataset kind: {kind}")
        else:
            try:
                json_validate(instance=instance, schema=schema)
            except JsonSchemaError as e:
                location = "/".join(str(part) for part in e.absolute_path) or "<root>"
                errors.append(f"Schema validation failed at {location}: {e.message}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"kind": kind},
        )
