"""
Base Validation Components for the label graph system.

This module provides the ValidationResult container used to report validation
outcomes and the DataclassRule / ``validate_dataclass`` pair that adds runtime
field type checking to the core dataclasses (edges, path steps).
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, Union, get_args, get_origin, get_type_hints


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]
    context: Optional[Dict[str, Any]] = None


class DataclassRule:
    """
    Rule for validating dataclass fields.

    This rule ensures that fields in a dataclass instance match their type hints.
    Type hints are resolved lazily so that dataclasses may refer to each other.

    Attributes:
        dataclass_type: The dataclass type to validate against
        error_message: Message to display when validation fails
    """

    def __init__(self, dataclass_type: Type, error_message: str = ""):
        self.error_message = error_message or f"Invalid value for {dataclass_type.__name__}"
        self.dataclass_type = dataclass_type
        self._type_hints: Optional[Dict[str, Any]] = None

    @property
    def type_hints(self) -> Dict[str, Any]:
        if self._type_hints is None:
            self._type_hints = get_type_hints(self.dataclass_type)
        return self._type_hints

    def _validate_type(self, value: Any, expected_type: Any) -> bool:
        """Validate a value against its expected type."""
        if expected_type is Any:
            return True

        origin = get_origin(expected_type)

        # Optional[X] and X | None
        if origin is Union:
            args = get_args(expected_type)
            if value is None:
                return type(None) in args
            return any(self._validate_type(value, arg) for arg in args if arg is not type(None))

        if value is None:
            return False

        if origin is list:
            if not isinstance(value, list):
                return False
            args = get_args(expected_type)
            if not args:
                return True
            return all(self._validate_type(item, args[0]) for item in value)
        if origin is dict:
            if not isinstance(value, dict):
                return False
            args = get_args(expected_type)
            if len(args) != 2:
                return True
            key_type, val_type = args
            return all(
                self._validate_type(k, key_type) and self._validate_type(v, val_type)
                for k, v in value.items()
            )
        if origin is tuple:
            if not isinstance(value, tuple):
                return False
            args = get_args(expected_type)
            if not args:
                return True
            if len(args) == 2 and args[1] is Ellipsis:
                return all(self._validate_type(item, args[0]) for item in value)
            if len(args) != len(value):
                return False
            return all(self._validate_type(val, typ) for val, typ in zip(value, args))
        if origin is not None:
            try:
                return isinstance(value, origin)
            except TypeError:
                return True
        try:
            return isinstance(value, expected_type)
        except TypeError:
            return True

    def validate(self, value: Any) -> bool:
        """
        Validate a dataclass instance.

        Args:
            value: Dataclass instance to validate

        Returns:
            bool: True if every field matches its type hint
        """
        if not isinstance(value, self.dataclass_type):
            return False

        for field_name, field_type in self.type_hints.items():
            if not self._validate_type(getattr(value, field_name), field_type):
                return False
        return True

    def invalid_fields(self, value: Any) -> List[str]:
        """Return the names of the fields that do not match their type hints."""
        return [
            field_name
            for field_name, field_type in self.type_hints.items()
            if not self._validate_type(getattr(value, field_name), field_type)
        ]


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    The class's own ``__post_init__`` runs first so it can normalise values
    (for example coerce an int weight to float) before the types are checked.

    Example:
        >>> @validate_dataclass
        ... @dataclass
        ... class Example:
        ...     name: str
        ...     count: int
    """
    original_post_init = getattr(cls, "__post_init__", None)
    validator = DataclassRule(cls)

    def validated_post_init(self):
        """Validate all fields after initialization."""
        if original_post_init:
            original_post_init(self)

        if not validator.validate(self):
            bad = ", ".join(validator.invalid_fields(self))
            raise TypeError(f"Invalid field types in {cls.__name__}: {bad}")

    cls.__post_init__ = validated_post_init
    return cls
