"""JSON schemas for the datasets the loaders accept."""

from ..utils.validation import SchemaValidator

COOCCURRENCE_SCHEMA = {
    "type": "object",
    "additionalProperties": {
        "type": "array",
        "items": {"type": "string", "minLength": 1, "pattern": r"\S"},
    },
}

CAMPUS_SCHEMA = {
    "type": "object",
    "required": ["buildings", "paths"],
    "properties": {
        "buildings": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["short_name", "x", "y"],
                "properties": {
                    "short_name": {"type": "string", "minLength": 1, "pattern": r"\S"},
                    "long_name": {"type": "string"},
                    "x": {"type": "number"},
                    "y": {"type": "number"},
                },
            },
        },
        "paths": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["start", "end", "distance"],
                "properties": {
                    "start": {"type": "string", "minLength": 1},
                    "end": {"type": "string", "minLength": 1},
                    "distance": {"type": "number", "minimum": 0},
                    "label": {"type": "string", "minLength": 1, "pattern": r"\S"},
                },
            },
        },
    },
}


def default_validator() -> SchemaValidator:
    """A validator with the co-occurrence and campus schemas registered."""
    validator = SchemaValidator()
    validator.register_schema("cooccurrence", COOCCURRENCE_SCHEMA)
    validator.register_schema("campus", CAMPUS_SCHEMA)
    return validator
