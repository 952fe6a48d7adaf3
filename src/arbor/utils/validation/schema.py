"""
Schema Validation Components for arbor

This module provides JSON schema-based validation for serialized dependency
trees. It supports:
- The built-in schema of the tree serialization format
- Registration of additional schemas by name
- Validation of payloads against a registered schema
- Validation reporting through ValidationResult
"""

from typing import Any, Dict

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .base import ValidationResult

_NULLABLE_STRING = {"type": ["string", "null"]}

_ARC_SCHEMA = {
    "type": "object",
    "properties": {
        "head": {"type": "integer", "minimum": 0},
        "label": {"type": "string", "minLength": 1},
        "function_tag": _NULLABLE_STRING,
    },
    "required": ["head", "label"],
}

TREE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "schema_version": {"type": "string"},
        "metadata": {"type": "object", "additionalProperties": {"type": "string"}},
        "nodes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer", "minimum": 1},
                    "form": _NULLABLE_STRING,
                    "lemma": _NULLABLE_STRING,
                    "pos_tag": _NULLABLE_STRING,
                    "named_entity_tag": _NULLABLE_STRING,
                    "feats": {"type": "object", "additionalProperties": {"type": "string"}},
                    "head": {"type": ["integer", "null"], "minimum": 0},
                    "label": _NULLABLE_STRING,
                    "secondary_heads": {"type": ["array", "null"], "items": _ARC_SCHEMA},
                    "semantic_heads": {"type": ["array", "null"], "items": _ARC_SCHEMA},
                },
                "required": ["id"],
            },
        },
    },
    "required": ["schema_version", "nodes"],
}


class SchemaValidator:
    """
    JSON Schema-based validator for serialized payloads.

    Attributes:
        schemas (Dict[str, Dict[str, Any]]): Registered schemas by name; the
            ``"tree"`` schema is registered on construction
    """

    def __init__(self):
        self.schemas: Dict[str, Dict[str, Any]] = {"tree": TREE_SCHEMA}

    def register_schema(self, name: str, schema: Dict[str, Any]) -> None:
        """
        Register a JSON schema under a name.

        Example:
            >>> validator = SchemaValidator()
            >>> validator.register_schema("arc", {"type": "object", "required": ["head"]})
        """
        self.schemas[name] = schema

    def validate(self, payload: Any, name: str = "tree") -> ValidationResult:
        """
        Validate a payload against a registered schema.

        If no schema is registered under the name, the result is valid and
        carries a warning.

        Args:
            payload: Decoded JSON data
            name: Name of the schema to use

        Returns:
            ValidationResult containing validation details and any errors or warnings
        """
        errors = []
        warnings = []

        schema = self.schemas.get(name)
        if schema is None:
            warnings.append(f"No schema registered under: {name}")
        else:
            try:
                json_validate(instance=payload, schema=schema)
            except JsonSchemaError as e:
                errors.append(f"Schema validation failed: {e.message}")

        return ValidationResult.from_messages(errors, warnings, schema=name)
