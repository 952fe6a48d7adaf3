"""
Validation package for arbor.

This package provides validation utilities for ensuring data integrity
and type safety of models and serialized trees.
"""

from .base import DataclassRule, ValidationResult, validate_dataclass
from .schema import TREE_SCHEMA, SchemaValidator

__all__ = [
    "ValidationResult",
    "DataclassRule",
    "validate_dataclass",
    "SchemaValidator",
    "TREE_SCHEMA",
]
