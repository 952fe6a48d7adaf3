"""
Base Validation Components for arbor

This module provides the validation building blocks used by the models and the
tree container:
- ValidationResult, the report returned by tree and schema validation
- DataclassRule, a runtime type check of dataclass fields against their hints
- validate_dataclass, a decorator applying DataclassRule after ``__init__``
"""

import functools
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type, Union, get_args, get_origin, get_type_hints


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed
        errors (List[str]): Validation error messages
        warnings (List[str]): Validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None

    @classmethod
    def from_messages(
        cls, errors: List[str], warnings: Optional[List[str]] = None, **context: Any
    ) -> "ValidationResult":
        """Build a result that is valid exactly when there are no errors."""
        return cls(
            is_valid=not errors,
            errors=list(errors),
            warnings=list(warnings or []),
            context=context or None,
        )


class DataclassRule:
    """
    Rule checking that dataclass fields match their type hints.

    Supports plain classes, ``Optional``/``Union``, ``List``, ``Dict`` and ``Any``.
    Integers are accepted where a float is expected.

    Attributes:
        dataclass_type: The dataclass type to validate against
    """

    def __init__(self, dataclass_type: Type, error_message: str = ""):
        self.error_message = error_message or f"Invalid field types in {dataclass_type.__name__}"
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _validate_type(self, value: Any, expected_type: Any) -> bool:
        """Validate a value against its expected type."""
        if expected_type is Any:
            return True

        origin = get_origin(expected_type)
        if origin is Union:
            return any(self._validate_type(value, arg) for arg in get_args(expected_type))
        if expected_type is type(None):
            return value is None
        if expected_type is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)

        if origin is list:
            args = get_args(expected_type)
            return isinstance(value, list) and (
                not args or all(self._validate_type(item, args[0]) for item in value)
            )
        if origin is dict:
            args = get_args(expected_type)
            return isinstance(value, dict) and (
                len(args) != 2
                or all(
                    self._validate_type(k, args[0]) and self._validate_type(v, args[1])
                    for k, v in value.items()
                )
            )
        if origin is not None:
            return isinstance(value, origin)

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
        return all(
            self._validate_type(getattr(value, name), hint) for name, hint in self.type_hints.items()
        )


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    The generated ``__init__`` is wrapped, so the check also applies to
    dataclasses without a ``__post_init__``. An existing ``__post_init__`` still
    runs first, inside ``__init__``, so it can normalize or reject values; field
    types are checked afterwards.

    Example:
        >>> @validate_dataclass
        ... @dataclass
        ... class Example:
        ...     name: str
        ...     count: int
    """
    original_init = cls.__init__
    rule: Optional[DataclassRule] = None

    @functools.wraps(original_init)
    def validated_init(self, *args, **kwargs):
        """Initialize, then validate all fields."""
        nonlocal rule

        original_init(self, *args, **kwargs)

        if rule is None:
            rule = DataclassRule(cls)
        if not rule.validate(self):
            raise TypeError(rule.error_message)

    cls.__init__ = validated_init
    return cls
