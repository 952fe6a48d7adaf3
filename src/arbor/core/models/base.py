"""
Core domain models base module for the dependency graph system.

This module provides the matcher type shared by every label and tag query of
the node and arc models. A matcher is one of:

- a string, compared for equality
- a compiled regular expression, searched anywhere in the value
- a set, list or tuple of strings, tested for membership
- a callable taking the value and returning a bool
"""

import re
from typing import Callable, Collection, Optional, Pattern, Union

Matcher = Union[str, Pattern[str], Collection[str], Callable[[Optional[str]], bool]]


def matches(value: Optional[str], matcher: Matcher) -> bool:
    """
    Check whether a label or tag value satisfies a matcher.

    A missing value only satisfies callable matchers that accept it.

    Args:
        value: The label or tag to test
        matcher: Exact string, compiled pattern, collection of strings or predicate

    Returns:
        bool: True if the value matches
    """
    if isinstance(matcher, str):
        return value == matcher
    if isinstance(matcher, re.Pattern):
        return value is not None and matcher.search(value) is not None
    if callable(matcher):
        return bool(matcher(value))
    return value in matcher


def validate_label(label: Optional[str], name: str = "label") -> None:
    """Validate that an arc label is a non-empty string."""
    if not isinstance(label, str) or not label.strip():
        raise ValueError(f"{name} must be a non-empty string")
