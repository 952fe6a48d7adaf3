"""
Runtime settings for dependency graph traversal.

Settings are process-global and programmatic. They are read by the traversal
helpers of the node model each time a traversal starts, so changes take effect
immediately.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, Generator

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraversalSettings:
    """
    Settings controlling descendant and subtree traversals.

    Attributes:
        check_cycles (bool): Track visited nodes during traversal and raise
            CyclicTreeError on revisits instead of recursing forever
    """

    check_cycles: bool = False


_settings = TraversalSettings()


def get_settings() -> TraversalSettings:
    """Get the current traversal settings."""
    return _settings


def reconfigure(**kwargs: Any) -> TraversalSettings:
    """
    Replace selected traversal settings.

    Args:
        **kwargs: Setting names and their new values

    Returns:
        TraversalSettings: The settings now in effect

    Raises:
        ConfigurationError: If a setting name is unknown or a value has the wrong type
    """
    global _settings

    known = {f.name: f for f in fields(TraversalSettings)}
    for name, value in kwargs.items():
        if name not in known:
            raise ConfigurationError(f"Unknown traversal setting: {name}")
        if not isinstance(value, bool):
            raise ConfigurationError(f"Setting {name} must be a bool, got {type(value).__name__}")

    _settings = replace(_settings, **kwargs)
    logger.debug("Traversal settings updated: %s", _settings)
    return _settings


@contextmanager
def override_settings(**kwargs: Any) -> Generator[TraversalSettings, None, None]:
    """Context manager applying settings temporarily."""
    global _settings

    previous = _settings
    try:
        yield reconfigure(**kwargs)
    finally:
        _settings = previous
        logger.debug("Traversal settings restored: %s", _settings)
