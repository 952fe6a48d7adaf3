"""
Tests for traversal settings.
"""

import pytest

from arbor.core.config import get_settings, override_settings, reconfigure
from arbor.core.exceptions import ConfigurationError


def test_default_settings():
    """Test that cycle checking is off by default."""
    assert get_settings().check_cycles is False


def test_reconfigure():
    """Test replacing a setting."""
    settings = reconfigure(check_cycles=True)

    assert settings.check_cycles is True
    assert get_settings() is settings


def test_reconfigure_unknown_setting():
    """Test that unknown setting names are rejected."""
    with pytest.raises(ConfigurationError):
        reconfigure(max_depth=3)
    assert get_settings().check_cycles is False


def test_reconfigure_invalid_value():
    """Test that non-boolean values are rejected."""
    with pytest.raises(ConfigurationError):
        reconfigure(check_cycles="yes")


def test_override_settings_restores():
    """Test that overrides are undone on exit, including on errors."""
    with override_settings(check_cycles=True) as settings:
        assert settings.check_cycles is True
        assert get_settings().check_cycles is True
    assert get_settings().check_cycles is False

    with pytest.raises(RuntimeError):
        with override_settings(check_cycles=True):
            raise RuntimeError("boom")
    assert get_settings().check_cycles is False
