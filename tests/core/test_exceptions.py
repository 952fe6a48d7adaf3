"""
Tests for custom exceptions.
"""

import pytest

from arbor.core.exceptions import (
    ConfigurationError,
    CyclicTreeError,
    GraphOperationError,
    IndexOutOfRangeError,
    InvalidOperationError,
    LayerNotInitializedError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_subclasses_keep_prefix():
    """Test that graph operation subclasses share the message prefix."""
    assert str(CyclicTreeError("loop")) == "Graph Operation Error: loop"
    assert str(IndexOutOfRangeError("far")) == "Graph Operation Error: far"


@pytest.mark.parametrize(
    "error, bases",
    [
        (CyclicTreeError, (GraphOperationError,)),
        (IndexOutOfRangeError, (GraphOperationError, IndexError)),
        (LayerNotInitializedError, (InvalidOperationError,)),
        (NodeNotFoundError, (ResourceNotFoundError,)),
        (ConfigurationError, (Exception,)),
    ],
)
def test_exception_hierarchy(error, bases):
    """Test the exception hierarchy."""
    for base in bases:
        assert issubclass(error, base)
