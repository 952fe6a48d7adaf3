"""
Custom exceptions for the dependency graph system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle various error conditions in a structured and meaningful way. Each exception
type corresponds to a specific category of errors that may occur while building or
querying dependency structures.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as malformed column-format lines or serialized trees that do not
    match their schema.

    Examples:
        * Non-integer node ids
        * Head ids that do not exist in the sentence
        * Malformed arc strings
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on a dependency structure
    encounter errors, such as invalid positional lookups or tree integrity
    violations.

    Examples:
        * Cycles in the primary tree
        * Dependent or vertex index out of range
        * Invalid serialized graph data
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class CyclicTreeError(GraphOperationError):
    """
    Raised when a cycle is found in the primary head relation.

    Descendant and subtree traversals assume the primary heads form a tree.
    This error is only raised when cycle checking is enabled, or by explicit
    tree validation.
    """


class IndexOutOfRangeError(GraphOperationError, IndexError):
    """
    Raised when a positional index is outside its valid range.

    Examples:
        * Dependent lookup by position past the end of the dependent list
        * Vertex id outside ``[0, size)`` of a weighted graph
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown setting names
        * Invalid setting values
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on a
    resource that does not exist in the system.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Examples:
        * Node lookup by an id that is not part of the sentence
    """


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    This exception is raised when attempting to perform an operation that
    is not valid given the current state of a node or graph.
    """


class LayerNotInitializedError(InvalidOperationError):
    """
    Raised when an auxiliary arc layer is used before initialization.

    Secondary heads and semantic heads are absent until ``init_secondary_heads``
    or ``init_semantic_heads`` is called on the node.
    """
