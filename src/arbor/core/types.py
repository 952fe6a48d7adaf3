"""
Core type definitions and protocols.

This module provides the protocols that graph algorithms depend on, so they
can accept WeightedGraph or any structure exposing the same operations.
"""

from typing import List, Protocol, runtime_checkable

from .graph.weighted import WeightedEdge


@runtime_checkable
class WeightedGraphProtocol(Protocol):
    """Protocol defining the operations algorithms use on a weighted graph."""

    def size(self) -> int:
        """Get the number of vertices."""
        ...

    def get_outgoing_edges(self, source: int) -> List[WeightedEdge]:
        """Get the outgoing edges of a vertex in insertion order."""
        ...

    def set_edge(self, source: int, target: int, weight: float) -> WeightedEdge:
        """Append an edge from source to target."""
        ...
