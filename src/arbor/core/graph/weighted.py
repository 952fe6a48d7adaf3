"""
Weighted directed graph with a fixed vertex count.

This module provides WeightedGraph, an adjacency-list structure over integer
vertex ids used as a building block by algorithms that score or search over
dependency structures. Edges are appended in O(1) and kept in insertion order;
self-loops and parallel edges are allowed.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List

from ...utils.validation import validate_dataclass
from ..exceptions import IndexOutOfRangeError


@validate_dataclass
@dataclass
class WeightedEdge:
    """
    Directed weighted edge between two vertex ids.

    Attributes:
        source (int): Source vertex id
        target (int): Target vertex id
        weight (float): Edge weight
    """

    source: int
    target: int
    weight: float

    def __post_init__(self):
        """Normalize the weight after initialization."""
        if isinstance(self.weight, int) and not isinstance(self.weight, bool):
            self.weight = float(self.weight)


class WeightedGraph:
    """
    Fixed-size adjacency-list graph over vertex ids ``0 .. size-1``.

    Attributes:
        _outgoing (List[List[WeightedEdge]]): Outgoing edges per source vertex
    """

    def __init__(self, size: int):
        """
        Initialize an edgeless graph.

        Args:
            size (int): Number of vertices

        Raises:
            ValueError: If size is negative
        """
        if size < 0:
            raise ValueError("size must be non-negative")
        self._outgoing: List[List[WeightedEdge]] = [[] for _ in range(size)]

    def _check_vertex(self, vertex: int, role: str) -> None:
        if not 0 <= vertex < len(self._outgoing):
            raise IndexOutOfRangeError(
                f"{role} vertex {vertex} out of range for graph of size {len(self._outgoing)}"
            )

    def set_edge(self, source: int, target: int, weight: float) -> WeightedEdge:
        """
        Append an edge to the outgoing list of its source.

        No cycle or duplicate detection is done.

        Args:
            source (int): Source vertex id
            target (int): Target vertex id
            weight (float): Edge weight

        Returns:
            WeightedEdge: The appended edge

        Raises:
            IndexOutOfRangeError: If either vertex id is out of range
        """
        self._check_vertex(source, "Source")
        self._check_vertex(target, "Target")

        edge = WeightedEdge(source, target, weight)
        self._outgoing[source].append(edge)
        return edge

    def add_edges_batch(self, edges: Iterable[WeightedEdge]) -> None:
        """Append multiple edges in order."""
        for edge in edges:
            self.set_edge(edge.source, edge.target, edge.weight)

    def get_outgoing_edges(self, source: int) -> List[WeightedEdge]:
        """
        Get the outgoing edges of a vertex in insertion order.

        Raises:
            IndexOutOfRangeError: If the vertex id is out of range
        """
        self._check_vertex(source, "Source")
        return list(self._outgoing[source])

    def has_edge(self, source: int, target: int) -> bool:
        """Check if at least one edge exists from source to target."""
        self._check_vertex(source, "Source")
        return any(edge.target == target for edge in self._outgoing[source])

    def get_edges(self) -> Iterator[WeightedEdge]:
        """Iterate over all edges by source vertex, then insertion order."""
        for edges in self._outgoing:
            yield from edges

    def get_edge_count(self) -> int:
        return sum(len(edges) for edges in self._outgoing)

    def size(self) -> int:
        """Get the number of vertices."""
        return len(self._outgoing)

    def __len__(self) -> int:
        return len(self._outgoing)
