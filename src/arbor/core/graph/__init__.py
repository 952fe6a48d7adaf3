"""
Graph module for arbor.

This module provides the weighted directed graph used by algorithms that
compute or search over dependency structures.
"""

from .weighted import WeightedEdge, WeightedGraph

__all__ = [
    "WeightedEdge",
    "WeightedGraph",
]
