"""
Core domain models package for the dependency graph system.

This package provides the fundamental data structures that represent
dependency nodes, their auxiliary arcs and their feature maps.
"""

from .arc import DependencyArc, SemanticArc, format_arcs
from .base import Matcher, matches
from .features import FeatureMap
from .node import DependencyNode

__all__ = [
    # Base utilities
    "Matcher",
    "matches",
    # Node models
    "DependencyNode",
    "FeatureMap",
    # Arc models
    "DependencyArc",
    "SemanticArc",
    "format_arcs",
]
