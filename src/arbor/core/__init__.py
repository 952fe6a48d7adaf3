"""Core dependency graph functionality."""

from .config import TraversalSettings, get_settings, override_settings, reconfigure
from .constants import FEAT_PB, NULL_ID, ROOT_ID, ROOT_TAG
from .exceptions import (
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
from .models import DependencyArc, DependencyNode, FeatureMap, Matcher, SemanticArc
from .graph import WeightedEdge, WeightedGraph
from .types import WeightedGraphProtocol
from .tree import DependencyTree
from .serialization import TreeSerializer

__all__ = [
    "ConfigurationError",
    "CyclicTreeError",
    "DependencyArc",
    "DependencyNode",
    "DependencyTree",
    "FEAT_PB",
    "FeatureMap",
    "GraphOperationError",
    "IndexOutOfRangeError",
    "InvalidOperationError",
    "LayerNotInitializedError",
    "Matcher",
    "NULL_ID",
    "NodeNotFoundError",
    "ROOT_ID",
    "ROOT_TAG",
    "ResourceNotFoundError",
    "SemanticArc",
    "TraversalSettings",
    "TreeSerializer",
    "ValidationError",
    "WeightedEdge",
    "WeightedGraph",
    "WeightedGraphProtocol",
    "get_settings",
    "override_settings",
    "reconfigure",
]
