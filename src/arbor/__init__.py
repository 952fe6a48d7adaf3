"""
arbor - Multi-layer Linguistic Dependency Graphs

This package provides the shared data structure used by dependency parsing,
labeling and feature-extraction code. It includes:

- Dependency nodes carrying a primary tree, a secondary-head DAG overlay and
  a semantic-role layer over the same node set
- Positional queries over sorted dependents and subtrees
- A sentence container with tree validation
- Column-format and JSON readers/writers
- A fixed-size weighted directed graph for scoring algorithms
"""

__version__ = "0.1.0"
__author__ = "arbor Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("arbor requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core.graph import WeightedGraph
from .core.models import DependencyNode
from .core.tree import DependencyTree
from .io import ColumnFormat, read_trees, write_trees

__all__ = [
    "ColumnFormat",
    "DependencyNode",
    "DependencyTree",
    "WeightedGraph",
    "read_trees",
    "write_trees",
]
