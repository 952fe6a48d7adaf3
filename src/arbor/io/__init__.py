"""
Readers and writers for dependency trees.

This package provides the tab-separated column format shared by dependency
treebanks, in plain dependency, DAG, semantic-role and full layouts.
"""

from .conll import (
    ColumnFormat,
    iter_trees,
    read_file,
    read_trees,
    write_file,
    write_tree,
    write_trees,
)

__all__ = [
    "ColumnFormat",
    "iter_trees",
    "read_file",
    "read_trees",
    "write_file",
    "write_tree",
    "write_trees",
]
