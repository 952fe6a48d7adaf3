"""Shared test fixtures."""

import pytest

from arbor.core import config
from arbor.core.models import DependencyNode
from arbor.core.tree import DependencyTree


@pytest.fixture(autouse=True)
def reset_settings():
    """Fixture restoring default traversal settings after each test."""
    yield
    config._settings = config.TraversalSettings()


@pytest.fixture
def sentence() -> DependencyTree:
    """
    Fixture providing the parsed sentence "John saw a dog ."

    Heads: John->saw (nsubj), saw->root (root), a->dog (det),
    dog->saw (dobj), .->saw (punct).
    """
    tree = DependencyTree(
        [
            DependencyNode(1, "John", "john", "NNP", "PERSON"),
            DependencyNode(2, "saw", "see", "VBD", feats={"Tense": "Past"}),
            DependencyNode(3, "a", "a", "DT"),
            DependencyNode(4, "dog", "dog", "NN"),
            DependencyNode(5, ".", ".", "."),
        ],
        metadata={"sent_id": "1"},
    )
    tree[1].set_head(tree[2], "nsubj")
    tree[2].set_head(tree.root, "root")
    tree[3].set_head(tree[4], "det")
    tree[4].set_head(tree[2], "dobj")
    tree[5].set_head(tree[2], "punct")
    return tree


@pytest.fixture
def chain() -> DependencyTree:
    """Fixture providing the chain root->A (nsubj)->B (dobj)."""
    tree = DependencyTree([DependencyNode(1, "A", "a", "NN"), DependencyNode(2, "B", "b", "NN")])
    tree[1].set_head(tree.root, "nsubj")
    tree[2].set_head(tree[1], "dobj")
    return tree
