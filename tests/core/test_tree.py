"""
Tests for the sentence container.
"""

import pytest

from arbor.core.constants import NULL_ID
from arbor.core.exceptions import NodeNotFoundError, ValidationError
from arbor.core.models import DependencyNode
from arbor.core.tree import DependencyTree


def test_tree_container(sentence):
    """Test lookup, length and iteration."""
    assert len(sentence) == 5
    assert sentence[0] is sentence.root
    assert sentence.root.is_root
    assert [node.form for node in sentence] == ["John", "saw", "a", "dog", "."]
    assert sentence.get(6) is None
    assert sentence.get(-1) is None
    assert sentence.metadata == {"sent_id": "1"}

    with pytest.raises(NodeNotFoundError):
        sentence.get_safe(6)
    with pytest.raises(NodeNotFoundError):
        sentence[9]


def test_add_node_assigns_ids():
    """Test that nodes without an id receive the next position."""
    tree = DependencyTree()

    first = tree.add_node(DependencyNode(form="a"))
    second = tree.add_node(DependencyNode(form="b"))

    assert (first.id, second.id) == (1, 2)
    assert len(tree) == 2


def test_add_node_rejects_wrong_id():
    """Test that an explicit id must match the position."""
    tree = DependencyTree()

    with pytest.raises(ValidationError):
        tree.add_node(DependencyNode(2))


def test_heads_and_labels(sentence):
    """Test head id and label listings."""
    sentence[5].clear_head()

    assert sentence.get_heads() == [2, 0, 4, 2, NULL_ID]
    assert sentence.get_labels() == ["nsubj", "root", "det", "dobj", None]


def test_init_layers(sentence):
    """Test initializing auxiliary layers of every node."""
    sentence.init_secondary_heads()
    sentence.init_semantic_heads()

    assert all(node.has_secondary_heads() for node in sentence)
    assert all(node.has_semantic_heads() for node in sentence)
    assert not sentence.root.has_semantic_heads()


def test_validate_well_formed(sentence):
    """Test validation of a well-formed tree."""
    result = sentence.validate()

    assert result.is_valid
    assert result.errors == []
    assert result.context == {"nodes": 5}


def test_validate_rootless_node(sentence):
    """Test that a rootless word node is reported."""
    sentence[3].clear_head()

    result = sentence.validate()

    assert not result.is_valid
    assert result.errors == ["Node 3 has no head"]


def test_validate_cycle():
    """Test that cycles are reported once."""
    tree = DependencyTree([DependencyNode(1), DependencyNode(2), DependencyNode(3)])
    tree[1].set_head(tree[2], "dep")
    tree[2].set_head(tree[1], "dep")
    tree[3].set_head(tree.root, "root")

    result = tree.validate()

    assert not result.is_valid
    assert len(result.errors) == 1
    assert result.errors[0].startswith("Cycle in primary tree")


def test_validate_foreign_head(sentence):
    """Test that heads outside the sentence are reported."""
    sentence[4].set_head(DependencyNode(9), "dep")

    result = sentence.validate()

    assert not result.is_valid
    assert "Node 4 has a head outside the sentence" in result.errors


def test_projective(sentence):
    """Test that an ordinary tree is projective."""
    assert sentence.is_projective()
    assert sentence.get_non_projective_nodes() == []


def test_non_projective():
    """Test detection of crossing arcs."""
    tree = DependencyTree([DependencyNode(i) for i in range(1, 5)])
    tree[1].set_head(tree[3], "dep")
    tree[2].set_head(tree.root, "root")
    tree[3].set_head(tree[2], "dep")
    tree[4].set_head(tree[1], "dep")

    assert not tree.is_projective()
    assert [node.id for node in tree.get_non_projective_nodes()] == [1, 4]


def test_tree_string(chain):
    """Test rendering of all word nodes."""
    assert str(chain) == "1\tA\ta\tNN\t_\t_\t0\tnsubj\t_\t_\n2\tB\tb\tNN\t_\t_\t1\tdobj\t_\t_"
