"""
Tests for the secondary-head and semantic-role layers of nodes.
"""

import re

import pytest

from arbor.core.constants import FEAT_PB
from arbor.core.exceptions import InvalidOperationError, LayerNotInitializedError
from arbor.core.models import DependencyArc, DependencyNode, SemanticArc


@pytest.fixture
def predicates():
    """Fixture providing an argument node and two predicates."""
    argument = DependencyNode(1, "John")
    first = DependencyNode(2, "wants")
    second = DependencyNode(4, "leave")
    return argument, first, second


@pytest.mark.parametrize(
    "operation",
    [
        lambda node, other: node.add_secondary_head(other, "xsubj"),
        lambda node, other: node.get_secondary_head_arc_list(),
        lambda node, other: node.add_semantic_head(other, "A0"),
        lambda node, other: node.get_semantic_head_arc_list(),
        lambda node, other: node.get_semantic_label(other),
        lambda node, other: node.remove_semantic_head(other),
        lambda node, other: node.clear_semantic_heads(),
        lambda node, other: node.is_argument_of(),
    ],
)
def test_uninitialized_layers_raise(operation):
    """Test that auxiliary layers must be initialized before use."""
    node = DependencyNode(1)

    with pytest.raises(LayerNotInitializedError):
        operation(node, DependencyNode(2))
    assert issubclass(LayerNotInitializedError, InvalidOperationError)


def test_secondary_heads(predicates):
    """Test adding and filtering secondary heads."""
    argument, first, second = predicates
    argument.init_secondary_heads()
    assert argument.has_secondary_heads()
    assert argument.secondary_heads == []

    arc = argument.add_secondary_head(second, "xsubj")
    argument.add_secondary_head(DependencyArc(first, "nsubj"))

    assert arc.is_node(second)
    assert [a.label for a in argument.get_secondary_head_arc_list()] == ["xsubj", "nsubj"]
    assert argument.get_secondary_head_arc_list("nsubj") == [DependencyArc(first, "nsubj")]

    listed = argument.get_secondary_head_arc_list()
    listed.clear()
    assert len(argument.secondary_heads) == 2


def test_secondary_heads_independent_of_tree(predicates):
    """Test that secondary heads ignore the primary tree."""
    argument, first, second = predicates
    argument.set_head(first, "nsubj")
    argument.set_secondary_heads([DependencyArc(first, "nsubj")])

    argument.clear_head()

    assert argument.has_secondary_heads()
    assert argument.secondary_heads[0].head is first
    assert argument not in first.dependents


def test_dag_rendering_sorted(predicates):
    """Test that secondary arcs render sorted by head id."""
    argument, first, second = predicates
    argument.init_secondary_heads()
    argument.add_secondary_head(second, "xsubj")
    argument.add_secondary_head(first, "nsubj")

    assert argument.to_string_dag().endswith("\t2:nsubj;4:xsubj")
    assert DependencyNode(3).to_string_dag().endswith("\t_")


def test_semantic_heads(predicates):
    """Test adding and querying semantic arcs."""
    argument, first, second = predicates
    argument.init_semantic_heads()
    assert argument.has_semantic_heads()

    argument.add_semantic_head(second, "A0")
    argument.add_semantic_head(first, "AM", "TMP")
    argument.add_semantic_heads([SemanticArc(first, "A1")])

    assert argument.get_semantic_label(second) == "A0"
    assert argument.get_semantic_label(first) == "AM"
    assert argument.get_semantic_label(DependencyNode(9)) is None
    assert argument.get_semantic_head_arc(first, "A1") == SemanticArc(first, "A1")
    assert argument.get_semantic_head_arc(second, "A1") is None
    assert argument.get_semantic_head_set(re.compile("^A[0-9]")) == {first, second}
    assert argument.get_first_semantic_head("A1") is first
    assert argument.get_first_semantic_head("A2") is None
    assert len(argument.get_semantic_head_arc_list(re.compile("^A\\d"))) == 2

    assert argument.is_argument_of()
    assert argument.is_argument_of(first)
    assert argument.is_argument_of(first, "A1")
    assert not argument.is_argument_of(second, "A1")
    assert argument.is_argument_of(matcher="AM")


def test_srl_rendering(predicates):
    """Test rendering of semantic arcs with function tags."""
    argument, first, second = predicates
    argument.init_semantic_heads()
    argument.add_semantic_head(second, "A0")
    argument.add_semantic_head(first, "AM", "TMP")

    assert argument.to_string_srl() == "1\tJohn\t_\t_\t_\t_\t_\t2:AM=TMP;4:A0"


def test_remove_semantic_heads(predicates):
    """Test the semantic arc removal operations."""
    argument, first, second = predicates
    argument.set_semantic_heads(
        [SemanticArc(first, "A0"), SemanticArc(second, "A1"), SemanticArc(second, "AM-TMP")]
    )

    assert argument.remove_semantic_head(second)
    assert [arc.label for arc in argument.semantic_heads] == ["A0", "AM-TMP"]
    assert not argument.remove_semantic_head(DependencyNode(7))

    assert argument.remove_semantic_head(SemanticArc(first, "A0"))
    assert not argument.remove_semantic_head(SemanticArc(first, "A0"))

    argument.add_semantic_head(first, "A2")
    argument.remove_semantic_heads([SemanticArc(first, "A2")])
    assert [arc.label for arc in argument.semantic_heads] == ["AM-TMP"]

    argument.add_semantic_head(first, "A2")
    argument.remove_semantic_heads_by_label(re.compile("^AM"))
    assert [arc.label for arc in argument.semantic_heads] == ["A2"]

    argument.clear_semantic_heads()
    assert argument.has_semantic_heads()
    assert argument.semantic_heads == []


def test_roleset(predicates):
    """Test roleset ids stored as a feature."""
    _, predicate, _ = predicates

    assert not predicate.is_semantic_head()
    assert predicate.set_roleset_id("want.01") is None
    assert predicate.set_roleset_id("want.02") == "want.01"
    assert predicate.get_roleset_id() == "want.02"
    assert predicate.get_feat(FEAT_PB) == "want.02"
    assert predicate.is_semantic_head()

    predicate.clear_roleset_id()
    assert predicate.get_roleset_id() is None
    assert not predicate.is_semantic_head()
