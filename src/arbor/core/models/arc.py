"""
Arc models for the dependency graph system.

This module defines the labeled arcs of the two auxiliary layers of a node:
secondary heads, which turn the primary tree into a DAG, and semantic heads,
which link an argument to its predicates. Arcs hold a non-owning reference to
their head node.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ...utils.validation import validate_dataclass
from ..constants import BLANK, DELIM_ARC_LABEL, DELIM_ARCS, DELIM_FUNCTION_TAG
from .base import Matcher, matches, validate_label


@validate_dataclass
@dataclass(eq=True)
class DependencyArc:
    """
    Labeled arc to a secondary head.

    Arcs order by head id, then label, which is the order used for rendering.

    Attributes:
        head (DependencyNode): The head node of the arc
        label (str): Relation name
    """

    head: "DependencyNode"
    label: str

    def __post_init__(self):
        """Validate arc after initialization."""
        if self.head is None:
            raise ValueError("head must not be None")
        validate_label(self.label)

    def is_node(self, node: "DependencyNode") -> bool:
        """Check whether the arc points to the given node."""
        return self.head is node

    def is_label(self, matcher: Matcher) -> bool:
        """Check whether the arc label satisfies the matcher."""
        return matches(self.label, matcher)

    def equals(self, node: "DependencyNode", matcher: Matcher) -> bool:
        """Check both the head node and the label."""
        return self.is_node(node) and self.is_label(matcher)

    def sort_key(self):
        return (self.head.id, self.label)

    def __lt__(self, other: "DependencyArc") -> bool:
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self.head.id}{DELIM_ARC_LABEL}{self.label}"


@validate_dataclass
@dataclass(eq=True)
class SemanticArc(DependencyArc):
    """
    Labeled arc from an argument to a semantic predicate.

    Attributes:
        head (DependencyNode): The predicate node
        label (str): Semantic role label (e.g. ``A0``)
        function_tag (Optional[str]): Optional function tag of the role
    """

    function_tag: Optional[str] = None

    def sort_key(self):
        return (self.head.id, self.label, self.function_tag or "")

    def __str__(self) -> str:
        text = super().__str__()
        if self.function_tag:
            text = f"{text}{DELIM_FUNCTION_TAG}{self.function_tag}"
        return text


def format_arcs(arcs: Optional[Iterable[DependencyArc]]) -> str:
    """
    Render arcs for a column, sorted by head id.

    Absent or empty arc lists render as the blank token.
    """
    if not arcs:
        return BLANK
    return DELIM_ARCS.join(str(arc) for arc in sorted(arcs))


# Resolves the head annotation for field type checks; node.py imports this module
from .node import DependencyNode  # noqa: E402
