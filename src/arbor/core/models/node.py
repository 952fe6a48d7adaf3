"""
Node model for the dependency graph system.

This module defines DependencyNode, the vertex shared by the three edge layers of
a sentence: the primary dependency tree, the secondary-head overlay that turns the
tree into a DAG, and the semantic-role layer linking arguments to predicates.

The primary relation is always owned by the dependent: ``set_head`` is the single
place where a node is detached from its old head and inserted into the new head's
dependents, which are kept sorted by id. Positional queries are answered from that
sorted sequence rather than by re-scanning the sentence.

Descendant and subtree queries assume the primary heads form a tree. Enable
``check_cycles`` in ``arbor.core.config`` to fail fast on malformed input.
"""

from bisect import bisect_left, insort
from typing import Iterable, Iterator, List, Optional, Set, Union

from ..config import get_settings
from ..constants import BLANK, DELIM_COLUMN, FEAT_PB, NULL_ID, ROOT_ID, ROOT_TAG
from ..exceptions import CyclicTreeError, IndexOutOfRangeError, LayerNotInitializedError
from .arc import DependencyArc, SemanticArc, format_arcs
from .base import Matcher, matches
from .features import FeatureMap

_UNSET = object()


def _node_id(node: "DependencyNode") -> int:
    return node.id


def _column(value: Optional[object]) -> str:
    return BLANK if value is None else str(value)


class DependencyNode:
    """
    Vertex of a multi-layer dependency graph.

    Attributes:
        form (Optional[str]): Word form
        lemma (Optional[str]): Lemma of the word form
        pos_tag (Optional[str]): Part-of-speech tag
        named_entity_tag (Optional[str]): Named entity tag
        label (Optional[str]): Dependency label to the primary head
    """

    def __init__(
        self,
        id: int = NULL_ID,
        form: Optional[str] = None,
        lemma: Optional[str] = None,
        pos_tag: Optional[str] = None,
        named_entity_tag: Optional[str] = None,
        feats: Optional[dict] = None,
    ):
        self._id = id
        self._head: Optional[DependencyNode] = None
        self._dependents: List[DependencyNode] = []
        self._secondary_heads: Optional[List[DependencyArc]] = None
        self._semantic_heads: Optional[List[SemanticArc]] = None
        self.init(id, form, lemma, pos_tag, named_entity_tag, feats)

    def init(
        self,
        id: int,
        form: Optional[str] = None,
        lemma: Optional[str] = None,
        pos_tag: Optional[str] = None,
        named_entity_tag: Optional[str] = None,
        feats: Optional[dict] = None,
    ) -> None:
        """
        Reset this node's attributes and primary relations.

        The node is detached from its head and every current dependent becomes
        rootless, so no other node is left pointing at a stale relation.
        """
        self.set_head(None, None)
        for dependent in list(self._dependents):
            dependent.clear_head()

        self.id = id
        self.form = form
        self.lemma = lemma
        self.pos_tag = pos_tag
        self.named_entity_tag = named_entity_tag
        self.feats = feats

    @classmethod
    def root(cls) -> "DependencyNode":
        """Create an artificial root node."""
        node = cls()
        node.init_root()
        return node

    def init_root(self) -> None:
        """Initialize this node as the artificial root."""
        self.init(ROOT_ID, ROOT_TAG, ROOT_TAG, ROOT_TAG, ROOT_TAG, FeatureMap())

    def copy(self) -> "DependencyNode":
        """Copy the basic fields of this node, without any head, dependent or arc."""
        return DependencyNode(
            self.id, self.form, self.lemma, self.pos_tag, self.named_entity_tag, self.feats.copy()
        )

    # ------------------------------------------------------------------ fields

    @property
    def id(self) -> int:
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        head = self._head
        if head is not None:
            head._remove_dependent(self)
        self._id = value
        if head is not None:
            head._insert_dependent(self)

    @property
    def feats(self) -> FeatureMap:
        return self._feats

    @feats.setter
    def feats(self, value: Optional[dict]) -> None:
        if value is None:
            value = FeatureMap()
        elif not isinstance(value, FeatureMap):
            value = FeatureMap(value)
        self._feats = value

    def get_feat(self, key: str) -> Optional[str]:
        return self._feats.get(key)

    def put_feat(self, key: str, value: str) -> Optional[str]:
        """Set a feature, returning the previous value if any."""
        return self._feats.put(key, value)

    def remove_feat(self, key: str) -> Optional[str]:
        """Remove a feature, returning its value if it was present."""
        return self._feats.remove(key)

    @property
    def is_root(self) -> bool:
        return self._id == ROOT_ID

    def is_form(self, form: str) -> bool:
        return self.form == form

    def is_lemma(self, lemma: str) -> bool:
        return self.lemma == lemma

    def is_pos_tag(self, matcher: Matcher) -> bool:
        return matches(self.pos_tag, matcher)

    def is_named_entity_tag(self, matcher: Matcher) -> bool:
        return matches(self.named_entity_tag, matcher)

    def is_label(self, matcher: Matcher) -> bool:
        return matches(self.label, matcher)

    def is_label_any(self, *labels: str) -> bool:
        return self.label in labels

    # ------------------------------------------------------------ primary head

    @property
    def head(self) -> Optional["DependencyNode"]:
        return self._head

    @property
    def grand_head(self) -> Optional["DependencyNode"]:
        return None if self._head is None else self._head._head

    @property
    def dependents(self) -> tuple:
        """Dependents of this node sorted by id."""
        return tuple(self._dependents)

    @property
    def sibling_index(self) -> int:
        """Position of this node among its head's dependents, or -1 if rootless."""
        if self._head is None:
            return -1
        return self._head.get_dependent_index(self)

    def has_head(self) -> bool:
        return self._head is not None

    def set_head(self, node: Optional["DependencyNode"], label=_UNSET) -> None:
        """
        Attach this node to a new primary head.

        The node is removed from its current head's dependents and inserted into
        the new head's dependents at the position preserving id order. Passing
        ``None`` makes the node rootless; doing so on a rootless node changes
        nothing.

        Args:
            node: The new head, or None
            label: New dependency label; the current label is kept when omitted
        """
        if self._head is not None:
            self._head._remove_dependent(self)
        if node is not None:
            node._insert_dependent(self)
        self._head = node

        if label is not _UNSET:
            self.label = label

    def clear_head(self) -> None:
        self.set_head(None, None)

    def add_dependent(self, node: "DependencyNode", label=_UNSET) -> None:
        """Make ``node`` a dependent of this node through ``node.set_head``."""
        node.set_head(self, label)

    def _insert_dependent(self, node: "DependencyNode") -> None:
        insort(self._dependents, node, key=_node_id)

    def _remove_dependent(self, node: "DependencyNode") -> None:
        index = self.get_dependent_index(node)
        if index >= 0:
            del self._dependents[index]

    def _insert_index(self) -> int:
        # Position this node would take among its own dependents
        return bisect_left(self._dependents, self._id, key=_node_id)

    # -------------------------------------------------------- positional queries

    def get_dependent(self, index: int) -> "DependencyNode":
        """
        Get the dependent at a position.

        Raises:
            IndexOutOfRangeError: If the index is outside ``[0, dependent count)``
        """
        if not 0 <= index < len(self._dependents):
            raise IndexOutOfRangeError(
                f"Dependent index {index} out of range for node {self._id} "
                f"with {len(self._dependents)} dependents"
            )
        return self._dependents[index]

    def get_dependent_index(self, node: "DependencyNode") -> int:
        """Position of ``node`` among the dependents, or -1 if it is not one."""
        index = bisect_left(self._dependents, node.id, key=_node_id)
        if index < len(self._dependents) and self._dependents[index] is node:
            return index
        return -1

    def get_dependent_size(self) -> int:
        return len(self._dependents)

    def _dependent_at(self, index: int) -> Optional["DependencyNode"]:
        if 0 <= index < len(self._dependents):
            return self._dependents[index]
        return None

    def get_left_most_dependent(self, order: int = 0) -> Optional["DependencyNode"]:
        """
        Get the leftmost dependent.

        Args:
            order: 0 for the leftmost, 1 for the second leftmost, etc.

        Returns:
            The dependent if it exists and lies to the left of this node, otherwise None
        """
        node = self._dependent_at(order) if order >= 0 else None
        if node is not None and node.id < self._id:
            return node
        return None

    def get_right_most_dependent(self, order: int = 0) -> Optional["DependencyNode"]:
        """
        Get the rightmost dependent.

        Args:
            order: 0 for the rightmost, 1 for the second rightmost, etc.

        Returns:
            The dependent if it exists and lies to the right of this node, otherwise None
        """
        node = self._dependent_at(len(self._dependents) - 1 - order) if order >= 0 else None
        if node is not None and node.id > self._id:
            return node
        return None

    def get_left_nearest_dependent(self, order: int = 0) -> Optional["DependencyNode"]:
        """Get the ``order``-th dependent to the left of this node, counting outward."""
        return self._dependent_at(self._insert_index() - order - 1) if order >= 0 else None

    def get_right_nearest_dependent(self, order: int = 0) -> Optional["DependencyNode"]:
        """Get the ``order``-th dependent to the right of this node, counting outward."""
        return self._dependent_at(self._insert_index() + order) if order >= 0 else None

    def get_left_nearest_sibling(self, order: int = 0) -> Optional["DependencyNode"]:
        if self._head is None or order < 0:
            return None
        return self._head._dependent_at(self.sibling_index - order - 1)

    def get_right_nearest_sibling(self, order: int = 0) -> Optional["DependencyNode"]:
        if self._head is None or order < 0:
            return None
        return self._head._dependent_at(self.sibling_index + order + 1)

    def get_dependent_list(self) -> List["DependencyNode"]:
        return list(self._dependents)

    def get_dependent_list_by_label(self, matcher: Matcher) -> List["DependencyNode"]:
        return [node for node in self._dependents if node.is_label(matcher)]

    def get_first_dependent_by_label(self, matcher: Matcher) -> Optional["DependencyNode"]:
        for node in self._dependents:
            if node.is_label(matcher):
                return node
        return None

    def get_left_dependent_list(self, matcher: Optional[Matcher] = None) -> List["DependencyNode"]:
        """Dependents to the left of this node, optionally filtered by label."""
        nodes = []
        for node in self._dependents:
            if node.id > self._id:
                break
            if matcher is None or node.is_label(matcher):
                nodes.append(node)
        return nodes

    def get_right_dependent_list(self, matcher: Optional[Matcher] = None) -> List["DependencyNode"]:
        """Dependents to the right of this node, optionally filtered by label."""
        nodes = []
        for node in self._dependents:
            if node.id < self._id:
                continue
            if matcher is None or node.is_label(matcher):
                nodes.append(node)
        return nodes

    def get_left_valency(self) -> int:
        """Number of dependents to the left of this node."""
        return bisect_left(self._dependents, self._id, key=_node_id)

    def get_right_valency(self) -> int:
        """Number of dependents to the right of this node."""
        return len(self._dependents) - bisect_left(self._dependents, self._id, key=_node_id)

    # ---------------------------------------------------------------- traversal

    def _iter_subtree(
        self, height: Optional[int] = None, include_self: bool = True
    ) -> Iterator["DependencyNode"]:
        """
        Walk the subtree depth-first in pre-order.

        Args:
            height: Maximum depth below this node, or None for the whole subtree
            include_self: Whether to yield this node first

        Raises:
            CyclicTreeError: If cycle checking is enabled and a node is reached twice
        """
        visited: Optional[Set[int]] = {id(self)} if get_settings().check_cycles else None

        if include_self:
            yield self

        stack = [(dep, 1) for dep in reversed(self._dependents)]
        while stack:
            node, depth = stack.pop()
            if visited is not None:
                if id(node) in visited:
                    raise CyclicTreeError(f"Cycle through node {node.id} below node {self._id}")
                visited.add(id(node))

            yield node
            if height is None or depth < height:
                stack.extend((dep, depth + 1) for dep in reversed(node._dependents))

    def _iter_ancestors(self) -> Iterator["DependencyNode"]:
        visited: Optional[Set[int]] = {id(self)} if get_settings().check_cycles else None

        head = self._head
        while head is not None:
            if visited is not None:
                if id(head) in visited:
                    raise CyclicTreeError(f"Cycle through node {head.id} above node {self._id}")
                visited.add(id(head))
            yield head
            head = head._head

    def get_grand_dependent_list(self) -> List["DependencyNode"]:
        """Unsorted list of the dependents of this node's dependents."""
        return [node for dep in self._dependents for node in dep._dependents]

    def get_descendant_list(self, height: Optional[int] = None) -> List["DependencyNode"]:
        """
        Get descendants within a depth.

        Args:
            height: 1 returns the dependents, larger values add deeper levels,
                None returns the whole subtree; values below 1 return an empty list

        Returns:
            List[DependencyNode]: Unsorted descendants, excluding this node
        """
        if height is not None and height < 1:
            return []
        return list(self._iter_subtree(height, include_self=False))

    def get_any_descendant_by_pos_tag(self, matcher: Matcher) -> Optional["DependencyNode"]:
        for node in self._iter_subtree(include_self=False):
            if node.is_pos_tag(matcher):
                return node
        return None

    def get_sub_node_list(self) -> List["DependencyNode"]:
        """Nodes of the subtree of this node (inclusive), sorted by id."""
        return sorted(self._iter_subtree(), key=_node_id)

    def get_sub_node_set(self) -> Set["DependencyNode"]:
        """Nodes of the subtree of this node (inclusive)."""
        return set(self._iter_subtree())

    def get_sub_node_id_set(self) -> Set[int]:
        return {node.id for node in self._iter_subtree()}

    def get_sub_node_id_sorted_list(self) -> List[int]:
        return sorted(self.get_sub_node_id_set())

    def contains_dependent(self, node_or_matcher: Union["DependencyNode", Matcher]) -> bool:
        """Check for a dependent by node or by label matcher."""
        if isinstance(node_or_matcher, DependencyNode):
            return node_or_matcher._head is self
        return self.get_first_dependent_by_label(node_or_matcher) is not None

    def is_dependent_of(self, node: "DependencyNode", matcher: Optional[Matcher] = None) -> bool:
        if self._head is not node:
            return False
        return matcher is None or self.is_label(matcher)

    def is_descendant_of(self, node: "DependencyNode") -> bool:
        return any(head is node for head in self._iter_ancestors())

    def is_sibling_of(self, node: "DependencyNode") -> bool:
        return self._head is not None and node.is_dependent_of(self._head)

    # ---------------------------------------------------------- secondary heads

    def init_secondary_heads(self) -> None:
        self._secondary_heads = []

    def has_secondary_heads(self) -> bool:
        """Check whether the secondary-head layer is initialized."""
        return self._secondary_heads is not None

    @property
    def secondary_heads(self) -> Optional[List[DependencyArc]]:
        return self._secondary_heads

    def _require_secondary_heads(self) -> List[DependencyArc]:
        if self._secondary_heads is None:
            raise LayerNotInitializedError(f"Secondary heads of node {self._id} are not initialized")
        return self._secondary_heads

    def add_secondary_head(
        self, head: Union["DependencyNode", DependencyArc], label: Optional[str] = None
    ) -> DependencyArc:
        """
        Append a secondary head arc.

        Args:
            head: The head node, or a ready-made arc
            label: Arc label, required when ``head`` is a node

        Returns:
            DependencyArc: The appended arc
        """
        arcs = self._require_secondary_heads()
        arc = head if isinstance(head, DependencyArc) else DependencyArc(head, label)
        arcs.append(arc)
        return arc

    def set_secondary_heads(self, arcs: Iterable[DependencyArc]) -> None:
        """Replace the secondary-head layer, initializing it if needed."""
        self._secondary_heads = list(arcs)

    def get_secondary_head_arc_list(self, matcher: Optional[Matcher] = None) -> List[DependencyArc]:
        arcs = self._require_secondary_heads()
        return [arc for arc in arcs if matcher is None or arc.is_label(matcher)]

    # ----------------------------------------------------------- semantic heads

    def get_roleset_id(self) -> Optional[str]:
        return self._feats.get(FEAT_PB)

    def set_roleset_id(self, roleset_id: str) -> Optional[str]:
        """Mark this node as a predicate, returning the previous roleset id."""
        return self._feats.put(FEAT_PB, roleset_id)

    def clear_roleset_id(self) -> None:
        self._feats.remove(FEAT_PB)

    def is_semantic_head(self) -> bool:
        """Check whether this node carries a roleset id."""
        return FEAT_PB in self._feats

    def init_semantic_heads(self) -> None:
        self._semantic_heads = []

    def has_semantic_heads(self) -> bool:
        """Check whether the semantic-head layer is initialized."""
        return self._semantic_heads is not None

    @property
    def semantic_heads(self) -> Optional[List[SemanticArc]]:
        return self._semantic_heads

    def _require_semantic_heads(self) -> List[SemanticArc]:
        if self._semantic_heads is None:
            raise LayerNotInitializedError(f"Semantic heads of node {self._id} are not initialized")
        return self._semantic_heads

    def add_semantic_head(
        self,
        head: Union["DependencyNode", SemanticArc],
        label: Optional[str] = None,
        function_tag: Optional[str] = None,
    ) -> SemanticArc:
        """
        Append a semantic arc from this argument to a predicate.

        Args:
            head: The predicate node, or a ready-made arc
            label: Semantic role label, required when ``head`` is a node
            function_tag: Optional function tag of the role

        Returns:
            SemanticArc: The appended arc
        """
        arcs = self._require_semantic_heads()
        arc = head if isinstance(head, SemanticArc) else SemanticArc(head, label, function_tag)
        arcs.append(arc)
        return arc

    def add_semantic_heads(self, arcs: Iterable[SemanticArc]) -> None:
        self._require_semantic_heads().extend(arcs)

    def set_semantic_heads(self, arcs: Iterable[SemanticArc]) -> None:
        """Replace the semantic-head layer, initializing it if needed."""
        self._semantic_heads = list(arcs)

    def get_semantic_head_arc_list(self, matcher: Optional[Matcher] = None) -> List[SemanticArc]:
        arcs = self._require_semantic_heads()
        return [arc for arc in arcs if matcher is None or arc.is_label(matcher)]

    def get_semantic_head_set(self, matcher: Matcher) -> Set["DependencyNode"]:
        """Predicates of this node reached through arcs whose label matches."""
        return {arc.head for arc in self._require_semantic_heads() if arc.is_label(matcher)}

    def get_semantic_head_arc(
        self, node: "DependencyNode", matcher: Optional[Matcher] = None
    ) -> Optional[SemanticArc]:
        """
        Get the first arc to a given predicate.

        Args:
            node: The predicate node, compared by identity
            matcher: Optional label matcher the arc must also satisfy

        Returns:
            Optional[SemanticArc]: The arc, or None if there is none
        """
        for arc in self._require_semantic_heads():
            if arc.is_node(node) and (matcher is None or arc.is_label(matcher)):
                return arc
        return None

    def get_semantic_label(self, node: "DependencyNode") -> Optional[str]:
        arc = self.get_semantic_head_arc(node)
        return None if arc is None else arc.label

    def get_first_semantic_head(self, matcher: Matcher) -> Optional["DependencyNode"]:
        for arc in self._require_semantic_heads():
            if arc.is_label(matcher):
                return arc.head
        return None

    def remove_semantic_head(self, target: Union["DependencyNode", SemanticArc]) -> bool:
        """
        Remove the first arc to a predicate node, or a given arc.

        Returns:
            bool: True if an arc was removed
        """
        arcs = self._require_semantic_heads()
        by_arc = isinstance(target, SemanticArc)
        for index, arc in enumerate(arcs):
            found = arc == target if by_arc else arc.is_node(target)
            if found:
                del arcs[index]
                return True
        return False

    def remove_semantic_heads(self, arcs: Iterable[SemanticArc]) -> None:
        """Remove every arc equal to one of the given arcs."""
        removed = list(arcs)
        current = self._require_semantic_heads()
        current[:] = [arc for arc in current if arc not in removed]

    def remove_semantic_heads_by_label(self, matcher: Matcher) -> None:
        current = self._require_semantic_heads()
        current[:] = [arc for arc in current if not arc.is_label(matcher)]

    def clear_semantic_heads(self) -> None:
        self._require_semantic_heads().clear()

    def is_argument_of(
        self, node: Optional["DependencyNode"] = None, matcher: Optional[Matcher] = None
    ) -> bool:
        """Check for a semantic arc to ``node`` (any predicate if None) matching ``matcher``."""
        return any(
            (node is None or arc.is_node(node)) and (matcher is None or arc.is_label(matcher))
            for arc in self._require_semantic_heads()
        )

    def get_argument_candidate_set(self, depth: int, include_self: bool) -> Set["DependencyNode"]:
        """
        Collect argument candidates for this node as a predicate.

        The candidates are the descendants within ``depth``, plus every ancestor
        up to the root together with each ancestor's dependents.

        Args:
            depth: Depth of descendants to include
            include_self: Whether this node itself is a candidate

        Returns:
            Set[DependencyNode]: Candidate argument nodes
        """
        candidates = set(self.get_descendant_list(depth))
        for head in self._iter_ancestors():
            candidates.add(head)
            candidates.update(head._dependents)

        if include_self:
            candidates.add(self)
        else:
            candidates.discard(self)
        return candidates

    # ---------------------------------------------------------------- rendering

    def _head_columns(self) -> List[str]:
        if self._head is None:
            return [BLANK, BLANK]
        return [str(self._head.id), _column(self.label)]

    def _join(self, *columns: object) -> str:
        return DELIM_COLUMN.join(_column(column) for column in columns)

    def to_string_pos(self) -> str:
        return self._join(self.form, self.pos_tag, self._feats)

    def to_string_morph(self) -> str:
        return self._join(self.form, self.lemma, self.pos_tag, self._feats)

    def to_string_dep(self) -> str:
        return self._join(self._id, self.form, self.lemma, self.pos_tag, self._feats, *self._head_columns())

    def to_string_dag(self) -> str:
        return self._join(self.to_string_dep(), format_arcs(self._secondary_heads))

    def to_string_srl(self) -> str:
        return self._join(self.to_string_dep(), format_arcs(self._semantic_heads))

    def to_string_conllx(self) -> str:
        return self._join(
            self._id,
            self.form,
            self.lemma,
            self.pos_tag,
            self.pos_tag,
            self._feats,
            *self._head_columns(),
        )

    def __str__(self) -> str:
        return self._join(
            self._id,
            self.form,
            self.lemma,
            self.pos_tag,
            self.named_entity_tag,
            self._feats,
            *self._head_columns(),
            format_arcs(self._secondary_heads),
            format_arcs(self._semantic_heads),
        )

    def __repr__(self) -> str:
        return f"DependencyNode(id={self._id!r}, form={self.form!r}, label={self.label!r})"

    def __lt__(self, other: "DependencyNode") -> bool:
        return self._id < other._id
