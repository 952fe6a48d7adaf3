"""
Sentence container for dependency nodes.

This module provides DependencyTree, which owns every node of one sentence:
the artificial root at index 0 followed by the word nodes with ids 1..n, so a
node's id is also its index in the container. Node-to-node links stay on the
nodes themselves; the tree adds lookup by id, layer initialization for all
nodes, and integrity validation of the primary tree.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from ..utils.validation import ValidationResult
from .constants import NULL_ID, ROOT_ID
from .exceptions import NodeNotFoundError, ValidationError
from .models.node import DependencyNode

logger = logging.getLogger(__name__)


class DependencyTree:
    """
    Ordered collection of the nodes of one sentence.

    Attributes:
        metadata (Dict[str, str]): Sentence-level metadata, such as comment lines
            of the column format
    """

    def __init__(
        self,
        nodes: Optional[Iterable[DependencyNode]] = None,
        metadata: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize a tree holding an artificial root and the given nodes.

        Args:
            nodes: Word nodes in sentence order
            metadata: Sentence-level metadata

        Raises:
            ValidationError: If a node id does not match its position
        """
        self._nodes: List[DependencyNode] = [DependencyNode.root()]
        self.metadata: Dict[str, str] = dict(metadata or {})
        for node in nodes or ():
            self.add_node(node)

    @property
    def root(self) -> DependencyNode:
        return self._nodes[ROOT_ID]

    def add_node(self, node: DependencyNode) -> DependencyNode:
        """
        Append a word node.

        A node with ``NULL_ID`` receives the next id.

        Raises:
            ValidationError: If the node id is not the next position
        """
        expected = len(self._nodes)
        if node.id == NULL_ID:
            node.id = expected
        elif node.id != expected:
            raise ValidationError(f"Node id {node.id} does not match its position {expected}")

        self._nodes.append(node)
        return node

    def get(self, node_id: int) -> Optional[DependencyNode]:
        """Get a node by id (0 is the root), or None if missing."""
        if 0 <= node_id < len(self._nodes):
            return self._nodes[node_id]
        return None

    def get_safe(self, node_id: int) -> DependencyNode:
        """
        Get a node by id.

        Raises:
            NodeNotFoundError: If no node has the id
        """
        node = self.get(node_id)
        if node is None:
            raise NodeNotFoundError(f"Node {node_id} not found in sentence of {len(self)} nodes")
        return node

    def __getitem__(self, node_id: int) -> DependencyNode:
        return self.get_safe(node_id)

    def __len__(self) -> int:
        """Number of word nodes, excluding the root."""
        return len(self._nodes) - 1

    def __iter__(self) -> Iterator[DependencyNode]:
        """Iterate over word nodes, excluding the root."""
        return iter(self._nodes[1:])

    def init_secondary_heads(self) -> None:
        for node in self:
            node.init_secondary_heads()

    def init_semantic_heads(self) -> None:
        for node in self:
            node.init_semantic_heads()

    def get_heads(self) -> List[int]:
        """Head ids of the word nodes, ``NULL_ID`` for rootless nodes."""
        return [NULL_ID if node.head is None else node.head.id for node in self]

    def get_labels(self) -> List[Optional[str]]:
        return [node.label for node in self]

    def _find_cycle(self, node: DependencyNode) -> Optional[List[int]]:
        # Follows heads upward; a cycle never reaches the root
        path: List[DependencyNode] = []
        positions: Dict[int, int] = {}
        current: Optional[DependencyNode] = node
        while current is not None and current is not self.root:
            if id(current) in positions:
                return [visited.id for visited in path[positions[id(current)] :]]
            positions[id(current)] = len(path)
            path.append(current)
            current = current.head
        return None

    def validate(self) -> ValidationResult:
        """
        Check the integrity of the primary tree.

        Errors are reported for rootless word nodes, heads outside the sentence,
        cycles, head/dependent desynchronization and unsorted dependents.

        Returns:
            ValidationResult: Validation outcome with one message per problem
        """
        errors: List[str] = []
        members = {id(node) for node in self._nodes}
        cycles = set()

        for node in self._nodes:
            ids = [dep.id for dep in node.dependents]
            if ids != sorted(ids) or len(set(ids)) != len(ids):
                errors.append(f"Dependents of node {node.id} are not strictly sorted: {ids}")
            for dep in node.dependents:
                if dep.head is not node:
                    errors.append(f"Node {dep.id} is listed under {node.id} but has another head")

            if node.id == ROOT_ID:
                continue
            head = node.head
            if head is None:
                errors.append(f"Node {node.id} has no head")
                continue
            if id(head) not in members:
                errors.append(f"Node {node.id} has a head outside the sentence")
                continue
            if head.get_dependent_index(node) < 0:
                errors.append(f"Node {node.id} is missing from the dependents of {head.id}")

            cycle = self._find_cycle(node)
            if cycle is not None and frozenset(cycle) not in cycles:
                cycles.add(frozenset(cycle))
                errors.append(f"Cycle in primary tree: {cycle}")

        result = ValidationResult.from_messages(errors, nodes=len(self))
        if not result.is_valid:
            logger.warning("Dependency tree failed validation with %d errors", len(errors))
        return result

    def get_non_projective_nodes(self) -> List[DependencyNode]:
        """
        Get nodes whose arc to their head is crossed by another arc.

        An arc is projective when every node between the head and the dependent
        is a descendant of the head.

        Returns:
            List[DependencyNode]: Dependents of non-projective arcs, in id order
        """
        nodes = []
        for node in self:
            head = node.head
            if head is None:
                continue
            low, high = sorted((node.id, head.id))
            for between in self._nodes[low + 1 : high]:
                if not between.is_descendant_of(head):
                    nodes.append(node)
                    break
        return nodes

    def is_projective(self) -> bool:
        return not self.get_non_projective_nodes()

    def __str__(self) -> str:
        return "\n".join(str(node) for node in self)
