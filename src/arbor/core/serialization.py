"""Dependency tree serialization and deserialization.

This module provides functionality for importing/exporting trees:
- Dictionary and JSON serialization of all three edge layers
- Schema validation during import
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ..utils.validation import SchemaValidator
from .exceptions import GraphOperationError, NodeNotFoundError, ValidationError
from .models import DependencyArc, DependencyNode, FeatureMap, SemanticArc
from .tree import DependencyTree

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


class TreeSerializer:
    """Handles dependency tree serialization operations."""

    def __init__(self, tree: DependencyTree):
        """Initialize serializer.

        Args:
            tree: The tree to serialize
        """
        self.tree = tree

    @staticmethod
    def _arcs_to_list(arcs: Optional[List[DependencyArc]]) -> Optional[List[Dict]]:
        if arcs is None:
            return None
        data = []
        for arc in sorted(arcs):
            item: Dict[str, Any] = {"head": arc.head.id, "label": arc.label}
            if isinstance(arc, SemanticArc) and arc.function_tag:
                item["function_tag"] = arc.function_tag
            data.append(item)
        return data

    def to_dict(self) -> Dict:
        """Convert tree to dictionary format.

        Returns:
            Dictionary containing serialized tree data
        """
        nodes_data = []
        for node in self.tree:
            nodes_data.append(
                {
                    "id": node.id,
                    "form": node.form,
                    "lemma": node.lemma,
                    "pos_tag": node.pos_tag,
                    "named_entity_tag": node.named_entity_tag,
                    "feats": dict(node.feats),
                    "head": None if node.head is None else node.head.id,
                    "label": node.label,
                    "secondary_heads": self._arcs_to_list(node.secondary_heads),
                    "semantic_heads": self._arcs_to_list(node.semantic_heads),
                }
            )

        return {
            "schema_version": SCHEMA_VERSION,
            "metadata": dict(self.tree.metadata),
            "nodes": nodes_data,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Convert tree to JSON string.

        Args:
            indent: Number of spaces for pretty printing (default: None)

        Returns:
            JSON string representation of the tree
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @staticmethod
    def from_dict(data: Dict) -> DependencyTree:
        """Create tree from dictionary data.

        Nodes are created first, then heads and arcs are resolved by id.

        Args:
            data: Dictionary containing tree data

        Returns:
            DependencyTree: The rebuilt tree

        Raises:
            GraphOperationError: If data format is invalid
        """
        result = SchemaValidator().validate(data)
        if not result.is_valid:
            raise GraphOperationError(f"Invalid tree data format: {'; '.join(result.errors)}")

        try:
            tree = DependencyTree(metadata=data.get("metadata"))
            for node_data in data["nodes"]:
                tree.add_node(
                    DependencyNode(
                        node_data["id"],
                        node_data.get("form"),
                        node_data.get("lemma"),
                        node_data.get("pos_tag"),
                        node_data.get("named_entity_tag"),
                        FeatureMap(node_data.get("feats") or {}),
                    )
                )

            for node, node_data in zip(tree, data["nodes"]):
                if node_data.get("head") is not None:
                    node.set_head(tree.get_safe(node_data["head"]), node_data.get("label"))
                else:
                    node.label = node_data.get("label")

                if node_data.get("secondary_heads") is not None:
                    node.set_secondary_heads(
                        DependencyArc(tree.get_safe(arc["head"]), arc["label"])
                        for arc in node_data["secondary_heads"]
                    )
                if node_data.get("semantic_heads") is not None:
                    node.set_semantic_heads(
                        SemanticArc(
                            tree.get_safe(arc["head"]), arc["label"], arc.get("function_tag")
                        )
                        for arc in node_data["semantic_heads"]
                    )

            logger.debug("Deserialized tree with %d nodes", len(tree))
            return tree

        except (KeyError, ValueError, NodeNotFoundError, ValidationError) as e:
            raise GraphOperationError(f"Invalid tree data format: {str(e)}") from e

    @staticmethod
    def from_json(json_str: str) -> DependencyTree:
        """Create tree from JSON string.

        Args:
            json_str: JSON string containing tree data

        Returns:
            DependencyTree: The rebuilt tree

        Raises:
            GraphOperationError: If JSON is invalid
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise GraphOperationError(f"Invalid JSON format: {str(e)}") from e
        return TreeSerializer.from_dict(data)
