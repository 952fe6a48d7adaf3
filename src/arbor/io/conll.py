"""
Column-format reading and writing of dependency trees.

Trees are exchanged as tab-separated lines, one node per line and a blank line
between sentences, with ``# key = value`` comment lines as sentence metadata.
Tokenization of the text and serialization of lines are delegated to the
``conllu`` library; every column is read as a raw string and converted here.

Column layouts:
    DEP:  id form lemma pos feats head deprel
    DAG:  DEP + secondary heads
    SRL:  DEP + semantic heads
    FULL: id form lemma pos nament feats head deprel xheads sheads

Arc columns hold ``head:label`` pairs joined by ``;`` and sorted by head id;
semantic labels may carry a function tag as ``head:label=tag``.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

import conllu
from conllu.models import Token, TokenList

from ..core.constants import BLANK, DELIM_ARC_LABEL, DELIM_ARCS, DELIM_FUNCTION_TAG
from ..core.exceptions import NodeNotFoundError, ValidationError
from ..core.models import DependencyNode, FeatureMap, format_arcs
from ..core.tree import DependencyTree

logger = logging.getLogger(__name__)

_DEP_FIELDS = ("id", "form", "lemma", "pos", "feats", "head", "deprel")

# Column separators recognized by the reader, which must not occur inside a value
_SEPARATORS = ("\t", "\n", "\r", "  ")


class ColumnFormat(Enum):
    """Column layouts supported by the reader and writer."""

    DEP = _DEP_FIELDS
    DAG = _DEP_FIELDS + ("xheads",)
    SRL = _DEP_FIELDS + ("sheads",)
    FULL = ("id", "form", "lemma", "pos", "nament", "feats", "head", "deprel", "xheads", "sheads")

    @property
    def fields(self) -> Tuple[str, ...]:
        return self.value


def _raw(line: List[str], i: int) -> str:
    return line[i]


def _nullable(value: Optional[str]) -> Optional[str]:
    return None if value is None or value == BLANK else value


def _parse_int(value: Optional[str], what: str) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {what} '{value}'") from e


def _parse_arcs(value: Optional[str]) -> List[Tuple[int, str, Optional[str]]]:
    """Split an arc column into (head id, label, function tag) triples."""
    if _nullable(value) is None:
        return []

    arcs = []
    for item in value.split(DELIM_ARCS):  # type: ignore[union-attr]
        head, sep, label = item.partition(DELIM_ARC_LABEL)
        if not sep or not label:
            raise ValidationError(f"Invalid arc '{item}' in '{value}'")
        label, _, function_tag = label.partition(DELIM_FUNCTION_TAG)
        arcs.append((_parse_int(head, "arc head id"), label, function_tag or None))
    return arcs


def _resolve(tree: DependencyTree, node_id: int) -> DependencyNode:
    try:
        return tree.get_safe(node_id)
    except NodeNotFoundError as e:
        raise ValidationError(f"Head id {node_id} does not exist in the sentence") from e


def _to_tree(sentence: TokenList, fmt: ColumnFormat) -> DependencyTree:
    metadata: Dict[str, str] = {
        key: "" if value is None else str(value) for key, value in sentence.metadata.items()
    }
    tree = DependencyTree(metadata=metadata)

    for token in sentence:
        tree.add_node(
            DependencyNode(
                _parse_int(token.get("id"), "node id"),
                _nullable(token.get("form")),
                _nullable(token.get("lemma")),
                _nullable(token.get("pos")),
                _nullable(token.get("nament")),
                FeatureMap.from_string(token.get("feats")),
            )
        )

    if "xheads" in fmt.fields:
        tree.init_secondary_heads()
    if "sheads" in fmt.fields:
        tree.init_semantic_heads()

    for node, token in zip(tree, sentence):
        label = _nullable(token.get("deprel"))
        head = _nullable(token.get("head"))
        if head is None:
            node.label = label
        else:
            node.set_head(_resolve(tree, _parse_int(head, "head id")), label)

        for head_id, arc_label, _ in _parse_arcs(token.get("xheads")):
            node.add_secondary_head(_resolve(tree, head_id), arc_label)
        for head_id, arc_label, function_tag in _parse_arcs(token.get("sheads")):
            node.add_semantic_head(_resolve(tree, head_id), arc_label, function_tag)

    return tree


def _parse_options(fmt: ColumnFormat) -> Dict:
    return {
        "fields": fmt.fields,
        "field_parsers": {field: _raw for field in fmt.fields},
    }


def read_trees(text: str, fmt: ColumnFormat = ColumnFormat.FULL) -> List[DependencyTree]:
    """
    Read every sentence of a column-format string.

    Args:
        text: Column-format data
        fmt: Column layout of the data

    Returns:
        List[DependencyTree]: One tree per sentence

    Raises:
        ValidationError: If ids, head ids, features or arcs are malformed
    """
    trees = [_to_tree(sentence, fmt) for sentence in conllu.parse(text, **_parse_options(fmt))]
    logger.debug("Read %d trees in %s format", len(trees), fmt.name)
    return trees


def iter_trees(stream: TextIO, fmt: ColumnFormat = ColumnFormat.FULL) -> Iterator[DependencyTree]:
    """Lazily read sentences from an open text stream."""
    for sentence in conllu.parse_incr(stream, **_parse_options(fmt)):
        yield _to_tree(sentence, fmt)


def read_file(path: Union[str, Path], fmt: ColumnFormat = ColumnFormat.FULL) -> List[DependencyTree]:
    """Read every sentence of a column-format file."""
    with open(path, "r", encoding="utf-8") as f:
        trees = list(iter_trees(f, fmt))
    logger.debug("Read %d trees from %s", len(trees), path)
    return trees


def _node_columns(node: DependencyNode) -> Dict[str, object]:
    has_head = node.head is not None
    return {
        "id": str(node.id),
        "form": node.form,
        "lemma": node.lemma,
        "pos": node.pos_tag,
        "nament": node.named_entity_tag,
        "feats": str(node.feats),
        "head": str(node.head.id) if has_head else None,
        "deprel": node.label if has_head else None,
        "xheads": format_arcs(node.secondary_heads),
        "sheads": format_arcs(node.semantic_heads),
    }


def _check_column(node: DependencyNode, field: str, value: object) -> None:
    if isinstance(value, str) and any(sep in value for sep in _SEPARATORS):
        raise ValidationError(
            f"Column {field} of node {node.id} contains a column separator: {value!r}"
        )


def write_tree(tree: DependencyTree, fmt: ColumnFormat = ColumnFormat.FULL) -> str:
    """
    Render one tree, followed by a blank line.

    Missing values render as ``_``; a rootless node has blank head and label.

    Raises:
        ValidationError: If a value contains a tab, a line break or a run of
            two spaces, which would be read back as a column boundary
    """
    if not len(tree):
        return ""

    tokens = []
    for node in tree:
        columns = _node_columns(node)
        token = Token()
        for field in fmt.fields:
            _check_column(node, field, columns[field])
            token[field] = columns[field]
        tokens.append(token)
    return TokenList(tokens, metadata=dict(tree.metadata)).serialize()


def write_trees(trees: Iterable[DependencyTree], fmt: ColumnFormat = ColumnFormat.FULL) -> str:
    return "".join(write_tree(tree, fmt) for tree in trees)


def write_file(
    path: Union[str, Path], trees: Iterable[DependencyTree], fmt: ColumnFormat = ColumnFormat.FULL
) -> None:
    """Write trees to a column-format file."""
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for tree in trees:
            f.write(write_tree(tree, fmt))
            count += 1
    logger.debug("Wrote %d trees to %s", count, path)
