"""
Tests for JSON serialization of trees.
"""

import json

import pytest

from arbor.core.exceptions import GraphOperationError
from arbor.core.serialization import TreeSerializer


@pytest.fixture
def annotated(sentence):
    """Fixture providing the sentence with secondary and semantic arcs."""
    sentence.init_semantic_heads()
    sentence[2].set_roleset_id("see.01")
    sentence[1].add_semantic_head(sentence[2], "A0")
    sentence[4].add_semantic_head(sentence[2], "A1", "PRD")
    sentence[1].set_secondary_heads([])
    sentence[1].add_secondary_head(sentence[4], "ref")
    return sentence


def test_to_dict(annotated):
    """Test conversion to a dictionary."""
    data = TreeSerializer(annotated).to_dict()

    assert data["schema_version"] == "1.0"
    assert data["metadata"] == {"sent_id": "1"}
    assert len(data["nodes"]) == 5

    john = data["nodes"][0]
    assert john["id"] == 1
    assert john["head"] == 2
    assert john["label"] == "nsubj"
    assert john["secondary_heads"] == [{"head": 4, "label": "ref"}]
    assert john["semantic_heads"] == [{"head": 2, "label": "A0"}]
    assert data["nodes"][1]["feats"] == {"Tense": "Past", "pb": "see.01"}
    assert data["nodes"][1]["secondary_heads"] is None
    assert data["nodes"][3]["semantic_heads"] == [{"head": 2, "label": "A1", "function_tag": "PRD"}]


def test_json_round_trip(annotated):
    """Test that JSON output rebuilds an identical tree."""
    text = TreeSerializer(annotated).to_json(indent=2)
    restored = TreeSerializer.from_json(text)

    assert [str(node) for node in restored] == [str(node) for node in annotated]
    assert restored.metadata == annotated.metadata
    assert restored[1].get_semantic_label(restored[2]) == "A0"
    assert restored[2].get_roleset_id() == "see.01"
    assert not restored[2].has_secondary_heads()
    assert restored.validate().is_valid


@pytest.mark.parametrize(
    "data",
    [
        {"nodes": []},
        {"schema_version": "1.0", "nodes": [{"id": 0}]},
        {"schema_version": "1.0", "nodes": [{"id": 1, "head": 5}]},
        {"schema_version": "1.0", "nodes": [{"id": 2}]},
        {
            "schema_version": "1.0",
            "nodes": [{"id": 1, "head": 0, "semantic_heads": [{"head": 0, "label": ""}]}],
        },
    ],
)
def test_from_dict_invalid(data):
    """Test that invalid payloads are rejected."""
    with pytest.raises(GraphOperationError):
        TreeSerializer.from_dict(data)


def test_from_json_invalid():
    """Test that malformed JSON is rejected."""
    with pytest.raises(GraphOperationError):
        TreeSerializer.from_json("{not json")


def test_rootless_label_survives(chain):
    """Test that a rootless node keeps its label through serialization."""
    chain[2].set_head(None)
    data = json.loads(TreeSerializer(chain).to_json())

    assert data["nodes"][1]["head"] is None
    restored = TreeSerializer.from_dict(data)
    assert restored[2].head is None
    assert restored[2].label == "dobj"
