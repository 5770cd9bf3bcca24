"""Tests for graph document loading and validation."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from orphanscan.core.config import (
    DocumentParseError,
    EdgeEntry,
    GraphDocument,
    load_graph_document,
)


class TestGraphDocument:
    def test_parses_document_key_names(self, scenario_b: dict[str, Any]) -> None:
        scenario_b["deletedEdge"] = [{"from": "C", "to": "B"}]

        document = GraphDocument.model_validate(scenario_b)

        assert document.node_names() == ["A", "B", "C"]
        assert document.root == "A"
        assert document.edge_pairs() == [("B", "A"), ("C", "B")]
        assert document.deleted_pairs() == [("C", "B")]

    def test_python_field_names_are_accepted(self) -> None:
        document = GraphDocument(
            nodes=[{"id": "A"}],
            root="A",
            deleted_edges=[EdgeEntry(from_node="A", to_node="A")],
        )

        assert document.deleted_pairs() == [("A", "A")]

    def test_edges_and_deletions_default_to_empty(self) -> None:
        document = GraphDocument.model_validate({"nodes": [{"id": "A"}], "root": "A"})

        assert document.edges == []
        assert document.deleted_edges == []

    def test_null_lists_are_empty(self) -> None:
        document = GraphDocument.model_validate({"nodes": [{"id": "A"}], "root": "A", "edges": None, "deletedEdge": None})

        assert document.edge_pairs() == []

    def test_duplicate_nodes_survive_validation(self) -> None:
        # Deduplication is the builder's job
        document = GraphDocument.model_validate({"nodes": [{"id": "A"}, {"id": "A"}], "root": "A"})

        assert document.node_names() == ["A", "A"]

    def test_extra_attributes_on_entries_are_ignored(self) -> None:
        document = GraphDocument.model_validate(
            {
                "nodes": [{"id": "A", "label": "Root"}],
                "root": "A",
                "edges": [{"from": "A", "to": "A", "weight": 3}],
            }
        )

        assert document.edge_pairs() == [("A", "A")]

    def test_unknown_top_level_key_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="deletedEdges"):
            GraphDocument.model_validate({"nodes": [], "root": "A", "deletedEdges": []})

    @pytest.mark.parametrize(
        "payload",
        [
            {"root": "A"},
            {"nodes": [{"id": "A"}]},
            {"nodes": [{"name": "A"}], "root": "A"},
            {"nodes": [{"id": ""}], "root": "A"},
            {"nodes": [{"id": "A"}], "root": "A", "edges": [{"from": "A"}]},
            {"nodes": "A", "root": "A"},
        ],
    )
    def test_structural_errors_raise_validation_error(self, payload: dict[str, Any]) -> None:
        with pytest.raises(ValidationError):
            GraphDocument.model_validate(payload)

    def test_root_outside_nodes_is_not_a_validation_error(self) -> None:
        document = GraphDocument.model_validate({"nodes": [{"id": "A"}], "root": "Z"})

        assert document.root == "Z"

    def test_document_is_frozen(self, scenario_b: dict[str, Any]) -> None:
        document = GraphDocument.model_validate(scenario_b)

        with pytest.raises(ValidationError):
            document.root = "B"  # type: ignore[misc]


class TestLoadGraphDocument:
    def test_loads_json(self, write_document: Callable[..., Path], scenario_b: dict[str, Any]) -> None:
        document = load_graph_document(write_document(scenario_b))

        assert document.edge_pairs() == [("B", "A"), ("C", "B")]

    @pytest.mark.parametrize("name", ["graph.yaml", "graph.yml"])
    def test_loads_yaml(self, write_document: Callable[..., Path], scenario_b: dict[str, Any], name: str) -> None:
        document = load_graph_document(write_document(scenario_b, name))

        assert document.root == "A"
        assert document.node_names() == ["A", "B", "C"]

    def test_unknown_suffix_is_read_as_json(self, write_document: Callable[..., Path], scenario_b: dict[str, Any]) -> None:
        document = load_graph_document(write_document(scenario_b, "example1_json.txt"))

        assert document.root == "A"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_graph_document(tmp_path / "absent.json")

    def test_malformed_json(self, write_document: Callable[..., Path]) -> None:
        path = write_document('{"nodes": [', "broken.json")

        with pytest.raises(DocumentParseError, match="invalid JSON") as exc_info:
            load_graph_document(path)

        assert exc_info.value.path == path

    def test_malformed_yaml(self, write_document: Callable[..., Path]) -> None:
        path = write_document("nodes: [unclosed\nroot: A\n", "broken.yaml")

        with pytest.raises(DocumentParseError, match="invalid YAML"):
            load_graph_document(path)

    def test_top_level_must_be_mapping(self, write_document: Callable[..., Path]) -> None:
        path = write_document('["A", "B"]', "list.json")

        with pytest.raises(DocumentParseError, match="mapping"):
            load_graph_document(path)

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"nodes":[{"id":"\xff"}],"root":"A"}')

        with pytest.raises(DocumentParseError, match="not valid UTF-8") as exc_info:
            load_graph_document(path)

        assert exc_info.value.path == path

    def test_directory_is_not_a_document(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentParseError, match="not a regular file"):
            load_graph_document(tmp_path)

    def test_placeholder_identifiers_are_kept_verbatim(
        self,
        write_document: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("NODE", "A")
        path = write_document(
            {
                "nodes": [{"id": "A"}, {"id": "${NODE}"}],
                "root": "A",
                "edges": [{"from": "${NODE}", "to": "A"}],
            }
        )

        document = load_graph_document(path)

        assert document.node_names() == ["A", "${NODE}"]
        assert document.edge_pairs() == [("${NODE}", "A")]
