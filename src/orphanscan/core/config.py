# src/orphanscan/core/config.py
"""
Graph document schema and loading.

A graph document is the declarative description the analysis runs on:

    {
      "nodes": [{"id": "A"}, {"id": "B"}],
      "root": "A",
      "edges": [{"from": "B", "to": "A"}],
      "deletedEdge": [{"from": "B", "to": "A"}]
    }

Uses Pydantic for validation. Documents are frozen (immutable) after
construction. JSON and YAML files are accepted.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from orphanscan.contracts import EdgePair, NodeName

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class DocumentParseError(ValueError):
    """Raised when a graph document file cannot be parsed.

    Covers malformed or non-UTF-8 JSON/YAML, paths that are not regular
    files, and documents whose top level is not a mapping.
    Field-level problems surface as pydantic ValidationError.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class NodeEntry(BaseModel):
    """A single node declaration."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1, description="Unique node identifier")


class EdgeEntry(BaseModel):
    """A directed edge declaration (``from`` -> ``to``).

    ``from`` is a Python keyword, so the field is named from_node and
    populated through its alias.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    from_node: str = Field(alias="from", min_length=1, description="Edge source node id")
    to_node: str = Field(alias="to", min_length=1, description="Edge target node id")

    def as_pair(self) -> EdgePair:
        return self.from_node, self.to_node


class GraphDocument(BaseModel):
    """Top-level graph description.

    Referential consistency (edges naming unknown nodes, a root that is not a
    node) is NOT checked here; that is the graph builder's job, which reports
    dangling edges as warnings and an unknown root as a ConfigurationError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    nodes: list[NodeEntry] = Field(description="Node declarations in registration order")
    root: str = Field(min_length=1, description="Identifier of the root node")
    edges: list[EdgeEntry] = Field(
        default_factory=list,
        description="Edges to add",
    )
    deleted_edges: list[EdgeEntry] = Field(
        default_factory=list,
        alias="deletedEdge",
        description="Edges to remove after all edges are added",
    )

    @field_validator("nodes", "edges", "deleted_edges", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        """Treat an explicit null list as empty (common in hand-written YAML)."""
        return [] if v is None else v

    def node_names(self) -> list[NodeName]:
        return [NodeName(entry.id) for entry in self.nodes]

    def edge_pairs(self) -> list[EdgePair]:
        return [edge.as_pair() for edge in self.edges]

    def deleted_pairs(self) -> list[EdgePair]:
        return [edge.as_pair() for edge in self.deleted_edges]


def _parse_text(path: Path, text: str) -> Any:
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DocumentParseError(path, f"invalid YAML: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError(path, f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e


def load_graph_document(path: Path) -> GraphDocument:
    """Load and validate a graph document from a JSON or YAML file.

    ``.yaml``/``.yml`` files are parsed as YAML, everything else as JSON.
    String values are taken verbatim; node identifiers are opaque.

    Args:
        path: Path to the document

    Returns:
        Validated GraphDocument

    Raises:
        FileNotFoundError: If the file doesn't exist
        DocumentParseError: If the path is not a regular file, the file is not
            UTF-8 encoded JSON/YAML, or its top level is not a mapping
        ValidationError: If the document fails Pydantic validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Graph document not found: {path}")
    if not path.is_file():
        raise DocumentParseError(path, "not a regular file")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentParseError(path, f"not valid UTF-8: {e.reason} at byte {e.start}") from e

    raw = _parse_text(path, text)
    if not isinstance(raw, dict):
        raise DocumentParseError(path, f"top level must be a mapping, got {type(raw).__name__}")

    return GraphDocument.model_validate(raw)
