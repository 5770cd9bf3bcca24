# src/orphanscan/core/__init__.py
"""Core infrastructure: graph building, reachability analysis, document loading, logging."""

from orphanscan.core.config import (
    DocumentParseError,
    EdgeEntry,
    GraphDocument,
    NodeEntry,
    load_graph_document,
)
from orphanscan.core.graph import (
    BuildResult,
    ConfigurationError,
    DanglingReferenceWarning,
    EdgeNotFoundWarning,
    GraphBuildWarning,
    GraphFrozenError,
    OrphanReport,
    ReversedGraph,
    build_graph,
    find_orphans,
    find_unreachable,
)
from orphanscan.core.logging import configure_logging

__all__ = [
    "BuildResult",
    "ConfigurationError",
    "DanglingReferenceWarning",
    "DocumentParseError",
    "EdgeEntry",
    "EdgeNotFoundWarning",
    "GraphBuildWarning",
    "GraphDocument",
    "GraphFrozenError",
    "NodeEntry",
    "OrphanReport",
    "ReversedGraph",
    "build_graph",
    "configure_logging",
    "find_orphans",
    "find_unreachable",
    "load_graph_document",
]
