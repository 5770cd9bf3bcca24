# src/orphanscan/core/graph/__init__.py
"""Orphan-node graph operations.

Package re-exports: the builder, the analyzer and their result types.
"""

from orphanscan.core.graph.builder import build_graph
from orphanscan.core.graph.graph import ReversedGraph
from orphanscan.core.graph.models import (
    BuildResult,
    ConfigurationError,
    DanglingReferenceWarning,
    EdgeNotFoundWarning,
    GraphBuildWarning,
    GraphFrozenError,
    OrphanReport,
)
from orphanscan.core.graph.reachability import find_orphans, find_unreachable

__all__ = [
    "BuildResult",
    "ConfigurationError",
    "DanglingReferenceWarning",
    "EdgeNotFoundWarning",
    "GraphBuildWarning",
    "GraphFrozenError",
    "OrphanReport",
    "ReversedGraph",
    "build_graph",
    "find_orphans",
    "find_unreachable",
]
