# src/orphanscan/core/graph/builder.py
"""Graph construction from a parsed graph description.

Takes plain sequences (node names, (from, to) pairs) so the core stays
independent of whatever file format the description came from.

Dependency: models.py (leaf) and graph.py.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from orphanscan.contracts import EdgePair
from orphanscan.core.graph.graph import ReversedGraph
from orphanscan.core.graph.models import BuildResult, GraphBuildWarning

logger = structlog.get_logger(__name__)


def _record(warnings: list[GraphBuildWarning], warning: GraphBuildWarning | None, *, phase: str) -> None:
    if warning is None:
        return
    warnings.append(warning)
    logger.warning(
        warning.message,
        code=warning.code,
        phase=phase,
        node_ids=list(warning.node_ids),
    )


def build_graph(
    nodes: Iterable[str],
    root: str,
    edges: Iterable[EdgePair] = (),
    deleted_edges: Iterable[EdgePair] = (),
) -> BuildResult:
    """Build a reversed graph and resolve its root.

    Order of operations:
    1. Register every node name (duplicates keep their first index)
    2. Resolve the root (fatal if unknown, before any edge is touched)
    3. Add every edge (dangling references are skipped with a warning)
    4. Apply every deletion (best-effort, warnings for misses)
    5. Freeze the graph

    Args:
        nodes: Node names in registration order
        root: Name of the root node
        edges: (from, to) pairs to add
        deleted_edges: (from, to) pairs to remove after all edges are added

    Returns:
        BuildResult with the frozen graph, root index and collected warnings

    Raises:
        ConfigurationError: If root is not one of the registered nodes
    """
    graph = ReversedGraph()
    for name in nodes:
        graph.register_node(name)

    root_index = graph.resolve_root(root)

    warnings: list[GraphBuildWarning] = []
    for from_name, to_name in edges:
        _record(warnings, graph.add_edge(from_name, to_name), phase="add_edge")

    for from_name, to_name in deleted_edges:
        _record(warnings, graph.delete_edge(from_name, to_name), phase="delete_edge")

    graph.freeze()
    logger.debug(
        "Graph built",
        node_count=graph.node_count,
        edge_count=graph.edge_count,
        root=root,
        warning_count=len(warnings),
    )
    return BuildResult(graph=graph, root=root_index, warnings=tuple(warnings))
