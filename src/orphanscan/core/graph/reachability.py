# src/orphanscan/core/graph/reachability.py
"""Reachability analysis over a reversed graph.

Because edges are stored reversed, the nodes reachable from the root here are
exactly the nodes with a forward path to the root in the original graph.
Everything else is an orphan.
"""

from __future__ import annotations

import structlog

from orphanscan.contracts import NodeIndex
from orphanscan.core.graph.graph import ReversedGraph
from orphanscan.core.graph.models import BuildResult, ConfigurationError, OrphanReport

logger = structlog.get_logger(__name__)


def find_unreachable(graph: ReversedGraph, root: int) -> frozenset[NodeIndex]:
    """Return the indices of all nodes not reachable from ``root``.

    Iterative depth-first search with an explicit stack. Nodes are marked
    visited when pushed, so each node enters the stack at most once and the
    search ends after at most node_count pops. Sibling order does not matter:
    the result is plain set reachability.

    Raises:
        ConfigurationError: If root is not a valid node index
    """
    node_count = graph.node_count
    if not 0 <= root < node_count:
        raise ConfigurationError(f"Root index {root} is not a valid node index (node_count={node_count})")

    visited = [False] * node_count
    visited[root] = True
    stack = [root]

    while stack:
        current = stack.pop()
        for predecessor in graph.predecessors(current):
            if not visited[predecessor]:
                visited[predecessor] = True
                stack.append(predecessor)

    unreachable = frozenset(NodeIndex(i) for i, seen in enumerate(visited) if not seen)
    logger.debug(
        "Reachability search complete",
        root=graph.name_of(root),
        visited_count=node_count - len(unreachable),
        unreachable_count=len(unreachable),
    )
    return unreachable


def find_orphans(result: BuildResult) -> OrphanReport:
    """Run the reachability search on a build result and name the orphans.

    Orphans are listed in node registration order. Build warnings are carried
    over so the caller can report them alongside the orphans.
    """
    graph = result.graph
    unreachable = find_unreachable(graph, result.root)
    orphans = tuple(graph.name_of(index) for index in sorted(unreachable))
    return OrphanReport(root=result.root_name, orphans=orphans, warnings=result.warnings)
