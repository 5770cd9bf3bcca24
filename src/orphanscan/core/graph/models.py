# src/orphanscan/core/graph/models.py
"""Types, constants, and exceptions for orphan graph operations.

Leaf module: no intra-package imports beyond contracts (prevents import cycles).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from orphanscan.contracts import NodeIndex, NodeName

if TYPE_CHECKING:
    from orphanscan.core.graph.graph import ReversedGraph


class ConfigurationError(ValueError):
    """Raised when the graph description cannot be analysed at all.

    The only fatal condition: a root identifier that was never registered
    as a node. No traversal is attempted once this is raised.
    """

    pass


class GraphFrozenError(RuntimeError):
    """Raised when a frozen graph is mutated."""

    pass


@dataclass(frozen=True, slots=True)
class GraphBuildWarning:
    """Non-fatal warning emitted during graph construction.

    Unlike ConfigurationError, warnings don't prevent graph construction.
    The offending edge or deletion is skipped and processing continues.
    """

    code: ClassVar[str] = "graph_build"

    message: str
    node_ids: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        """Plain representation for JSON output."""
        return {"code": self.code, "message": self.message, "node_ids": list(self.node_ids)}


@dataclass(frozen=True, slots=True)
class DanglingReferenceWarning(GraphBuildWarning):
    """An edge or deletion names a node that was never registered.

    node_ids holds only the missing identifier(s).
    """

    code: ClassVar[str] = "dangling_reference"


@dataclass(frozen=True, slots=True)
class EdgeNotFoundWarning(GraphBuildWarning):
    """A deletion targets an edge that is not currently in the graph.

    node_ids holds the (from, to) pair of the requested deletion.
    """

    code: ClassVar[str] = "edge_not_found"


@dataclass(frozen=True, slots=True)
class BuildResult:
    """A constructed graph, its resolved root and the warnings collected on the way."""

    graph: ReversedGraph
    root: NodeIndex
    warnings: tuple[GraphBuildWarning, ...] = ()

    @property
    def root_name(self) -> NodeName:
        return self.graph.name_of(self.root)


@dataclass(frozen=True, slots=True)
class OrphanReport:
    """Outcome of an orphan analysis.

    orphans are listed in registration order of the nodes, which keeps
    output stable for a given input regardless of traversal order.
    """

    root: NodeName
    orphans: tuple[NodeName, ...]
    warnings: tuple[GraphBuildWarning, ...] = field(default=())

    @property
    def has_orphans(self) -> bool:
        return bool(self.orphans)
