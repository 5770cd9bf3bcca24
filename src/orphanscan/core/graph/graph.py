# src/orphanscan/core/graph/graph.py
"""ReversedGraph class: node registration, edge mutation and queries.

Construction from a full graph description lives in builder.py; this module
contains the graph class with all per-node and per-edge operations.

Edges are stored reversed: an edge ``from -> to`` is recorded as "``to`` has
predecessor ``from``". Searching this structure from the root visits exactly
the nodes that have a forward path to the root.
"""

from __future__ import annotations

from collections.abc import Iterator

import networkx as nx
from networkx import DiGraph

from orphanscan.contracts import NodeIndex, NodeName
from orphanscan.core.graph.models import (
    ConfigurationError,
    DanglingReferenceWarning,
    EdgeNotFoundWarning,
    GraphBuildWarning,
    GraphFrozenError,
)


class ReversedGraph:
    """Directed graph keyed by dense node indices, stored as predecessor sets.

    Node names map to indices in first-registered order. ``_predecessors`` is
    an arena indexed by node index: entry ``i`` exists for every registered
    node (possibly empty) and only ever holds valid indices.
    """

    def __init__(self) -> None:
        self._index_by_name: dict[NodeName, NodeIndex] = {}
        self._name_by_index: list[NodeName] = []
        self._predecessors: list[set[NodeIndex]] = []
        self._frozen = False

    @property
    def node_count(self) -> int:
        """Number of registered nodes."""
        return len(self._name_by_index)

    @property
    def edge_count(self) -> int:
        """Number of distinct edges currently stored."""
        return sum(len(preds) for preds in self._predecessors)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject any further mutation. Called once construction is complete."""
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph is frozen; nodes and edges can no longer change")

    # -------------------------------------------------------------------------
    # Name <-> index mapping
    # -------------------------------------------------------------------------

    def has_node(self, name: str) -> bool:
        """Check if a node name is registered."""
        return name in self._index_by_name

    def index_of(self, name: str) -> NodeIndex | None:
        """Index for a node name, or None if the name is unknown."""
        return self._index_by_name.get(NodeName(name))

    def name_of(self, index: int) -> NodeName:
        """Node name for a valid index.

        Raises:
            IndexError: If index is outside [0, node_count)
        """
        if not 0 <= index < len(self._name_by_index):
            raise IndexError(f"Node index {index} out of range (node_count={self.node_count})")
        return self._name_by_index[index]

    def node_names(self) -> tuple[NodeName, ...]:
        """All node names in index order."""
        return tuple(self._name_by_index)

    def register_node(self, name: str) -> NodeIndex:
        """Register a node name and return its index.

        Re-registering a known name is a no-op and returns the index assigned
        on first registration.
        """
        existing = self._index_by_name.get(NodeName(name))
        if existing is not None:
            return existing

        self._check_mutable()
        index = NodeIndex(len(self._name_by_index))
        self._index_by_name[NodeName(name)] = index
        self._name_by_index.append(NodeName(name))
        self._predecessors.append(set())
        return index

    def resolve_root(self, name: str) -> NodeIndex:
        """Look up the root node index.

        Raises:
            ConfigurationError: If the root name was never registered
        """
        index = self.index_of(name)
        if index is None:
            raise ConfigurationError(f"Root node '{name}' is not among the {self.node_count} registered node(s)")
        return index

    # -------------------------------------------------------------------------
    # Edge mutation
    # -------------------------------------------------------------------------

    def _resolve_pair(self, from_name: str, to_name: str, action: str) -> tuple[NodeIndex, NodeIndex] | DanglingReferenceWarning:
        from_index = self.index_of(from_name)
        to_index = self.index_of(to_name)
        if from_index is not None and to_index is not None:
            return from_index, to_index

        missing = tuple(name for name, index in ((from_name, from_index), (to_name, to_index)) if index is None)
        return DanglingReferenceWarning(
            message=(
                f"Cannot {action} edge {from_name} -> {to_name}: "
                f"node(s) {', '.join(repr(m) for m in missing)} do not exist in the graph"
            ),
            node_ids=missing,
        )

    def add_edge(self, from_name: str, to_name: str) -> GraphBuildWarning | None:
        """Add the edge ``from_name -> to_name``.

        The edge is stored reversed (``from`` joins the predecessor set of
        ``to``). Adding an existing edge again changes nothing. Self-loops are
        allowed.

        Returns:
            DanglingReferenceWarning if either end is unknown (edge skipped),
            otherwise None.
        """
        self._check_mutable()
        resolved = self._resolve_pair(from_name, to_name, "add")
        if isinstance(resolved, DanglingReferenceWarning):
            return resolved

        from_index, to_index = resolved
        self._predecessors[to_index].add(from_index)
        return None

    def delete_edge(self, from_name: str, to_name: str) -> GraphBuildWarning | None:
        """Remove the edge ``from_name -> to_name`` if present.

        Deletion is best-effort: deleting an unknown or already-removed edge
        leaves the graph unchanged and reports a warning.

        Returns:
            DanglingReferenceWarning if either end is unknown,
            EdgeNotFoundWarning if the edge is not in the graph,
            otherwise None.
        """
        self._check_mutable()
        resolved = self._resolve_pair(from_name, to_name, "delete")
        if isinstance(resolved, DanglingReferenceWarning):
            return resolved

        from_index, to_index = resolved
        predecessors = self._predecessors[to_index]
        if from_index not in predecessors:
            return EdgeNotFoundWarning(
                message=f"Cannot delete edge {from_name} -> {to_name}: the edge does not exist in the graph",
                node_ids=(from_name, to_name),
            )
        predecessors.remove(from_index)
        return None

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def predecessors(self, index: int) -> frozenset[NodeIndex]:
        """Indices of nodes with an edge into ``index`` (empty if none)."""
        if not 0 <= index < len(self._predecessors):
            raise IndexError(f"Node index {index} out of range (node_count={self.node_count})")
        return frozenset(self._predecessors[index])

    def has_edge(self, from_name: str, to_name: str) -> bool:
        """Check if the edge ``from_name -> to_name`` is currently stored."""
        from_index = self.index_of(from_name)
        to_index = self.index_of(to_name)
        if from_index is None or to_index is None:
            return False
        return from_index in self._predecessors[to_index]

    def edges(self) -> Iterator[tuple[NodeName, NodeName]]:
        """Yield stored edges in the original (from, to) direction.

        Ordered by target index, then source index.
        """
        for to_index, preds in enumerate(self._predecessors):
            for from_index in sorted(preds):
                yield self._name_by_index[from_index], self._name_by_index[to_index]

    def get_nx_graph(self) -> DiGraph[str]:
        """Return a frozen NetworkX view of the graph in the original direction.

        Use this for topology analysis and other NetworkX algorithms that
        need direct graph access. Every registered node is present, including
        isolated ones. Mutation attempts raise nx.NetworkXError.
        """
        graph: DiGraph[str] = nx.DiGraph()
        graph.add_nodes_from(self._name_by_index)
        graph.add_edges_from(self.edges())
        return nx.freeze(graph)  # type: ignore[no-any-return]
