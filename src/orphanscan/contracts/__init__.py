"""Shared contracts for cross-boundary data types.

This package is a LEAF MODULE with no outbound dependencies to core.

Import patterns:
    from orphanscan.contracts import NodeName, NodeIndex, EdgePair
"""

from orphanscan.contracts.types import EdgePair, NodeIndex, NodeName

__all__ = [
    "EdgePair",
    "NodeIndex",
    "NodeName",
]
