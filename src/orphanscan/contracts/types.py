"""Semantic type aliases for compile-time type safety.

NewType creates distinct types that mypy treats as incompatible,
preventing accidental misuse of node names where dense indices are
expected (and the other way round).
"""

from typing import NewType, TypeAlias

NodeName = NewType("NodeName", str)
"""Externally visible node identifier as it appears in the input (e.g., 'A')"""

NodeIndex = NewType("NodeIndex", int)
"""Dense node position, assigned sequentially in first-registered order from 0"""

EdgePair: TypeAlias = tuple[str, str]
"""Directed edge as a (from, to) pair of node names"""
