# tests/property/__init__.py
"""Property-based tests for orphanscan.

Property-based testing validates invariants that must hold for ALL inputs,
not just the specific examples we think of.

Test categories:
- core/: reachability against a NetworkX oracle, idempotence, order independence
"""
