# tests/property/__init__.py
"""Property-based tests for graph-canon.

Property-based testing validates invariants that must hold for ALL inputs,
not just the specific examples we think of. For a canonicalizer the central
invariant is that renaming nodes never changes the canonical string while
any change to structure or content does.
"""
