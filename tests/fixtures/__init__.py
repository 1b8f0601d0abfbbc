# tests/fixtures/__init__.py
"""Shared fixtures for graph-canon tests.

Available helpers:
- DictGraph: protocol-only PropertyGraph implementation
- relabel: rename nodes and shuffle iteration order of a DictGraph
"""

from tests.fixtures.graphs import DictGraph, relabel

__all__ = [
    "DictGraph",
    "relabel",
]
