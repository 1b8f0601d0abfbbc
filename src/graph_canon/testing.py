# src/graph_canon/testing.py
"""Assertion helpers for test suites.

Both helpers accept PropertyGraph implementations or GDL text, so fixtures
can be compared against an inline expectation:

    from graph_canon.testing import assert_isomorphic

    def test_import_builds_expected_graph(imported_graph):
        assert_isomorphic(imported_graph, "(a:User {id: 1})-[:OWNS]->(:Repo)")

On mismatch the AssertionError carries a unified diff of the canonical
strings, which pytest prints in full.
"""

from __future__ import annotations

import difflib

from graph_canon.contracts.graph import PropertyGraph
from graph_canon.core.canonicalizer import Canonicalizer
from graph_canon.core.config import CanonicalizerSettings
from graph_canon.gdl import parse_gdl


def _as_graph(graph: PropertyGraph | str) -> PropertyGraph:
    if isinstance(graph, str):
        return parse_gdl(graph)
    return graph


def assert_isomorphic(
    left: PropertyGraph | str,
    right: PropertyGraph | str,
    *,
    settings: CanonicalizerSettings | None = None,
) -> None:
    """Assert that two graphs are isomorphic.

    Raises:
        AssertionError: With a unified diff of both canonical forms
    """
    __tracebackhide__ = True
    canonicalizer = Canonicalizer(settings)
    left_text = canonicalizer.canonicalize(_as_graph(left))
    right_text = canonicalizer.canonicalize(_as_graph(right))
    if left_text == right_text:
        return
    diff = "\n".join(
        difflib.unified_diff(
            left_text.splitlines(),
            right_text.splitlines(),
            fromfile="left",
            tofile="right",
            lineterm="",
        )
    )
    raise AssertionError(f"Graphs are not isomorphic:\n{diff}")


def assert_not_isomorphic(
    left: PropertyGraph | str,
    right: PropertyGraph | str,
    *,
    settings: CanonicalizerSettings | None = None,
) -> None:
    """Assert that two graphs are NOT isomorphic.

    Raises:
        AssertionError: With the shared canonical form
    """
    __tracebackhide__ = True
    canonicalizer = Canonicalizer(settings)
    left_text = canonicalizer.canonicalize(_as_graph(left))
    right_text = canonicalizer.canonicalize(_as_graph(right))
    if left_text != right_text:
        return
    raise AssertionError(f"Graphs are isomorphic, canonical form:\n{left_text}")
