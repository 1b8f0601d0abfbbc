# src/graph_canon/core/canonicalizer.py
"""Equality facade: canonical strings and isomorphism checks.

Pipeline per graph:
    snapshot (encode once) -> refine (colour refinement)
    -> choose_order (tie-break search) -> serialized text

Two graphs are isomorphic iff their canonical strings are identical.
"""

from __future__ import annotations

from dataclasses import dataclass

from graph_canon.contracts.graph import PropertyGraph
from graph_canon.contracts.types import NodeRef
from graph_canon.core.config import CanonicalizerSettings
from graph_canon.core.logging import get_logger
from graph_canon.core.ordering import CanonicalOrder, choose_order
from graph_canon.core.refinement import RefinementResult, refine
from graph_canon.core.snapshot import take_snapshot

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CanonicalForm:
    """Canonical string plus the diagnostics that produced it.

    Attributes:
        text: The canonical string
        node_order: Caller node identities in canonical position order
            (node_order[i] is rendered as n<i>)
        refinement: Signature engine result
        ordering: Tie-break search result
    """

    text: str
    node_order: tuple[NodeRef, ...]
    refinement: RefinementResult
    ordering: CanonicalOrder

    @property
    def best_effort(self) -> bool:
        """True when a permutation budget cut the tie-break search short.

        A best-effort form may differ between isomorphic graphs. An
        unconverged refinement does not make the form best-effort: it only
        leaves larger tie groups for the exhaustive search.
        """
        return not self.ordering.exhaustive


class Canonicalizer:
    """Computes canonical forms under a fixed set of budgets.

    Example:
        >>> canonicalizer = Canonicalizer(CanonicalizerSettings(max_permutations=5040))
        >>> canonicalizer.equals(left, right)
        True
    """

    def __init__(self, settings: CanonicalizerSettings | None = None) -> None:
        self._settings = settings if settings is not None else CanonicalizerSettings()

    @property
    def settings(self) -> CanonicalizerSettings:
        return self._settings

    def canonical_form(self, graph: PropertyGraph) -> CanonicalForm:
        """Canonicalize a graph and keep the intermediate results.

        Raises:
            TypeError: If graph does not implement PropertyGraph
            InvalidReferenceError: If a relationship endpoint is not a node
            GraphContractError: If a node identity is listed twice
            UnsupportedValueError: If a property value is outside the variant set
        """
        if not isinstance(graph, PropertyGraph):
            raise TypeError(f"Expected a PropertyGraph implementation, got {type(graph).__name__}")

        snapshot = take_snapshot(graph)
        refinement = refine(snapshot, max_rounds=self._settings.max_refinement_rounds)
        ordering = choose_order(
            snapshot,
            refinement.signatures,
            max_permutations=self._settings.max_permutations,
        )
        logger.debug(
            "graph_canonicalized",
            nodes=snapshot.node_count,
            relationships=snapshot.relationship_count,
            rounds=refinement.rounds,
            classes=refinement.class_count,
            candidates=ordering.candidates,
        )
        return CanonicalForm(
            text=ordering.text,
            node_order=tuple(snapshot.node_refs[node] for node in ordering.order),
            refinement=refinement,
            ordering=ordering,
        )

    def canonicalize(self, graph: PropertyGraph) -> str:
        """Return the canonical string of a graph."""
        return self.canonical_form(graph).text

    def equals(self, left: PropertyGraph, right: PropertyGraph) -> bool:
        """Whether two graphs are isomorphic (identical canonical strings)."""
        return self.canonicalize(left) == self.canonicalize(right)


_default_canonicalizer = Canonicalizer()


def canonicalize(graph: PropertyGraph) -> str:
    """Return the canonical string of a graph using default (unbounded) budgets."""
    return _default_canonicalizer.canonicalize(graph)


def equals(left: PropertyGraph, right: PropertyGraph) -> bool:
    """Whether two graphs are isomorphic, using default (unbounded) budgets."""
    return _default_canonicalizer.equals(left, right)
