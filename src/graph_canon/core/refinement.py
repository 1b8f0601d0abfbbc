# src/graph_canon/core/refinement.py
"""Colour refinement (1-dimensional Weisfeiler-Leman) over a graph snapshot.

Every node starts with its own labels + properties as signature. Each round
replaces a node's signature with a hash of its previous signature and the
sorted multiset of (direction, relationship text, neighbour signature) over
its incident relationships. Rounds read only the previous round's
signatures, so the result never depends on traversal order.

The partition induced by signature equality can only get finer from round to
round. Once a round leaves the number of classes unchanged the partition is
stable; on a finite node set that happens after at most node-count rounds.
"""

from __future__ import annotations

from dataclasses import dataclass

from graph_canon.contracts.types import Signature
from graph_canon.core.canonical import stable_hash
from graph_canon.core.logging import get_logger
from graph_canon.core.snapshot import GraphSnapshot

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RefinementResult:
    """Final signatures, one per node index.

    Attributes:
        signatures: Signature of node i at position i
        rounds: Refinement rounds actually run
        converged: False only when a configured round budget stopped the loop
            before the partition stabilized
    """

    signatures: tuple[Signature, ...]
    rounds: int
    converged: bool

    @property
    def class_count(self) -> int:
        """Number of distinct signatures (cells of the partition)."""
        return len(set(self.signatures))


def initial_signatures(snapshot: GraphSnapshot) -> list[Signature]:
    """Signature of each node before any refinement: its own encoding."""
    return [Signature(text) for text in snapshot.node_texts]


def refine_round(snapshot: GraphSnapshot, previous: list[Signature]) -> list[Signature]:
    """Run one refinement round against a snapshot of the previous signatures."""
    refined: list[Signature] = []
    for node, incidences in enumerate(snapshot.incidences):
        neighbourhood = sorted([entry.direction.value, entry.text, previous[entry.neighbour]] for entry in incidences)
        refined.append(Signature(stable_hash([previous[node], neighbourhood])))
    return refined


def refine(snapshot: GraphSnapshot, *, max_rounds: int | None = None) -> RefinementResult:
    """Refine signatures until the partition is stable or the budget runs out.

    Args:
        snapshot: Encoded graph
        max_rounds: Round budget; None means node count, which always
            suffices for convergence

    Returns:
        RefinementResult with one signature per node
    """
    signatures = initial_signatures(snapshot)
    class_count = len(set(signatures))
    budget = max_rounds if max_rounds is not None else snapshot.node_count

    rounds = 0
    # A discrete partition (every node distinct) cannot be refined further
    converged = class_count == snapshot.node_count
    while not converged and rounds < budget:
        refined = refine_round(snapshot, signatures)
        rounds += 1
        refined_count = len(set(refined))
        signatures = refined
        if refined_count == class_count:
            converged = True
        class_count = refined_count
        if class_count == snapshot.node_count:
            converged = True

    if not converged:
        logger.warning(
            "refinement_budget_exhausted",
            rounds=rounds,
            classes=class_count,
            nodes=snapshot.node_count,
        )
    else:
        logger.debug("refinement_converged", rounds=rounds, classes=class_count, nodes=snapshot.node_count)

    return RefinementResult(signatures=tuple(signatures), rounds=rounds, converged=converged)
