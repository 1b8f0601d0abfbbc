# src/graph_canon/core/ordering.py
"""Canonical node order via exhaustive tie-break search.

Nodes are grouped by final refinement signature and groups are ordered by
signature text. Nodes inside a tie group could not be told apart by
refinement (typically automorphic nodes), so every ordering of every tie
group is tried: the search space is the Cartesian product of per-group
permutations. Each candidate order is serialized and the lexicographically
smallest text wins.

The cost is the product of the tie-group factorials. That is acceptable for
test-fixture graphs and is the reason this library is not meant for
large-scale comparisons.
"""

from __future__ import annotations

import itertools
import math
from collections import defaultdict
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from graph_canon.contracts.types import Signature
from graph_canon.core.logging import get_logger
from graph_canon.core.serializer import serialize
from graph_canon.core.snapshot import GraphSnapshot

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CanonicalOrder:
    """Winning node order and its serialization.

    Attributes:
        order: Node indices, canonical position i holds node order[i]
        text: Serialization under that order
        candidates: Total number of candidate orders in the search space
        tried: Candidate orders actually serialized
    """

    order: tuple[int, ...]
    text: str
    candidates: int
    tried: int

    @property
    def exhaustive(self) -> bool:
        """Whether every candidate was tried (False means best-effort)."""
        return self.tried == self.candidates


def tie_groups(signatures: Sequence[Signature]) -> list[tuple[int, ...]]:
    """Group node indices by signature, groups sorted by signature."""
    groups: defaultdict[Signature, list[int]] = defaultdict(list)
    for node, signature in enumerate(signatures):
        groups[signature].append(node)
    return [tuple(groups[signature]) for signature in sorted(groups)]


def candidate_count(groups: Sequence[tuple[int, ...]]) -> int:
    """Size of the search space: product of tie-group factorials."""
    return math.prod(math.factorial(len(group)) for group in groups)


def candidate_orders(groups: Sequence[tuple[int, ...]]) -> Iterator[tuple[int, ...]]:
    """Lazily enumerate every full order consistent with the group order.

    Singleton groups contribute exactly one arrangement, so only tie groups
    multiply the number of candidates.
    """
    if not groups:
        yield ()
        return
    head, rest = groups[0], groups[1:]
    for arrangement in itertools.permutations(head):
        for tail in candidate_orders(rest):
            yield arrangement + tail


def choose_order(
    snapshot: GraphSnapshot,
    signatures: Sequence[Signature],
    *,
    max_permutations: int | None = None,
) -> CanonicalOrder:
    """Pick the candidate order with the smallest serialization.

    Args:
        snapshot: Encoded graph
        signatures: Final refinement signature per node index
        max_permutations: Stop after this many candidates (None = all). An
            exhausted budget yields a best-effort order that is no longer
            guaranteed to be invariant under relabeling.

    Returns:
        CanonicalOrder with the winning order and text
    """
    if max_permutations is not None and max_permutations < 1:
        raise ValueError(f"max_permutations must be positive, got {max_permutations}")

    groups = tie_groups(signatures)
    candidates = candidate_count(groups)
    largest_tie = max((len(group) for group in groups), default=0)
    logger.debug("tie_break_search", groups=len(groups), largest_tie=largest_tie, candidates=candidates)

    # candidate_orders always yields at least one order (the empty one for an empty graph)
    orders = candidate_orders(groups)
    best_order = next(orders)
    best_text = serialize(snapshot, best_order)
    tried = 1
    for order in orders:
        if max_permutations is not None and tried >= max_permutations:
            break
        text = serialize(snapshot, order)
        tried += 1
        if text < best_text:
            best_text = text
            best_order = order

    if tried < candidates:
        logger.warning(
            "permutation_budget_exhausted",
            candidates=candidates,
            tried=tried,
            largest_tie=largest_tie,
        )

    return CanonicalOrder(order=best_order, text=best_text, candidates=candidates, tried=tried)
