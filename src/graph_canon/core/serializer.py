# src/graph_canon/core/serializer.py
"""Render a graph snapshot under a given node order.

Output (one line each, joined by newlines):

    n0 [A] {a: 13, b: 37}
    n1 [B] {bar: 84}
    n0 -[REL] {a: 13}-> n1
    n1 -[REL] {c: 12}-> n0

Nodes are listed in the chosen order. Relationships are listed by source
position, then by their own encoding, then by target position. Only
positions appear in the output, never caller identities, so the text depends
on structure and content alone.
"""

from __future__ import annotations

from collections.abc import Sequence

from graph_canon.core.snapshot import GraphSnapshot


def serialize(snapshot: GraphSnapshot, order: Sequence[int]) -> str:
    """Serialize the snapshot with node ``order[i]`` at position i.

    Args:
        snapshot: Encoded graph
        order: Permutation of range(snapshot.node_count)

    Returns:
        Canonical text for this order ("" for the empty graph)
    """
    position = [0] * snapshot.node_count
    for pos, node in enumerate(order):
        position[node] = pos

    lines = [f"n{pos} {snapshot.node_texts[node]}" for pos, node in enumerate(order)]

    edges = sorted((position[rel.source], rel.text, position[rel.target]) for rel in snapshot.relationships)
    lines.extend(f"n{source} -{text}-> n{target}" for source, text, target in edges)

    return "\n".join(lines)
