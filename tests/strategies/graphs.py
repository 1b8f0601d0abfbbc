"""Strategies for small property graphs and node relabelings."""

from __future__ import annotations

from hypothesis import strategies as st

from tests.fixtures.graphs import DictGraph
from tests.strategies.values import small_labels, small_property_maps, small_types


@st.composite
def small_graphs(draw: st.DrawFn, max_nodes: int = 6, max_relationships: int = 9) -> DictGraph:
    """Generate a graph from a tiny label/type/property domain.

    The tiny domain makes equal signatures (and therefore tie-break searches)
    common. Self-loops and parallel relationships are allowed.
    """
    node_count = draw(st.integers(min_value=0, max_value=max_nodes))
    graph = DictGraph()
    for index in range(node_count):
        labels = draw(st.lists(small_labels, max_size=2))
        graph.node_data[f"n{index}"] = (labels, draw(small_property_maps))

    if node_count == 0:
        return graph

    endpoints = st.integers(min_value=0, max_value=node_count - 1)
    rel_count = draw(st.integers(min_value=0, max_value=max_relationships))
    for index in range(rel_count):
        source = draw(endpoints)
        target = draw(endpoints)
        graph.rel_data[f"r{index}"] = (f"n{source}", f"n{target}", draw(small_types), draw(small_property_maps))
    return graph


@st.composite
def graphs_with_relabeling(draw: st.DrawFn) -> tuple[DictGraph, dict[str, str], int]:
    """Generate a graph, a bijective node renaming and a shuffle seed."""
    graph = draw(small_graphs())
    nodes = list(graph.node_data)
    permuted = draw(st.permutations(nodes))
    node_map = {node: f"v{target}" for node, target in zip(nodes, permuted, strict=True)}
    seed = draw(st.integers(min_value=0, max_value=2**32 - 1))
    return graph, node_map, seed
