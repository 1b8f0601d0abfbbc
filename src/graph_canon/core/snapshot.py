# src/graph_canon/core/snapshot.py
"""Read-only, index-based snapshot of a PropertyGraph.

The snapshot is taken once per canonicalize call. Caller identities are
replaced by dense integer indices (in the order nodes() yields them) and every
node and relationship is encoded exactly once, so the refinement and ordering
phases never touch the caller's graph again.
"""

from __future__ import annotations

from dataclasses import dataclass

from graph_canon.contracts.enums import Direction
from graph_canon.contracts.errors import GraphContractError, InvalidReferenceError
from graph_canon.contracts.graph import PropertyGraph
from graph_canon.contracts.types import NodeRef
from graph_canon.core.canonical import encode_labels, encode_properties, encode_relationship_type


@dataclass(frozen=True, slots=True)
class RelationshipRecord:
    """Relationship with endpoints resolved to node indices."""

    source: int
    target: int
    text: str  # "[TYPE] {props}"


@dataclass(frozen=True, slots=True)
class Incidence:
    """One relationship as seen from one of its endpoints."""

    direction: Direction
    text: str
    neighbour: int


@dataclass(frozen=True, slots=True)
class GraphSnapshot:
    """Encoded view of a graph, indexed by node position in nodes()."""

    node_refs: tuple[NodeRef, ...]
    node_texts: tuple[str, ...]  # "[Label, ...] {props}"
    relationships: tuple[RelationshipRecord, ...]
    incidences: tuple[tuple[Incidence, ...], ...]

    @property
    def node_count(self) -> int:
        return len(self.node_refs)

    @property
    def relationship_count(self) -> int:
        return len(self.relationships)


def take_snapshot(graph: PropertyGraph) -> GraphSnapshot:
    """Encode a graph into a GraphSnapshot.

    Args:
        graph: Any PropertyGraph implementation

    Returns:
        Immutable snapshot

    Raises:
        GraphContractError: If nodes() yields the same identity twice
        InvalidReferenceError: If a relationship endpoint is not a node
        UnsupportedValueError: If a property value is outside the variant set
    """
    index: dict[NodeRef, int] = {}
    node_refs: list[NodeRef] = []
    node_texts: list[str] = []
    for node in graph.nodes():
        if node in index:
            raise GraphContractError(f"Node {node!r} is listed more than once")
        index[node] = len(node_refs)
        node_refs.append(node)
        labels = encode_labels(graph.node_labels(node))
        properties = encode_properties(graph.node_properties(node))
        node_texts.append(f"{labels} {properties}")

    relationships: list[RelationshipRecord] = []
    incidences: list[list[Incidence]] = [[] for _ in node_refs]
    for rel in graph.relationships():
        source_ref = graph.relationship_source(rel)
        target_ref = graph.relationship_target(rel)
        if source_ref not in index:
            raise InvalidReferenceError(rel, source_ref, "source")
        if target_ref not in index:
            raise InvalidReferenceError(rel, target_ref, "target")
        source = index[source_ref]
        target = index[target_ref]
        rel_type = encode_relationship_type(graph.relationship_type(rel))
        text = f"{rel_type} {encode_properties(graph.relationship_properties(rel))}"

        relationships.append(RelationshipRecord(source=source, target=target, text=text))
        # A self-loop is incident twice: once outgoing, once incoming
        incidences[source].append(Incidence(Direction.OUTGOING, text, target))
        incidences[target].append(Incidence(Direction.INCOMING, text, source))

    return GraphSnapshot(
        node_refs=tuple(node_refs),
        node_texts=tuple(node_texts),
        relationships=tuple(relationships),
        incidences=tuple(tuple(entries) for entries in incidences),
    )
