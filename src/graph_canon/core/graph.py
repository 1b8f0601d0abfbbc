# src/graph_canon/core/graph.py
"""InMemoryGraph: a concrete PropertyGraph backed by NetworkX.

Test fixtures either build graphs directly (add_node / add_relationship),
parse them from GDL text (graph_canon.gdl), or adopt an existing NetworkX
graph that stores labels, types and properties as attributes.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

import networkx as nx
from networkx import MultiDiGraph

from graph_canon.contracts.errors import GraphContractError, InvalidReferenceError
from graph_canon.contracts.types import PropertyMap


class InMemoryGraph:
    """Property graph wrapping a NetworkX MultiDiGraph.

    Uses MultiDiGraph to support parallel relationships between the same
    node pair. Relationship identities are sequential integers assigned by
    add_relationship() and double as the MultiDiGraph edge key.
    """

    def __init__(self) -> None:
        self._graph: MultiDiGraph[Hashable] = nx.MultiDiGraph()
        self._endpoints: dict[int, tuple[Hashable, Hashable]] = {}  # rel_id -> (source, target)

    @property
    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return self._graph.number_of_nodes()

    @property
    def relationship_count(self) -> int:
        """Number of relationships in the graph."""
        return self._graph.number_of_edges()

    def has_node(self, node_id: Hashable) -> bool:
        """Check if node exists."""
        return self._graph.has_node(node_id)

    def get_nx_graph(self) -> MultiDiGraph[Hashable]:
        """Return a frozen copy of the underlying NetworkX graph.

        Node attributes: labels (frozenset), properties (mapping).
        Edge attributes: type (str | None), properties (mapping); edge key is
        the relationship id.
        """
        return nx.freeze(self._graph.copy())  # type: ignore[no-any-return]

    def add_node(
        self,
        node_id: Hashable,
        labels: Iterable[str] = (),
        properties: Mapping[str, Any] | None = None,
    ) -> None:
        """Add a node.

        Args:
            node_id: Unique node identity (any hashable)
            labels: Node labels; order and duplicates are irrelevant
            properties: Node property set

        Raises:
            GraphContractError: If node_id is already present
        """
        if self._graph.has_node(node_id):
            raise GraphContractError(f"Node {node_id!r} already exists")
        if isinstance(labels, str):
            labels = (labels,)
        self._graph.add_node(
            node_id,
            labels=frozenset(labels),
            properties=MappingProxyType(dict(properties or {})),
        )

    def add_relationship(
        self,
        source: Hashable,
        target: Hashable,
        *,
        rel_type: str | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> int:
        """Add a relationship between two existing nodes.

        Args:
            source: Source node identity
            target: Target node identity
            rel_type: Relationship type, or None for an untyped relationship
            properties: Relationship property set

        Returns:
            The new relationship's identity

        Raises:
            InvalidReferenceError: If source or target is not in the graph
        """
        rel_id = len(self._endpoints)
        if not self._graph.has_node(source):
            raise InvalidReferenceError(rel_id, source, "source")
        if not self._graph.has_node(target):
            raise InvalidReferenceError(rel_id, target, "target")
        self._graph.add_edge(
            source,
            target,
            key=rel_id,
            type=rel_type,
            properties=MappingProxyType(dict(properties or {})),
        )
        self._endpoints[rel_id] = (source, target)
        return rel_id

    @classmethod
    def from_networkx(
        cls,
        graph: nx.Graph[Any],
        *,
        labels_attr: str = "labels",
        type_attr: str = "type",
    ) -> InMemoryGraph:
        """Adopt a directed NetworkX graph.

        Node attribute ``labels_attr`` holds the labels (a string or an
        iterable of strings); every other node attribute becomes a property.
        Edge attribute ``type_attr`` holds the relationship type; every other
        edge attribute becomes a property. Multigraph edge keys are ignored.

        Raises:
            GraphContractError: If the graph is undirected
        """
        if not graph.is_directed():
            raise GraphContractError("Property graphs are directed; got an undirected NetworkX graph")

        result = cls()
        for node_id, data in graph.nodes(data=True):
            labels = data.get(labels_attr, ())
            properties = {k: v for k, v in data.items() if k != labels_attr}
            result.add_node(node_id, labels=labels, properties=properties)

        for source, target, data in graph.edges(data=True):
            properties = {k: v for k, v in data.items() if k != type_attr}
            result.add_relationship(source, target, rel_type=data.get(type_attr), properties=properties)
        return result

    # PropertyGraph protocol

    def nodes(self) -> Iterator[Hashable]:
        return iter(self._graph.nodes)

    def relationships(self) -> Iterator[int]:
        return iter(self._endpoints)

    def node_labels(self, node: Hashable) -> frozenset[str]:
        labels: frozenset[str] = self._graph.nodes[node]["labels"]
        return labels

    def node_properties(self, node: Hashable) -> PropertyMap:
        properties: PropertyMap = self._graph.nodes[node]["properties"]
        return properties

    def relationship_type(self, relationship: int) -> str | None:
        source, target = self._endpoints[relationship]
        rel_type: str | None = self._graph.edges[source, target, relationship]["type"]
        return rel_type

    def relationship_properties(self, relationship: int) -> PropertyMap:
        source, target = self._endpoints[relationship]
        properties: PropertyMap = self._graph.edges[source, target, relationship]["properties"]
        return properties

    def relationship_source(self, relationship: int) -> Hashable:
        return self._endpoints[relationship][0]

    def relationship_target(self, relationship: int) -> Hashable:
        return self._endpoints[relationship][1]

    def __repr__(self) -> str:
        return f"InMemoryGraph(nodes={self.node_count}, relationships={self.relationship_count})"
