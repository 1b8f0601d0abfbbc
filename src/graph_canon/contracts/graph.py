"""Graph abstraction consumed by the canonicalizer.

Any object implementing these eight accessors can be canonicalized; the
core never needs to know the concrete representation.

Example:
    class TupleGraph:
        def __init__(self, nodes, rels):
            self._nodes = nodes  # {node_id: (labels, props)}
            self._rels = rels    # {rel_id: (src, tgt, type, props)}

        def nodes(self):
            return self._nodes.keys()

        def relationships(self):
            return self._rels.keys()

        def node_labels(self, node):
            return self._nodes[node][0]

        ...
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from graph_canon.contracts.types import NodeRef, PropertyMap, RelationshipRef


@runtime_checkable
class PropertyGraph(Protocol):
    """Read-only capability set of a property graph.

    Node and relationship references are opaque hashable identities that are
    only meaningful within one graph instance. Every reference returned by
    relationship_source() and relationship_target() must also be yielded by
    nodes().
    """

    def nodes(self) -> Iterable[NodeRef]:
        """Yield every node identity exactly once."""
        ...

    def relationships(self) -> Iterable[RelationshipRef]:
        """Yield every relationship identity exactly once."""
        ...

    def node_labels(self, node: NodeRef) -> Iterable[str]:
        """Labels of a node. Order and duplicates are irrelevant."""
        ...

    def node_properties(self, node: NodeRef) -> PropertyMap:
        ...

    def relationship_type(self, relationship: RelationshipRef) -> str | None:
        """Type of a relationship, or None for an untyped relationship."""
        ...

    def relationship_properties(self, relationship: RelationshipRef) -> PropertyMap:
        ...

    def relationship_source(self, relationship: RelationshipRef) -> NodeRef:
        ...

    def relationship_target(self, relationship: RelationshipRef) -> NodeRef:
        ...
