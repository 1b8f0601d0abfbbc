"""Shared contracts: graph protocol, value kinds, type aliases and errors.

Leaf package: nothing here imports from graph_canon.core.
"""

from graph_canon.contracts.enums import Direction, ValueKind
from graph_canon.contracts.errors import (
    GdlSyntaxError,
    GraphContractError,
    InvalidReferenceError,
    UnsupportedValueError,
)
from graph_canon.contracts.graph import PropertyGraph
from graph_canon.contracts.types import (
    NodeRef,
    PropertyMap,
    PropertyValue,
    RelationshipRef,
    Signature,
)

__all__ = [
    "Direction",
    "GdlSyntaxError",
    "GraphContractError",
    "InvalidReferenceError",
    "NodeRef",
    "PropertyGraph",
    "PropertyMap",
    "PropertyValue",
    "RelationshipRef",
    "Signature",
    "UnsupportedValueError",
    "ValueKind",
]
