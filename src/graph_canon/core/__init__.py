# src/graph_canon/core/__init__.py
"""Core infrastructure: encoding, refinement, ordering, serialization, configuration, logging."""

from graph_canon.core.canonical import (
    compare_values,
    encode_labels,
    encode_properties,
    encode_relationship_type,
    encode_value,
    stable_hash,
    value_kind,
    value_sort_key,
)
from graph_canon.core.canonicalizer import (
    CanonicalForm,
    Canonicalizer,
    canonicalize,
    equals,
)
from graph_canon.core.config import CanonicalizerSettings, load_settings
from graph_canon.core.graph import InMemoryGraph
from graph_canon.core.logging import configure_logging, get_logger
from graph_canon.core.ordering import CanonicalOrder, choose_order
from graph_canon.core.refinement import RefinementResult, refine
from graph_canon.core.serializer import serialize
from graph_canon.core.snapshot import GraphSnapshot, take_snapshot

__all__ = [
    "CanonicalForm",
    "CanonicalOrder",
    "Canonicalizer",
    "CanonicalizerSettings",
    "GraphSnapshot",
    "InMemoryGraph",
    "RefinementResult",
    "canonicalize",
    "choose_order",
    "compare_values",
    "configure_logging",
    "encode_labels",
    "encode_properties",
    "encode_relationship_type",
    "encode_value",
    "equals",
    "get_logger",
    "load_settings",
    "refine",
    "serialize",
    "stable_hash",
    "take_snapshot",
    "value_kind",
    "value_sort_key",
]
