# src/graph_canon/core/canonical.py
"""
Canonical text encoding for property values, property sets and labels.

Two-phase approach:
1. Normalize: Convert numpy types and Python containers to the closed
   property value variant set (our code)
2. Encode: Produce deterministic text; strings are escaped per RFC 8785/JCS
   (rfc8785 package) so they never collide with structural delimiters

Equal values always encode identically (map key order, label order and
duplicate labels are irrelevant). Values of different variants never do:
integer 42, float 42.0, boolean true and string "42" all encode differently.

Empty label sets and empty property sets encode as explicit markers
("[]" and "{}"), never as the empty string.
"""

from __future__ import annotations

import hashlib
import math
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import numpy as np
import rfc8785

from graph_canon.contracts.enums import ValueKind
from graph_canon.contracts.errors import UnsupportedValueError

# Names matching this pattern render bare; everything else is backtick-quoted
_PLAIN_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

EMPTY_LABELS = "[]"
EMPTY_PROPERTIES = "{}"


def _normalize_value(obj: Any) -> Any:
    """Convert a single value to a member of the closed variant set.

    Handles numpy scalar and array types that show up in test fixtures
    built from dataframes.

    Args:
        obj: Any Python value

    Returns:
        bool, int, float, str, list or dict (recursively normalized)

    Raises:
        UnsupportedValueError: If value is outside the variant set
    """
    # bool before int: bool is an int subclass but a distinct variant
    if isinstance(obj, bool | np.bool_):
        return bool(obj)
    if isinstance(obj, int | np.integer):
        return int(obj)
    if isinstance(obj, float | np.floating):
        return float(obj)
    if isinstance(obj, str):
        return obj
    if isinstance(obj, np.ndarray):
        return [_normalize_value(x) for x in obj.tolist()]
    if isinstance(obj, Mapping):
        normalized: dict[str, Any] = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise UnsupportedValueError(f"Map keys must be strings, got {type(key).__name__}: {key!r}")
            normalized[key] = _normalize_value(value)
        return normalized
    # bytes/bytearray are Sequences but not lists of property values
    if isinstance(obj, Sequence) and not isinstance(obj, bytes | bytearray):
        return [_normalize_value(x) for x in obj]
    raise UnsupportedValueError(
        f"Unsupported property value of type {type(obj).__name__}: {obj!r}. "
        "Supported: bool, int, float, str, list, and str-keyed mappings of these."
    )


def value_kind(value: Any) -> ValueKind:
    """Return the variant tag of a (normalized or raw) property value."""
    normalized = _normalize_value(value)
    return _kind_of(normalized)


def _kind_of(normalized: Any) -> ValueKind:
    if isinstance(normalized, bool):
        return ValueKind.BOOLEAN
    if isinstance(normalized, int):
        return ValueKind.INTEGER
    if isinstance(normalized, float):
        return ValueKind.FLOAT
    if isinstance(normalized, str):
        return ValueKind.STRING
    if isinstance(normalized, list):
        return ValueKind.LIST
    return ValueKind.MAP


def _sort_key(normalized: Any) -> tuple[Any, ...]:
    kind = _kind_of(normalized)
    if kind is ValueKind.FLOAT:
        # NaN sorts after every other float so the order stays total
        if math.isnan(normalized):
            return (kind, 1, 0.0)
        return (kind, 0, normalized)
    if kind is ValueKind.LIST:
        return (kind, tuple(_sort_key(v) for v in normalized))
    if kind is ValueKind.MAP:
        return (kind, tuple((k, _sort_key(normalized[k])) for k in sorted(normalized)))
    return (kind, normalized)


def value_sort_key(value: Any) -> tuple[Any, ...]:
    """Sort key implementing the total order over property values.

    Values order by variant (boolean < integer < float < string < list < map),
    then by value. Lists compare element-wise, maps by their sorted items.

    Example:
        >>> sorted([3, "a", True, 1.5], key=value_sort_key)
        [True, 3, 1.5, 'a']
    """
    return _sort_key(_normalize_value(value))


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison of two property values (-1, 0 or 1)."""
    left_key = value_sort_key(left)
    right_key = value_sort_key(right)
    return (left_key > right_key) - (left_key < right_key)


def encode_name(name: str) -> str:
    """Encode a label, relationship type or property key.

    Plain identifiers render bare; anything else is wrapped in backticks with
    embedded backticks doubled, so names can never be confused with
    delimiters.
    """
    if not isinstance(name, str):
        raise UnsupportedValueError(f"Names must be strings, got {type(name).__name__}: {name!r}")
    if not name.isascii():
        try:
            name.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise UnsupportedValueError(f"Names must be valid Unicode text: {name!r}") from exc
    if _PLAIN_NAME.fullmatch(name):
        return name
    escaped = name.replace("`", "``")
    return f"`{escaped}`"


def _encode_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0.0:
        # -0.0 == 0.0, equal values must encode identically
        return "0.0"
    return repr(value)


def _encode_normalized(normalized: Any) -> str:
    kind = _kind_of(normalized)
    if kind is ValueKind.BOOLEAN:
        return "true" if normalized else "false"
    if kind is ValueKind.INTEGER:
        return str(normalized)
    if kind is ValueKind.FLOAT:
        return _encode_float(normalized)
    if kind is ValueKind.STRING:
        try:
            result: bytes = rfc8785.dumps(normalized)
        except rfc8785.CanonicalizationError as exc:
            # Lone surrogates have no UTF-8 form
            raise UnsupportedValueError(f"String values must be valid Unicode text: {normalized!r}") from exc
        return result.decode("utf-8")
    if kind is ValueKind.LIST:
        return "[" + ", ".join(_encode_normalized(v) for v in normalized) + "]"
    return _encode_map(normalized)


def _encode_map(normalized: Mapping[str, Any]) -> str:
    pairs = [f"{encode_name(key)}: {_encode_normalized(normalized[key])}" for key in sorted(normalized)]
    return "{" + ", ".join(pairs) + "}"


def encode_value(value: Any) -> str:
    """Produce the canonical text of a single property value.

    Args:
        value: Property value (bool, int, float, str, list, mapping, or numpy
            equivalents)

    Returns:
        Deterministic text, e.g. '42', '42.0', '"42"', '[1, "a"]', '{a: true}'

    Raises:
        UnsupportedValueError: If value is outside the variant set
    """
    return _encode_normalized(_normalize_value(value))


def encode_properties(properties: Mapping[str, Any]) -> str:
    """Encode a property set with keys sorted lexicographically.

    The empty set encodes as "{}".
    """
    if not isinstance(properties, Mapping):
        raise UnsupportedValueError(f"Property sets must be mappings, got {type(properties).__name__}")
    if not properties:
        return EMPTY_PROPERTIES
    return _encode_map(_normalize_value(properties))


def encode_labels(labels: Iterable[str]) -> str:
    """Encode a label set: deduplicated, sorted, bracketed.

    The empty set encodes as "[]".
    """
    unique = sorted({encode_name(label) for label in labels})
    return "[" + ", ".join(unique) + "]"


def encode_relationship_type(rel_type: str | None) -> str:
    """Encode the zero-or-one relationship type as "[TYPE]" or "[]"."""
    if rel_type is None:
        return EMPTY_LABELS
    return f"[{encode_name(rel_type)}]"


def canonical_json(obj: Any) -> str:
    """Produce RFC 8785 canonical JSON (no whitespace, sorted keys).

    Only used for internal bookkeeping structures made of strings and lists;
    property values go through encode_value() instead, which keeps integer
    and float variants apart.
    """
    result: bytes = rfc8785.dumps(obj)
    return result.decode("utf-8")


def stable_hash(obj: Any) -> str:
    """Compute stable hash of a JSON-compatible structure.

    Used to keep refinement signatures at a fixed size regardless of how many
    rounds have nested the neighbourhood information.

    Returns:
        SHA-256 hex digest of canonical JSON
    """
    canonical = canonical_json(obj)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
