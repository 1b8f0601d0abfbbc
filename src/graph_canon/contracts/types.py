"""Semantic type aliases for compile-time type safety.

NewType creates distinct types that mypy treats as incompatible,
preventing accidental misuse of semantically different string values.
"""

from collections.abc import Hashable, Mapping, Sequence
from typing import NewType

Signature = NewType("Signature", str)
"""Refinement colour of a node (e.g., '[Person] {age: 42}' or a SHA-256 digest)"""

NodeRef = Hashable
"""Caller-supplied node identity. Only used for bookkeeping, never rendered."""

RelationshipRef = Hashable
"""Caller-supplied relationship identity. Only used for bookkeeping, never rendered."""

type PropertyValue = bool | int | float | str | Sequence[PropertyValue] | Mapping[str, PropertyValue]
"""Closed set of property value variants (see ValueKind)."""

type PropertyMap = Mapping[str, PropertyValue]
