"""Kinds and directions used across subsystem boundaries."""

from enum import IntEnum, StrEnum


class ValueKind(IntEnum):
    """Variant tag of a property value.

    The integer value is the rank used for cross-variant ordering:
    any boolean sorts before any integer, any integer before any float, etc.
    """

    BOOLEAN = 0
    INTEGER = 1
    FLOAT = 2
    STRING = 3
    LIST = 4
    MAP = 5


class Direction(StrEnum):
    """Direction of a relationship relative to the node it is incident to."""

    OUTGOING = "out"
    INCOMING = "in"
