"""Exception hierarchy for graph canonicalization.

Contract violations by the caller-supplied graph are fatal to the
canonicalization call and are never recovered locally.
"""

from typing import Any


class GraphContractError(ValueError):
    """Raised when a supplied graph violates the PropertyGraph contract."""


class InvalidReferenceError(GraphContractError):
    """Raised when a relationship endpoint is not among the graph's nodes.

    Attributes:
        relationship: Identity of the offending relationship
        endpoint: The unresolved node reference
        role: "source" or "target"
    """

    def __init__(self, relationship: Any, endpoint: Any, role: str) -> None:
        self.relationship = relationship
        self.endpoint = endpoint
        self.role = role
        super().__init__(f"Relationship {relationship!r} references {role} node {endpoint!r} which is not in the graph")


class UnsupportedValueError(TypeError):
    """Raised when a property value is outside the closed variant set.

    Property values are limited to bool, int, float, str, lists of values
    and string-keyed maps of values.
    """


class GdlSyntaxError(ValueError):
    """Raised when a graph description cannot be parsed.

    Attributes:
        position: Character offset in the source text where parsing failed
    """

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(f"{message} (at position {position})")
