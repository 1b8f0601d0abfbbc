"""
graph-canon: canonical forms and isomorphism checks for small property graphs.

Intended as a test-assertion helper: two graphs are isomorphic iff their
canonical strings are identical.
"""

__version__ = "0.1.0"

from graph_canon.core.canonicalizer import Canonicalizer, canonicalize, equals  # noqa: E402
from graph_canon.core.graph import InMemoryGraph  # noqa: E402
from graph_canon.gdl import parse_gdl  # noqa: E402

__all__ = [
    "Canonicalizer",
    "InMemoryGraph",
    "__version__",
    "canonicalize",
    "equals",
    "parse_gdl",
]
