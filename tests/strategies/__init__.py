# tests/strategies/__init__.py
"""Hypothesis strategies for property-based tests.

Re-exports commonly used strategies for convenience:
    from tests.strategies import property_values, small_graphs, STANDARD_SETTINGS
"""

from tests.strategies.graphs import graphs_with_relabeling, small_graphs
from tests.strategies.settings import DETERMINISM_SETTINGS, QUICK_SETTINGS, SLOW_SETTINGS, STANDARD_SETTINGS
from tests.strategies.values import names, property_maps, property_values, scalar_values

__all__ = [
    "DETERMINISM_SETTINGS",
    "QUICK_SETTINGS",
    "SLOW_SETTINGS",
    "STANDARD_SETTINGS",
    "graphs_with_relabeling",
    "names",
    "property_maps",
    "property_values",
    "scalar_values",
    "small_graphs",
]
