"""Standardized Hypothesis settings profiles for property tests.

Tiers:
- DETERMINISM_SETTINGS: 500 examples - encoding determinism tests
- STANDARD_SETTINGS: 100 examples - Regular property tests
- SLOW_SETTINGS: 50 examples - Tie-break heavy graph tests
- QUICK_SETTINGS: 20 examples - Fast validation tests
"""

from hypothesis import settings

DETERMINISM_SETTINGS = settings(max_examples=500)
STANDARD_SETTINGS = settings(max_examples=100)
SLOW_SETTINGS = settings(max_examples=50)
QUICK_SETTINGS = settings(max_examples=20)
