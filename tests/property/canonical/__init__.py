# tests/property/canonical/__init__.py
"""Property tests for value encoding and the total order over values."""
