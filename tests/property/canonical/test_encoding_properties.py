# tests/property/canonical/test_encoding_properties.py
"""Property-based tests for value and property-set encoding.

Canonical strings are only as good as the encodings underneath them: the
same value must always encode to the same text, and two values that are
not the same must never share an encoding.
"""

from __future__ import annotations

from typing import Any

from hypothesis import assume, given
from hypothesis import strategies as st

from graph_canon.core.canonical import compare_values, encode_name, encode_properties, encode_value, value_sort_key
from tests.strategies import DETERMINISM_SETTINGS, STANDARD_SETTINGS, names, property_maps, property_values


class TestEncodingDeterminism:
    @given(value=property_values)
    @DETERMINISM_SETTINGS
    def test_encode_value_is_deterministic(self, value: Any) -> None:
        assert encode_value(value) == encode_value(value)

    @given(properties=property_maps, data=st.data())
    @STANDARD_SETTINGS
    def test_property_set_independent_of_insertion_order(self, properties: dict[str, Any], data: st.DataObject) -> None:
        keys = data.draw(st.permutations(list(properties)))
        reordered = {key: properties[key] for key in keys}

        assert encode_properties(reordered) == encode_properties(properties)


class TestEncodingInjectivity:
    @given(left=property_values, right=property_values)
    @STANDARD_SETTINGS
    def test_equal_encodings_imply_equal_order(self, left: Any, right: Any) -> None:
        """Values sharing an encoding are the same value in the total order."""
        if encode_value(left) == encode_value(right):
            assert compare_values(left, right) == 0

    @given(left=property_values, right=property_values)
    @STANDARD_SETTINGS
    def test_distinct_order_means_distinct_encoding(self, left: Any, right: Any) -> None:
        assume(compare_values(left, right) != 0)

        assert encode_value(left) != encode_value(right)

    @given(left=names, right=names)
    @STANDARD_SETTINGS
    def test_names_injective(self, left: str, right: str) -> None:
        assume(left != right)

        assert encode_name(left) != encode_name(right)

    @given(value=st.integers(min_value=-(2**63), max_value=2**63 - 1))
    @STANDARD_SETTINGS
    def test_integer_never_collides_with_float_or_string(self, value: int) -> None:
        assert encode_value(value) != encode_value(float(value))
        assert encode_value(value) != encode_value(str(value))


class TestTotalOrder:
    @given(values=st.lists(property_values, max_size=8))
    @STANDARD_SETTINGS
    def test_sorting_is_stable_under_permutation(self, values: list[Any]) -> None:
        forward = [encode_value(v) for v in sorted(values, key=value_sort_key)]
        backward = [encode_value(v) for v in sorted(reversed(values), key=value_sort_key)]

        assert forward == backward

    @given(left=property_values, right=property_values)
    @STANDARD_SETTINGS
    def test_antisymmetric(self, left: Any, right: Any) -> None:
        assert compare_values(left, right) == -compare_values(right, left)
