from treeset.comparators import (
    int_comparator,
    key_comparator,
    natural_comparator,
    reverse_comparator,
    string_comparator,
)
from hypothesis import given
import hypothesis.strategies as st
from functools import cmp_to_key
import unittest


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class TestComparators(unittest.TestCase):
    @given(st.integers(), st.integers())
    def test_int_comparator_agrees_with_operators(
        self, a: int, b: int
    ) -> None:
        self.assertEqual(_sign(int_comparator(a, b)), (a > b) - (a < b))

    @given(st.text(), st.text())
    def test_string_comparator_agrees_with_operators(
        self, a: str, b: str
    ) -> None:
        self.assertEqual(string_comparator(a, b), (a > b) - (a < b))

    def test_string_comparator_is_lexicographic(self) -> None:
        self.assertLess(string_comparator('ab', 'b'), 0)
        self.assertLess(string_comparator('a', 'ab'), 0)
        self.assertGreater(string_comparator('b', 'B'), 0)
        self.assertEqual(0, string_comparator('', ''))

    @given(st.integers(), st.integers())
    def test_natural_comparator_is_antisymmetric(
        self, a: int, b: int
    ) -> None:
        self.assertEqual(natural_comparator(a, b), -natural_comparator(b, a))

    @given(st.lists(st.integers()))
    def test_reverse_comparator_sorts_descending(self, l: list[int]) -> None:
        self.assertListEqual(
            sorted(l, reverse=True),
            sorted(l, key=cmp_to_key(reverse_comparator(int_comparator))),
        )

    def test_key_comparator(self) -> None:
        by_length = key_comparator(len)
        self.assertLess(by_length('z', 'aa'), 0)
        self.assertEqual(0, by_length('ab', 'cd'))
        self.assertGreater(by_length([1, 2, 3], []), 0)
