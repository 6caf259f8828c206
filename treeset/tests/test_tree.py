from treeset.comparators import int_comparator, key_comparator
from treeset.tree import Tree
from hypothesis import given
import hypothesis.strategies as st
from typing import List
import unittest


class TestTree(unittest.TestCase):
    def test_empty(self) -> None:
        tree = Tree[int, str](int_comparator)
        self.assertEqual(0, tree.size())
        self.assertListEqual([], tree.keys())
        self.assertEqual((None, False), tree.get(1))

    def test_put_and_get(self) -> None:
        tree = Tree[int, str](int_comparator)
        tree.put(2, 'b')
        tree.put(1, 'a')
        self.assertEqual(('a', True), tree.get(1))
        self.assertEqual(('b', True), tree.get(2))
        self.assertEqual((None, False), tree.get(3))
        self.assertEqual(2, tree.size())

    def test_put_overwrites_value(self) -> None:
        tree = Tree[int, str](int_comparator)
        tree.put(1, 'a')
        tree.put(1, 'z')
        self.assertEqual(('z', True), tree.get(1))
        self.assertEqual(1, len(tree))

    def test_put_keeps_stored_key(self) -> None:
        tree = Tree[str, int](key_comparator(str.lower))
        tree.put('Key', 1)
        tree.put('KEY', 2)
        self.assertListEqual(['Key'], tree.keys())
        self.assertEqual((2, True), tree.get('key'))

    def test_lookup_uses_comparator(self) -> None:
        tree = Tree[str, None](key_comparator(str.lower))
        tree.put('Apple', None)
        self.assertIn('APPLE', tree)
        self.assertNotIn('pear', tree)

    def test_remove_absent_key(self) -> None:
        tree = Tree[int, None](int_comparator)
        tree.put(1, None)
        tree.remove(2)
        self.assertListEqual([1], tree.keys())

    def test_clear(self) -> None:
        tree = Tree[int, None](int_comparator)
        for key in range(10):
            tree.put(key, None)
        tree.clear()
        self.assertEqual(0, tree.size())
        self.assertListEqual([], tree.keys())

    @given(st.lists(st.integers()), st.lists(st.integers()))
    def test_keys_are_sorted_and_unique(
        self, to_put: List[int], to_remove: List[int]
    ) -> None:
        tree = Tree[int, None](int_comparator)
        for key in to_put:
            tree.put(key, None)
        for key in to_remove:
            tree.remove(key)
        self.assertListEqual(sorted(set(to_put) - set(to_remove)), tree.keys())
        self.assertEqual(len(tree.keys()), tree.size())
