"""An ordered set backed by a sorted tree.

Elements are kept unique and in ascending order of the comparator given at
construction. Sets are not safe to share between threads.
"""

import logging
from typing import TYPE_CHECKING, AbstractSet, Iterable, Iterator

from treeset.comparators import (
    Comparator,
    int_comparator,
    string_comparator,
)
from treeset.logging import TreeSetLogger
from treeset.tree import Tree

_logger = TreeSetLogger(logging.getLogger(__name__))


class TreeSet[T](AbstractSet[T]):
    """A set of unique elements kept in ascending comparator order.

    Membership is decided by the comparator alone, so `x in s`, `contains`,
    `add` and `remove` let any exception the comparator raises propagate.
    For example `'a' in s` raises TypeError when s uses `int_comparator`,
    and so do the `collections.abc.Set` mixins built on `in`, such as
    `isdisjoint`.

    Sets combined with `union`, `diff` and `inter` must order their elements
    the same way; this is not checked."""

    def __init__(self, comparator: Comparator[T]) -> None:
        if not callable(comparator):
            raise TypeError(
                f'comparator must be callable, not {type(comparator).__name__}'
            )
        self._comparator = comparator
        self._tree = Tree[T, None](comparator)

    @property
    def comparator(self) -> Comparator[T]:
        return self._comparator

    def _empty_like(self) -> 'TreeSet[T]':
        return TreeSet(self._comparator)

    def clone(self) -> 'TreeSet[T]':
        new_set = self._empty_like()
        new_set.add(*self.values())
        return new_set

    __copy__ = clone

    def union(self, other: 'TreeSet[T]') -> 'TreeSet[T]':
        self._log_combination('union', other)
        new_set = self.clone()
        new_set.add(*other.values())
        return new_set

    def in_place_union(self, other: 'TreeSet[T]') -> None:
        self._log_combination('in-place union', other)
        self.add(*other.values())

    def diff(self, other: 'TreeSet[T]') -> 'TreeSet[T]':
        self._log_combination('difference', other)
        new_set = self.clone()
        new_set.remove(*other.values())
        return new_set

    def in_place_diff(self, other: 'TreeSet[T]') -> None:
        self._log_combination('in-place difference', other)
        self.remove(*other.values())

    def inter(self, other: 'TreeSet[T]') -> 'TreeSet[T]':
        """Return the elements present in both sets.

        Both sets are walked once in ascending order, so this takes a linear
        number of comparisons."""

        self._log_combination('intersection', other)
        new_set = self._empty_like()
        set_values = self.values()
        other_values = other.values()
        i, j = 0, 0
        while i < len(set_values) and j < len(other_values):
            compare = self._comparator(set_values[i], other_values[j])
            if compare == 0:
                new_set.add(set_values[i])
                i += 1
                j += 1
            elif compare < 0:
                i += 1
            else:
                j += 1
        return new_set

    def in_place_inter(self, other: 'TreeSet[T]') -> None:
        """Remove every element that is not also in other."""

        self._log_combination('in-place intersection', other)
        set_values = self.values()
        other_values = other.values()
        i, j = 0, 0
        while i < len(set_values):
            if j == len(other_values):
                # nothing left to match the rest against
                self.remove(*set_values[i:])
                break
            compare = self._comparator(set_values[i], other_values[j])
            if compare == 0:
                i += 1
                j += 1
            elif compare < 0:
                self.remove(set_values[i])
                i += 1
            else:
                j += 1

    def _log_combination(self, operation: str, other: 'TreeSet[T]') -> None:
        _logger.debug(
            '{} of {} and {} elements', operation, self.size(), other.size()
        )
        if other._comparator is not self._comparator:
            _logger.debug(
                '{} combines sets with different comparators {!r} and {!r}',
                operation,
                self._comparator,
                other._comparator,
            )

    def add(self, *items: T) -> None:
        """Add the items to the set.

        Adding an item equal to an element already in the set does nothing."""

        for item in items:
            self._tree.put(item, None)

    def remove(self, *items: T) -> None:
        """Remove the items from the set, ignoring the ones not in it."""

        for item in items:
            self._tree.remove(item)

    def contains(self, *items: T) -> bool:
        """Check whether all of the items are in the set.

        With no items this is True, since every set is a superset of the
        empty set."""

        for item in items:
            if not self._tree.get(item)[1]:
                return False
        return True

    def empty(self) -> bool:
        return self._tree.size() == 0

    def size(self) -> int:
        return self._tree.size()

    def clear(self) -> None:
        self._tree.clear()

    def values(self) -> list[T]:
        return self._tree.keys()

    def __contains__(self, item: object) -> bool:
        return item in self._tree

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __len__(self) -> int:
        return self._tree.size()

    def _from_iterable(self, iterable: Iterable[T]) -> 'TreeSet[T]':
        # collections.abc.Set builds the results of its mixin operators with
        # this, so they get the receiver's comparator
        new_set = self._empty_like()
        new_set.add(*iterable)
        return new_set

    def _coerce(self, other: object) -> 'TreeSet[T] | None':
        if isinstance(other, TreeSet):
            return other
        if isinstance(other, AbstractSet):
            return self._from_iterable(other)
        return None

    def __or__(self, other: object) -> 'TreeSet[T]':
        other_set = self._coerce(other)
        if other_set is None:
            return NotImplemented
        return self.union(other_set)

    def __sub__(self, other: object) -> 'TreeSet[T]':
        other_set = self._coerce(other)
        if other_set is None:
            return NotImplemented
        return self.diff(other_set)

    def __and__(self, other: object) -> 'TreeSet[T]':
        other_set = self._coerce(other)
        if other_set is None:
            return NotImplemented
        return self.inter(other_set)

    def __ior__(self, other: object) -> 'TreeSet[T]':
        other_set = self._coerce(other)
        if other_set is None:
            return NotImplemented
        self.in_place_union(other_set)
        return self

    def __isub__(self, other: object) -> 'TreeSet[T]':
        other_set = self._coerce(other)
        if other_set is None:
            return NotImplemented
        self.in_place_diff(other_set)
        return self

    def __iand__(self, other: object) -> 'TreeSet[T]':
        other_set = self._coerce(other)
        if other_set is None:
            return NotImplemented
        self.in_place_inter(other_set)
        return self

    def __str__(self) -> str:
        return 'TreeSet\n' + ', '.join(str(value) for value in self.values())

    def __repr__(self) -> str:
        name = type(self).__qualname__
        return f'{name}({self._comparator!r}, {self.values()!r})'


def new_with[T](comparator: Comparator[T]) -> TreeSet[T]:
    return TreeSet(comparator)


def new_with_int_comparator() -> TreeSet[int]:
    return TreeSet(int_comparator)


def new_with_string_comparator() -> TreeSet[str]:
    return TreeSet(string_comparator)


if TYPE_CHECKING:
    from treeset.sets import Set

    _: Set[int] = new_with_int_comparator()
