"""Three-way comparison functions used to order the elements of a set.

A comparator takes two elements and returns a negative number, zero or a
positive number when the first is less than, equal to or greater than the
second.
"""

from collections.abc import Callable
from typing import Any

type Comparator[T] = Callable[[T, T], int]


def natural_comparator(a: Any, b: Any) -> int:
    """Order values by their own `<` and `>` operators."""
    return (a > b) - (a < b)


def int_comparator(a: int, b: int) -> int:
    return a - b


def string_comparator(a: str, b: str) -> int:
    """Order strings lexicographically by code point."""
    return (a > b) - (a < b)


def reverse_comparator[T](comparator: Comparator[T]) -> Comparator[T]:
    def reversed_comparator(a: T, b: T) -> int:
        return comparator(b, a)

    return reversed_comparator


def key_comparator[T](key: Callable[[T], Any]) -> Comparator[T]:
    """Order elements by the natural order of `key(element)`."""

    def compare_keys(a: T, b: T) -> int:
        return natural_comparator(key(a), key(b))

    return compare_keys
