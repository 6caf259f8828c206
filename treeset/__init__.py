"""Ordered sets whose elements are sorted by a pluggable comparator."""

from treeset.comparators import (
    Comparator,
    int_comparator,
    key_comparator,
    natural_comparator,
    reverse_comparator,
    string_comparator,
)
from treeset.treeset import (
    TreeSet,
    new_with,
    new_with_int_comparator,
    new_with_string_comparator,
)

version = '0.1.0'

__all__ = [
    'Comparator',
    'TreeSet',
    'int_comparator',
    'key_comparator',
    'natural_comparator',
    'new_with',
    'new_with_int_comparator',
    'new_with_string_comparator',
    'reverse_comparator',
    'string_comparator',
]
