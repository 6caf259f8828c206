from functools import cmp_to_key
from sortedcontainers import SortedKeyList

from treeset.comparators import Comparator


class Tree[K, V]:
    """Ordered map whose keys are kept sorted by a three-way comparator.

    Keys are equal when the comparator returns zero for them; hashing and
    `==` are never used. Entries are `(key, value)` pairs stored in a
    `SortedKeyList`, which gives logarithmic put, remove and lookup and
    linear enumeration in ascending key order."""

    def __init__(self, comparator: Comparator[K]) -> None:
        self._comparator = comparator
        self._sort_key = cmp_to_key(comparator)
        self._entries = SortedKeyList(
            key=lambda entry: self._sort_key(entry[0])
        )

    def _index_of(self, key: K) -> int | None:
        entries = self._entries
        index = entries.bisect_key_left(self._sort_key(key))
        if (
            index < len(entries)
            and self._comparator(entries[index][0], key) == 0
        ):
            return index
        return None

    def put(self, key: K, value: V) -> None:
        """Map key to value.

        If an equal key is already present, its value is replaced and the
        stored key is kept."""

        index = self._index_of(key)
        if index is None:
            self._entries.add((key, value))
            return
        stored_key, stored_value = self._entries[index]
        if stored_value is value:
            return
        del self._entries[index]
        self._entries.add((stored_key, value))

    def remove(self, key: K) -> None:
        index = self._index_of(key)
        if index is not None:
            del self._entries[index]

    def get(self, key: K) -> tuple[V | None, bool]:
        index = self._index_of(key)
        if index is None:
            return None, False
        return self._entries[index][1], True

    def size(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> list[K]:
        return [key for key, _ in self._entries]

    def __contains__(self, key: object) -> bool:
        return self._index_of(key) is not None  # type: ignore

    def __len__(self) -> int:
        return len(self._entries)
