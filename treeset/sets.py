from typing import TypeVar

from typing_extensions import Protocol, runtime_checkable

_T = TypeVar('_T')


@runtime_checkable
class Set(Protocol[_T]):
    """A mutable collection of unique elements."""

    def add(self, *items: _T) -> None:
        ...

    def remove(self, *items: _T) -> None:
        ...

    def contains(self, *items: _T) -> bool:
        ...

    def empty(self) -> bool:
        ...

    def size(self) -> int:
        ...

    def clear(self) -> None:
        ...

    def values(self) -> list[_T]:
        ...
