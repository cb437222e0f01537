"""A last-in, first-out stack."""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO stack. Iteration runs from the top down."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"