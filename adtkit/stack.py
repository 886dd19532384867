"""A last-in, first-out stack built on ArrayList."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from adtkit.arraylist import ArrayList

T = TypeVar("T")


class StackEmptyError(IndexError):
    """Raised when an item is taken from or looked at on an empty stack."""


class Stack(Generic[T]):
    """Items are pushed on and popped from the top."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: ArrayList[T] = ArrayList(items)

    def push(self, item: T) -> None:
        """Add an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove the top item and return it."""
        if self._items.is_empty():
            raise StackEmptyError("Cannot pop from empty stack")
        last = len(self._items) - 1
        item = self._items[last]
        self._items.remove(last)
        return item

    def top(self) -> T:
        """Return the top item without removing it."""
        if self._items.is_empty():
            raise StackEmptyError("Cannot peek from empty stack")
        return self._items[len(self._items) - 1]

    def is_empty(self) -> bool:
        """Whether the stack holds no items."""
        return self._items.is_empty()

    def copy(self) -> Stack[T]:
        """A new stack holding the same items."""
        return type(self)(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"