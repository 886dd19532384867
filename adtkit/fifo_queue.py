"""A first-in, first-out queue built on ArrayList."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from adtkit.arraylist import ArrayList

T = TypeVar("T")


class QueueEmptyError(IndexError):
    """Raised when an item is taken from or looked at on an empty queue."""


class Queue(Generic[T]):
    """Items are pushed on the back and popped from the front."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: ArrayList[T] = ArrayList(items)

    def push(self, item: T) -> None:
        """Add an item at the back of the queue."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove the front item and return it."""
        if self._items.is_empty():
            raise QueueEmptyError("Cannot pop from empty queue")
        item = self._items[0]
        self._items.remove(0)
        return item

    def peek(self) -> T:
        """Return the front item without removing it."""
        if self._items.is_empty():
            raise QueueEmptyError("Cannot peek from empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Whether the queue holds no items."""
        return self._items.is_empty()

    def copy(self) -> Queue[T]:
        """A new queue holding the same items in the same order."""
        return type(self)(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"