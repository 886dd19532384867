"""An ordered, growable list with bounds-checked positional access."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class ArrayList(Generic[T]):
    """An ordered collection indexed from 0 to len - 1.

    Negative positions are not accepted; any position out of range raises
    IndexError.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    @staticmethod
    def _check_int(position: Any) -> None:
        if not isinstance(position, int) or isinstance(position, bool):
            raise TypeError("list positions must be integers")

    def _check_position(self, position: int) -> None:
        self._check_int(position)
        if not 0 <= position < len(self._items):
            raise IndexError("Invalid index!")

    def append(self, item: T) -> None:
        """Add an item at the end of the list."""
        self._items.append(item)

    def insert(self, item: T, position: int) -> None:
        """Insert an item at a position from 0 to len, shifting later items."""
        self._check_int(position)
        if not 0 <= position <= len(self._items):
            raise IndexError("Invalid index!")
        self._items.insert(position, item)

    def remove(self, position: int) -> None:
        """Remove the item at a position from 0 to len - 1."""
        self._check_position(position)
        del self._items[position]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def is_empty(self) -> bool:
        """Whether the list holds no items."""
        return not self._items

    def copy(self) -> ArrayList[T]:
        """A new list holding the same items."""
        return type(self)(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, position: int) -> T:
        self._check_position(position)
        return self._items[position]

    def __setitem__(self, position: int, item: T) -> None:
        self._check_position(position)
        self._items[position] = item

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __add__(self, other: object) -> ArrayList[T]:
        if not isinstance(other, ArrayList):
            return NotImplemented
        return ArrayList([*self._items, *other._items])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if not self._items:
            return "[  ]"
        return "[ " + ", ".join(str(item) for item in self._items) + " ]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"