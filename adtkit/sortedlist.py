"""A list that keeps its items in descending order."""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

from adtkit.arraylist import ArrayList

T = TypeVar("T")


class SortedList(ArrayList[T]):
    """An ArrayList whose items are always kept in descending order.

    Items equal to ones already present go after them.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        super().__init__()
        for item in items:
            self.insert(item)

    def insert(self, item: T, position: Optional[int] = None) -> None:
        """Insert an item where it belongs; any given position is ignored."""
        target = next(
            (index for index, current in enumerate(self) if item > current),
            len(self),
        )
        super().insert(item, target)

    def append(self, item: T) -> None:
        """Add an item in its sorted place."""
        self.insert(item)