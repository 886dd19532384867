"""An ordered list built from singly linked nodes."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("item", "next")

    def __init__(self, item: T, next_node: Optional[_Node[T]] = None) -> None:
        self.item = item
        self.next = next_node


class LinkedList(Generic[T]):
    """An ordered collection of linked nodes, indexed from 0 to len - 1.

    Negative indices are not accepted; any index out of range raises
    IndexError.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.append(item)

    @staticmethod
    def _check_int(index: Any) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("list indices must be integers")

    def _check_index(self, index: int) -> None:
        self._check_int(index)
        if not 0 <= index < self._size:
            raise IndexError("Invalid index!")

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node[T]:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("Invalid index!")

    def append(self, item: T) -> None:
        """Add an item at the end of the list."""
        self.insert(item, self._size)

    def insert(self, item: T, index: int) -> None:
        """Insert an item at an index from 0 to len, shifting later items."""
        self._check_int(index)
        if not 0 <= index <= self._size:
            raise IndexError("Invalid index!")
        if index == 0:
            self._head = _Node(item, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(item, previous.next)
        self._size += 1

    def remove(self, index: int) -> None:
        """Remove the item at an index from 0 to len - 1."""
        self._check_index(index)
        if index == 0:
            assert self._head is not None
            self._head = self._head.next
        else:
            previous = self._node_at(index - 1)
            assert previous.next is not None
            previous.next = previous.next.next
        self._size -= 1

    def clear(self) -> None:
        """Remove every item."""
        self._head = None
        self._size = 0

    def is_empty(self) -> bool:
        """Whether the list holds no items."""
        return self._head is None

    def copy(self) -> LinkedList[T]:
        """A new list holding the same items."""
        return type(self)(self)

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._node_at(index).item

    def __setitem__(self, index: int, item: T) -> None:
        self._check_index(index)
        self._node_at(index).item = item

    def __iter__(self) -> Iterator[T]:
        return (node.item for node in self._nodes())

    def __add__(self, other: object) -> LinkedList[T]:
        if not isinstance(other, LinkedList):
            return NotImplemented
        result: LinkedList[T] = LinkedList(self)
        for item in other:
            result.append(item)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(
            mine == theirs for mine, theirs in zip(self, other)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self.is_empty():
            return "[ ]"
        return "[ " + ", ".join(str(item) for item in self) + " ]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"