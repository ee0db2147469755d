"""A doubly linked list that grows and shrinks at its tail."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Iterator, Optional

from containerkit.linked_list import SinglyLinkedList


@dataclass(eq=False)
class _Node:
    data: Any
    prev: Optional[_Node] = field(default=None, repr=False)
    next: Optional[_Node] = None


class DoublyLinkedList(SinglyLinkedList):
    """Linked list with head and tail references, walkable both ways."""

    def __init__(self) -> None:
        super().__init__()
        self._tail: Optional[_Node] = None

    def append(self, data: Any) -> None:
        """Add ``data`` at the tail."""
        node = _Node(data, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove the tail element and return it."""
        node = self._tail
        if node is None:
            raise IndexError("pop from empty list")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.data

    def get(self, index: int) -> Any:
        """Return the element at a zero-based index, walking from the nearer end."""
        self._check_index(index)
        if index < self._size // 2:
            return super().get(index)
        return next(islice(reversed(self), self._size - 1 - index, None))

    def clear(self) -> None:
        """Remove every element."""
        super().clear()
        self._tail = None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev