"""A singly linked list that grows and shrinks at its end."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional[_Node] = None


class SinglyLinkedList:
    """Linked list holding only a reference to its head."""

    def __init__(self) -> None:
        self._head: Optional[Any] = None
        self._size = 0

    def _nodes(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is out of bounds")

    def append(self, data: Any) -> None:
        """Add ``data`` at the end."""
        node = _Node(data)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self._head = node
        else:
            last.next = node
        self._size += 1

    def pop(self) -> Any:
        """Remove the last element and return it."""
        if self._head is None:
            raise IndexError("pop from empty list")
        previous = None
        for node in self._nodes():
            if node.next is None:
                break
            previous = node
        if previous is None:
            self._head = None
        else:
            previous.next = None
        self._size -= 1
        return node.data

    def get(self, index: int) -> Any:
        """Return the element at a zero-based index."""
        self._check_index(index)
        return next(islice(self, index, None))

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())