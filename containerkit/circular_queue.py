"""A fixed-capacity first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator, Optional


class CircularQueue:
    """FIFO queue that refuses new items once it holds ``capacity`` of them."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: Optional[deque[Any]] = deque()

    @property
    def capacity(self) -> int:
        """Maximum number of items the queue can hold."""
        return self._capacity

    def _live(self) -> deque[Any]:
        if self._items is None:
            raise ValueError("queue has been cleared")
        return self._items

    def _at(self, position: int) -> Any:
        items = self._live()
        if not items:
            raise IndexError("queue is empty")
        return items[position]

    def is_full(self) -> bool:
        """Return True when no more items fit."""
        return len(self) >= self._capacity

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return len(self) == 0

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back; raise OverflowError when full."""
        items = self._live()
        if item is None:
            raise ValueError("item is None")
        if self.is_full():
            raise OverflowError("queue is full")
        items.append(item)

    def dequeue(self) -> Any:
        """Remove the front item and return it."""
        front = self._at(0)
        self._live().popleft()
        return front

    def peek_front(self) -> Any:
        """Return the front item without removing it."""
        return self._at(0)

    def peek_back(self) -> Any:
        """Return the most recently enqueued item without removing it."""
        return self._at(-1)

    def clear(self) -> None:
        """Release the queue: drop all items and reset the capacity to zero."""
        self._live()
        self._items = None
        self._capacity = 0

    def __len__(self) -> int:
        return len(self._items or ())

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items or ()))