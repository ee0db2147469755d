"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class Stack:
    """LIFO stack that refuses new items once it holds ``capacity`` of them."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: Optional[list[Any]] = []

    @property
    def capacity(self) -> int:
        """Maximum number of items the stack can hold."""
        return self._capacity

    def _storage(self) -> list[Any]:
        if self._items is None:
            raise ValueError("stack has been cleared")
        return self._items

    def _nonempty(self) -> list[Any]:
        items = self._storage()
        if not items:
            raise IndexError("stack is empty")
        return items

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raise OverflowError when full."""
        items = self._storage()
        if item is None:
            raise ValueError("item is None")
        if len(items) >= self._capacity:
            raise OverflowError("stack is full")
        items.append(item)

    def pop(self) -> Any:
        """Remove the top item and return it."""
        return self._nonempty().pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        return self._nonempty()[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._storage()

    def clear(self) -> None:
        """Release the stack: drop all items and reset the capacity to zero."""
        self._storage()
        self._items = None
        self._capacity = 0

    def __len__(self) -> int:
        return 0 if self._items is None else len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter((self._items or [])[::-1])