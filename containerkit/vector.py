"""A growable array that doubles when full and halves when mostly empty."""

from __future__ import annotations

from typing import Any, Callable, Iterator

Matcher = Callable[[Any, Any], bool]

_SHRINK_THRESHOLD = 4


class Vector:
    """Ordered sequence with an explicit, self-managed capacity.

    The capacity doubles when an element is pushed onto a full vector and
    halves after a removal leaves it at most half full, as long as the
    capacity is larger than four.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._items: list[Any] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of elements the vector can hold before it grows."""
        return self._capacity

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} is out of bounds")

    def _maybe_shrink(self) -> None:
        if len(self._items) <= self._capacity // 2 and self._capacity > _SHRINK_THRESHOLD:
            self._capacity //= 2

    def search(self, key: Any, match: Matcher) -> Any:
        """Return the first element for which ``match(element, key)`` is true.

        Raises LookupError when no element matches.
        """
        if key is None:
            raise ValueError("key is None")
        if match is None:
            raise TypeError("match function is required")
        for element in self._items:
            if match(element, key):
                return element
        raise LookupError(f"no element matches {key!r}")

    def get(self, index: int) -> Any:
        """Return the element at a zero-based index."""
        self._check_index(index)
        return self._items[index]

    def push_back(self, element: Any) -> None:
        """Append ``element``, doubling the capacity if the vector is full."""
        if element is None:
            raise ValueError("element is None")
        if len(self._items) >= self._capacity:
            self._capacity = self._capacity * 2 if self._capacity else 1
        self._items.append(element)

    def remove(self, element: Any) -> None:
        """Remove the first element equal to ``element``.

        Raises ValueError when there is no such element.
        """
        if element is None:
            raise ValueError("element is None")
        try:
            position = self._items.index(element)
        except ValueError:
            raise ValueError(f"{element!r} is not in the vector") from None
        del self._items[position]
        self._maybe_shrink()

    def pop_index(self, index: int) -> Any:
        """Remove the element at ``index`` and return it."""
        self._check_index(index)
        element = self._items.pop(index)
        self._maybe_shrink()
        return element

    def clear(self) -> None:
        """Drop every element and reset the capacity to zero."""
        self._items.clear()
        self._capacity = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"