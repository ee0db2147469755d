"""A fixed-size array of items with a sorted copy operation."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, Iterator


def compare_ints(a: Any, b: Any) -> int:
    """Three-way compare: -1, 0 or 1. A missing operand compares as equal."""
    if a is None or b is None:
        return 0
    return (a > b) - (a < b)


class FixedArray:
    """An immutable, non-empty sequence of items."""

    def __init__(self, items: Iterable[Any]) -> None:
        self._items = tuple(items)
        if not self._items:
            raise ValueError("items must not be empty")

    def get(self, index: int) -> Any:
        """Return the item at a zero-based index."""
        if index < 0:
            raise IndexError(f"negative index {index}")
        try:
            return self._items[index]
        except IndexError:
            raise IndexError(f"no item at position {index}") from None

    def sorted(self) -> FixedArray:
        """Return a new array holding the items in ascending order."""
        result = type(self).__new__(type(self))
        result._items = tuple(sorted(self._items, key=cmp_to_key(compare_ints)))
        return result

    def clear(self) -> None:
        """Release all items."""
        self._items = ()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)