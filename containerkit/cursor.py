"""A bidirectional cursor over a sequence."""

from __future__ import annotations

from typing import Any, Sequence


class Cursor:
    """Walks a non-empty sequence forwards and backwards by position."""

    def __init__(self, data: Sequence[Any]) -> None:
        if data is None or len(data) == 0:
            raise ValueError("data must not be empty")
        self._data = data
        self._index = 0

    @property
    def index(self) -> int:
        """The current position."""
        return self._index

    def _at(self, position: int) -> Any:
        if not 0 <= position < len(self._data):
            raise IndexError(f"position {position} is out of range")
        return self._data[position]

    def current(self) -> Any:
        """Return the element at the current position."""
        return self._at(self._index)

    def has_next(self) -> bool:
        """Return True while the current position holds an element."""
        return self._index < len(self._data)

    def next(self) -> Any:
        """Return the current element and advance past it."""
        value = self._at(self._index)
        self._index += 1
        return value

    def before(self) -> Any:
        """Step back one position and return the element there."""
        if self._index <= 0:
            raise IndexError("already at the start")
        self._index -= 1
        return self._data[self._index]

    def jump(self, amount: int) -> Any:
        """Move by ``amount`` (may be negative) and return the element there."""
        value = self._at(self._index + amount)
        self._index += amount
        return value

    def peek(self, amount: int) -> Any:
        """Return the element ``amount`` positions away without moving."""
        return self._at(self._index + amount)

    def reset(self) -> None:
        """Go back to the first position."""
        self._index = 0

    def __iter__(self) -> Cursor:
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()