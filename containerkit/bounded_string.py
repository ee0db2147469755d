"""A string with an explicit capacity limit."""

from __future__ import annotations

from typing import Any


class BoundedString:
    """Text that must be non-empty and no longer than its capacity."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, text: str, capacity: int) -> None:
        self._text = ""
        self._capacity = 0
        self._assign(text, capacity)

    def _assign(self, text: str, capacity: int) -> None:
        if not text:
            raise ValueError("text must not be empty")
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if len(text) > capacity:
            raise ValueError("text is longer than capacity")
        self._text = text
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Maximum number of characters the string may hold."""
        return self._capacity

    def update(self, text: str, capacity: int) -> None:
        """Replace the content and the capacity."""
        self._assign(text, capacity)

    def split(self, delimiter: str) -> list[str]:
        """Split on any character of ``delimiter``, dropping empty tokens."""
        if not delimiter:
            return [self._text] if self._text else []
        tokens: list[str] = []
        current: list[str] = []
        for char in self._text:
            if char in delimiter:
                if current:
                    tokens.append("".join(current))
                    current = []
            else:
                current.append(char)
        if current:
            tokens.append("".join(current))
        return tokens

    def concat(self, other: BoundedString, capacity: int) -> BoundedString:
        """Return a new string holding this one followed by ``other``."""
        if not self._text:
            raise ValueError("first string is empty")
        if not other._text:
            raise ValueError("second string is empty")
        if len(self._text) + len(other._text) > capacity:
            raise ValueError("combined length is larger than capacity")
        return BoundedString(self._text + other._text, capacity)

    def substring(self, start: int, length: int) -> BoundedString:
        """Return up to ``length`` characters starting at ``start``."""
        if not self._text:
            raise ValueError("string is empty")
        if start < 0 or start >= len(self._text):
            raise IndexError("start index out of range")
        piece = self._text[start:start + max(length, 0)]
        if not piece:
            raise ValueError("substring length is zero")
        return BoundedString(piece, len(piece))

    def clear(self) -> None:
        """Release the content; raise if it was already released."""
        if not self._text:
            raise ValueError("string is already cleared")
        self._text = ""
        self._capacity = 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BoundedString):
            return NotImplemented
        return self._text == other._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"BoundedString({self._text!r}, {self._capacity})"

    def __len__(self) -> int:
        return len(self._text)