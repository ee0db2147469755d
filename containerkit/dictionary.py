"""A fixed-capacity dictionary that keeps pairs in insertion order."""

from __future__ import annotations

from typing import Any, Iterator

from containerkit.pair import Pair


class BoundedDictionary:
    """An ordered collection of key-value pairs with a fixed capacity.

    Keys are matched by equality; appending does not replace existing keys,
    so lookups find the earliest pair with a matching key.
    """

    def __init__(self, initial_pair: Pair, capacity: int) -> None:
        if initial_pair.is_null():
            raise ValueError("initial pair is null")
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._pairs: list[Pair] = [Pair(initial_pair.key, initial_pair.value)]
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Maximum number of pairs the dictionary can hold."""
        return self._capacity

    def append(self, pair: Pair) -> None:
        """Add a pair at the end; raise OverflowError when full."""
        if pair.is_null():
            raise ValueError("pair is null")
        if len(self._pairs) >= self._capacity:
            raise OverflowError("dictionary is full")
        self._pairs.append(Pair(pair.key, pair.value))

    def _find(self, key: Any) -> int:
        for position, pair in enumerate(self._pairs):
            if pair.key == key:
                return position
        raise KeyError(key)

    def remove(self, key: Any) -> Pair:
        """Remove the first pair with this key and return it."""
        if key is None:
            raise KeyError(key)
        return self._pairs.pop(self._find(key))

    def get(self, key: Any) -> Pair:
        """Return the first pair with this key."""
        if key is None:
            raise KeyError(key)
        return self._pairs[self._find(key)]

    def format_items(self) -> str:
        """Render every pair as a ``key : value`` line."""
        return "".join(f"{pair.key} : {pair.value}\n" for pair in self._pairs)

    def clear(self) -> None:
        """Drop all pairs and reset the capacity to zero."""
        self._pairs.clear()
        self._capacity = 0

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: Any) -> bool:
        return any(pair.key == key for pair in self._pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(list(self._pairs))