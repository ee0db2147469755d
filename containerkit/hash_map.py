"""An open-addressing hash map with linear probing and string keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Iterator

Comparator = Callable[[Any, Any], int]

_HASH_SEED = 5381
_HASH_MASK = (1 << 64) - 1
_LOAD_FACTOR = 0.7


class EntryState(Enum):
    """State of a slot in the table."""

    EMPTY = auto()
    OCCUPIED = auto()
    DELETED = auto()


@dataclass
class _Entry:
    key: Any = None
    value: Any = None
    state: EntryState = EntryState.EMPTY


def _default_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _key_bytes(key: Any) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raise TypeError(f"key must be str or bytes, not {type(key).__name__}")


def simple_hash(key: Any, capacity: int) -> int:
    """Hash a string key (djb2, 64-bit) into a slot index below ``capacity``.

    Hashing stops at the first NUL character.
    """
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    value = _HASH_SEED
    for byte in _key_bytes(key):
        if byte == 0:
            break
        value = (value * 33 + byte) & _HASH_MASK
    return value % capacity


class HashMap:
    """Maps string keys to values; doubles its table at 70% load."""

    def __init__(self, capacity: int, cmp: Comparator | None = None) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.cmp: Comparator = cmp if cmp is not None else _default_cmp
        self._table = [_Entry() for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._table)

    def _probe(self, key: Any) -> Iterator[_Entry]:
        capacity = len(self._table)
        start = simple_hash(key, capacity)
        for offset in range(capacity):
            yield self._table[(start + offset) % capacity]

    def get(self, key: Any) -> Any:
        """Return the value stored for ``key``, or None if it is absent."""
        if key is None:
            return None
        for entry in self._probe(key):
            if entry.state is EntryState.EMPTY:
                return None
            if entry.state is EntryState.OCCUPIED and self.cmp(entry.key, key) == 0:
                return entry.value
        return None

    def _resize(self) -> None:
        old_table = self._table
        self._table = [_Entry() for _ in range(len(old_table) * 2)]
        self._size = 0
        for entry in old_table:
            if entry.state is EntryState.OCCUPIED:
                self.insert(entry.key, entry.value)

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing a value found on the way."""
        if key is None or value is None:
            raise ValueError("key and value must not be None")
        _key_bytes(key)
        if self._size >= len(self._table) * _LOAD_FACTOR:
            self._resize()
        for entry in self._probe(key):
            if entry.state is not EntryState.OCCUPIED:
                entry.key = key
                entry.value = value
                entry.state = EntryState.OCCUPIED
                self._size += 1
                return
            if self.cmp(entry.key, key) == 0:
                entry.value = value
                return

    def delete(self, key: Any) -> None:
        """Remove ``key``; do nothing if it is absent."""
        if key is None:
            return
        for entry in self._probe(key):
            if entry.state is EntryState.EMPTY:
                return
            if entry.state is EntryState.OCCUPIED and self.cmp(entry.key, key) == 0:
                entry.key = None
                entry.value = None
                entry.state = EntryState.DELETED
                self._size -= 1
                return

    def clear(self) -> None:
        """Remove every entry, keeping the current capacity."""
        self._table = [_Entry() for _ in range(len(self._table))]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.get(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return iter([e.key for e in self._table if e.state is EntryState.OCCUPIED])