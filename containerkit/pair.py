"""Key-value pair used by the bounded dictionary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Pair:
    """An immutable key-value pair.

    A pair whose key or value is missing (``None``) is considered null.
    """

    key: Any = None
    value: Any = None

    def is_null(self) -> bool:
        """Return True if the key or the value is missing."""
        return self.key is None or self.value is None