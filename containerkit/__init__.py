"""Container types: fixed arrays, bounded strings and dictionaries, linked lists, binary search trees, hash maps, cursors, queues, stacks, vectors and console input helpers."""

__version__ = "0.1.0"