"""An unbalanced binary search tree with a caller-supplied comparison."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Comparator = Callable[[Any, Any], int]


def _default_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(eq=False)
class TreeNode:
    """A node of the tree, linked to its parent and children."""

    data: Any
    parent: Optional[TreeNode] = field(default=None, repr=False)
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class BinaryTree:
    """Smaller values go to the left, equal or larger ones to the right."""

    def __init__(self, cmp: Comparator | None = None) -> None:
        self.cmp: Comparator = cmp if cmp is not None else _default_cmp
        self.root: Optional[TreeNode] = None

    def search(self, data: Any) -> Optional[TreeNode]:
        """Return the first node found that compares equal to ``data``."""
        node = self.root
        while node is not None:
            order = self.cmp(data, node.data)
            if order == 0:
                return node
            node = node.left if order < 0 else node.right
        return None

    def insert(self, data: Any) -> None:
        """Insert ``data`` as a new leaf."""
        new_node = TreeNode(data)
        if self.root is None:
            self.root = new_node
            return
        parent = self.root
        while True:
            if self.cmp(data, parent.data) < 0:
                if parent.left is None:
                    parent.left = new_node
                    break
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = new_node
                    break
                parent = parent.right
        new_node.parent = parent

    def _replace(self, node: TreeNode, child: Optional[TreeNode]) -> None:
        if child is not None:
            child.parent = node.parent
        if node.parent is None:
            self.root = child
        elif node.parent.left is node:
            node.parent.left = child
        else:
            node.parent.right = child

    def delete(self, data: Any) -> None:
        """Remove one node equal to ``data``; do nothing if there is none."""
        node = self.search(data)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.data = successor.data
            self._replace(successor, successor.right)
        else:
            self._replace(node, node.left if node.left is not None else node.right)

    def clear(self) -> None:
        """Drop every node."""
        self.root = None

    def __iter__(self) -> Iterator[Any]:
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right