"""Unbalanced binary search tree of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from structkit.stack import _NODE_PROMPTS, _run_counted, _spaced


@dataclass(slots=True, eq=False)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


def _inorder(root: Any) -> Iterator[int]:
    """Yield the values of a tree of nodes with value/left/right in ascending order."""
    pending: list[Any] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.value
        node = node.right


def _find(root: Any, value: int) -> Any:
    """Return the node holding ``value`` in a search tree, or None."""
    node = root
    while node is not None:
        if value == node.value:
            return node
        node = node.left if value < node.value else node.right
    return None


class BinarySearchTree:
    """A set of integers kept in a plain binary search tree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert a value; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return True
        node = self._root
        while True:
            if value == node.value:
                return False
            side = "left" if value < node.value else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, _Node(value))
                break
            node = child
        self._size += 1
        return True

    def search(self, value: int) -> int | None:
        """Return the stored value equal to ``value``, or None if absent."""
        node = _find(self._root, value)
        return None if node is None else node.value

    def inorder(self) -> list[int]:
        """Return the values in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        return _inorder(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None


def main(argv: list[str] | None = None) -> int:
    return _run_counted(
        argv,
        "binary-search-tree",
        "Read integers from standard input into a binary search tree and print them in order.",
        _NODE_PROMPTS,
        lambda values: _spaced(BinarySearchTree(values)),
    )