"""Self-balancing AVL tree of integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from structkit.binary_search_tree import _find, _inorder
from structkit.stack import _NODE_PROMPTS, _read_counted, _spaced


@dataclass(slots=True, eq=False)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update_height(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(top: _Node) -> _Node:
    pivot = top.left
    assert pivot is not None
    top.left = pivot.right
    pivot.right = top
    _update_height(top)
    _update_height(pivot)
    return pivot


def _rotate_left(top: _Node) -> _Node:
    pivot = top.right
    assert pivot is not None
    top.right = pivot.left
    pivot.left = top
    _update_height(top)
    _update_height(pivot)
    return pivot


def _insert(node: _Node | None, value: int) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node

    _update_height(node)
    balance = _balance(node)

    if balance > 1:
        assert node.left is not None
        if value > node.left.value:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if value < node.right.value:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A set of integers kept in a height-balanced binary search tree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert a value; return False if it was already present."""
        if value in self:
            return False
        self._root = _insert(self._root, value)
        self._size += 1
        return True

    def inorder(self) -> list[int]:
        """Return the values in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        return _inorder(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and _find(self._root, value) is not None

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self._root)

    def root_value(self) -> int:
        """Value stored at the root."""
        if self._root is None:
            raise IndexError("tree is empty")
        return self._root.value


def main(argv: list[str] | None = None) -> int:
    values = _read_counted(
        argv,
        "avl-tree",
        "Read integers from standard input into an AVL tree and print them in order.",
        _NODE_PROMPTS,
    )
    if values is None:
        return 1
    print(_spaced(AVLTree(values)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())