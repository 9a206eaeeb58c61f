"""Doubly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from structkit.linked_list import _follow, _render
from structkit.stack import _NODE_PROMPTS, _run_counted


@dataclass(slots=True, eq=False)
class _Node:
    value: int
    next: _Node | None = None
    prev: _Node | None = None


class DoublyLinkedList:
    """A linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add a value at the end."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        return _follow(self._head, "next")

    def __reversed__(self) -> Iterator[int]:
        return _follow(self._tail, "prev")

    def __len__(self) -> int:
        return self._size

    def format(self) -> str:
        """Render the list as values joined by arrows and ending in ``NULL``."""
        return _render(self, "<-->")


def main(argv: list[str] | None = None) -> int:
    return _run_counted(
        argv,
        "doubly-linked-list",
        "Read integers into a doubly linked list and print it.",
        _NODE_PROMPTS,
        lambda values: DoublyLinkedList(values).format() + "\n",
    )