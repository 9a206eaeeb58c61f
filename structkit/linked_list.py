"""Singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from structkit.stack import _NODE_PROMPTS, _run_counted


@dataclass(slots=True, eq=False)
class _Node:
    value: int
    next: _Node | None = None


def _follow(node: Any, link: str) -> Iterator[int]:
    """Yield values along a chain of nodes joined by the attribute ``link``."""
    while node is not None:
        yield node.value
        node = getattr(node, link)


def _render(values: Iterable[int], arrow: str) -> str:
    return "".join(f"{value} {arrow} " for value in values) + "NULL"


class LinkedList:
    """A singly linked list with O(1) append and prepend."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add a value at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: int) -> None:
        """Add a value at the beginning."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def delete_last(self) -> int:
        """Remove the last value and return it."""
        if self._head is None:
            raise IndexError("delete from empty list")
        if self._head.next is None:
            value = self._head.value
            self._head = self._tail = None
            self._size = 0
            return value
        node = self._head
        while node.next.next is not None:
            node = node.next
        last = node.next
        node.next = None
        self._tail = node
        self._size -= 1
        return last.value

    def __iter__(self) -> Iterator[int]:
        return _follow(self._head, "next")

    def __len__(self) -> int:
        return self._size

    def format(self) -> str:
        """Render the list as values joined by arrows and ending in ``NULL``."""
        return _render(self, "-->")


def _prepend_five_drop_last(values: list[int]) -> str:
    items = LinkedList(values)
    items.prepend(5)
    items.delete_last()
    return items.format() + "\n"


def main(argv: list[str] | None = None) -> int:
    return _run_counted(
        argv,
        "linked-list",
        "Read integers into a linked list, prepend 5, drop the last node and print it.",
        _NODE_PROMPTS,
        _prepend_five_drop_last,
    )