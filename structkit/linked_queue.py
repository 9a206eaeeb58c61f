"""First-in, first-out queue of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from structkit.stack import _ELEMENT_PROMPTS, _run_counted, _spaced


class Queue:
    """A FIFO queue; iteration runs from head to tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def enqueue(self, value: int) -> None:
        """Add a value at the tail."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the head."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def format(self) -> str:
        """Render the values from head to tail, each followed by a space."""
        return _spaced(self)


def main(argv: list[str] | None = None) -> int:
    return _run_counted(
        argv,
        "queue",
        "Enqueue integers from standard input and print the queue.",
        _ELEMENT_PROMPTS,
        lambda values: Queue(values).format() + "\n",
    )