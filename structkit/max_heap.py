"""Array-backed max-heap of integers and heap sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from structkit.stack import _parse_cli, _spaced

_EXAMPLE = (6, 4, 3, 2, 4, 3)


class MaxHeap:
    """A binary max-heap; iteration yields the values in storage order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def _swap(self, first: int, second: int) -> None:
        items = self._items
        items[first], items[second] = items[second], items[first]

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[largest] < items[child]:
                    largest = child
            if largest == index:
                return
            self._swap(index, largest)
            index = largest

    def insert(self, value: int) -> None:
        """Add a value to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def extract_max(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("extract from empty heap")
        self._swap(0, len(self._items) - 1)
        top = self._items.pop()
        if self._items:
            self._sift_down(0)
        return top

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def format(self) -> str:
        """Render the values in storage order, each followed by a space."""
        return _spaced(self)


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted in ascending order using a max-heap."""
    heap = MaxHeap(values)
    result = [heap.extract_max() for _ in range(len(heap))]
    result.reverse()
    return result


def main(argv: list[str] | None = None) -> int:
    _parse_cli(argv, "max-heap", "Heap-sort a fixed example array and print the result.")
    print(_spaced(heap_sort(_EXAMPLE)))
    return 0