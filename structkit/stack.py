"""Last-in, first-out stack of integers, plus the helpers shared by the containers and commands."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TextIO

_NODE_PROMPTS = ("Numar de noduri: ", "Nodul numarul {}: ")
_ELEMENT_PROMPTS = ("Numar elemente: ", "Elementul numarul {}: ")


def _parse_cli(argv: list[str] | None, prog: str, description: str) -> None:
    argparse.ArgumentParser(prog=prog, description=description).parse_args(argv)


def _read_ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for word in line.split():
            yield int(word)


def _spaced(values: Iterable[Any]) -> str:
    """Render values each followed by a single space."""
    return "".join(f"{value} " for value in values)


def _read_counted(
    argv: list[str] | None,
    prog: str,
    description: str,
    prompts: tuple[str, str],
) -> list[int] | None:
    """Read a count and that many integers from stdin, prompting for each.

    Returns None, after reporting on stderr, when the input runs out or is not an integer.
    """
    _parse_cli(argv, prog, description)
    count_prompt, item_prompt = prompts
    numbers = _read_ints(sys.stdin)
    values: list[int] = []
    try:
        print(count_prompt, end="")
        count = next(numbers)
        for index in range(count):
            print(item_prompt.format(index), end="")
            values.append(next(numbers))
    except (StopIteration, ValueError):
        print("\nerror: expected an integer", file=sys.stderr)
        return None
    return values


def _run_counted(
    argv: list[str] | None,
    prog: str,
    description: str,
    prompts: tuple[str, str],
    render: Callable[[list[int]], str],
) -> int:
    """Read counted integers from stdin and write ``render(values)`` to stdout."""
    values = _read_counted(argv, prog, description, prompts)
    if values is None:
        return 1
    sys.stdout.write(render(values))
    return 0


def _run_graph(
    argv: list[str] | None,
    prog: str,
    description: str,
    build: Callable[[int], Any],
    edge_prompt: str,
    arity: int,
    render: Callable[[Any], str],
) -> int:
    """Read a node count, an edge count and the edges from stdin, then write ``render(graph)``."""
    _parse_cli(argv, prog, description)
    numbers = _read_ints(sys.stdin)
    try:
        print("Number of nodes: ", end="")
        graph = build(next(numbers))
        print("Number of edges: ", end="")
        for index in range(next(numbers)):
            print(edge_prompt.format(index), end="")
            graph.add_edge(*[next(numbers) for _ in range(arity)])
        output = render(graph)
    except (StopIteration, ValueError, IndexError) as error:
        detail = str(error) or "expected an integer"
        print(f"\nerror: {detail}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


class Stack:
    """A LIFO stack; iteration runs from the top down."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def push(self, value: int) -> None:
        """Put a value on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def format(self) -> str:
        """Render the values from the top down, each followed by a space."""
        return _spaced(self)


def main(argv: list[str] | None = None) -> int:
    return _run_counted(
        argv,
        "stack",
        "Push integers from standard input onto a stack and print it from the top.",
        _ELEMENT_PROMPTS,
        lambda values: Stack(values).format() + "\n",
    )