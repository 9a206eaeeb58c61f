import io

import pytest

from structkit.stack import Stack, main


def test_lifo_order():
    values = [1, 2, 3, 4]
    stack = Stack(values)
    popped = [stack.pop() for _ in range(len(values))]
    assert popped == values[::-1]
    assert stack.is_empty()


def test_iteration_is_top_first():
    values = [5, 6, 7]
    stack = Stack(values)
    assert list(stack) == values[::-1]
    assert len(stack) == len(values)


def test_pop_empty_raises():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()


def test_push_then_pop_round_trip():
    stack = Stack([1])
    stack.push(42)
    assert stack.pop() == 42
    assert list(stack) == [1]
    assert not stack.is_empty()


def test_format():
    assert Stack([1, 2, 3]).format() == "3 2 1 "
    assert Stack().format() == ""


def test_main_prints_from_top(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2 3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Numar elemente: Elementul numarul 0: Elementul numarul 1: "
        "Elementul numarul 2: 3 2 1 \n"
    )


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 1