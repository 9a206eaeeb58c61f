import io

import pytest

from structkit.linked_list import LinkedList, main


def test_append_keeps_order():
    values = [4, 8, 15, 16]
    items = LinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


def test_format():
    assert LinkedList([1, 2, 3]).format() == "1 --> 2 --> 3 --> NULL"
    assert LinkedList().format() == "NULL"


def test_prepend():
    items = LinkedList([2, 3])
    items.prepend(1)
    assert list(items) == [1, 2, 3]
    empty = LinkedList()
    empty.prepend(9)
    empty.append(10)
    assert list(empty) == [9, 10]


def test_delete_last_returns_value():
    items = LinkedList([7, 8, 9])
    assert items.delete_last() == 9
    assert list(items) == [7, 8]
    assert len(items) == 2


def test_append_after_delete_last_goes_to_end():
    items = LinkedList([1, 2, 3])
    items.delete_last()
    items.append(4)
    assert list(items) == [1, 2, 4]


def test_delete_last_on_single_and_empty():
    items = LinkedList([6])
    assert items.delete_last() == 6
    assert list(items) == []
    with pytest.raises(IndexError):
        items.delete_last()


def test_main_prepends_five_and_drops_last(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2 3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Numar de noduri: Nodul numarul 0: Nodul numarul 1: Nodul numarul 2: "
        "5 --> 1 --> 2 --> NULL\n"
    )


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n"))
    assert main([]) == 1