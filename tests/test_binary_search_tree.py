import io

from structkit.binary_search_tree import BinarySearchTree, main


def test_inorder_is_sorted_and_unique():
    values = [50, 30, 70, 20, 40, 60, 80, 30]
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(set(values))
    assert len(tree) == len(set(values))


def test_insert_reports_duplicates():
    tree = BinarySearchTree([7])
    assert tree.insert(7) is False
    assert tree.insert(8) is True
    assert len(tree) == 2


def test_search_found_and_missing():
    tree = BinarySearchTree([50, 30, 70, 20])
    assert tree.search(20) == 20
    assert tree.search(0) == 0 if 0 in tree else tree.search(0) is None
    assert tree.search(65) is None


def test_contains():
    tree = BinarySearchTree([5, -3, 12])
    assert -3 in tree
    assert 4 not in tree
    assert "5" not in tree


def test_degenerate_input_does_not_recurse():
    values = range(5000)
    tree = BinarySearchTree(values)
    assert list(tree) == list(values)
    assert 4999 in tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert len(tree) == 0
    assert tree.search(1) is None


def test_main_prints_inorder(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n9 2 9 5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Numar de noduri: Nodul numarul 0: Nodul numarul 1: "
        "Nodul numarul 2: Nodul numarul 3: 2 5 9 "
    )


def test_main_rejects_garbage(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 x\n"))
    assert main([]) == 1