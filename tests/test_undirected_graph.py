import io

import pytest

from structkit.undirected_graph import UndirectedGraph, main


def test_edges_are_symmetric():
    graph = UndirectedGraph(4)
    graph.add_edge(1, 3)
    assert 3 in graph.neighbors(1)
    assert 1 in graph.neighbors(3)


def test_duplicate_edge_is_ignored():
    graph = UndirectedGraph(3)
    assert graph.add_edge(0, 2) is True
    assert graph.add_edge(2, 0) is False
    assert graph.neighbors(0) == [2]
    assert graph.neighbors(2) == [0]


def test_self_loop_appears_once():
    graph = UndirectedGraph(2)
    graph.add_edge(1, 1)
    assert graph.neighbors(1) == [1]


def test_components_partition_nodes():
    graph = UndirectedGraph(7)
    for first, second in [(0, 4), (4, 6), (1, 2), (3, 5)]:
        graph.add_edge(first, second)
    components = graph.connected_components()
    assert sorted(node for component in components for node in component) == list(range(7))


def test_separate_edges_form_separate_components():
    graph = UndirectedGraph(5)
    graph.add_edge(0, 1)
    graph.add_edge(2, 3)
    components = {frozenset(c) for c in graph.connected_components()}
    assert components == {frozenset({0, 1}), frozenset({2, 3}), frozenset({4})}


def test_components_start_at_smallest_node():
    graph = UndirectedGraph(8)
    for first, second in [(5, 2), (7, 0), (3, 6), (6, 1)]:
        graph.add_edge(first, second)
    components = graph.connected_components()
    firsts = [component[0] for component in components]
    assert firsts == sorted(firsts)
    for component in components:
        assert component[0] == min(component)


def test_out_of_range_node_raises():
    graph = UndirectedGraph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)
    with pytest.raises(IndexError):
        graph.neighbors(5)


def test_format_lists_adjacency():
    graph = UndirectedGraph(2)
    graph.add_edge(0, 1)
    assert graph.format() == "0: 1 \n1: 0 "


def test_main_prints_components(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 2\n0 1\n2 3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    graph = UndirectedGraph(4)
    graph.add_edge(0, 1)
    graph.add_edge(2, 3)
    for number, component in enumerate(graph.connected_components(), start=1):
        line = f"Component number {number}: " + "".join(f"{node} " for node in component)
        assert line in out


def test_main_rejects_bad_node(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n0 9\n"))
    assert main([]) == 1