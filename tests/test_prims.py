import io

import pytest

from algolab.prims import CityGraph, main


@pytest.fixture
def triangle():
    graph = CityGraph(["A", "B", "C"])
    graph.connect("A", "B", 1)
    graph.connect("B", "C", 2)
    graph.connect("A", "C", 3)
    return graph


def test_connect_is_symmetric(triangle):
    assert triangle.cost("A", "B") == 1
    assert triangle.cost("B", "A") == 1
    assert triangle.cost("A", "A") == 0


def test_unconnected_cost_is_none():
    graph = CityGraph(["A", "B"])
    assert graph.cost("A", "B") is None


def test_invalid_connections():
    graph = CityGraph(["A", "B"])
    with pytest.raises(ValueError):
        graph.connect("A", "A", 4)
    with pytest.raises(ValueError):
        graph.connect("A", "B", 999)
    with pytest.raises(KeyError):
        graph.connect("A", "Z", 4)


def test_too_many_cities():
    with pytest.raises(ValueError):
        CityGraph([f"c{i}" for i in range(11)])


def test_format_matrix_marks_missing_roads():
    graph = CityGraph(["A", "B", "C"])
    graph.connect("A", "B", 5)
    lines = graph.format_matrix().splitlines()
    assert lines[0].split() == ["A", "B", "C"]
    assert lines[1].split() == ["A", "0", "5", "INF"]
    assert lines[3].split() == ["C", "INF", "INF", "0"]


def test_prims_triangle(triangle):
    tree = triangle.prims("A")
    assert tree.edges == (("A", "B", 1), ("B", "C", 2))
    assert tree.total_cost == 3


def test_prims_steps(triangle):
    tree = triangle.prims("A")
    assert len(tree.steps) == len(tree.edges)
    assert tree.steps[-1].edges == tree.edges
    assert tree.steps[0].nearest == (None, None, 1)
    assert [step.iteration for step in tree.steps] == [1, 2]


def test_total_is_sum_of_edges_from_any_start(triangle):
    for start in triangle.cities:
        tree = triangle.prims(start)
        assert tree.total_cost == sum(edge[2] for edge in tree.edges)
        assert len(tree.edges) == len(triangle.cities) - 1
        assert all(step.nearest[triangle.cities.index(start)] is None for step in tree.steps)


def test_disconnected_graph_stops_early():
    graph = CityGraph(["A", "B", "C"])
    graph.connect("A", "B", 7)
    tree = graph.prims("A")
    assert tree.edges == (("A", "B", 7),)
    assert len(tree.steps) == 1


def test_single_city():
    tree = CityGraph(["A"]).prims("A")
    assert tree.edges == ()
    assert tree.total_cost == 0


def test_unknown_start(triangle):
    with pytest.raises(KeyError):
        triangle.prims("Z")


def test_main_prints_total(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\nA B C\ny 1\ny 3\ny 2\nA\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Total Minimum Cost: 3" in out
    assert "Edge: (A - B) Cost: 1" in out


def test_main_invalid_start(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nA B\nn\nQ\n"))
    assert main([]) == 1
    assert "Invalid city name." in capsys.readouterr().out