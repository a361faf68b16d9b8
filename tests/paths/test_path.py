from collections import deque

import pytest

from graphpath.config import DISPLAY_CONFIG
from graphpath.graph.adjacency import AdjacencyGraph
from graphpath.paths.path import Path


def test_empty_path():
    path = Path()
    assert len(path) == 0
    assert not path
    assert path.src_vertex is None
    assert path.dst_vertex is None
    assert path.edge_count == 0
    assert path.total_weight == 0.0
    assert path.visited == set()


def test_single_vertex_path():
    path = Path(deque(["A"]))
    assert path
    assert path.src_vertex == path.dst_vertex == "A"
    assert path.edge_count == 0


def test_paths_do_not_share_state():
    first, second = Path(), Path()
    first.vertices.append("A")
    first.visited.add("A")
    assert not second.vertices
    assert not second.visited


def test_iteration_order():
    path = Path(deque(["A", "B", "C"]))
    assert list(path) == ["A", "B", "C"]
    assert path.edge_count == 2


def test_recalculate_total_weight():
    path = Path(deque([1, 2, 4]), total_weight=99.0)
    result = path.recalculate_total_weight(lambda u, v: abs(u - v) * 1.5)
    assert result == pytest.approx(4.5)
    assert path.total_weight == pytest.approx(4.5)


def test_recalculate_total_weight_trivial_paths():
    calls = []

    def weight(u, v):
        calls.append((u, v))
        return 1

    assert Path().recalculate_total_weight(weight) == 0.0
    assert Path(deque(["A"])).recalculate_total_weight(weight) == 0.0
    assert calls == []


def test_recalculate_total_weight_passes_edges_in_order():
    calls = []

    def weight(u, v):
        calls.append((u, v))
        return 2

    assert Path(deque("ABC")).recalculate_total_weight(weight) == 4
    assert calls == [("A", "B"), ("B", "C")]


def test_is_valid(diamond):
    assert Path(deque(["A", "B", "D"])).is_valid(diamond)
    assert Path(deque(["A"])).is_valid(diamond)
    assert not Path(deque(["A", "D"])).is_valid(diamond)
    assert not Path(deque(["D", "B"])).is_valid(diamond)
    assert not Path().is_valid(diamond)


def test_str_short_path():
    path = Path(deque(["A", "B", "D"]), total_weight=2, visited={"A", "B", "C", "D"})
    assert str(path) == "Weight=2.00 Length=3 visited=4 (A, B, D)"


def test_str_elides_long_path():
    path = Path(deque(range(25)))
    head = ", ".join(str(i) for i in range(10))
    tail = ", ".join(str(i) for i in range(15, 25))
    assert str(path) == f"Weight=0.00 Length=25 visited=0 ({head}, ..., {tail})"


@pytest.mark.parametrize("length", [0, 1, 19, 20])
def test_str_keeps_paths_up_to_twice_the_cut(length):
    path = Path(deque(range(length)))
    assert "..." not in str(path)
    assert str(path).endswith("(" + ", ".join(str(i) for i in range(length)) + ")")


def test_str_honours_display_config(monkeypatch):
    monkeypatch.setattr(DISPLAY_CONFIG, "display_cut", 1)
    monkeypatch.setattr(DISPLAY_CONFIG, "weight_precision", 0)
    path = Path(deque("ABCD"), total_weight=3.4)
    assert str(path) == "Weight=3 Length=4 visited=0 (A, ..., D)"


def test_search_result_is_valid_path():
    g = AdjacencyGraph(directed=False)
    g.add_edge("X", "Y", 2)
    g.add_edge("Y", "Z", 3)
    path = g.dijkstra_shortest_path("Z", "X", g.weight)
    assert list(path) == ["Z", "Y", "X"]
    assert path.is_valid(g)
    assert path.recalculate_total_weight(g.weight) == path.total_weight == 5
