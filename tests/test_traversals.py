import pytest

from edstructs.graph import Graph
from edstructs.traversals import (
    breadth_first_scan,
    depth_first_scan,
    topological_sorting,
)

UNDIRECTED = "UNDIRECTED 5 a b c d e 3 a b 1 a c 1 b d 1"


def _recorder():
    visits = []

    def process(v, u):
        visits.append((v.key(), u.key()))

    return visits, process


def _visited_keys(graph):
    return {vertex.key() for vertex in graph.vertices() if vertex.visited}


def test_depth_first_scan_from_start():
    graph = Graph.unfold(UNDIRECTED)
    visits, process = _recorder()
    depth_first_scan(graph, process, graph.find_vertex("a"))
    assert visits == [("a", "a"), ("b", "a"), ("d", "b"), ("c", "a")]
    assert _visited_keys(graph) == {"a", "b", "c", "d"}


def test_depth_first_scan_whole_graph():
    graph = Graph.unfold(UNDIRECTED)
    visits, process = _recorder()
    depth_first_scan(graph, process)
    assert visits == [
        ("a", "a"),
        ("b", "a"),
        ("d", "b"),
        ("c", "a"),
        ("e", "e"),
    ]
    assert _visited_keys(graph) == {"a", "b", "c", "d", "e"}


def test_breadth_first_scan_from_start():
    graph = Graph.unfold(UNDIRECTED)
    visits, process = _recorder()
    breadth_first_scan(graph, process, graph.find_vertex("a"))
    assert visits == [("a", "a"), ("b", "a"), ("c", "a"), ("d", "b")]
    assert _visited_keys(graph) == {"a", "b", "c", "d"}


def test_breadth_first_scan_whole_graph():
    graph = Graph.unfold(UNDIRECTED)
    visits, process = _recorder()
    breadth_first_scan(graph, process)
    assert visits == [
        ("a", "a"),
        ("b", "a"),
        ("c", "a"),
        ("d", "b"),
        ("e", "e"),
    ]
    assert _visited_keys(graph) == {"a", "b", "c", "d", "e"}


@pytest.mark.parametrize("scan", [depth_first_scan, breadth_first_scan])
def test_scan_from_isolated_vertex_stays_in_component(scan):
    graph = Graph.unfold(UNDIRECTED)
    visits, process = _recorder()
    scan(graph, process, graph.find_vertex("e"))
    assert visits == [("e", "e")]
    assert _visited_keys(graph) == {"e"}


@pytest.mark.parametrize("scan", [depth_first_scan, breadth_first_scan])
def test_scan_visits_every_vertex_once(scan):
    graph = Graph.unfold(UNDIRECTED)
    visits, process = _recorder()
    scan(graph, process)
    assert sorted(v for v, _ in visits) == ["a", "b", "c", "d", "e"]
    assert all(vertex.visited for vertex in graph.vertices())


def test_depth_first_scan_follows_direction():
    graph = Graph.unfold("DIRECTED 3 a b c 2 b a 1 b c 1")
    visits, process = _recorder()
    depth_first_scan(graph, process)
    assert visits == [("a", "a"), ("b", "b"), ("c", "b")]
    assert _visited_keys(graph) == {"a", "b", "c"}


def test_scan_rejects_foreign_start():
    graph = Graph.unfold(UNDIRECTED)
    other = Graph.unfold("UNDIRECTED 1 z 0")
    with pytest.raises(ValueError):
        depth_first_scan(graph, lambda v, u: None, other.find_vertex("z"))


def test_topological_sorting_order():
    graph = Graph.unfold("DIRECTED 4 a b c d 4 a b 1 a c 1 b d 1 c d 1")
    order = [vertex.key() for vertex in topological_sorting(graph)]
    assert order == ["a", "c", "b", "d"]


def test_topological_sorting_respects_every_edge():
    graph = Graph.unfold(
        "DIRECTED 6 shirt tie jacket belt pants shoes "
        "5 shirt tie 1 tie jacket 1 belt jacket 1 pants belt 1 pants shoes 1"
    )
    order = topological_sorting(graph)
    position = {vertex.key(): index for index, vertex in enumerate(order)}
    assert len(order) == 6
    for edge in graph.edges():
        assert position[edge.first.key()] < position[edge.second.key()]


def test_topological_sorting_needs_directed_graph():
    with pytest.raises(ValueError):
        topological_sorting(Graph.unfold(UNDIRECTED))


def test_topological_sorting_detects_cycle():
    graph = Graph.unfold("DIRECTED 3 a b c 3 a b 1 b c 1 c a 1")
    with pytest.raises(ValueError):
        topological_sorting(graph)