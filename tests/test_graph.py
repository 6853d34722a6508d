import pytest

from edstructs.elements import Vertex
from edstructs.graph import Graph, GraphFormatError
from edstructs.items import City


def build(directed):
    graph = Graph(directed)
    a = graph.add_vertex("a")
    b = graph.add_vertex("b")
    c = graph.add_vertex("c")
    graph.add_edge(a, b, 1.5)
    graph.add_edge(b, c, 2.0)
    return graph, a, b, c


def keys_of_edges(edges):
    return [(e.first.key(), e.second.key()) for e in edges]


def test_new_graph_is_empty():
    graph = Graph(True)
    assert graph.is_empty()
    assert graph.is_directed() is True
    assert graph.num_vertices() == 0
    assert graph.num_edges() == 0
    assert not graph.has_current_vertex()
    assert not Graph(False).is_directed()


def test_add_vertex_labels_and_cursor():
    graph = Graph(False)
    a = graph.add_vertex("a")
    b = graph.add_vertex("b")
    assert (a.label, b.label) == (0, 1)
    assert graph.current_vertex() is b
    assert not graph.has_current_edge()
    assert graph.num_vertices() == 2
    assert not graph.is_empty()
    assert graph.vertex(0) is a
    assert graph.vertex(7) is None


def test_directed_adjacency():
    graph, a, b, c = build(True)
    assert graph.is_adjacent(a, b)
    assert not graph.is_adjacent(b, a)
    assert graph.num_edges() == 2


def test_undirected_adjacency_and_count():
    graph, a, b, c = build(False)
    assert graph.is_adjacent(a, b)
    assert graph.is_adjacent(b, a)
    assert not graph.is_adjacent(a, c)
    assert graph.num_edges() == 2
    assert keys_of_edges(graph.edges()) == [("a", "b"), ("b", "c")]


def test_add_edge_moves_cursors():
    graph, a, b, c = build(True)
    assert graph.current_vertex() is b
    assert graph.current_edge().second is c
    assert graph.current_edge().item == 2.0


def test_add_edge_twice_raises():
    graph, a, b, c = build(False)
    with pytest.raises(ValueError):
        graph.add_edge(b, a, 3.0)


def test_vertex_iteration_order():
    graph, a, b, c = build(True)
    graph.goto_first_vertex()
    seen = []
    while graph.has_current_vertex():
        seen.append(graph.current_vertex().item)
        graph.goto_next_vertex()
    assert seen == ["a", "b", "c"]


def test_incident_edges_undirected():
    graph, a, b, c = build(False)
    graph.goto_vertex(b)
    graph.goto_first_edge()
    seen = []
    while graph.has_current_edge():
        seen.append(graph.current_edge().other(b).key())
        graph.goto_next_edge()
    assert seen == ["a", "c"]
    assert keys_of_edges(graph.incident_edges(c)) == [("b", "c")]


def test_edge_lookup_keeps_cursors():
    graph, a, b, c = build(True)
    graph.goto_vertex(a)
    found = graph.edge(b, c)
    assert found.item == 2.0
    assert graph.edge(c, b) is None
    assert graph.current_vertex() is a
    assert graph.current_edge().second is b


def test_goto_edge_between_and_missing():
    graph, a, b, c = build(False)
    graph.goto_edge_between(c, b)
    assert graph.current_vertex() is c
    assert graph.current_edge().item == 2.0
    graph.goto_edge_between(a, c)
    assert graph.current_vertex() is a
    assert not graph.has_current_edge()


def test_goto_edge_ref():
    graph, a, b, c = build(True)
    edge = graph.edge(a, b)
    graph.goto_vertex(c)
    graph.goto_edge_ref(edge)
    assert graph.current_vertex() is a
    assert graph.current_edge() is edge


def test_find_vertex_and_next():
    graph = Graph(True)
    first = graph.add_vertex("x")
    graph.add_vertex("y")
    second = graph.add_vertex("x")
    assert graph.find_vertex("x") is first
    assert graph.current_vertex() is first
    graph.goto_next_vertex()
    assert graph.find_next_vertex("x") is second
    graph.goto_next_vertex()
    assert graph.find_next_vertex("x") is None
    assert not graph.has_current_vertex()


def test_find_vertex_missing():
    graph, a, b, c = build(True)
    assert graph.find_vertex("z") is None
    assert not graph.has_current_vertex()


def test_reset_sets_all_flags():
    graph, a, b, c = build(False)
    graph.reset(True)
    assert all(v.visited for v in graph.vertices())
    assert all(e.visited for e in graph.edges())
    graph.reset(False)
    assert not any(v.visited for v in graph.vertices())
    assert not any(e.visited for e in graph.edges())


def test_remove_vertex_removes_incident_edges():
    graph, a, b, c = build(False)
    graph.goto_vertex(b)
    graph.remove_vertex()
    assert not graph.has(b)
    assert not graph.has_current_vertex()
    assert graph.num_vertices() == 2
    assert graph.num_edges() == 0
    assert graph.incident_edges(a) == []


def test_remove_edge_undirected():
    graph, a, b, c = build(False)
    graph.goto_edge_between(c, b)
    graph.remove_edge()
    assert not graph.has_current_edge()
    assert graph.current_vertex() is c
    assert not graph.is_adjacent(b, c)
    assert not graph.is_adjacent(c, b)
    assert graph.num_edges() == 1


def test_remove_edge_directed():
    graph, a, b, c = build(True)
    graph.goto_edge_between(a, b)
    graph.remove_edge()
    assert not graph.is_adjacent(a, b)
    assert graph.num_edges() == 1


def test_cursor_errors():
    graph = Graph(True)
    with pytest.raises(LookupError):
        graph.current_vertex()
    with pytest.raises(LookupError):
        graph.current_edge()
    with pytest.raises(ValueError):
        graph.goto_first_vertex()
    with pytest.raises(LookupError):
        graph.remove_vertex()
    with pytest.raises(ValueError):
        graph.goto_vertex(Vertex(0, "q"))


def test_fold_directed():
    graph, a, b, c = build(True)
    assert graph.fold() == "DIRECTED\n3\na\nb\nc\n2\na b 1.5\nb c 2"


def test_fold_undirected_writes_both_directions():
    graph = Graph(False)
    a = graph.add_vertex("a")
    b = graph.add_vertex("b")
    graph.add_edge(a, b, 1.0)
    assert graph.fold() == "DIRECTED\n2\na\nb\n2\na b 1\nb a 1"


def test_unfold_round_trip():
    graph, a, b, c = build(True)
    again = Graph.unfold(graph.fold())
    assert again.is_directed()
    assert again.fold() == graph.fold()


def test_unfold_undirected_with_ints():
    text = "UNDIRECTED 3 1 2 3 2 1 2 4.5 2 3 1"
    graph = Graph.unfold(text, lambda stream: int(next(stream)))
    assert not graph.is_directed()
    assert [v.item for v in graph.vertices()] == [1, 2, 3]
    one, two, three = graph.vertices()
    assert graph.edge(two, one).item == 4.5
    assert graph.num_edges() == 2


def test_unfold_leaves_remaining_tokens():
    stream = iter("DIRECTED 2 a b 1 a b 3 a".split())
    graph = Graph.unfold(stream)
    assert graph.num_edges() == 1
    assert list(stream) == ["a"]


def test_unfold_string_weights():
    graph = Graph.unfold("DIRECTED 2 a b 1 a b label")
    assert graph.edges()[0].item == "label"


def test_unfold_cities():
    text = "UNDIRECTED 2 Cordoba 37.88 -4.77 Sevilla 37.39 -5.98 1 Cordoba Sevilla 120"
    graph = Graph.unfold(text, City.parse)
    assert [v.key() for v in graph.vertices()] == ["Cordoba", "Sevilla"]
    assert graph.edges()[0].item == 120.0


@pytest.mark.parametrize(
    "text",
    [
        "SIDEWAYS 1 a 0",
        "DIRECTED 2 a",
        "DIRECTED 2 a b 1 a z 1",
        "DIRECTED x",
        "DIRECTED -1",
        "UNDIRECTED 2 a b 2 a b 1 b a 2",
        "",
    ],
)
def test_unfold_wrong_graph(text):
    with pytest.raises(GraphFormatError, match="Wrong graph"):
        Graph.unfold(text)