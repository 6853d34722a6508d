"""A graph stored as vertices with their incident edge lists, with cursors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

from edstructs.elements import Edge, Vertex


class GraphFormatError(ValueError):
    """Raised when a folded graph cannot be read."""


@dataclass
class _Entry:
    vertex: Vertex
    edges: list[Edge] = field(default_factory=list)


def _parse_word(stream: Iterator[str]) -> str:
    return next(stream)


def _parse_weight(token: str) -> Any:
    try:
        return float(token)
    except ValueError:
        return token


def _read_count(stream: Iterator[str]) -> int:
    count = int(next(stream))
    if count < 0:
        raise GraphFormatError("Wrong graph")
    return count


def _format(value: Any) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class Graph:
    """A directed or undirected graph with a vertex cursor and an edge cursor.

    Each vertex keeps the list of edges incident on it.  In an undirected
    graph an edge (u, v) appears in the lists of both u and v.  The vertex
    cursor walks the vertices in insertion order and the edge cursor walks
    the incident list of the current vertex.
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = bool(directed)
        self._entries: list[_Entry] = []
        self._next_label = 0
        self._vertex_pos = 0
        self._edge_pos = 0

    # Folding and unfolding

    @classmethod
    def unfold(
        cls,
        tokens: Iterable[str] | str,
        parse_item: Callable[[Iterator[str]], Any] = _parse_word,
    ) -> "Graph":
        """Read a graph from its folded form.

        The form is ``DIRECTED`` or ``UNDIRECTED``, the number of vertices,
        one item per vertex, the number of edges and, for each edge, the keys
        of its ends followed by its weight.  ``parse_item`` takes the token
        iterator and returns one vertex item; by default an item is a single
        token.  Weights that read as numbers become floats, others stay
        strings.  When ``tokens`` is an iterator only the tokens of the graph
        are taken from it.  Raises GraphFormatError on malformed input.
        """
        stream = iter(tokens.split()) if isinstance(tokens, str) else iter(tokens)
        try:
            return cls._read(stream, parse_item)
        except (StopIteration, ValueError) as error:
            raise GraphFormatError("Wrong graph") from error

    @classmethod
    def _read(
        cls, stream: Iterator[str], parse_item: Callable[[Iterator[str]], Any]
    ) -> "Graph":
        header = next(stream)
        if header == "DIRECTED":
            graph = cls(True)
        elif header == "UNDIRECTED":
            graph = cls(False)
        else:
            raise GraphFormatError("Wrong graph")

        for _ in range(_read_count(stream)):
            graph.add_vertex(parse_item(stream))

        by_key: dict[str, Vertex] = {}
        for vertex in graph.vertices():
            by_key.setdefault(str(vertex.key()), vertex)

        for _ in range(_read_count(stream)):
            u = by_key.get(next(stream))
            v = by_key.get(next(stream))
            weight = _parse_weight(next(stream))
            if u is None or v is None or graph.edge(u, v) is not None:
                raise GraphFormatError("Wrong graph")
            graph.add_edge(u, v, weight)
        return graph

    def fold(self) -> str:
        """Return the folded form of the graph, always written as DIRECTED.

        Every entry of every incident list becomes one directed edge, so an
        undirected edge is written once from each end.
        """
        lines = ["DIRECTED", str(len(self._entries))]
        lines.extend(str(entry.vertex.item) for entry in self._entries)
        arcs = [
            f"{entry.vertex.key()} {edge.other(entry.vertex).key()} "
            f"{_format(edge.item)}"
            for entry in self._entries
            for edge in entry.edges
        ]
        lines.append(str(len(arcs)))
        lines.extend(arcs)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.fold()

    # Observers

    def is_empty(self) -> bool:
        """Return True if the graph has no vertices."""
        return not self._entries

    def is_directed(self) -> bool:
        """Return True if the graph is directed."""
        return self._directed

    def num_vertices(self) -> int:
        """Return the number of vertices."""
        return len(self._entries)

    def num_edges(self) -> int:
        """Return the number of edges, counting an undirected edge once."""
        return len(self.edges())

    def has(self, vertex: Vertex) -> bool:
        """Return True if ``vertex`` belongs to this graph."""
        return any(entry.vertex is vertex for entry in self._entries)

    def is_adjacent(self, u: Vertex, v: Vertex) -> bool:
        """Return True if there is an edge from ``u`` to ``v``."""
        return self.edge(u, v) is not None

    def vertex(self, label: int) -> Optional[Vertex]:
        """Return the vertex with ``label``, or None."""
        return next(
            (entry.vertex for entry in self._entries if entry.vertex.label == label),
            None,
        )

    def vertices(self) -> list[Vertex]:
        """Return the vertices in insertion order."""
        return [entry.vertex for entry in self._entries]

    def edges(self) -> list[Edge]:
        """Return the edges, each undirected edge only once."""
        seen: set[int] = set()
        result: list[Edge] = []
        for entry in self._entries:
            for edge in entry.edges:
                if id(edge) not in seen:
                    seen.add(id(edge))
                    result.append(edge)
        return result

    def edge(self, u: Vertex, v: Vertex) -> Optional[Edge]:
        """Return the edge from ``u`` to ``v``, or None; the cursors do not move."""
        self._position_of(v)
        entry = self._entries[self._position_of(u)]
        return next((e for e in entry.edges if self._leads_to(e, u, v)), None)

    def incident_edges(self, vertex: Vertex) -> list[Edge]:
        """Return the edges incident on ``vertex``, in insertion order."""
        return list(self._entries[self._position_of(vertex)].edges)

    def _position_of(self, vertex: Vertex) -> int:
        for position, entry in enumerate(self._entries):
            if entry.vertex is vertex:
                return position
        raise ValueError("the vertex does not belong to this graph")

    def _leads_to(self, edge: Edge, u: Vertex, v: Vertex) -> bool:
        if self._directed:
            return edge.first is u and edge.second is v
        return edge.has(u) and edge.other(u) is v

    # Editing

    def reset(self, state: bool) -> None:
        """Set the visited flag of every vertex and edge to ``state``."""
        for entry in self._entries:
            entry.vertex.visited = state
            for edge in entry.edges:
                edge.visited = state

    def add_vertex(self, item: Any) -> Vertex:
        """Add a vertex holding ``item``, move the cursor to it and return it."""
        vertex = Vertex(self._next_label, item)
        self._next_label += 1
        self._entries.append(_Entry(vertex))
        self._vertex_pos = len(self._entries) - 1
        self._edge_pos = 0
        return vertex

    def remove_vertex(self) -> None:
        """Remove the current vertex and every edge incident on it.

        Afterwards there is no current vertex.
        """
        if not self.has_current_vertex():
            raise LookupError("there is no current vertex")
        removed = self._entries.pop(self._vertex_pos)
        for entry in self._entries:
            entry.edges = [e for e in entry.edges if not e.has(removed.vertex)]
        self._vertex_pos = len(self._entries)
        self._edge_pos = 0

    def add_edge(self, u: Vertex, v: Vertex, item: Any) -> Edge:
        """Add the edge (u, v) and move the cursors to it.

        Raises ValueError if ``u`` is already adjacent to ``v``.
        """
        if self.is_adjacent(u, v):
            raise ValueError("the vertices are already adjacent")
        edge = Edge(u, v, item)
        u_pos = self._position_of(u)
        self._entries[u_pos].edges.append(edge)
        if not self._directed and v is not u:
            self._entries[self._position_of(v)].edges.append(edge)
        self._vertex_pos = u_pos
        self._edge_pos = len(self._entries[u_pos].edges) - 1
        return edge

    def remove_edge(self) -> None:
        """Remove the current edge; afterwards there is no current edge."""
        if not self.has_current_edge():
            raise LookupError("there is no current edge")
        entry = self._entries[self._vertex_pos]
        edge = entry.edges.pop(self._edge_pos)
        if not self._directed:
            other = edge.other(entry.vertex)
            if other is not entry.vertex:
                other_entry = self._entries[self._position_of(other)]
                other_entry.edges = [e for e in other_entry.edges if e is not edge]
        self._edge_pos = len(entry.edges)

    # Cursors

    def has_current_vertex(self) -> bool:
        """Return True if the vertex cursor is on a vertex."""
        return self._vertex_pos < len(self._entries)

    def current_vertex(self) -> Vertex:
        """Return the vertex under the cursor; raises LookupError if none."""
        if not self.has_current_vertex():
            raise LookupError("there is no current vertex")
        return self._entries[self._vertex_pos].vertex

    def has_current_edge(self) -> bool:
        """Return True if the edge cursor is on an edge."""
        return (
            self.has_current_vertex()
            and self._edge_pos < len(self._entries[self._vertex_pos].edges)
        )

    def current_edge(self) -> Edge:
        """Return the edge under the cursor; raises LookupError if none."""
        if not self.has_current_edge():
            raise LookupError("there is no current edge")
        return self._entries[self._vertex_pos].edges[self._edge_pos]

    def goto_first_vertex(self) -> None:
        """Move the cursors to the first vertex and its first edge."""
        if self.is_empty():
            raise ValueError("the graph is empty")
        self._vertex_pos = 0
        self._edge_pos = 0

    def goto_first_edge(self) -> None:
        """Move the edge cursor to the first edge of the current vertex."""
        if not self.has_current_vertex():
            raise LookupError("there is no current vertex")
        self._edge_pos = 0

    def goto_next_vertex(self) -> None:
        """Move the cursors to the next vertex and its first edge."""
        if not self.has_current_vertex():
            raise LookupError("there is no current vertex")
        self._vertex_pos += 1
        self._edge_pos = 0

    def goto_next_edge(self) -> None:
        """Move the edge cursor to the next edge of the current vertex."""
        if not self.has_current_edge():
            raise LookupError("there is no current edge")
        self._edge_pos += 1

    def goto_vertex(self, vertex: Vertex) -> None:
        """Move the cursors to ``vertex`` and its first edge."""
        self._vertex_pos = self._position_of(vertex)
        self._edge_pos = 0

    def goto_edge(self, v: Vertex) -> None:
        """Move the edge cursor to the edge from the current vertex to ``v``.

        If there is no such edge the edge cursor is left off the list.
        """
        if not self.has_current_vertex():
            raise LookupError("there is no current vertex")
        self._position_of(v)
        entry = self._entries[self._vertex_pos]
        self._edge_pos = next(
            (
                position
                for position, edge in enumerate(entry.edges)
                if self._leads_to(edge, entry.vertex, v)
            ),
            len(entry.edges),
        )

    def goto_edge_between(self, u: Vertex, v: Vertex) -> None:
        """Move the vertex cursor to ``u`` and the edge cursor to (u, v)."""
        self.goto_vertex(u)
        self.goto_edge(v)

    def goto_edge_ref(self, edge: Edge) -> None:
        """Move the cursors to ``edge`` seen from its first end."""
        self.goto_edge_between(edge.first, edge.second)

    def find_vertex(self, key: Any) -> Optional[Vertex]:
        """Move the cursor to the first vertex with ``key`` and return it.

        Returns None, with no current vertex, if there is none.
        """
        self.goto_first_vertex()
        return self.find_next_vertex(key)

    def find_next_vertex(self, key: Any) -> Optional[Vertex]:
        """Move the cursor from the current vertex on to one with ``key``.

        The current vertex itself is checked first.  Returns None, with no
        current vertex, if there is none.
        """
        if self.is_empty():
            raise ValueError("the graph is empty")
        while self.has_current_vertex():
            vertex = self.current_vertex()
            if vertex.key() == key:
                return vertex
            self.goto_next_vertex()
        return None