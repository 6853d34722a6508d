"""Depth first and breadth first scans and topological sorting of graphs."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterator, Optional

from edstructs.elements import Edge, Vertex
from edstructs.graph import Graph

Processor = Callable[[Vertex, Vertex], None]


def _depth_first(graph: Graph, start: Vertex, process: Processor) -> None:
    start.visited = True
    process(start, start)
    stack: list[tuple[Vertex, Iterator[Edge]]] = [
        (start, iter(graph.incident_edges(start)))
    ]
    while stack:
        vertex, edges = stack[-1]
        for edge in edges:
            neighbour = edge.other(vertex)
            if not neighbour.visited:
                neighbour.visited = True
                process(neighbour, vertex)
                stack.append((neighbour, iter(graph.incident_edges(neighbour))))
                break
        else:
            stack.pop()


def _breadth_first(graph: Graph, start: Vertex, process: Processor) -> None:
    queue: deque[tuple[Vertex, Vertex]] = deque([(start, start)])
    while queue:
        vertex, origin = queue.popleft()
        if vertex.visited:
            continue
        process(vertex, origin)
        vertex.visited = True
        for edge in graph.incident_edges(vertex):
            neighbour = edge.other(vertex)
            if not neighbour.visited:
                queue.append((neighbour, vertex))


def _scan(
    graph: Graph,
    process: Processor,
    start: Optional[Vertex],
    walk: Callable[[Graph, Vertex, Processor], None],
) -> None:
    graph.reset(False)
    if start is not None:
        if not graph.has(start):
            raise ValueError("the start vertex does not belong to the graph")
        walk(graph, start, process)
        return
    for vertex in graph.vertices():
        if not vertex.visited:
            walk(graph, vertex, process)


def depth_first_scan(
    graph: Graph, process: Processor, start: Optional[Vertex] = None
) -> None:
    """Scan the graph depth first, calling ``process(v, u)`` for each vertex.

    ``v`` is the vertex reached and ``u`` the one it was reached from; the
    first vertex of each scanned tree is reported as ``process(v, v)``.
    With ``start`` only its connected component is scanned; otherwise every
    vertex is, in insertion order.
    """
    _scan(graph, process, start, _depth_first)


def breadth_first_scan(
    graph: Graph, process: Processor, start: Optional[Vertex] = None
) -> None:
    """Scan the graph breadth first, calling ``process(v, u)`` for each vertex.

    The arguments have the same meaning as for :func:`depth_first_scan`.
    """
    _scan(graph, process, start, _breadth_first)


def topological_sorting(graph: Graph) -> list[Vertex]:
    """Return the vertices of a directed acyclic graph in topological order.

    Raises ValueError if the graph is undirected or has a cycle.
    """
    if not graph.is_directed():
        raise ValueError("topological sorting needs a directed graph")
    graph.reset(False)
    finished: list[Vertex] = []
    on_path: set[Vertex] = set()
    for root in graph.vertices():
        if root.visited:
            continue
        on_path.add(root)
        stack: list[tuple[Vertex, Iterator[Edge]]] = [
            (root, iter(graph.incident_edges(root)))
        ]
        while stack:
            vertex, edges = stack[-1]
            for edge in edges:
                neighbour = edge.other(vertex)
                if neighbour in on_path:
                    raise ValueError("the graph has a cycle")
                if not neighbour.visited:
                    on_path.add(neighbour)
                    stack.append(
                        (neighbour, iter(graph.incident_edges(neighbour)))
                    )
                    break
            else:
                stack.pop()
                on_path.discard(vertex)
                vertex.visited = True
                finished.append(vertex)
    finished.reverse()
    return finished