"""Minimum spanning trees by Prim's and Kruskal's algorithms."""

from __future__ import annotations

import math
from typing import NamedTuple

from edstructs.disjointsets import DisjointSets
from edstructs.elements import Edge, Vertex
from edstructs.graph import Graph


class DisconnectedGraphError(ValueError):
    """Raised when a spanning tree is asked of an unconnected graph."""


class SpanningTree(NamedTuple):
    """The edges of a minimum spanning tree and their total weight."""

    weight: float
    edges: list[Edge]


def prim_algorithm(graph: Graph) -> SpanningTree:
    """Compute a minimum spanning tree growing from the current vertex.

    The graph must be undirected and have a current vertex.  Raises
    DisconnectedGraphError if not every vertex can be reached.
    """
    if graph.is_directed():
        raise ValueError("Prim's algorithm needs an undirected graph")
    start = graph.current_vertex()
    vertices = graph.vertices()
    in_tree: set[Vertex] = {start}
    cost: dict[Vertex, float] = {vertex: math.inf for vertex in vertices}
    predecessor: dict[Vertex, Vertex] = {}
    cost[start] = 0.0

    total = 0.0
    tree: list[Edge] = []
    latest = start
    for _ in range(len(vertices) - 1):
        for vertex in vertices:
            if vertex in in_tree:
                continue
            edge = graph.edge(latest, vertex)
            if edge is not None and edge.item < cost[vertex]:
                cost[vertex] = edge.item
                predecessor[vertex] = latest

        outside = [vertex for vertex in vertices if vertex not in in_tree]
        latest = min(outside, key=cost.__getitem__)
        if cost[latest] == math.inf:
            raise DisconnectedGraphError("It is an unconnected graph.")

        tree.append(graph.edge(latest, predecessor[latest]))
        in_tree.add(latest)
        total += cost[latest]
    return SpanningTree(total, tree)


def kruskal_algorithm(graph: Graph) -> SpanningTree:
    """Compute a minimum spanning tree of an undirected graph.

    Edges are taken by weight, ties broken by the labels of their first and
    then second ends.  Raises DisconnectedGraphError if the graph is not
    connected.
    """
    vertices = graph.vertices()
    needed = len(vertices) - 1
    if needed < 1:
        return SpanningTree(0.0, [])

    index = {vertex: position for position, vertex in enumerate(vertices)}
    sets = DisjointSets(len(vertices))
    for position in index.values():
        sets.make_set(position)

    ordered = sorted(
        graph.edges(),
        key=lambda edge: (edge.item, edge.first.label, edge.second.label),
    )

    total = 0.0
    tree: list[Edge] = []
    for edge in ordered:
        if len(tree) >= needed:
            break
        u = index[edge.first]
        v = index[edge.second]
        if sets.find(u) != sets.find(v):
            sets.joint(u, v)
            tree.append(edge)
            total += edge.item

    if len(tree) < needed:
        raise DisconnectedGraphError("It is an unconnected graph.")
    return SpanningTree(total, tree)