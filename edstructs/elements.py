"""Vertices and edges of a graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from edstructs.items import key_of


@dataclass(eq=False)
class Vertex:
    """A graph vertex with a unique label, a data item and a visited flag.

    Vertices compare by identity.
    """

    label: int
    item: Any
    visited: bool = False

    def key(self) -> Any:
        """Return the key of the vertex's item."""
        return key_of(self.item)


@dataclass(eq=False)
class Edge:
    """A link between two vertices carrying a data item (usually a weight).

    For a directed graph the edge goes from ``first`` to ``second``.  Edges
    compare by identity.
    """

    first: Vertex
    second: Vertex
    item: Any
    visited: bool = False

    def has(self, vertex: Vertex) -> bool:
        """Return True if ``vertex`` is one of the edge's ends."""
        return vertex is self.first or vertex is self.second

    def other(self, vertex: Vertex) -> Vertex:
        """Return the end that is not ``vertex``; raises ValueError if it is no end."""
        if vertex is self.first:
            return self.second
        if vertex is self.second:
            return self.first
        raise ValueError("the vertex is not an end of this edge")