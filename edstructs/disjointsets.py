"""Disjoint sets (union-find) with union by rank and path compression."""

from __future__ import annotations

from typing import Optional


class DisjointSets:
    """A partition of the integers ``0 .. capacity-1`` into disjoint sets.

    An element belongs to no set until :meth:`make_set` is called for it.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 1:
            raise ValueError("the capacity must be greater than one")
        self._parent: list[Optional[int]] = [None] * capacity
        self._rank: list[int] = [0] * capacity

    def __repr__(self) -> str:
        return f"DisjointSets({self.capacity()})"

    def capacity(self) -> int:
        """Return the number of elements handled."""
        return len(self._parent)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} is out of range")

    def is_set(self, i: int) -> bool:
        """Return True if element ``i`` belongs to a set."""
        self._check(i)
        return self._parent[i] is not None

    def find(self, i: int) -> Optional[int]:
        """Return the representative of the set holding ``i``, or None."""
        self._check(i)
        if self._parent[i] is None:
            return None
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while i != root:
            following = self._parent[i]
            self._parent[i] = root
            i = following
        return root

    def make_set(self, i: int) -> None:
        """Put element ``i`` in a set of its own."""
        self._check(i)
        self._parent[i] = i
        self._rank[i] = 0

    def joint(self, i: int, j: int) -> None:
        """Merge the sets holding ``i`` and ``j``.

        Raises ValueError if either element belongs to no set.
        """
        self._check(i)
        self._check(j)
        if not (self.is_set(i) and self.is_set(j)):
            raise ValueError("both elements must belong to a set")
        if i > j:
            i, j = j, i
        i_root = self.find(i)
        j_root = self.find(j)
        if i_root == j_root:
            return
        if self._rank[i_root] > self._rank[j_root]:
            self._parent[j_root] = i_root
        else:
            self._parent[i_root] = j_root
            if self._rank[i_root] == self._rank[j_root]:
                self._rank[j_root] += 1