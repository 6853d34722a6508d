"""Nodes of an AVL tree, each keeping its own height."""

from __future__ import annotations

from typing import Any, Optional

LEFT = 0
RIGHT = 1


def _height_of(node: Optional["AVLNode"]) -> int:
    return -1 if node is None else node.height()


class AVLNode:
    """A binary tree node that knows its height.

    The height of a leaf is 0, and a missing child counts as height -1, so
    the invariant is ``height == 1 + max(left height, right height)``.
    Changing a child through :meth:`set_left`, :meth:`set_right` or
    :meth:`set_child` refreshes this node's height but not its ancestors'.
    """

    __slots__ = ("item", "parent", "_left", "_right", "_height")

    def __init__(
        self,
        item: Any,
        parent: Optional["AVLNode"] = None,
        left: Optional["AVLNode"] = None,
        right: Optional["AVLNode"] = None,
    ) -> None:
        self.item = item
        self.parent = parent
        self._left = left
        self._right = right
        self._height = 0
        self.update_height()

    def __repr__(self) -> str:
        return f"AVLNode({self.item!r}, height={self._height})"

    @property
    def left(self) -> Optional["AVLNode"]:
        """The left child, or None."""
        return self._left

    @property
    def right(self) -> Optional["AVLNode"]:
        """The right child, or None."""
        return self._right

    def height(self) -> int:
        """Return the stored height of this node."""
        return self._height

    def balance_factor(self) -> int:
        """Return the right subtree height minus the left subtree height."""
        return _height_of(self._right) - _height_of(self._left)

    def child(self, direction: int) -> Optional["AVLNode"]:
        """Return the child in ``direction`` (0 for left, 1 for right)."""
        if direction == LEFT:
            return self._left
        if direction == RIGHT:
            return self._right
        raise ValueError(f"direction must be 0 or 1, not {direction!r}")

    def set_child(self, direction: int, node: Optional["AVLNode"]) -> None:
        """Replace the child in ``direction`` (0 for left, 1 for right)."""
        if direction == LEFT:
            self.set_left(node)
        elif direction == RIGHT:
            self.set_right(node)
        else:
            raise ValueError(f"direction must be 0 or 1, not {direction!r}")

    def set_left(self, node: Optional["AVLNode"]) -> None:
        """Replace the left child and refresh this node's height."""
        self._left = node
        self.update_height()

    def set_right(self, node: Optional["AVLNode"]) -> None:
        """Replace the right child and refresh this node's height."""
        self._right = node
        self.update_height()

    def update_height(self) -> None:
        """Recompute this node's height from its children's stored heights."""
        self._height = 1 + max(_height_of(self._left), _height_of(self._right))