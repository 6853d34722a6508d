"""A self-balancing binary search tree with a search cursor."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from edstructs.avl_node import LEFT, RIGHT, AVLNode

_NO_ITEM = object()


class TreeFormatError(ValueError):
    """Raised when a folded tree cannot be unfolded into a valid AVL tree."""


def _parse_item(token: Optional[str]) -> int:
    if token is None:
        raise TreeFormatError("Wrong input format.")
    try:
        return int(token)
    except ValueError:
        raise TreeFormatError("Wrong input format.") from None


def _inorder(node: Optional[AVLNode]) -> Iterator[AVLNode]:
    stack: list[AVLNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _is_balanced(node: Optional[AVLNode]) -> bool:
    if node is None:
        return True
    return (
        abs(node.balance_factor()) <= 1
        and _is_balanced(node.left)
        and _is_balanced(node.right)
    )


class AVLTree:
    """An AVL tree of ordered keys.

    Besides the usual queries the tree keeps a cursor: :meth:`search` moves
    it to the key found, :meth:`insert` leaves it on the inserted key and
    :meth:`remove` deletes the key under it.  Subtrees returned by
    :meth:`left` and :meth:`right` share nodes with the tree they come from.
    """

    def __init__(self, item: Any = _NO_ITEM) -> None:
        self._root: Optional[AVLNode] = None
        self._parent: Optional[AVLNode] = None
        self._current: Optional[AVLNode] = None
        if item is not _NO_ITEM:
            self._root = AVLNode(item)

    @classmethod
    def _from_node(cls, node: Optional[AVLNode]) -> "AVLTree":
        tree = cls()
        tree._root = node
        return tree

    # Folding and unfolding

    @classmethod
    def unfold(cls, text: str) -> "AVLTree":
        """Build a tree of integers from its folded form.

        The empty tree is ``[]`` and a non-empty one is
        ``[ <item> <left> <right> ]``, tokens separated by white space.
        Raises TreeFormatError if the text is malformed, is not a binary
        search tree or is not balanced.
        """
        tokens = iter(text.split())
        tree = cls._unfold_tokens(tokens)
        if next(tokens, None) is not None:
            raise TreeFormatError("Wrong input format.")
        return tree

    @classmethod
    def _unfold_tokens(cls, tokens: Iterator[str]) -> "AVLTree":
        tree = cls()
        token = next(tokens, None)
        if token == "[":
            tree.create_root(_parse_item(next(tokens, None)))
            left = cls._unfold_tokens(tokens)
            right = cls._unfold_tokens(tokens)
            tree._attach(LEFT, left)
            tree._attach(RIGHT, right)
            if next(tokens, None) != "]":
                raise TreeFormatError("Wrong input format.")
        elif token != "[]":
            raise TreeFormatError("Wrong input format.")
        if not tree._is_a_binary_search_tree():
            raise TreeFormatError("It is not a binary search tree")
        if not _is_balanced(tree._root):
            raise TreeFormatError("It is not an avl tree")
        return tree

    def _attach(self, direction: int, subtree: "AVLTree") -> None:
        assert self._root is not None
        self._root.set_child(direction, subtree._root)
        if subtree._root is not None:
            subtree._root.parent = self._root

    def fold(self) -> str:
        """Return the folded form of the tree, as read by :meth:`unfold`."""
        return self._fold_node(self._root)

    @classmethod
    def _fold_node(cls, node: Optional[AVLNode]) -> str:
        if node is None:
            return "[]"
        return (
            f"[ {node.item} {cls._fold_node(node.left)} "
            f"{cls._fold_node(node.right)} ]"
        )

    def __str__(self) -> str:
        return self.fold()

    def __repr__(self) -> str:
        return f"AVLTree.unfold({self.fold()!r})"

    # Observers

    def is_empty(self) -> bool:
        """Return True if the tree has no keys."""
        return self._root is None

    def item(self) -> Any:
        """Return the key at the root; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("the tree is empty")
        return self._root.item

    def current_exists(self) -> bool:
        """Return True if the cursor is on a key."""
        return self._current is not None

    def current(self) -> Any:
        """Return the key under the cursor; raises LookupError if there is none."""
        if self._current is None:
            raise LookupError("there is no current item")
        return self._current.item

    def current_level(self) -> int:
        """Return the depth of the cursor's node; the root is at level 0."""
        if self._current is None:
            raise LookupError("there is no current item")
        level = 0
        node = self._current.parent
        while node is not None:
            level += 1
            node = node.parent
        return level

    def left(self) -> "AVLTree":
        """Return the left subtree; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("the tree is empty")
        return self._from_node(self._root.left)

    def right(self) -> "AVLTree":
        """Return the right subtree; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("the tree is empty")
        return self._from_node(self._root.right)

    def size(self) -> int:
        """Return the number of keys in the tree."""
        return sum(1 for _ in _inorder(self._root))

    def __len__(self) -> int:
        return self.size()

    def height(self) -> int:
        """Return the height of the root node, or 0 for an empty tree."""
        return 0 if self._root is None else self._root.height()

    def balance_factor(self) -> int:
        """Return the root's right height minus its left height (0 if empty)."""
        return 0 if self._root is None else self._root.balance_factor()

    def has(self, key: Any) -> bool:
        """Return True if ``key`` is in the tree, leaving the cursor alone."""
        node = self._root
        while node is not None:
            if key == node.item:
                return True
            node = node.left if key < node.item else node.right
        return False

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        return (node.item for node in _inorder(self._root))

    def _is_a_binary_search_tree(self) -> bool:
        previous = _NO_ITEM
        for node in _inorder(self._root):
            if previous is not _NO_ITEM and not previous < node.item:
                return False
            previous = node.item
        return True

    # Modifiers

    def create_root(self, item: Any) -> None:
        """Make ``item`` the root of an empty tree; raises ValueError otherwise."""
        if self._root is not None:
            raise ValueError("the tree is not empty")
        self._root = AVLNode(item)

    def search(self, key: Any) -> bool:
        """Move the cursor to ``key``; return whether it was found.

        If the key is missing the cursor is left off the tree.
        """
        self._current = self._root
        self._parent = None
        while self._current is not None:
            if key == self._current.item:
                return True
            self._parent = self._current
            if key < self._current.item:
                self._current = self._current.left
            else:
                self._current = self._current.right
        return False

    def insert(self, key: Any) -> None:
        """Insert ``key`` and leave the cursor on it; an existing key is kept."""
        if self.search(key):
            return
        if self._parent is None:
            self.create_root(key)
            self._current = self._root
        else:
            self._current = AVLNode(key, self._parent)
            if key < self._parent.item:
                self._parent.set_left(self._current)
            else:
                self._parent.set_right(self._current)
        self._make_balanced()

    def remove(self) -> None:
        """Remove the key under the cursor; raises LookupError if there is none."""
        if self._current is None:
            raise LookupError("there is no current item")
        node = self._current
        if node.left is not None and node.right is not None:
            self._find_inorder_successor()
            node.item = self._current.item
            node = self._current
        subtree = node.left if node.left is not None else node.right
        if self._parent is None:
            self._root = subtree
        elif node is self._parent.left:
            self._parent.set_left(subtree)
        else:
            self._parent.set_right(subtree)
        if subtree is not None:
            subtree.parent = self._parent
        self._make_balanced()
        self._current = None
        self._parent = None

    def _find_inorder_successor(self) -> None:
        assert self._current is not None and self._current.right is not None
        self._parent = self._current
        self._current = self._current.right
        while self._current.left is not None:
            self._parent = self._current
            self._current = self._current.left

    def _rotate(self, pivot: AVLNode, direction: int) -> AVLNode:
        """Rotate the subtree at ``pivot`` (0 left, 1 right) and return its new root."""
        promoted = pivot.child(1 - direction)
        assert promoted is not None
        above = pivot.parent
        moved = promoted.child(direction)

        pivot.set_child(1 - direction, moved)
        promoted.set_child(direction, pivot)
        pivot.parent = promoted
        if moved is not None:
            moved.parent = pivot

        if above is None:
            self._root = promoted
        elif above.left is pivot:
            above.set_left(promoted)
        else:
            above.set_right(promoted)
        promoted.parent = above
        return promoted

    def _make_balanced(self) -> None:
        node = self._parent
        while node is not None:
            node.update_height()
            factor = node.balance_factor()
            if abs(factor) > 1:
                direction = RIGHT if factor > 0 else LEFT
                heavy = node.child(direction)
                assert heavy is not None
                if heavy.balance_factor() * factor < 0:
                    self._rotate(heavy, direction)
                node = self._rotate(node, 1 - direction)
            node = node.parent
        if self._current is not None:
            self._parent = self._current.parent