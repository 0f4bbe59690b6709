"""
Red-Black Tree implementation of an ordered key set.

Insertion repairs the tree bottom-up on the way back out of the recursive
descent, so every node on the path from the new leaf to the root is fixed
in a single pass with no parent pointers.
"""

from collections.abc import AsyncIterator, Iterable, Iterator
from typing import Any

from redblack.engine.iterators import AsyncRangeIterator, RangeIterator
from redblack.interfaces.ordered_set import OrderedSet
from redblack.models.comparison import Comparator, natural_order
from redblack.models.node import Color, Node, flip_color, is_red


class RedBlackTree(OrderedSet):
    """
    Red-Black Tree implementation of OrderedSet.

    Properties maintained after every insert:
    1. Every node is either red or black
    2. Root (and every absent child) is black
    3. Red nodes cannot have red children
    4. Every path from a node to an absent child has the same number of black nodes
    5. Keys are strictly ordered by the comparator, smaller keys to the left

    Not safe for concurrent mutation; guard the whole tree with one lock if
    it is shared between threads.
    """

    def __init__(
        self, keys: Iterable[Any] | None = None, compare: Comparator = natural_order
    ) -> None:
        """
        Initialize the tree.

        Args:
            keys: Optional keys to insert, in order.
            compare: Three-way comparator defining the key order.
        """
        if not callable(compare):
            raise TypeError(f"compare must be callable, got {compare!r}")

        self._root: Node | None = None
        self._size: int = 0
        self._compare = compare

        if keys is not None:
            for key in keys:
                self.insert(key)

    @property
    def root(self) -> Node | None:
        return self._root

    def insert(self, key: Any) -> None:
        """Insert a key. Re-inserting an existing key changes nothing. O(log N)"""
        self._root = self._insert(self._root, key)
        self._root.color = Color.BLACK

    def contains(self, key: Any) -> bool:
        """Check membership. O(log N)"""
        current = self._root
        while current is not None:
            cmp = self._compare(key, current.key)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                return True
        return False

    def serialize(self) -> list[Any]:
        return list(self)

    def max_height(self) -> int:
        return self._height(self._root)

    def black_height(self) -> int:
        """Count BLACK nodes on the leftmost root-to-leaf path."""
        count = 0
        current = self._root
        while current is not None:
            if current.color == Color.BLACK:
                count += 1
            current = current.left
        return count

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        return RangeIterator(self._root, self._compare, start, end)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    def async_iterator(self, start: Any = None, end: Any = None) -> AsyncIterator[Any]:
        return AsyncRangeIterator(self._root, self._compare, start, end)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"

    def _insert(self, r: Node | None, key: Any) -> Node:
        """
        Insert key below r and return the repaired subtree top.

        The caller must store the returned node in the slot r came from,
        since rotations can promote a different node to the top.
        """
        if r is None:
            self._size += 1
            return Node(key, Color.RED)

        cmp = self._compare(key, r.key)
        if cmp < 0:
            r.left = self._insert(r.left, key)
        elif cmp > 0:
            r.right = self._insert(r.right, key)
        else:
            return r

        # Each check runs on the current top, so one level can be
        # rotated more than once before the color flip.
        if is_red(r.right) and not is_red(r.left):
            r = self._lean_left(r)
        if is_red(r.left) and not is_red(r.right):
            r = self._lean_right(r)
        if is_red(r.left) and is_red(r.left.left):
            r = self._lean_right(r)
        if is_red(r.right) and is_red(r.right.right):
            r = self._lean_left(r)
        if is_red(r.left) and is_red(r.right):
            self._flip_colors(r)

        return r

    def _lean_left(self, h: Node) -> Node:
        """Hand h's color to its right child, make h red, and rotate left."""
        h.right.color = h.color
        h.color = Color.RED
        return self._rotate_left(h)

    def _lean_right(self, h: Node) -> Node:
        """Hand h's color to its left child, make h red, and rotate right."""
        h.left.color = h.color
        h.color = Color.RED
        return self._rotate_right(h)

    @staticmethod
    def _rotate_left(h: Node) -> Node:
        """Left rotation. Returns the new subtree top; colors are untouched."""
        top = h.right
        h.right = top.left
        top.left = h
        return top

    @staticmethod
    def _rotate_right(h: Node) -> Node:
        """Right rotation. Returns the new subtree top; colors are untouched."""
        top = h.left
        h.left = top.right
        top.right = h
        return top

    @staticmethod
    def _flip_colors(h: Node) -> None:
        h.color = flip_color(h.color)
        h.left.color = flip_color(h.left.color)
        h.right.color = flip_color(h.right.color)

    def _height(self, node: Node | None) -> int:
        if node is None:
            return 0
        return 1 + max(self._height(node.left), self._height(node.right))
