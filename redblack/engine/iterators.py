"""
In-order range iterators over a red-black tree.
"""

from collections.abc import AsyncIterator, Iterator
from typing import Any

from redblack.models.comparison import Comparator
from redblack.models.node import Node


class _InOrderWalk:
    """Explicit-stack in-order walk bounded to [start, end)."""

    def __init__(self, root: Node | None, compare: Comparator, start: Any, end: Any) -> None:
        self._stack: list[Node] = []
        self._compare = compare
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def _advance(self) -> Node | None:
        """Pop the next node in order, or None when the walk is done."""
        if not self._stack:
            return None

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and self._compare(node.key, self._end) >= 0:
            self._stack.clear()
            return None

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return node

    def _push_left_path(self, node: Node | None, start: Any) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node is not None:
            if start is not None and self._compare(node.key, start) < 0:
                # Skip nodes less than start
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class RangeIterator(_InOrderWalk, Iterator[Any]):
    """Iterator for range queries on Red-Black Tree."""

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        node = self._advance()
        if node is None:
            raise StopIteration
        return node.key


class AsyncRangeIterator(_InOrderWalk, AsyncIterator[Any]):
    """Async iterator for range queries on Red-Black Tree (in-memory, no I/O)."""

    def __aiter__(self) -> "AsyncRangeIterator":
        return self

    async def __anext__(self) -> Any:
        node = self._advance()
        if node is None:
            raise StopAsyncIteration
        return node.key
