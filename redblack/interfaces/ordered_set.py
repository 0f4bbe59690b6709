"""
OrderedSet abstract base class for self-balancing key sets.
"""

from abc import abstractmethod
from typing import Any

from redblack.interfaces.range_iterable import RangeIterable


class OrderedSet(RangeIterable):
    """
    Abstract base class for ordered sets of keys.

    Provides O(log N) insert and membership, plus in-order serialization.
    Inherits range iteration capabilities from RangeIterable.

    Implementations:
    - RedBlackTree
    """

    @abstractmethod
    def insert(self, key: Any) -> None:
        """
        Insert a key. Inserting a key that is already present is a no-op.

        Args:
            key: The key to insert.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, key: Any) -> bool:
        """
        Check if a key is present.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def serialize(self) -> list[Any]:
        """
        Return every key in ascending order.

        Returns:
            A new list of keys produced by an in-order traversal.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def max_height(self) -> int:
        """
        Return the number of nodes on the longest root-to-leaf path.

        Returns:
            0 for an empty set, 1 for a single key.
        """
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of keys.

        Time complexity: O(1)
        """
        pass

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return self.size()
