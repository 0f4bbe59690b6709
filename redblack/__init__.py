"""
Red-black tree ordered key set.

This package provides a self-balancing binary search tree with:
- insert(key) - O(log N), duplicate keys are ignored
- contains(key) - O(log N) membership query
- serialize() - keys in ascending order
- max_height() - longest root-to-leaf path, bounded by 2*log2(N+1)
- iterator(start, end) / async_iterator(start, end) - range scans
"""

from redblack.engine import RedBlackTree
from redblack.models import Color, Node, natural_order, reverse_order

__all__ = ["RedBlackTree", "Color", "Node", "natural_order", "reverse_order"]
