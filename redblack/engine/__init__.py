"""
Ordered-set engine implementations.
"""

from redblack.engine.tree import RedBlackTree

__all__ = ["RedBlackTree"]
