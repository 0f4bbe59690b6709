"""
Abstract base classes for the ordered-set engines.
"""

from redblack.interfaces.ordered_set import OrderedSet
from redblack.interfaces.range_iterable import RangeIterable

__all__ = ["OrderedSet", "RangeIterable"]
