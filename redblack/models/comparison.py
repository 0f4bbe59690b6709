"""
Comparison contract used to order keys.

A comparator takes two keys and returns a negative number when the first
orders before the second, zero when they are equal and a positive number
when it orders after.
"""

from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Order keys by their own < and > operators."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def reverse_order(a: Any, b: Any) -> int:
    """Order keys descending."""
    return natural_order(b, a)
