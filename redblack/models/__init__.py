"""
Data models for the red-black tree engine.
"""

from redblack.models.comparison import Comparator, natural_order, reverse_order
from redblack.models.node import Color, Node, flip_color, is_red

__all__ = [
    "Color",
    "Node",
    "flip_color",
    "is_red",
    "Comparator",
    "natural_order",
    "reverse_order",
]
