"""
Node and Color for the red-black tree.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """
    Node in the Red-Black Tree.

    Each node is owned by exactly one parent (or by the tree's root slot).
    An absent child is None and counts as BLACK.

    Attributes:
        key: The stored key.
        color: RED or BLACK. Nodes created by insertion are RED.
        left: Subtree of keys ordered before this key.
        right: Subtree of keys ordered after this key.
    """

    key: Any
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Node({self.key!r}, {self.color.name})"


def is_red(node: Node | None) -> bool:
    """Return True if node is RED. An absent node is BLACK."""
    return node is not None and node.color == Color.RED


def flip_color(color: Color) -> Color:
    """Return the opposite color."""
    return Color.BLACK if color == Color.RED else Color.RED
