"""
Shared pytest fixtures for red-black tree tests.
"""

import random

import pytest

from redblack import Color, RedBlackTree
from redblack.models.comparison import natural_order


def _check_subtree(node, compare, low, high) -> int:
    """
    Validate the subtree rooted at node and return its black-height.

    Walks the raw node links only; nothing from the engine's balancing
    code is used.
    """
    if node is None:
        return 1

    assert node.color in (Color.RED, Color.BLACK), f"bad color on {node!r}"
    if low is not None:
        assert compare(low, node.key) < 0, f"{node.key!r} not after {low!r}"
    if high is not None:
        assert compare(node.key, high) < 0, f"{node.key!r} not before {high!r}"

    if node.color == Color.RED:
        for child in (node.left, node.right):
            assert child is None or child.color == Color.BLACK, (
                f"red {node.key!r} has red child {child.key!r}"
            )

    left_bh = _check_subtree(node.left, compare, low, node.key)
    right_bh = _check_subtree(node.right, compare, node.key, high)
    assert left_bh == right_bh, (
        f"black-height mismatch under {node.key!r}: {left_bh} != {right_bh}"
    )
    return left_bh + (1 if node.color == Color.BLACK else 0)


def _count_nodes(node) -> int:
    if node is None:
        return 0
    return 1 + _count_nodes(node.left) + _count_nodes(node.right)


def assert_red_black(tree: RedBlackTree, compare=natural_order) -> int:
    """Assert all red-black invariants hold and return the tree's black-height."""
    root = tree.root
    assert root is None or root.color == Color.BLACK, "root is not black"
    black_height = _check_subtree(root, compare, None, None)
    assert _count_nodes(root) == tree.size()
    return black_height


@pytest.fixture
def check_invariants():
    """Provide the independent red-black invariant checker."""
    return assert_red_black


@pytest.fixture
def tree():
    """Provide a fresh, empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def rng():
    """Provide a seeded random generator so failures are reproducible."""
    return random.Random(1234)


@pytest.fixture
def sample_keys(rng):
    """Provide a shuffled list of distinct keys."""
    keys = list(range(500))
    rng.shuffle(keys)
    return keys
