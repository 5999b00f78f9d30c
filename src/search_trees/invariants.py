"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by both
the benchmark verify phase and the test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from search_trees.logging_config import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from search_trees.binary_search_tree import BinarySearchTree
    from search_trees.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "keys_in_order",
    "min_matches",
    "max_matches",
)


class InvariantError(Exception):
    """Raised when a binary search tree invariant is violated."""


def assert_tree_invariants_raise(
    t: BinarySearchTree,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if t.is_empty():
        if stats.node_count != 0:
            raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≠ 0 for empty tree")
        if stats.height != -1:
            raise InvariantError(f"Invariant failed: height={stats.height} ≠ -1 for empty tree")
        return

    if stats.node_count <= 0:
        raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
    if stats.leaf_count <= 0:
        raise InvariantError(f"Invariant failed: leaf_count={stats.leaf_count} ≤ 0 for non-empty tree")
    if stats.height < 0 or stats.height >= stats.node_count:
        raise InvariantError(
            f"Invariant failed: height={stats.height} outside [0, {stats.node_count - 1}]"
        )
    if stats.least_item is None:
        raise InvariantError("Invariant failed: least_item is None for non-empty tree")
    if stats.greatest_item is None:
        raise InvariantError("Invariant failed: greatest_item is None for non-empty tree")

    height = t.height()
    if height != stats.height:
        raise InvariantError(f"Invariant failed: t.height()={height} ≠ stats.height={stats.height}")


def check_keys_in_order(
    tree: BinarySearchTree,
    expected_keys: list[Any] | None = None,
) -> tuple[list[Any], bool, bool]:
    """Traverse the tree in order and validate its keys.

    Returns
    -------
    (keys, presence_ok, order_ok)
    """
    keys = list(tree.in_order())
    order_ok = all(a < b for a, b in zip(keys, keys[1:]))

    presence_ok = True
    if expected_keys is not None:
        if len(keys) != len(expected_keys):
            presence_ok = False
        else:
            presence_ok = set(keys) == set(expected_keys)

    return keys, presence_ok, order_ok
