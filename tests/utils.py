"""Utility functions for testing BinarySearchTree invariants."""

from typing import Optional

from search_trees.binary_search_tree import BinarySearchTree
from search_trees.invariants import TREE_FLAGS
from search_trees.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: BinarySearchTree, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    if t.is_empty():
        tc.assertEqual(stats.node_count, 0, f"Empty tree reports nodes\n\n{err_msg}")
        tc.assertEqual(stats.height, -1, f"Empty tree height must be -1\n\n{err_msg}")
        tc.assertIsNone(t.find_min(), f"find_min() on empty tree must be None\n\n{err_msg}")
        tc.assertIsNone(t.find_max(), f"find_max() on empty tree must be None\n\n{err_msg}")
        return

    tc.assertGreater(
        stats.node_count, 0,
        f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
    )
    tc.assertGreater(
        stats.leaf_count, 0,
        f"Invariant failed: leaf_count={stats.leaf_count} ≤ 0 for non-empty tree\n\n{err_msg}"
    )
    tc.assertIsNotNone(
        stats.least_item,
        f"Invariant failed: least_item is None for non-empty tree\n\n{err_msg}"
    )
    tc.assertIsNotNone(
        stats.greatest_item,
        f"Invariant failed: greatest_item is None for non-empty tree\n\n{err_msg}"
    )
    tc.assertEqual(
        t.height(), stats.height,
        f"Invariant failed: height()={t.height()} ≠ stats.height={stats.height}\n\n{err_msg}"
    )
    tc.assertEqual(
        len(t), stats.node_count,
        f"Invariant failed: len()={len(t)} ≠ node_count={stats.node_count}\n\n{err_msg}"
    )
