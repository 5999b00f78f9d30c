"""Tests for tree_stats and the shared invariant checks."""

import unittest

from search_trees.binary_search_tree import BinarySearchTree, BSTNode
from search_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_keys_in_order,
)
from search_trees.tree_stats import tree_stats
from search_trees.utils import create_bst


class TestTreeStats(unittest.TestCase):

    def test_empty_tree(self):
        stats = tree_stats(BinarySearchTree())
        self.assertEqual(stats.node_count, 0)
        self.assertEqual(stats.height, -1)
        self.assertEqual(stats.leaf_count, 0)
        self.assertIsNone(stats.least_item)
        self.assertIsNone(stats.greatest_item)
        self.assertTrue(stats.is_search_tree)
        self.assertTrue(stats.min_matches)
        self.assertTrue(stats.max_matches)

    def test_none_tree(self):
        stats = tree_stats(None)
        self.assertEqual(stats.node_count, 0)

    def test_balanced_tree(self):
        tree = create_bst([5, 3, 8, 1, 4, 7, 9])
        depth_hist = {}
        stats = tree_stats(tree, depth_hist)
        self.assertEqual(stats.node_count, 7)
        self.assertEqual(stats.height, 2)
        self.assertEqual(stats.leaf_count, 4)
        self.assertEqual(stats.least_item, 1)
        self.assertEqual(stats.greatest_item, 9)
        self.assertTrue(stats.is_search_tree)
        self.assertTrue(stats.keys_in_order)
        self.assertEqual(depth_hist, {0: 1, 1: 2, 2: 4})

    def test_degenerate_chain(self):
        tree = create_bst(range(1, 6))
        stats = tree_stats(tree)
        self.assertEqual(stats.height, 4)
        self.assertEqual(stats.leaf_count, 1)

    def test_detects_local_order_violation(self):
        tree = create_bst([5, 3, 8])
        tree.root.left.value = 6
        stats = tree_stats(tree)
        self.assertFalse(stats.is_search_tree)
        self.assertFalse(stats.keys_in_order)

    def test_detects_violation_against_ancestor(self):
        # 6 sits below 3 on the right, which is locally fine but exceeds 5
        tree = create_bst([5, 3, 8])
        tree.root.left.right = BSTNode(6)
        stats = tree_stats(tree)
        self.assertFalse(stats.is_search_tree)

    def test_detects_duplicate_node(self):
        tree = create_bst([5, 3])
        tree.root.right = BSTNode(5)
        stats = tree_stats(tree)
        self.assertFalse(stats.is_search_tree)
        self.assertFalse(stats.keys_in_order)


class TestInvariants(unittest.TestCase):

    def test_valid_tree_passes(self):
        tree = create_bst([5, 3, 8, 1, 4, 7, 9])
        assert_tree_invariants_raise(tree, tree_stats(tree))

    def test_empty_tree_passes(self):
        tree = BinarySearchTree()
        assert_tree_invariants_raise(tree, tree_stats(tree))

    def test_broken_tree_raises(self):
        tree = create_bst([5, 3, 8])
        tree.root.right.value = 1
        with self.assertRaises(InvariantError) as cm:
            assert_tree_invariants_raise(tree, tree_stats(tree))
        self.assertIn("is_search_tree", str(cm.exception))

    def test_stale_stats_raise(self):
        tree = create_bst([5, 3, 8])
        stats = tree_stats(tree)
        tree.insert(9)
        tree.insert(10)
        with self.assertRaises(InvariantError):
            assert_tree_invariants_raise(tree, stats)

    def test_check_keys_in_order(self):
        tree = create_bst([2, 1, 3])
        keys, presence_ok, order_ok = check_keys_in_order(tree, [3, 2, 1])
        self.assertEqual(keys, [1, 2, 3])
        self.assertTrue(presence_ok)
        self.assertTrue(order_ok)

        _, presence_ok, _ = check_keys_in_order(tree, [1, 2])
        self.assertFalse(presence_ok)
        _, presence_ok, _ = check_keys_in_order(tree, [1, 2, 4])
        self.assertFalse(presence_ok)


if __name__ == "__main__":
    unittest.main()
