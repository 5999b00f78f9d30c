"""Correctness verification for benchmark data structures."""

import logging
from typing import Iterable

from search_trees.binary_search_tree import BinarySearchTree
from search_trees.invariants import TREE_FLAGS, check_keys_in_order
from search_trees.tree_stats import Stats


def verify_invariants(tree: BinarySearchTree, stats: Stats) -> bool:
    """
    Check all tree invariants.

    This is the verify phase - not timed in benchmarks.

    Args:
        tree: The BinarySearchTree to verify
        stats: Computed statistics for the tree

    Returns:
        True if all invariants pass, False otherwise
    """
    all_passed = True

    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logging.error("Invariant failed: %s is False", flag)
            all_passed = False

    if not tree.is_empty():
        if stats.node_count <= 0:
            logging.error(
                "Invariant failed: node_count=%d ≤ 0 for non-empty tree",
                stats.node_count
            )
            all_passed = False
        if stats.least_item is None:
            logging.error("Invariant failed: least_item is None for non-empty tree")
            all_passed = False
        if stats.greatest_item is None:
            logging.error("Invariant failed: greatest_item is None for non-empty tree")
            all_passed = False
    elif stats.node_count != 0:
        logging.error(
            "Invariant failed: node_count=%d for empty tree",
            stats.node_count
        )
        all_passed = False

    return all_passed


def verify_membership(tree: BinarySearchTree, expected_keys: Iterable[int]) -> bool:
    """
    Check that the tree holds exactly the distinct expected keys.

    This is the verify phase - not timed in benchmarks.
    """
    expected = sorted(set(expected_keys))
    keys, presence_ok, order_ok = check_keys_in_order(tree, expected)
    if not presence_ok:
        logging.error(
            "Membership mismatch: tree has %d keys, expected %d",
            len(keys), len(expected)
        )
    if not order_ok:
        logging.error("In-order traversal is not strictly ascending")
    return presence_ok and order_ok
