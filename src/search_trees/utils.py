"""
Utility functions for binary search trees and the workloads that drive them.
"""
import random
from typing import Iterable, Optional

from search_trees.binary_search_tree import BinarySearchTree


def rand_int(lo: int, hi: int, rng: Optional[random.Random] = None) -> int:
    """
    Return a uniformly distributed integer in the inclusive range [lo, hi].

    Parameters:
        lo (int): Smallest value that can be returned.
        hi (int): Largest value that can be returned.
        rng (random.Random): Source of randomness. Defaults to the module-level
            generator of :mod:`random`.

    Returns:
        int: The drawn integer.

    Raises:
        ValueError: If lo > hi.
    """
    if lo > hi:
        raise ValueError(f"rand_int(): empty range [{lo}, {hi}]")
    if rng is None:
        return random.randint(lo, hi)
    return rng.randint(lo, hi)


def create_bst(values: Iterable = (), value_type: Optional[type] = None) -> BinarySearchTree:
    """Build a tree by inserting each value in iteration order."""
    tree = BinarySearchTree(value_type=value_type)
    tree_insert = tree.insert
    for value in values:
        tree_insert(value)
    return tree
