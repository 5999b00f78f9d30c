"""
search_trees: An unbalanced binary search tree and its diagnostics.

Quick-start imports::

    from search_trees import BinarySearchTree, create_bst
"""

from search_trees.base import AbstractSetDataStructure
from search_trees.binary_search_tree import (
    EMPTY_TREE_MARKER,
    BinarySearchTree,
    BSTNode,
)
from search_trees.display import print_pretty, print_structure

# Stats & invariants
from search_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_keys_in_order,
)
from search_trees.tree_stats import Stats, tree_stats
from search_trees.utils import create_bst, rand_int

__all__ = [
    "AbstractSetDataStructure",
    "BSTNode",
    "BinarySearchTree",
    "EMPTY_TREE_MARKER",
    # Stats & invariants
    "InvariantError",
    "Stats",
    "assert_tree_invariants_raise",
    "check_keys_in_order",
    "create_bst",
    "print_pretty",
    "print_structure",
    "rand_int",
    "tree_stats",
]
