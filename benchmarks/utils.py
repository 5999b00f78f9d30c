"""Utilities for benchmark workload generation and tree creation."""

import random
from dataclasses import dataclass
from typing import List, Tuple

from search_trees.binary_search_tree import BinarySearchTree
from search_trees.utils import rand_int


@dataclass
class Workload:
    """Keys for the three phases of one benchmark repetition."""
    insert_keys: List[int]
    search_keys: List[int]
    delete_keys: List[int]


def draw_keys(n: int, key_range: Tuple[int, int], rng: random.Random) -> List[int]:
    """Draw n keys uniformly from the inclusive key range, duplicates allowed."""
    lo, hi = key_range
    return [rand_int(lo, hi, rng) for _ in range(n)]


def generate_workload(n: int, key_range: Tuple[int, int], seed: int) -> Workload:
    """
    Generate deterministic random keys for one repetition.

    This is the setup phase - not timed in benchmarks.

    Args:
        n: Number of operations per phase
        key_range: Inclusive (min, max) of the drawn keys
        seed: Random seed for reproducibility

    Returns:
        Workload with independent key lists for insert, search and delete
    """
    rng = random.Random(seed)
    return Workload(
        insert_keys=draw_keys(n, key_range, rng),
        search_keys=draw_keys(n, key_range, rng),
        delete_keys=draw_keys(n, key_range, rng),
    )


def create_tree(keys: List[int]) -> BinarySearchTree:
    """
    Build a BinarySearchTree from a list of keys.

    This is the setup phase - not timed in benchmarks.
    """
    tree = BinarySearchTree()
    tree_insert = tree.insert
    for key in keys:
        tree_insert(key)
    return tree
