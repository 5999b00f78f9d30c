"""Statistics and invariant flags for binary search trees."""

from __future__ import annotations

import collections
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from search_trees.logging_config import get_logger

if TYPE_CHECKING:
    from search_trees.binary_search_tree import BinarySearchTree

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for a binary search tree."""

    node_count: int
    height: int
    leaf_count: int
    least_item: Any | None
    greatest_item: Any | None
    is_search_tree: bool
    keys_in_order: bool
    min_matches: bool
    max_matches: bool


def tree_stats(
    t: BinarySearchTree,
    depth_hist: dict[int, int] | None = None,
) -> Stats:
    """
    Returns aggregated statistics for a binary search tree in **O(n)** time.

    ``is_search_tree`` checks every node against the open interval inherited
    from its ancestors; ``keys_in_order`` checks the in-order sequence
    independently. The caller can supply a dict for ``depth_hist`` to
    receive the number of nodes at each depth.
    """
    if depth_hist is None:
        depth_hist = collections.Counter()

    # ---------- empty tree return ---------------------------------
    if t is None or t.is_empty():
        return Stats(
            node_count=0,
            height=-1,
            leaf_count=0,
            least_item=None,
            greatest_item=None,
            is_search_tree=True,
            keys_in_order=True,
            min_matches=t is None or t.find_min() is None,
            max_matches=t is None or t.find_max() is None,
        )

    node_count = 0
    leaf_count = 0
    height = 0
    is_search_tree = True

    # (node, lower bound, upper bound, depth); None means unbounded
    stack = [(t.root, None, None, 0)]
    while stack:
        node, lo, hi, depth = stack.pop()
        node_count += 1
        depth_hist[depth] = depth_hist.get(depth, 0) + 1
        height = max(height, depth)

        value = node.value
        if (lo is not None and not lo < value) or (hi is not None and not value < hi):
            is_search_tree = False

        if node.is_leaf():
            leaf_count += 1
        if node.right is not None:
            stack.append((node.right, value, hi, depth + 1))
        if node.left is not None:
            stack.append((node.left, lo, value, depth + 1))

    # ---------- in-order sequence --------------------------------
    keys_in_order = True
    least = greatest = None
    for value in t.in_order():
        if least is None:
            least = value
        elif not greatest < value:
            keys_in_order = False
        greatest = value

    stats = Stats(
        node_count=node_count,
        height=height,
        leaf_count=leaf_count,
        least_item=least,
        greatest_item=greatest,
        is_search_tree=is_search_tree,
        keys_in_order=keys_in_order,
        min_matches=t.find_min() == least,
        max_matches=t.find_max() == greatest,
    )
    logger.debug("tree_stats: %s", stats)
    return stats
