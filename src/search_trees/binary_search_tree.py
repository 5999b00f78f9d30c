"""Unbalanced binary search tree.

All matching is based on ``<`` and ``>``. Duplicates are ignored on insert
and removing a missing value does nothing; both report what happened through
their boolean return value instead of raising.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterator, List, Optional, TextIO

from search_trees.base import AbstractSetDataStructure, T
from search_trees.logging_config import get_logger

logger = get_logger(__name__)

EMPTY_TREE_MARKER = "Empty tree"


class BSTNode:
    """Basic node stored in unbalanced binary search trees."""
    __slots__ = ("value", "left", "right")

    def __init__(
        self,
        value,
        left: Optional[BSTNode] = None,
        right: Optional[BSTNode] = None,
    ):
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BSTNode(value={self.value!r})"


class BinarySearchTree(AbstractSetDataStructure[T]):
    """
    A binary search tree without any balancing.

    Attributes:
        root (Optional[BSTNode]): The root node. If None, the tree is empty.
        value_type (Optional[type]): If set, values passed to insert, remove
            and contains must be instances of this type.
    """
    __slots__ = ("root", "value_type")

    def __init__(self, value_type: Optional[type] = None):
        self.root: Optional[BSTNode] = None
        self.value_type = value_type

    def is_empty(self) -> bool:
        return self.root is None

    def __str__(self):
        if self.is_empty():
            return f"Empty {self.__class__.__name__}"
        return f"{self.__class__.__name__}({list(self.in_order())})"

    __repr__ = __str__

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    # Public API
    def insert(self, x: T) -> bool:
        """
        Public method (average-case O(log n)): Insert x into the tree.
        Duplicates are ignored.

        Args:
            x: The value to insert.
        Returns:
            bool: True if a new node was created, False for a duplicate.

        Raises:
            TypeError: If x is None, or value_type is set and x is not an instance of it.
        """
        self._check_type(x, "insert")
        if self.root is None:
            self.root = BSTNode(x)
            return True

        t = self.root
        while True:
            if x < t.value:
                if t.left is None:
                    t.left = BSTNode(x)
                    return True
                t = t.left
            elif x > t.value:
                if t.right is None:
                    t.right = BSTNode(x)
                    return True
                t = t.right
            else:
                return False  # Duplicate; do nothing

    def remove(self, x: T) -> bool:
        """
        Public method (average-case O(log n)): Remove x from the tree.
        Nothing is done if x is not found.

        A node with at most one child is replaced by that child. A node with
        two children takes over the value of its in-order successor, and the
        successor node (which never has a left child) is unlinked instead.

        Args:
            x: The value to remove.
        Returns:
            bool: True if x was found and removed, False otherwise.

        Raises:
            TypeError: If x is None, or value_type is set and x is not an instance of it.
        """
        self._check_type(x, "remove")
        parent: Optional[BSTNode] = None
        t = self.root
        while t is not None:
            if x < t.value:
                parent, t = t, t.left
            elif x > t.value:
                parent, t = t, t.right
            else:
                break
        else:
            return False  # Item not found; do nothing

        if t.left is not None and t.right is not None:
            succ_parent, succ = t, t.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("remove(%r): two children, splicing successor %r", x, succ.value)
            t.value = succ.value
            parent, t = succ_parent, succ

        child = t.left if t.left is not None else t.right
        self._relink(parent, t, child)
        return True

    def contains(self, x: T) -> bool:
        """Return True if x is present in the tree."""
        self._check_type(x, "contains")
        t = self.root
        while t is not None:
            if x < t.value:
                t = t.left
            elif x > t.value:
                t = t.right
            else:
                return True  # Match
        return False

    def find_min(self) -> Optional[T]:
        """Return the smallest value, or None if the tree is empty."""
        if self.is_empty():
            return None
        return self._find_min(self.root).value

    def find_max(self) -> Optional[T]:
        """Return the largest value, or None if the tree is empty."""
        if self.is_empty():
            return None
        return self._find_max(self.root).value

    def make_empty(self) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("make_empty(): dropping %d nodes", len(self))
        self.root = None

    clear = make_empty

    def in_order(self) -> Iterator[T]:
        """
        Yield the stored values in ascending order.

        The generator is lazy; call in_order() again (or iterate the tree
        again) to restart from the smallest value.
        """
        for node in self.iter_nodes():
            yield node.value

    def iter_nodes(self) -> Iterator[BSTNode]:
        """Yield every node in in-order sequence (left, node, right)."""
        stack: List[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def print_tree(self, file: Optional[TextIO] = None) -> None:
        """
        Print the tree contents in sorted order, one value per line.
        An empty tree prints the single line ``Empty tree``.
        """
        out = sys.stdout if file is None else file
        if self.is_empty():
            print(EMPTY_TREE_MARKER, file=out)
            return
        for value in self.in_order():
            print(value, file=out)

    def height(self) -> int:
        """
        Height of the tree: -1 when empty, otherwise the number of edges on
        the longest root-to-leaf path. Computed level by level.
        """
        height = -1
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [c for n in level for c in (n.left, n.right) if c is not None]
        return height

    # Internal helpers
    def _check_type(self, x, method: str) -> None:
        if x is None:
            raise TypeError(f"{method}(): None is not a valid value")
        if self.value_type is not None and not isinstance(x, self.value_type):
            raise TypeError(
                f"{method}(): expected {self.value_type.__name__}, got {type(x).__name__}"
            )

    def _relink(self, parent: Optional[BSTNode], node: BSTNode, child: Optional[BSTNode]) -> None:
        """Put child into the slot of parent that currently holds node."""
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    @staticmethod
    def _find_min(t: BSTNode) -> BSTNode:
        while t.left is not None:
            t = t.left
        return t

    @staticmethod
    def _find_max(t: BSTNode) -> BSTNode:
        while t.right is not None:
            t = t.right
        return t
