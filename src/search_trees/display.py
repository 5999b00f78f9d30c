"""Pretty-printing and display utilities for binary search trees."""

from __future__ import annotations

import collections
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from search_trees.binary_search_tree import BinarySearchTree


# ANSI colour codes
PRIMARY = '\033[32m'    # green
SECONDARY = '\033[33m'  # yellow
RESET = '\033[0m'


def print_pretty(tree: Optional[BinarySearchTree], color: bool = True) -> str:
    """
    Prints a binary search tree so:
      • Lines go from the root (depth 0) down to the deepest level.
      • Every value sits in its own column, given by its in-order position,
        so a left child is always printed left of its parent.
      • All columns have the same width.
    The root is highlighted in PRIMARY and leaves in SECONDARY when
    ``color`` is set.
    """
    from search_trees.binary_search_tree import BinarySearchTree

    if tree is None:
        return f"{type(tree).__name__}: None"

    if not isinstance(tree, BinarySearchTree):
        raise TypeError(f"print_pretty() expects BinarySearchTree, got {type(tree).__name__}")

    tree_type = type(tree).__name__
    if tree.is_empty():
        return f"{tree_type}: Empty"

    # 1) First pass: column and depth of each node, widest text
    depths = {}
    stack = [(tree.root, 0)]
    while stack:
        node, depth = stack.pop()
        depths[id(node)] = depth
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))

    layers_raw = collections.defaultdict(list)  # depth -> [(column, text, node)]
    max_len = 0
    for column, node in enumerate(tree.iter_nodes()):
        text = str(node.value)
        max_len = max(max_len, len(text))
        layers_raw[depths[id(node)]].append((column, text, node))

    # 2) Fixed column width: widest text + 1 space padding on each side
    column_width = max_len + 2

    # 3) Lay out each depth
    out_lines = []
    for depth in sorted(layers_raw):
        line = ""
        cursor = 0
        for column, text, node in layers_raw[depth]:
            line += " " * ((column - cursor) * column_width)
            cell = text.center(column_width)
            if color and node is tree.root:
                cell = f"{PRIMARY}{cell}{RESET}"
            elif color and node.is_leaf():
                cell = f"{SECONDARY}{cell}{RESET}"
            line += cell
            cursor = column + 1
        out_lines.append(f"Depth {depth}: {line.rstrip()}")

    return tree_type + "\n" + "\n".join(out_lines) + "\n"


def print_structure(
    tree: BinarySearchTree,
    indent: int = 0,
    max_depth: Optional[int] = None,
) -> str:
    """Return a debugging-oriented structural dump of a binary search tree.

    Each node is printed with its ``Left:`` and ``Right:`` children
    indented below it. Subtrees deeper than ``max_depth`` are elided.
    """
    prefix = ' ' * indent
    if tree is None or tree.is_empty():
        return f"{prefix}Empty {tree.__class__.__name__}"

    result = []
    # (node, label, indent, depth)
    stack = [(tree.root, "", indent, 0)]
    while stack:
        node, label, ind, depth = stack.pop()
        pad = ' ' * ind
        if node is None:
            result.append(f"{pad}{label}Empty")
            continue
        if max_depth is not None and depth > max_depth:
            result.append(f"{pad}{label}... (max depth reached)")
            continue
        result.append(f"{pad}{label}{node!r}")
        if node.is_leaf():
            continue
        stack.append((node.right, "Right: ", ind + 4, depth + 1))
        stack.append((node.left, "Left: ", ind + 4, depth + 1))

    return "\n".join(result)
