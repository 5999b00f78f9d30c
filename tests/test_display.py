"""Tests for print_pretty and print_structure."""

import unittest

from search_trees.binary_search_tree import BinarySearchTree
from search_trees.display import PRIMARY, RESET, SECONDARY, print_pretty, print_structure
from search_trees.utils import create_bst


class TestPrintPretty(unittest.TestCase):

    def test_none(self):
        self.assertEqual(print_pretty(None), "NoneType: None")

    def test_empty(self):
        self.assertEqual(print_pretty(BinarySearchTree()), "BinarySearchTree: Empty")

    def test_rejects_other_types(self):
        with self.assertRaises(TypeError):
            print_pretty([1, 2, 3])

    def test_layout_without_color(self):
        tree = create_bst([2, 1, 3])
        expected = (
            "BinarySearchTree\n"
            "Depth 0:     2\n"
            "Depth 1:  1     3\n"
        )
        self.assertEqual(print_pretty(tree, color=False), expected)

    def test_columns_follow_in_order_position(self):
        tree = create_bst([1, 2, 3])
        lines = print_pretty(tree, color=False).splitlines()[1:]
        offsets = [line.index(str(i + 1), len("Depth 0: ")) for i, line in enumerate(lines)]
        self.assertEqual(offsets, sorted(offsets))
        self.assertEqual(len(set(offsets)), 3)

    def test_color_marks_root_and_leaves(self):
        text = print_pretty(create_bst([2, 1, 3]))
        self.assertIn(f"{PRIMARY} 2 {RESET}", text)
        self.assertIn(f"{SECONDARY} 1 {RESET}", text)
        self.assertIn(f"{SECONDARY} 3 {RESET}", text)


class TestPrintStructure(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(print_structure(BinarySearchTree()), "Empty BinarySearchTree")

    def test_nested_children(self):
        tree = create_bst([5, 3, 8, 7])
        expected = "\n".join([
            "BSTNode(value=5)",
            "    Left: BSTNode(value=3)",
            "    Right: BSTNode(value=8)",
            "        Left: BSTNode(value=7)",
            "        Right: Empty",
        ])
        self.assertEqual(print_structure(tree), expected)

    def test_max_depth(self):
        tree = create_bst([1, 2, 3])
        text = print_structure(tree, max_depth=1)
        self.assertIn("... (max depth reached)", text)
        self.assertNotIn("value=3", text)


if __name__ == "__main__":
    unittest.main()
