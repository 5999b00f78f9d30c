"""
ASV benchmarks for BinarySearchTree operations.

This module benchmarks batch construction via insert(), contains() lookups
with controlled hit ratios and remove() over several key distributions.
"""

import gc

from search_trees.binary_search_tree import BinarySearchTree
from benchmarks.benchmark_utils import BaseBenchmark, BenchmarkUtils

# Ascending keys degenerate the tree into a chain; beyond this size a single
# sample takes seconds, so those combinations are skipped.
MAX_SEQUENTIAL_SIZE = 1000


def _skip_degenerate(size, distribution):
    if distribution == 'sequential' and size > MAX_SEQUENTIAL_SIZE:
        raise NotImplementedError("sequential keys skipped above MAX_SEQUENTIAL_SIZE")


class BSTBatchInsertBenchmarks(BaseBenchmark):
    """Benchmarks for BinarySearchTree construction via sequential inserts."""

    params = [
        [100, 1000, 10000],  # data sizes
        ['uniform', 'sequential', 'clustered'],  # data distributions
    ]
    param_names = ['size', 'distribution']

    min_run_count = 5

    def setup(self, size, distribution):
        """Generate deterministic keys for batch insert benchmarking."""
        super().setup(size, distribution)
        _skip_degenerate(size, distribution)

        self.keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=42 + size,
            distribution=distribution,
        )
        self.tree = BenchmarkUtils.build_tree(self.keys)
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_insert_batch_construction(self, size, distribution):
        """Benchmark full tree construction by inserting all keys."""
        tree = BinarySearchTree()
        tree_insert = tree.insert
        for key in self.keys:
            tree_insert(key)

    def time_insert_duplicates(self, size, distribution):
        """Benchmark re-inserting every key into a tree that already holds it."""
        tree = self.tree
        for key in self.keys:
            tree.insert(key)


class BSTContainsBenchmarks(BaseBenchmark):
    """Benchmarks for BinarySearchTree.contains()."""

    params = [
        [100, 1000, 10000],  # data sizes
        [0.0, 0.5, 1.0],  # hit ratios
    ]
    param_names = ['size', 'hit_ratio']

    min_run_count = 5

    # Class-level cache for built trees and their keys
    _tree_cache = {}

    def setup(self, size, hit_ratio):
        """Setup populated tree and lookup keys for benchmarking."""
        super().setup(size, hit_ratio)

        if size not in self._tree_cache:
            keys = BenchmarkUtils.generate_deterministic_keys(size=size, seed=42 + size)
            self._tree_cache[size] = (BenchmarkUtils.build_tree(keys), keys)

        self.tree, insert_keys = self._tree_cache[size]
        self.lookup_keys = BenchmarkUtils.create_lookup_keys(
            insert_keys=insert_keys,
            hit_ratio=hit_ratio,
            seed=1042 + size,
        )
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_contains(self, size, hit_ratio):
        """Benchmark lookups with the configured hit ratio."""
        tree_contains = self.tree.contains
        for key in self.lookup_keys:
            tree_contains(key)


class BSTRemoveBenchmarks(BaseBenchmark):
    """Benchmarks for BinarySearchTree.remove()."""

    params = [
        [100, 1000, 10000],  # data sizes
        ['uniform', 'sequential', 'clustered'],  # data distributions
    ]
    param_names = ['size', 'distribution']

    # Every sample needs a freshly built tree
    number = 1
    repeat = 10

    def setup(self, size, distribution):
        """Build a populated tree and a shuffled removal order."""
        super().setup(size, distribution)
        _skip_degenerate(size, distribution)

        keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=42 + size,
            distribution=distribution,
        )
        self.tree = BenchmarkUtils.build_tree(keys)
        self.remove_keys = BenchmarkUtils.create_lookup_keys(
            insert_keys=keys,
            hit_ratio=1.0,
            seed=2042 + size,
            num_lookups=size,
        )
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_remove(self, size, distribution):
        """Benchmark removing inserted keys; keys drawn twice hit the no-op path."""
        tree_remove = self.tree.remove
        for key in self.remove_keys:
            tree_remove(key)
