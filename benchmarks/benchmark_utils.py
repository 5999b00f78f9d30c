"""
Benchmarking utilities for binary search trees.

This module provides common utilities and base classes for ASV benchmarking
that work optimally with ASV's built-in timing and stabilization mechanisms.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable.

Logging:
    Benchmarks should be run with logging at INFO level or higher to avoid
    performance contamination from verbose debug output.
"""

import gc
import logging
import os
from typing import List, Tuple

import numpy as np

from search_trees.binary_search_tree import BinarySearchTree
from search_trees.logging_config import PROJECT_LOGGER

# Default seed for deterministic benchmarking - can be overridden via environment variable
DEFAULT_BENCHMARK_SEED = int(os.environ.get('BENCHMARK_SEED', '42'))


class BenchmarkUtils:
    """Utility class for ASV benchmarking operations.

    This class provides methods for generating deterministic test data and
    performing common benchmark setup operations while ensuring reproducibility.
    """

    @staticmethod
    def check_logging_level():
        """
        Check if logging level is appropriate for benchmarking.

        Raises ValueError if DEBUG or lower (more verbose) logging is enabled,
        as this can significantly contaminate benchmark results with I/O overhead.
        """
        tree_logger = logging.getLogger(PROJECT_LOGGER)
        effective_level = tree_logger.getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"Logging level is set to {logging.getLevelName(effective_level)}. "
                "Benchmarks require logging to be at INFO level or higher to avoid "
                "performance contamination from verbose debug output."
            )

    @staticmethod
    def generate_deterministic_keys(size: int,
                                    seed: int = None,
                                    key_range: Tuple[int, int] = (1, 1000000),
                                    distribution: str = 'uniform') -> List[int]:
        """
        Generate distinct deterministic keys for benchmarking.

        Args:
            size: Number of keys to generate
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            key_range: Range of key values (min, max), inclusive
            distribution: Distribution type ('uniform', 'clustered', 'sequential')

        Returns:
            List of deterministic keys, in insertion order

        Note:
            'sequential' keys are ascending and build a degenerate right-only
            chain, so they measure the worst case of an unbalanced tree.
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        rng = np.random.default_rng(seed)
        min_key, max_key = key_range
        if max_key - min_key + 1 < size:
            raise ValueError(
                f"Key-space too small! Required: {size}, Available: {max_key - min_key + 1}"
            )

        if distribution == 'uniform':
            # Sample without replacement (no duplicates)
            return rng.choice(np.arange(min_key, max_key + 1), size=size, replace=False).tolist()
        elif distribution == 'clustered':
            cluster_centers = np.linspace(min_key, max_key, 5, dtype=int)
            per_cluster = max(1, size // 5)
            keys = np.concatenate([
                np.clip(
                    rng.normal(center, max(1, (max_key - min_key) // 20), per_cluster),
                    min_key, max_key,
                ).astype(int)
                for center in cluster_centers
            ])
            # Keep first occurrences in generation order
            _, first_idx = np.unique(keys, return_index=True)
            unique_keys = keys[np.sort(first_idx)]
            if len(unique_keys) >= size:
                return unique_keys[:size].tolist()
            remaining = np.setdiff1d(np.arange(min_key, max_key + 1), unique_keys)
            pad = rng.choice(remaining, size=size - len(unique_keys), replace=False)
            return np.concatenate([unique_keys, pad]).tolist()
        elif distribution == 'sequential':
            return list(range(min_key, min_key + size))
        else:
            raise ValueError(f"Unknown distribution: {distribution}")

    @staticmethod
    def create_lookup_keys(insert_keys: List[int],
                           hit_ratio: float = 0.8,
                           seed: int = None,
                           num_lookups: int = 1000) -> List[int]:
        """
        Create keys for lookup operations with specified hit ratio.

        Args:
            insert_keys: Keys that were inserted (for hits)
            hit_ratio: Ratio of lookups that should be hits (0.0 to 1.0)
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            num_lookups: Number of lookup keys to generate

        Returns:
            List of lookup keys
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        rng = np.random.default_rng(seed)

        if not insert_keys:
            return rng.integers(1, 1000001, size=num_lookups).tolist()

        num_hits = int(num_lookups * hit_ratio)
        num_misses = num_lookups - num_hits

        hit_keys = rng.choice(insert_keys, size=num_hits).tolist() if num_hits else []

        # Misses are drawn above the largest inserted key
        max_key = max(insert_keys)
        miss_keys = (max_key + 1 + rng.integers(0, max_key + 1, size=num_misses)).tolist()

        lookup_keys = np.array(hit_keys + miss_keys, dtype=np.int64)
        rng.shuffle(lookup_keys)
        return lookup_keys.tolist()

    @staticmethod
    def build_tree(keys: List[int]) -> BinarySearchTree:
        """Build a tree from keys in the given order."""
        tree = BinarySearchTree()
        for key in keys:
            tree.insert(key)
        return tree


class BaseBenchmark:
    """Base class for ASV benchmarks optimized for ASV's built-in timing.

    This class provides a standard setup/teardown pattern that ensures:
    - Garbage collection is disabled during timed sections
    - Logging level is appropriate for benchmarking
    - Consistent parameter handling across benchmarks
    """

    params = []
    param_names = []

    # Let ASV handle timing optimization automatically
    warmup_time = 0.1
    sample_time = 0.4

    def setup(self, *params):
        """Setup method called before each benchmark.

        Subclasses should:
        1. Call super().setup(*params) first
        2. Prepare test data
        3. Call gc.collect() to clean up setup overhead
        4. Call gc.disable() to prevent GC during measurement
        """
        BenchmarkUtils.check_logging_level()

    def teardown(self, *params):
        """Re-enables garbage collection after measurement completes."""
        if not gc.isenabled():
            gc.enable()
