"""Core benchmark runner for binary search tree latency measurements."""

import logging
import time
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from tqdm import tqdm

from search_trees.binary_search_tree import BinarySearchTree
from search_trees.tree_stats import Stats, tree_stats

from .config import BenchmarkConfig, BenchmarkMetadata, get_git_commit_hash
from .utils import Workload, generate_workload
from .verify import verify_invariants, verify_membership

WARMUP_OPS = 1000


@dataclass
class PhaseTiming:
    """Wall-clock time of one phase."""
    total_ns: int
    ops: int

    @property
    def avg_ns(self) -> float:
        return self.total_ns / self.ops if self.ops else 0.0


@dataclass
class BenchmarkResult:
    """Results from a single benchmark repetition."""
    insert: PhaseTiming
    search: PhaseTiming
    delete: PhaseTiming
    items_found: int
    items_removed: int
    stats: Stats
    final_stats: Stats


class BenchmarkRunner:
    """
    Manages the benchmark lifecycle with proper phase separation.

    Phases:
    1. Setup (not timed): Configuration and key generation
    2. Warmup (not timed): Optional warmup iterations
    3. Run (timed): insertion, search and deletion loops
    4. Verify (not timed): Correctness checks
    5. Teardown (not timed): Cleanup
    """

    def __init__(self, config: BenchmarkConfig):
        """
        Initialize benchmark runner.

        Args:
            config: Benchmark configuration
        """
        self.config = config
        self._check_logging_level()

    def _check_logging_level(self) -> None:
        """Warn if verbose logging is enabled during measurement."""
        current_level = logging.getLogger().getEffectiveLevel()
        if current_level < logging.INFO:
            level_name = logging.getLevelName(current_level)
            logging.warning(
                "⚠️  Verbose logging (%s) is enabled. This may affect benchmark timing! "
                "Set log level to INFO or higher for accurate measurements.",
                level_name
            )

    def setup(self, size: int, repetitions: int) -> List[Workload]:
        """
        Setup phase: Generate one workload per repetition.

        NOT TIMED.
        """
        base_seed = self.config.seed
        return [
            generate_workload(size, self.config.key_range, base_seed + i)
            for i in range(repetitions)
        ]

    def warmup(self, workloads: List[Workload]) -> None:
        """
        Warmup phase: Run a short workload on a throwaway tree to warm caches.

        NOT TIMED.
        """
        if self.config.skip_warmup or not workloads:
            return

        keys = workloads[0].insert_keys[:WARMUP_OPS]
        tree = BinarySearchTree()
        for key in keys:
            tree.insert(key)
        for key in keys:
            tree.contains(key)
        for key in keys:
            tree.remove(key)

    def run_single(self, workload: Workload) -> Tuple[BinarySearchTree, BenchmarkResult]:
        """
        Run all three phases on a fresh tree.

        TIMED - only the insert/contains/remove loops are measured.

        Returns:
            The tree after deletion and the BenchmarkResult
        """
        tree = BinarySearchTree()
        tree_insert = tree.insert
        tree_contains = tree.contains
        tree_remove = tree.remove

        # loop for insertion
        start = time.perf_counter_ns()
        for key in workload.insert_keys:
            tree_insert(key)
        insert_ns = time.perf_counter_ns() - start

        stats = tree_stats(tree)

        # loop for search
        found = 0
        start = time.perf_counter_ns()
        for key in workload.search_keys:
            if tree_contains(key):
                found += 1
        search_ns = time.perf_counter_ns() - start

        # loop for deletion; only keys that are present get removed
        removed = 0
        start = time.perf_counter_ns()
        for key in workload.delete_keys:
            if tree_contains(key):
                tree_remove(key)
                removed += 1
        delete_ns = time.perf_counter_ns() - start

        final_stats = tree_stats(tree)

        result = BenchmarkResult(
            insert=PhaseTiming(insert_ns, len(workload.insert_keys)),
            search=PhaseTiming(search_ns, len(workload.search_keys)),
            delete=PhaseTiming(delete_ns, len(workload.delete_keys)),
            items_found=found,
            items_removed=removed,
            stats=stats,
            final_stats=final_stats,
        )
        return tree, result

    def verify(self, tree: BinarySearchTree, workload: Workload, result: BenchmarkResult) -> bool:
        """
        Verify phase: Check correctness of the tree left after deletion.

        NOT TIMED.
        """
        ok = verify_invariants(tree, result.final_stats)
        inserted = set(workload.insert_keys)
        if result.stats.node_count != len(inserted):
            logging.error(
                "Tree held %d keys after insertion, expected %d",
                result.stats.node_count, len(inserted)
            )
            ok = False
        if not verify_membership(tree, inserted - set(workload.delete_keys)):
            ok = False
        return ok

    def run_benchmark(self, size: int, repetitions: int) -> Tuple[List[BenchmarkResult], BenchmarkMetadata]:
        """
        Run complete benchmark with proper phase separation.

        Args:
            size: Number of operations per phase
            repetitions: Number of repetitions

        Returns:
            (results, metadata)
        """
        metadata = BenchmarkMetadata(
            commit_hash=get_git_commit_hash(),
            config=self.config,
            size=size,
            repetitions=repetitions,
        )

        # === SETUP PHASE (not timed) ===
        logging.debug("Setup: Generating %d workloads...", repetitions)
        workloads = self.setup(size, repetitions)

        # === WARMUP PHASE (not timed) ===
        if not self.config.skip_warmup:
            logging.debug("Warmup: Running warmup iterations...")
            self.warmup(workloads)

        # === MEASUREMENT PHASE (timed) ===
        results = []
        all_verified = True

        for workload in tqdm(workloads, desc=f"n={size}", leave=False):
            tree, result = self.run_single(workload)
            results.append(result)

            # === VERIFY PHASE (not timed) ===
            if self.config.verify_only or logging.getLogger().isEnabledFor(logging.DEBUG):
                if not self.verify(tree, workload, result):
                    all_verified = False

        if self.config.verify_only:
            if all_verified:
                logging.info("✓ All verifications passed for n=%d", size)
            else:
                logging.error("✗ Some verifications failed for n=%d", size)

        # === TEARDOWN PHASE (not timed) ===
        # No explicit cleanup needed for Python

        return results, metadata

    def aggregate_and_report(
        self,
        results: List[BenchmarkResult],
        metadata: BenchmarkMetadata,
    ) -> None:
        """
        Aggregate results and report statistics.

        NOT TIMED.
        """
        def avg_var(values) -> Tuple[float, float]:
            arr = np.asarray(list(values), dtype=float)
            return float(arr.mean()), float(arr.var())

        # === OUTPUT: Metadata ===
        logging.info("")
        logging.info("=== METADATA ===")
        for line in str(metadata).split('\n'):
            logging.info(line)

        # === OUTPUT: Statistics Table ===
        rows = [
            ("Items after insert", avg_var(r.stats.node_count for r in results)),
            ("Height after insert", avg_var(r.stats.height for r in results)),
            ("Leaves after insert", avg_var(r.stats.leaf_count for r in results)),
            ("Items found", avg_var(r.items_found for r in results)),
            ("Items removed", avg_var(r.items_removed for r in results)),
            ("Items remaining", avg_var(r.final_stats.node_count for r in results)),
        ]

        header = f"{'Metric':<20} {'Avg':>15} {'(Var)':>15}"
        sep_line = "-" * len(header)

        logging.info("")
        logging.info("=== STATISTICS ===")
        logging.info(header)
        logging.info(sep_line)
        for name, (avg, var) in rows:
            var_str = f"({var:.2f})"
            logging.info(f"{name:<20} {avg:15.2f} {var_str:>15}")

        # === OUTPUT: Performance Table ===
        phases = [
            ("Insertion", [r.insert for r in results]),
            ("Search", [r.search for r in results]),
            ("Deletion", [r.delete for r in results]),
        ]

        header = f"{'Phase':<12}{'Total(ns)':>16}{'Var(total)':>18}{'Avg/op(ns)':>14}{'Var(avg/op)':>16}"
        sep = "-" * len(header)

        logging.info("")
        logging.info("=== PERFORMANCE ===")
        logging.info(header)
        logging.info(sep)
        for name, timings in phases:
            total_avg, total_var = avg_var(t.total_ns for t in timings)
            op_avg, op_var = avg_var(t.avg_ns for t in timings)
            logging.info(
                f"{name:<12}"
                f"{total_avg:16.0f}"
                f"{total_var:18.3e}"
                f"{op_avg:14.1f}"
                f"{op_var:16.2f}"
            )
        logging.info(sep)
