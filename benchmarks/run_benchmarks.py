#!/usr/bin/env python3
"""
Main entry point for binary search tree benchmarks.

Each repetition inserts n random keys into a fresh tree, searches for n
random keys and then deletes n random keys (only those present), timing
each phase separately:
- Setup (not timed): Key generation and configuration
- Warmup (not timed): Cache warming
- Run (timed): Insertion, search and deletion loops
- Verify (not timed): Correctness checks
- Teardown (not timed): Cleanup

Usage:
    # Run with default settings
    python -m benchmarks.run_benchmarks

    # Run with custom seed for reproducibility
    BENCHMARK_SEED=123 python -m benchmarks.run_benchmarks

    # Run in verify-only mode (correctness checks, no report)
    BENCHMARK_VERIFY_ONLY=true python -m benchmarks.run_benchmarks

    # Same as the original driver: 100000 operations over keys 1..100000
    python -m benchmarks.run_benchmarks --sizes 100000 --key-range 1 100000
"""

import argparse
import logging
import os
import sys
import time
from datetime import datetime

from .config import BenchmarkConfig
from .runner import BenchmarkRunner


def setup_logging(config: BenchmarkConfig, log_dir: str = None) -> None:
    """
    Configure logging for benchmark output.

    Args:
        config: Benchmark configuration
        log_dir: Optional directory for log files
    """
    handlers = [logging.StreamHandler()]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = os.path.join(log_dir, f"benchmark_{ts}.log")
        handlers.append(logging.FileHandler(log_path, mode="w"))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,  # Override any existing configuration
    )


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Run binary search tree benchmarks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducibility (default: from env or 42)",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        help="Operations per phase to benchmark (default: 1000 10000 100000)",
    )
    parser.add_argument(
        "--key-range",
        type=int,
        nargs=2,
        metavar=("MIN", "MAX"),
        help="Inclusive range of random keys (default: 1 100000)",
    )
    parser.add_argument(
        "--repetitions",
        type=int,
        help="Number of repetitions per size (default: 5)",
    )
    parser.add_argument(
        "--verify-only",
        action="store_true",
        help="Run in verify-only mode (no report)",
    )
    parser.add_argument(
        "--skip-warmup",
        action="store_true",
        help="Skip warmup phase",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-dir",
        help="Directory for log files (default: benchmarks/logs)",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> BenchmarkConfig:
    """Start from the environment and override with command-line arguments."""
    config = BenchmarkConfig.from_env()

    if args.seed is not None:
        config.seed = args.seed
    if args.sizes is not None:
        config.sizes = args.sizes
    if args.key_range is not None:
        config.key_range = tuple(args.key_range)
    if args.repetitions is not None:
        config.repetitions = args.repetitions
    if args.verify_only:
        config.verify_only = True
    if args.skip_warmup:
        config.skip_warmup = True
    if args.log_level is not None:
        config.log_level = args.log_level

    config.validate()
    return config


def main(argv=None) -> int:
    """
    Main benchmark execution.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    log_dir = args.log_dir or os.path.join(os.path.dirname(__file__), "logs")
    setup_logging(config, log_dir if not config.verify_only else None)

    logging.info("=" * 70)
    logging.info("BINARY SEARCH TREE BENCHMARKS")
    logging.info("=" * 70)

    if config.verify_only:
        logging.info("Mode: VERIFY-ONLY (correctness checks, no report)")
    else:
        logging.info("Mode: PERFORMANCE (timed measurements)")

    runner = BenchmarkRunner(config)

    overall_start = time.perf_counter()

    for size in config.sizes:
        logging.info("")
        logging.info("=" * 70)
        logging.info(f"BENCHMARK: n={size}, repetitions={config.repetitions}")
        logging.info("=" * 70)

        run_start = time.perf_counter()

        results, metadata = runner.run_benchmark(
            size=size,
            repetitions=config.repetitions
        )

        run_elapsed = time.perf_counter() - run_start

        if not config.verify_only:
            runner.aggregate_and_report(results, metadata)

        logging.info("")
        logging.info(f"Execution time: {run_elapsed:.3f} seconds")

    overall_elapsed = time.perf_counter() - overall_start

    logging.info("")
    logging.info("=" * 70)
    logging.info(f"TOTAL EXECUTION TIME: {overall_elapsed:.3f} seconds")
    logging.info("=" * 70)

    return 0


if __name__ == "__main__":
    sys.exit(main())
