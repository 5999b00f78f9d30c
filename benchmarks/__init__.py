"""
Benchmarks package for binary search trees.

This package contains:
- A standalone runner timing insertion, search and deletion phases over
  randomized integer workloads (``python -m benchmarks.run_benchmarks``)
- ASV benchmarks for insert, contains and remove over several key
  distributions

The benchmarks are designed to be robust against CPU and memory load variations
by using multiple repetitions, deterministic test data, and phase separation.
"""

from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]
