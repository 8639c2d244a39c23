"""
PyMatInv inversion benchmark.

Generates random square matrices with integer-valued elements, inverts
them on one or more CPU threads, and reports how many were invertible
and how long the inversion calls took.

Usage:
    from pymatinv.benchmark import run_benchmark

    result = run_benchmark(size=7, trial_count=10_000, seed=42)
    print(result.summary())

From the command line:
    pymatinv-benchmark
    python -m pymatinv.benchmark
"""

from pymatinv.benchmark.design import BenchmarkDesign
from pymatinv.benchmark.solution import BenchmarkSolution
from pymatinv.benchmark.solvers import main, run_benchmark

__all__ = [
    "BenchmarkDesign",
    "BenchmarkSolution",
    "main",
    "run_benchmark",
]
