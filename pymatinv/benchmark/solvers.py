"""
Solver dispatch for the inversion benchmark.

Provides run_benchmark() as the entry point and main() for the
pymatinv-benchmark console script.
"""

from __future__ import annotations

from typing import Any, Literal

import numpy as np

from pymatinv.core.exceptions import ValidationError
from pymatinv.benchmark.design import (
    DEFAULT_HIGH,
    DEFAULT_LOW,
    DEFAULT_MATRIX_SIZE,
    DEFAULT_TRIAL_COUNT,
    BenchmarkDesign,
)
from pymatinv.benchmark.solution import BenchmarkSolution
from pymatinv.benchmark.backends.cpu import CPUSingleThreadBackend, CPUThreadedBackend


BackendChoice = Literal['threaded', 'single']


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend == 'threaded':
        return CPUThreadedBackend()
    if backend == 'single':
        return CPUSingleThreadBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def run_benchmark(
    size: int = DEFAULT_MATRIX_SIZE,
    trial_count: int = DEFAULT_TRIAL_COUNT,
    *,
    thread_count: int | None = None,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
    dtype: Any = np.float64,
    seed: int | None = None,
    backend: BackendChoice = 'threaded',
) -> BenchmarkSolution:
    """
    Invert random matrices and time the inversion calls.

    Parameters
    ----------
    size : int
        Dimension of the random square matrices.
    trial_count : int
        Number of matrices to generate and invert.
    thread_count : int, optional
        Worker threads for the threaded backend. Defaults to the number
        of usable cores.
    low, high : int
        Inclusive range of the random integer elements.
    dtype : numpy dtype
        Scalar dtype of the matrices (floating by default).
    seed : int, optional
        Seed for reproducible runs.
    backend : str
        'threaded' or 'single'.

    Returns
    -------
    BenchmarkSolution with counts and timings.
    """
    be = _get_backend(backend)
    design = BenchmarkDesign.for_benchmark(
        size,
        trial_count,
        thread_count=1 if backend == 'single' else thread_count,
        low=low,
        high=high,
        dtype=dtype,
        seed=seed,
    )
    result = be.solve(design)
    return BenchmarkSolution(_result=result, _design=design)


def main() -> int:
    """Run the default benchmark and print its report."""
    solution = run_benchmark()
    print(solution.summary())
    return 0
