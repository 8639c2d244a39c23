"""
Common data structures for the inversion benchmark.

BenchmarkParams is the parameter payload wrapped by Result[P] and
exposed through BenchmarkSolution.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BenchmarkParams:
    """
    Parameter payload for a benchmark run.

    - nonsingular_count: trials whose inversion succeeded
    - degenerate_count: trials that raised DegenerateMatrixError
    - inversion_seconds: time spent strictly inside invert(), summed
      over all workers (matrix population is excluded)
    """
    trial_count: int
    nonsingular_count: int
    degenerate_count: int
    inversion_seconds: float
    thread_count: int
    size: int

    @property
    def mean_inversion_seconds(self) -> float:
        """Average seconds per invert() call."""
        return self.inversion_seconds / self.trial_count
