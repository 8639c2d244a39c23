"""
Design for the inversion benchmark.

BenchmarkDesign encapsulates all inputs needed by backends to run a
benchmark. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pymatinv.core.compute.device import get_cpu_info
from pymatinv.core.exceptions import ValidationError
from pymatinv.core.validation import check_dtype, check_positive_int, check_range


DEFAULT_MATRIX_SIZE = 7
DEFAULT_TRIAL_COUNT = 1_000_000
DEFAULT_LOW = -10
DEFAULT_HIGH = 10


@dataclass(frozen=True)
class BenchmarkDesign:
    """
    Frozen design for a benchmark run.

    Attributes:
        size: Dimension of the random square matrices.
        trial_count: Total number of matrices to generate and invert.
        thread_count: Number of worker threads (threaded backend only).
        low: Smallest random element (inclusive).
        high: Largest random element (inclusive).
        dtype: Scalar dtype of the matrices.
        seed: Random seed for reproducibility, or None for fresh entropy.
    """
    size: int
    trial_count: int
    thread_count: int
    low: int
    high: int
    dtype: np.dtype
    seed: int | None

    @classmethod
    def for_benchmark(
        cls,
        size: int = DEFAULT_MATRIX_SIZE,
        trial_count: int = DEFAULT_TRIAL_COUNT,
        *,
        thread_count: int | None = None,
        low: int = DEFAULT_LOW,
        high: int = DEFAULT_HIGH,
        dtype: Any = np.float64,
        seed: int | None = None,
    ) -> BenchmarkDesign:
        """
        Create a benchmark design with validation.

        Args:
            size: Matrix dimension. Must be >= 1.
            trial_count: Number of trials. Must be >= 1.
            thread_count: Worker threads. Defaults to the usable core count.
            low: Smallest random element.
            high: Largest random element. Must be >= low.
            dtype: Floating or integer dtype of the matrices.
            seed: Non-negative integer seed, or None.

        Returns:
            Validated BenchmarkDesign.

        Raises:
            ValidationError: If inputs are invalid.
        """
        size = check_positive_int(size, "size")
        trial_count = check_positive_int(trial_count, "trial_count")

        if thread_count is None:
            thread_count = get_cpu_info().core_count
        thread_count = check_positive_int(thread_count, "thread_count")

        for name, value in (("low", low), ("high", high)):
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                raise ValidationError(f"{name}: must be an integer, got {value!r}")
        check_range(low, high, ("low", "high"))

        if seed is not None:
            if isinstance(seed, (bool, np.bool_)) or not isinstance(seed, (int, np.integer)):
                raise ValidationError(f"seed: must be an integer or None, got {seed!r}")
            if seed < 0:
                raise ValidationError(f"seed: must be non-negative, got {seed}")
            seed = int(seed)

        return cls(
            size=size,
            trial_count=trial_count,
            thread_count=thread_count,
            low=int(low),
            high=int(high),
            dtype=check_dtype(dtype, "dtype"),
            seed=seed,
        )

    def trial_shares(self) -> tuple[int, ...]:
        """
        Split trial_count across thread_count workers.

        Shares differ by at most one and sum exactly to trial_count; the
        remainder goes to the first workers.
        """
        base, extra = divmod(self.trial_count, self.thread_count)
        return tuple(base + (1 if i < extra else 0) for i in range(self.thread_count))
