"""
CPU backends for the inversion benchmark.

CPUSingleThreadBackend: all trials in the calling thread.
CPUThreadedBackend: one worker thread per configured thread, each with
its own random generator.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import threading

import numpy as np

from pymatinv.core.result import Result
from pymatinv.core.compute.timing import Timer
from pymatinv.core.exceptions import DegenerateMatrixError
from pymatinv.matrix.square import SquareMatrix
from pymatinv.benchmark._common import BenchmarkParams
from pymatinv.benchmark.design import BenchmarkDesign


def run_trials(
    design: BenchmarkDesign,
    trials: int,
    rng: np.random.Generator,
) -> tuple[int, int, float]:
    """
    Generate and invert `trials` random matrices.

    Only the invert() call is timed; populating the matrix is not.

    Returns:
        (nonsingular_count, degenerate_count, inversion_seconds)
    """
    timer = Timer()
    nonsingular = 0
    degenerate = 0
    shape = (design.size, design.size)

    for _ in range(trials):
        matrix = SquareMatrix(
            rng.integers(design.low, design.high, size=shape, endpoint=True),
            dtype=design.dtype,
        )
        try:
            with timer.section('inversion'):
                matrix.invert()
        except DegenerateMatrixError:
            degenerate += 1
        else:
            nonsingular += 1

    return nonsingular, degenerate, timer.elapsed('inversion')


def _info(design: BenchmarkDesign) -> dict:
    return {
        'size': design.size,
        'dtype': str(design.dtype),
        'low': design.low,
        'high': design.high,
        'seed': design.seed,
    }


class CPUSingleThreadBackend:
    """Runs every trial sequentially in the calling thread."""

    @property
    def name(self) -> str:
        return 'cpu_single'

    def solve(self, design: BenchmarkDesign) -> Result[BenchmarkParams]:
        """Run the benchmark and return Result[BenchmarkParams]."""
        timer = Timer()
        timer.start()

        rng = np.random.default_rng(design.seed)
        nonsingular, degenerate, seconds = run_trials(design, design.trial_count, rng)

        timer.stop()
        timing = timer.result()
        timing['inversion'] = seconds

        params = BenchmarkParams(
            trial_count=design.trial_count,
            nonsingular_count=nonsingular,
            degenerate_count=degenerate,
            inversion_seconds=seconds,
            thread_count=1,
            size=design.size,
        )
        return Result(
            params=params,
            info=_info(design),
            timing=timing,
            backend_name=self.name,
        )


class _Totals:
    """Shared counters; workers merge their local tallies under one lock."""

    def __init__(self):
        self._lock = threading.Lock()
        self.nonsingular = 0
        self.degenerate = 0
        self.inversion_seconds = 0.0

    def merge(self, nonsingular: int, degenerate: int, seconds: float) -> None:
        with self._lock:
            self.nonsingular += nonsingular
            self.degenerate += degenerate
            self.inversion_seconds += seconds


class CPUThreadedBackend:
    """
    Shares the trials across worker threads.

    Each worker gets a generator spawned from one SeedSequence, so a
    seeded run is reproducible for a fixed thread count.
    """

    @property
    def name(self) -> str:
        return 'cpu_threaded'

    def solve(self, design: BenchmarkDesign) -> Result[BenchmarkParams]:
        """Run the benchmark and return Result[BenchmarkParams]."""
        timer = Timer()
        timer.start()

        shares = design.trial_shares()
        seeds = np.random.SeedSequence(design.seed).spawn(len(shares))
        totals = _Totals()
        warnings_list: list[str] = []

        idle = sum(1 for share in shares if share == 0)
        if idle:
            warnings_list.append(
                f"{idle} of {design.thread_count} threads had no trials "
                f"(trial_count={design.trial_count})"
            )

        def worker(trials: int, seed_seq: np.random.SeedSequence) -> None:
            rng = np.random.default_rng(seed_seq)
            totals.merge(*run_trials(design, trials, rng))

        with ThreadPoolExecutor(max_workers=design.thread_count) as pool:
            futures = [
                pool.submit(worker, trials, seed_seq)
                for trials, seed_seq in zip(shares, seeds)
                if trials > 0
            ]
            # Re-raise anything a worker raised
            for future in futures:
                future.result()

        timer.stop()
        timing = timer.result()
        timing['inversion'] = totals.inversion_seconds

        params = BenchmarkParams(
            trial_count=design.trial_count,
            nonsingular_count=totals.nonsingular,
            degenerate_count=totals.degenerate,
            inversion_seconds=totals.inversion_seconds,
            thread_count=design.thread_count,
            size=design.size,
        )
        return Result(
            params=params,
            info=_info(design),
            timing=timing,
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
