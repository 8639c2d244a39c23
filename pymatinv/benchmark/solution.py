"""
Solution wrapper for benchmark results.

BenchmarkSolution wraps Result[BenchmarkParams] and provides convenient
accessors and the plain-text report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pymatinv.core.result import Result
from pymatinv.benchmark._common import BenchmarkParams

if TYPE_CHECKING:
    from pymatinv.benchmark.design import BenchmarkDesign


@dataclass
class BenchmarkSolution:
    """
    User-facing benchmark results.

    summary() produces the three-line report printed by the
    pymatinv-benchmark command.
    """
    _result: Result[BenchmarkParams]
    _design: 'BenchmarkDesign'

    @property
    def trial_count(self) -> int:
        return self._result.params.trial_count

    @property
    def nonsingular_count(self) -> int:
        """Trials whose inversion succeeded."""
        return self._result.params.nonsingular_count

    @property
    def degenerate_count(self) -> int:
        """Trials rejected with DegenerateMatrixError."""
        return self._result.params.degenerate_count

    @property
    def inversion_seconds(self) -> float:
        """Seconds spent inside invert(), summed over workers."""
        return self._result.params.inversion_seconds

    @property
    def mean_inversion_seconds(self) -> float:
        return self._result.params.mean_inversion_seconds

    @property
    def thread_count(self) -> int:
        return self._result.params.thread_count

    @property
    def size(self) -> int:
        return self._result.params.size

    @property
    def design(self) -> 'BenchmarkDesign':
        return self._design

    # --- Metadata ---

    @property
    def info(self) -> dict:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """
        Plain-text report.

        The first line keeps the historical "Singular:" label for output
        compatibility; it counts successful (non-singular) inversions.
        """
        return (
            f"Singular: {self.nonsingular_count}; "
            f"degenerate: {self.degenerate_count}.\n"
            f"Time spent in inversion functions: {self.inversion_seconds:g} s.\n"
            f"Average inversion time per matrix: {self.mean_inversion_seconds:g} s."
        )

    def __repr__(self) -> str:
        return (
            f"BenchmarkSolution(trials={self.trial_count}, "
            f"nonsingular={self.nonsingular_count}, "
            f"degenerate={self.degenerate_count}, "
            f"backend={self.backend_name!r})"
        )
