"""
Result envelope for measured PyMatInv jobs.

Every backend returns a Result wrapping its own parameter payload, so
timing and warning handling are shared while payloads stay job-specific.

Properties:
    - Generic over the payload type P
    - info carries run metadata (size, seed, dtype)
    - timing may be None when nothing was measured
    - frozen, so a finished run cannot be altered
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The job-specific parameter payload type

    Attributes:
        params: Job-specific payload (counts, durations, ...)
        info: Structured metadata (size, seed, dtype)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=BenchmarkParams(...),
        ...     info={'size': 7, 'seed': 42},
        ...     timing={'total_seconds': 1.2, 'inversion': 0.9},
        ...     backend_name='cpu_threaded'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
