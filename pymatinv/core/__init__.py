"""
Core infrastructure for PyMatInv.

This module provides shared abstractions and utilities used by the matrix
engine and the benchmark harness.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, CPU detection, tolerance tiers
"""

from pymatinv.core.result import Result
from pymatinv.core.exceptions import (
    PyMatInvError,
    ValidationError,
    DimensionError,
    NumericalError,
    DegenerateMatrixError,
    NumericalPrecisionWarning,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatInvError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "DegenerateMatrixError",
    "NumericalPrecisionWarning",
]
