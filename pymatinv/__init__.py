"""
PyMatInv: dense square-matrix inversion by Gauss-Jordan elimination.

Fixed-shape matrices over floating or integer scalars, with
tolerance-aware equality for floating kinds and exact equality for
integer kinds.

Submodules:
    matrix: Row, Matrix, SquareMatrix, identity, horizontal_concat
    benchmark: Timed bulk inversion of random matrices
    core: Exceptions, validation, timing, tolerances
"""

__version__ = "0.1.0"

from pymatinv.core.exceptions import (
    DegenerateMatrixError,
    DimensionError,
    NumericalPrecisionWarning,
    PyMatInvError,
    ValidationError,
)
from pymatinv.matrix import (
    Matrix,
    Row,
    SquareMatrix,
    horizontal_concat,
    identity,
)
from pymatinv import benchmark

__all__ = [
    "__version__",
    "Row",
    "Matrix",
    "SquareMatrix",
    "identity",
    "horizontal_concat",
    "PyMatInvError",
    "ValidationError",
    "DimensionError",
    "DegenerateMatrixError",
    "NumericalPrecisionWarning",
    "benchmark",
]
