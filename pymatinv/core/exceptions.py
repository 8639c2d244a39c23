"""
Exception hierarchy for PyMatInv.

All exceptions inherit from PyMatInvError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Index-out-of-range access is a precondition violation and raises the
builtin IndexError and is not part of this hierarchy.
"""


class PyMatInvError(Exception):
    """Base exception for all PyMatInv errors."""
    pass


class ValidationError(PyMatInvError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when operand shapes don't match what an operation requires:
    ragged rows, non-square input to a square-only operation, mismatched
    inner dimensions in a product, odd width for a right slice.
    """
    pass


class NumericalError(PyMatInvError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateMatrixError(NumericalError):
    """
    No usable pivot could be found during row reduction.

    Raised by Matrix.row_reduce() (and therefore by inversion) when the
    pivot search for some column finds no row with a non-zero diagonal
    element. The matrix being reduced is left in an unspecified state.

    Attributes:
        pivot_index: Column whose pivot could not be established
        shape: (height, width) of the matrix being reduced
    """

    def __init__(
        self,
        message: str = "Cannot invert degenerate matrix.",
        pivot_index: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.pivot_index = pivot_index
        self.shape = shape


class NumericalPrecisionWarning(UserWarning):
    """
    Non-fatal loss of precision.

    Issued when integer-kind normalization divides by a non-unit pivot,
    which truncates the reciprocal toward zero.
    """
    pass
