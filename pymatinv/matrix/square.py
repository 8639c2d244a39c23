"""
Square matrices: identity generation and Gauss-Jordan inversion.

Inversion row-reduces the augmented matrix [A | I] and reads the inverse
from its right half. The receiver is only overwritten once reduction has
succeeded, so a DegenerateMatrixError leaves it exactly as it was.

Usage:
    from pymatinv.matrix import SquareMatrix, identity

    A = SquareMatrix([[2, 7], [4, 6]])
    A_inv = A.get_inverse()          # A untouched
    assert A_inv @ A == identity(2)

    A.invert()                       # in place
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatinv.core.validation import check_dtype, check_positive_int, check_square
from pymatinv.matrix.matrix import Matrix, horizontal_concat


class SquareMatrix(Matrix):
    """
    Matrix with Height == Width, validated at construction.

    Raises:
        DimensionError: On construction from non-square data
    """

    def __init__(self, rows: ArrayLike, dtype: Any = np.float64):
        super().__init__(rows, dtype)
        check_square(self.shape, "rows")

    @classmethod
    def _adopt(cls, data: NDArray[Any]) -> SquareMatrix:
        check_square(data.shape, "data")
        return super()._adopt(data)

    @classmethod
    def zeros(cls, size: int, dtype: Any = np.float64) -> SquareMatrix:
        """All-zero size x size matrix."""
        size = check_positive_int(size, "size")
        return cls._adopt(np.zeros((size, size), dtype=check_dtype(dtype, "dtype")))

    @classmethod
    def identity(cls, size: int, dtype: Any = np.float64) -> SquareMatrix:
        """Fresh size x size identity matrix."""
        size = check_positive_int(size, "size")
        return cls._adopt(np.eye(size, dtype=check_dtype(dtype, "dtype")))

    @property
    def size(self) -> int:
        return self.height

    def invert(self) -> SquareMatrix:
        """
        Invert in place.

        Returns:
            self, for chaining

        Raises:
            DegenerateMatrixError: If row reduction finds no usable pivot.
                self is left unmodified.
        """
        augmented = horizontal_concat(self, SquareMatrix.identity(self.size, self.dtype))
        augmented.row_reduce()
        inverse = augmented.right_slice()
        self._rows = inverse._rows
        return self

    def get_inverse(self) -> SquareMatrix:
        """
        Inverse as a new matrix. self is never mutated.

        Raises:
            DegenerateMatrixError: If row reduction finds no usable pivot
        """
        return self.copy().invert()


def identity(size: int, dtype: Any = np.float64) -> SquareMatrix:
    """Fresh size x size identity matrix of the given dtype."""
    return SquareMatrix.identity(size, dtype)
