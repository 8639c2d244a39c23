"""
Dense matrix engine.

Provides fixed-shape matrices over floating or integer scalars, the
elementary row operations, Gauss-Jordan row reduction, and inversion of
square matrices through the augmented [A | I] construction.

Usage:
    from pymatinv.matrix import SquareMatrix, identity

    A = SquareMatrix([[2, 7], [4, 6]])
    assert A.get_inverse() @ A == identity(2)
"""

from pymatinv.matrix._scalar import ScalarPolicy, scalar_policy
from pymatinv.matrix.row import Row
from pymatinv.matrix.matrix import ColumnCursor, ColumnView, Matrix, horizontal_concat
from pymatinv.matrix.square import SquareMatrix, identity

__all__ = [
    "ScalarPolicy",
    "scalar_policy",
    "Row",
    "Matrix",
    "ColumnView",
    "ColumnCursor",
    "horizontal_concat",
    "SquareMatrix",
    "identity",
]
