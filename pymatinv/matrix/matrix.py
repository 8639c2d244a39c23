"""
Dense fixed-shape matrix and Gauss-Jordan row reduction.

A Matrix is a Height x Width grid of Rows with value semantics: no two
matrices share storage, and multiplication, slicing and concatenation
always build new matrices. In-place mutation happens only through
swap_rows, the Row operations, and row_reduce.

Usage:
    from pymatinv.matrix import Matrix, horizontal_concat

    A = Matrix([[2, 7], [4, 6]])
    B = Matrix([[1, 0], [0, 1]])
    AB = A @ B                       # new 2x2 matrix
    augmented = horizontal_concat(A, B)
    augmented.row_reduce()           # reduced row-echelon form, in place
    inverse = augmented.right_slice()
"""

from __future__ import annotations

from typing import Any, Iterator
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatinv.core.exceptions import (
    DegenerateMatrixError,
    DimensionError,
    NumericalPrecisionWarning,
    ValidationError,
)
from pymatinv.core.validation import (
    check_2d,
    check_array,
    check_dtype,
    check_even_width,
    check_index,
    check_inner_dimensions,
    check_nonempty,
    check_positive_int,
    check_same_height,
    check_same_width,
    check_square,
)
from pymatinv.matrix._scalar import ScalarPolicy, scalar_policy
from pymatinv.matrix.row import Row


class Matrix:
    """
    Dense Height x Width matrix of scalars.

    Construct from a nested row-major sequence (or a 2D array) of the
    chosen dtype, or with Matrix.zeros(). Floating dtypes compare within
    an absolute tolerance of 1e-11; integer dtypes compare exactly.

    Indexing:
        m[r]       -> Row r (live, mutations are visible in m)
        m[r, c]    -> scalar at row r, column c
        m[r, c] = v

    All indices are bounds-checked and raise IndexError outside the shape.
    """

    def __init__(self, rows: ArrayLike, dtype: Any = np.float64):
        data = check_array(rows, "rows", dtype)
        check_2d(data, "rows")
        check_nonempty(data, "rows")
        self._assign(data)

    def _assign(self, data: NDArray[Any]) -> None:
        self._rows: list[Row] = [Row._wrap(data[r].copy()) for r in range(data.shape[0])]
        self._width: int = data.shape[1]
        self._policy: ScalarPolicy = scalar_policy(data.dtype)

    @classmethod
    def _adopt(cls, data: NDArray[Any]) -> Matrix:
        """Build an instance from an already-validated 2D array."""
        matrix = cls.__new__(cls)
        matrix._assign(data)
        return matrix

    @classmethod
    def zeros(cls, height: int, width: int, dtype: Any = np.float64) -> Matrix:
        """All-zero height x width matrix; a SquareMatrix when height == width."""
        height = check_positive_int(height, "height")
        width = check_positive_int(width, "width")
        return _new_matrix(np.zeros((height, width), dtype=check_dtype(dtype, "dtype")))

    # === Shape ===

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return self._width

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self._width)

    @property
    def dtype(self) -> np.dtype:
        return self._policy.dtype

    @property
    def policy(self) -> ScalarPolicy:
        """Comparison and normalization rules for this matrix's dtype."""
        return self._policy

    def __len__(self) -> int:
        return self.height

    # === Element access ===

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        if isinstance(key, tuple):
            r, c = key
            return self._rows[check_index(r, self.height, "matrix row")][c]
        return self._rows[check_index(key, self.height, "matrix row")]

    def __setitem__(self, key: int | tuple[int, int], value: Any) -> None:
        if isinstance(key, tuple):
            r, c = key
            self._rows[check_index(r, self.height, "matrix row")][c] = value
            return
        r = check_index(key, self.height, "matrix row")
        replacement = Row(value.to_numpy() if isinstance(value, Row) else value, self.dtype)
        check_same_width(self._width, replacement.width, ("matrix", "row"))
        self._rows[r] = replacement

    def get(self, row: int, column: int) -> Any:
        return self[row, column]

    def set(self, row: int, column: int, value: Any) -> None:
        self[row, column] = value

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def column(self, index: int) -> ColumnView:
        """Lazy view reading down one column. Nothing is copied."""
        return ColumnView(self, check_index(index, self._width, "matrix column"))

    # === Elementary row operations ===

    def swap_rows(self, a: int, b: int) -> None:
        """Exchange rows a and b in place. No-op if a == b."""
        a = check_index(a, self.height, "matrix row")
        b = check_index(b, self.height, "matrix row")
        if a != b:
            self._rows[a], self._rows[b] = self._rows[b], self._rows[a]

    # === Gauss-Jordan ===

    def row_reduce(self) -> None:
        """
        Reduce the matrix in place toward reduced row-echelon form.

        For each pivot index r, in order:

        1. If (r, r) is zero-equivalent, swap in the first later row s whose
           own diagonal element (s, s) is non-zero-equivalent. Note that the
           candidate's diagonal is inspected, not column r, so some
           invertible matrices such as [[0, 1], [1, 0]] are reported as
           degenerate.
        2. Scale row r by the reciprocal of its pivot unless it is already 1.
        3. For every other row s with a non-zero (s, r), add
           row r * -(s, r) to it.

        Because the swap in step 1 does not look at column r, the row moved
        into place can still hold a zero at (r, r). Reduction then carries
        on with that zero pivot and emits a NumericalPrecisionWarning: a
        floating matrix fills with inf/nan (e.g. [[0, 1], [0, 1]]), and an
        integer matrix has row r zeroed. No error is raised in that case,
        and the diagonal is not unit.

        Raises:
            DimensionError: If the matrix is taller than it is wide
            DegenerateMatrixError: If no usable pivot exists for some column.
                The matrix contents are unspecified afterwards.
        """
        height, width = self.shape
        if height > width:
            raise DimensionError(
                f"row_reduce requires height <= width, got {height}x{width}"
            )

        rows = self._rows
        policy = self._policy
        one = policy.one()

        for r in range(height):
            if policy.is_zero(rows[r][r]):
                s = r + 1
                while s < height and policy.is_zero(rows[s][s]):
                    s += 1
                if s == height:
                    raise DegenerateMatrixError(
                        f"Cannot invert degenerate matrix: no usable pivot "
                        f"for column {r} of a {height}x{width} matrix.",
                        pivot_index=r,
                        shape=(height, width),
                    )
                self.swap_rows(r, s)

            pivot = rows[r][r]
            if policy.is_zero(pivot):
                warnings.warn(
                    f"pivot for column {r} is zero after a row swap; "
                    f"the reduced matrix is not meaningful",
                    NumericalPrecisionWarning,
                    stacklevel=2,
                )

            with np.errstate(divide='ignore', invalid='ignore'):
                if pivot != one:
                    rows[r].scale(policy.reciprocal(pivot))

                for s in range(height):
                    if s != r and rows[s][r] != 0:
                        rows[s].add(rows[r].scaled(-rows[s][r]))

    # === Derived matrices ===

    def right_slice(self) -> Matrix:
        """New matrix holding columns [width/2, width). Width must be even."""
        check_even_width(self.shape, "matrix")
        return _new_matrix(self.to_numpy()[:, self._width // 2:].copy())

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self x other.

        Each cell is the inner product of a row of self with a column of
        other, accumulated left to right. Neither operand is mutated.

        Raises:
            ValidationError: If other is not a Matrix
            DimensionError: If self.width != other.height
        """
        _check_matrix(other, "other")
        check_inner_dimensions(self.shape, other.shape)

        dt = np.result_type(self.dtype, other.dtype)
        zero = dt.type(0)
        product = np.zeros((self.height, other.width), dtype=dt)
        for r, row in enumerate(self._rows):
            for c in range(other.width):
                acc = zero
                for a, b in zip(row, other.column(c)):
                    acc = acc + a * b
                product[r, c] = acc
        return _new_matrix(product)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def equals(self, other: Matrix) -> bool:
        """
        Shape-aware, tolerance-aware equality.

        Matrices of different shapes are never equal. Otherwise cells are
        compared under the policy of the promoted dtype: within 1e-11 for
        floating kinds, exactly for integer kinds.

        Raises:
            ValidationError: If other is not a Matrix
        """
        _check_matrix(other, "other")
        if self.shape != other.shape:
            return False
        policy = scalar_policy(np.result_type(self.dtype, other.dtype))
        return policy.arrays_equal(self.to_numpy(), other.to_numpy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def as_square(self) -> SquareMatrix:
        """
        Copy of this matrix as a SquareMatrix.

        Raises:
            DimensionError: If height != width
        """
        from pymatinv.matrix.square import SquareMatrix

        check_square(self.shape, "matrix")
        return SquareMatrix._adopt(self.to_numpy())

    # === Conversion ===

    def copy(self) -> Matrix:
        return type(self)._adopt(self.to_numpy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the matrix as a 2D array."""
        return np.stack([row.to_numpy() for row in self._rows])

    def __str__(self) -> str:
        return "".join(
            "\n" + "".join("\t" + str(value) for value in row)
            for row in self._rows
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_numpy().tolist()!r}, dtype={self.dtype})"


class ColumnView:
    """
    Lazy, restartable sequence over one column of a matrix.

    Reads the parent's current values on demand; the parent is neither
    copied nor mutated. Every iter() starts again from the top, and
    reversed() walks from the bottom up.
    """

    __slots__ = ('_parent', '_column')

    def __init__(self, parent: Matrix, column: int):
        self._parent = parent
        self._column = check_index(column, parent.width, "matrix column")

    @property
    def column(self) -> int:
        return self._column

    def __len__(self) -> int:
        return self._parent.height

    def __getitem__(self, row: int) -> Any:
        return self._parent[row, self._column]

    def __iter__(self) -> Iterator[Any]:
        for row in self._parent:
            yield row[self._column]

    def __reversed__(self) -> Iterator[Any]:
        for r in range(self._parent.height - 1, -1, -1):
            yield self._parent[r, self._column]

    def cursor(self, row: int = 0) -> ColumnCursor:
        """Independent cursor starting at the given row (0..height)."""
        return ColumnCursor(self._parent, row, self._column)


class ColumnCursor:
    """
    Bidirectional position within one column.

    A cursor may rest one past the last row (at_end); reading value there
    raises IndexError, as does stepping outside [0, height].
    """

    __slots__ = ('_parent', '_row', '_column')

    def __init__(self, parent: Matrix, row: int, column: int):
        self._parent = parent
        self._column = check_index(column, parent.width, "matrix column")
        self._row = check_index(row, parent.height + 1, "cursor row")

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def at_end(self) -> bool:
        return self._row == self._parent.height

    @property
    def value(self) -> Any:
        return self._parent[self._row, self._column]

    def forward(self) -> ColumnCursor:
        if self.at_end:
            raise IndexError("column cursor is already past the last row")
        self._row += 1
        return self

    def backward(self) -> ColumnCursor:
        if self._row == 0:
            raise IndexError("column cursor is already at the first row")
        self._row -= 1
        return self

    def copy(self) -> ColumnCursor:
        return ColumnCursor(self._parent, self._row, self._column)

    def __repr__(self) -> str:
        return f"ColumnCursor(row={self._row}, column={self._column})"


def horizontal_concat(lhs: Matrix, rhs: Matrix) -> Matrix:
    """
    Join two matrices side by side.

    Columns [0, lhs.width) come from lhs and the rest from rhs, row-aligned.
    The result dtype is the numpy promotion of both dtypes.

    Raises:
        ValidationError: If either operand is not a Matrix
        DimensionError: If the heights differ
    """
    _check_matrix(lhs, "lhs")
    _check_matrix(rhs, "rhs")
    check_same_height(lhs.shape, rhs.shape, ("lhs", "rhs"))
    return _new_matrix(np.hstack([lhs.to_numpy(), rhs.to_numpy()]))


def _check_matrix(value: Any, name: str) -> None:
    if not isinstance(value, Matrix):
        raise ValidationError(f"{name}: expected a Matrix, got {type(value).__name__}")


def _new_matrix(data: NDArray[Any]) -> Matrix:
    """Wrap a fresh array, as a SquareMatrix when its shape is square."""
    from pymatinv.matrix.square import SquareMatrix

    if data.shape[0] == data.shape[1]:
        return SquareMatrix._adopt(data)
    return Matrix._adopt(data)
