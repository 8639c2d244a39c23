"""
Row: a fixed-width sequence of scalars with the elementary row operations.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatinv.core.validation import (
    check_1d,
    check_array,
    check_castable,
    check_dtype,
    check_index,
    check_nonempty,
    check_positive_int,
    check_same_width,
    check_scalar,
)


class Row:
    """
    Fixed-width row of scalars.

    The row owns its storage; the width never changes after construction.
    Element access is bounds-checked and raises IndexError outside
    [0, width).

    Elementary operations:
        scale(f)   multiply every element by f, in place
        scaled(f)  new Row equal to self * f (self untouched)
        add(other) elementwise in-place addition of an equal-width Row
    """

    __slots__ = ('_data',)

    def __init__(self, values: ArrayLike, dtype: Any = np.float64):
        data = check_array(values, "values", dtype)
        check_1d(data, "values")
        check_nonempty(data, "values")
        self._data: NDArray[Any] = data

    @classmethod
    def zeros(cls, width: int, dtype: Any = np.float64) -> Row:
        width = check_positive_int(width, "width")
        return cls._wrap(np.zeros(width, dtype=check_dtype(dtype, "dtype")))

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Row:
        # Adopt an already-validated array without copying it
        row = cls.__new__(cls)
        row._data = data
        return row

    # === Shape ===

    @property
    def width(self) -> int:
        return self._data.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self.width

    # === Element access ===

    def get(self, index: int) -> Any:
        return self._data[check_index(index, self.width, "row")]

    def set(self, index: int, value: Any) -> None:
        i = check_index(index, self.width, "row")
        self._data[i] = check_scalar(value, "value", self.dtype)

    __getitem__ = get
    __setitem__ = set

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    # === Elementary row operations ===

    def scale(self, factor: Any) -> None:
        """Multiply every element by factor, in place."""
        check_castable(np.result_type(self._data, factor), self.dtype, "factor")
        self._data *= factor

    def scaled(self, factor: Any) -> Row:
        """Return a new Row with every element multiplied by factor."""
        return Row._wrap(self._data * factor)

    def add(self, other: Row) -> None:
        """Add other elementwise into this row, in place."""
        check_same_width(self.width, other.width, ("row", "other"))
        check_castable(other.dtype, self.dtype, "other")
        self._data += other._data

    def __mul__(self, factor: Any) -> Row:
        return self.scaled(factor)

    def __imul__(self, factor: Any) -> Row:
        self.scale(factor)
        return self

    def __iadd__(self, other: Row) -> Row:
        self.add(other)
        return self

    # === Conversion ===

    def copy(self) -> Row:
        return Row._wrap(self._data.copy())

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the row as a 1D array."""
        return self._data.copy()

    def __repr__(self) -> str:
        return f"Row({self._data.tolist()!r}, dtype={self.dtype})"
