"""
Tests for Row: construction, bounds-checked access, row operations.
"""

import numpy as np
import pytest

from pymatinv.core.exceptions import DimensionError, ValidationError
from pymatinv.matrix import Row


class TestConstruction:

    def test_from_list(self):
        row = Row([1, 2, 3])
        assert row.width == 3
        assert len(row) == 3
        assert row.dtype == np.float64
        assert list(row) == [1.0, 2.0, 3.0]

    def test_zeros(self):
        row = Row.zeros(4, np.int64)
        assert row.dtype == np.int64
        np.testing.assert_array_equal(row.to_numpy(), [0, 0, 0, 0])

    def test_rejects_empty(self):
        with pytest.raises(DimensionError):
            Row([])

    def test_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            Row([[1, 2]])

    def test_rejects_zero_width(self):
        with pytest.raises(ValidationError):
            Row.zeros(0)

    def test_owns_its_storage(self):
        source = np.array([1.0, 2.0])
        row = Row(source)
        source[0] = 99.0
        assert row[0] == 1.0


class TestAccess:

    def test_get_set(self):
        row = Row([1, 2, 3])
        row.set(1, 5)
        assert row.get(1) == 5.0
        row[2] = 7
        assert row[2] == 7.0

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range_fails_fast(self, index):
        row = Row([1, 2, 3])
        with pytest.raises(IndexError):
            row[index]
        with pytest.raises(IndexError):
            row[index] = 0.0


class TestOperations:

    def test_scale_in_place(self):
        row = Row([1, -2, 4])
        row.scale(0.5)
        np.testing.assert_array_equal(row.to_numpy(), [0.5, -1.0, 2.0])

    def test_imul(self):
        row = Row([1, 2])
        row *= 3
        np.testing.assert_array_equal(row.to_numpy(), [3.0, 6.0])

    def test_scaled_returns_new_row(self):
        row = Row([1, 2, 3])
        scaled = row.scaled(-2)
        np.testing.assert_array_equal(scaled.to_numpy(), [-2.0, -4.0, -6.0])
        np.testing.assert_array_equal(row.to_numpy(), [1.0, 2.0, 3.0])

    def test_mul_operator_does_not_mutate(self):
        row = Row([1, 2])
        product = row * 10
        assert product is not row
        assert row[0] == 1.0

    def test_add_in_place(self):
        row = Row([1, 2, 3])
        other = Row([10, 20, 30])
        row.add(other)
        np.testing.assert_array_equal(row.to_numpy(), [11.0, 22.0, 33.0])
        np.testing.assert_array_equal(other.to_numpy(), [10.0, 20.0, 30.0])

    def test_iadd(self):
        row = Row([1, 1])
        row += Row([2, 3])
        np.testing.assert_array_equal(row.to_numpy(), [3.0, 4.0])

    def test_add_width_mismatch(self):
        with pytest.raises(DimensionError):
            Row([1, 2]).add(Row([1, 2, 3]))

    def test_copy_is_independent(self):
        row = Row([1, 2])
        clone = row.copy()
        clone[0] = 5
        assert row[0] == 1.0

    def test_to_numpy_is_a_copy(self):
        row = Row([1, 2])
        arr = row.to_numpy()
        arr[0] = 42
        assert row[0] == 1.0

    def test_repr(self):
        assert repr(Row([1, 2], np.int64)) == "Row([1, 2], dtype=int64)"


class TestIntegerRows:
    """Integer rows keep integer values after construction too."""

    def test_set_rejects_fraction(self):
        row = Row([1, 2], np.int64)
        with pytest.raises(ValidationError, match="non-integral"):
            row.set(0, 1.5)
        assert row[0] == 1

    def test_set_accepts_integral_float(self):
        row = Row([1, 2], np.int64)
        row[1] = 4.0
        assert row[1] == 4
        assert row.dtype == np.int64

    @pytest.mark.parametrize("value", [np.nan, "a", [1, 2]])
    def test_set_rejects_non_scalar_values(self, value):
        row = Row([1.0, 2.0])
        with pytest.raises(ValidationError):
            row[0] = value

    def test_scale_by_fraction_rejected(self):
        row = Row([2, 4], np.int64)
        with pytest.raises(ValidationError, match="factor"):
            row.scale(0.5)
        np.testing.assert_array_equal(row.to_numpy(), [2, 4])

    def test_scale_by_integer(self):
        row = Row([2, 4], np.int64)
        row.scale(-3)
        np.testing.assert_array_equal(row.to_numpy(), [-6, -12])

    def test_add_float_row_rejected(self):
        row = Row([2, 4], np.int64)
        with pytest.raises(ValidationError, match="other"):
            row.add(Row([0.5, 0.5]))
        np.testing.assert_array_equal(row.to_numpy(), [2, 4])

    def test_float_row_accepts_integer_operands(self):
        row = Row([0.5, 1.5])
        row.add(Row([1, 1], np.int64))
        row.scale(2)
        np.testing.assert_array_equal(row.to_numpy(), [3.0, 5.0])

    def test_scaled_promotes_instead_of_failing(self):
        halves = Row([2, 4], np.int64).scaled(0.5)
        assert halves.dtype == np.float64
        np.testing.assert_array_equal(halves.to_numpy(), [1.0, 2.0])
