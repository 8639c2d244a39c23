"""
Tests for SquareMatrix inversion.

Validates:
    - A^-1 x A and A x A^-1 equal the identity for invertible inputs
    - get_inverse() never mutates the receiver
    - invert() mutates in place on success and not at all on failure
    - Degenerate inputs raise DegenerateMatrixError
    - Agreement with numpy.linalg.inv on well-conditioned input
"""

import numpy as np
import pytest

from pymatinv import DegenerateMatrixError, SquareMatrix, identity
from pymatinv.core.exceptions import DimensionError


INVERTIBLE = [
    [[5.0]],
    [[2, 7], [4, 6]],
    [[0, 1], [1, 2]],
    [[0.7, 1.99], [24.1, 9999]],
    [[-1, 3, -3], [0, -6, 5], [-5, -3, 1]],
    [[7, 2, 1], [0, 3, -1], [-3, 4, -2]],
    [[2, 1, 0], [0, 2, 0], [2, 0, 1]],
    [[4, 0, 0, 0], [0, 0, 2, 0], [0, 1, 2, 0], [1, 0, 0, 1]],
    [[1, 2, 1, 0], [2, 1, 1, 1], [-1, 2, 1, -1], [1, 1, 1, 2]],
]

DEGENERATE = [
    [[10, 10], [10, 10]],
    [[2, 6], [1, 3]],
    [[0.001, 0.002], [0.003, 0.006]],
    [[1, 0, 0], [-2, 0, 0], [4, 6, 1]],
    [[0, 1, 0], [0, 0, 1], [0, 1, 0]],
    [[0, 1], [1, 0]],
]


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestSquareConstruction:

    def test_rejects_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            SquareMatrix([[1, 2, 3], [4, 5, 6]])

    def test_identity(self):
        eye = identity(3)
        assert isinstance(eye, SquareMatrix)
        assert eye.size == 3
        np.testing.assert_array_equal(eye.to_numpy(), np.eye(3))

    def test_identity_is_fresh(self):
        first = identity(2)
        first[0, 0] = 7
        assert identity(2)[0, 0] == 1.0

    def test_zeros(self):
        z = SquareMatrix.zeros(2)
        np.testing.assert_array_equal(z.to_numpy(), np.zeros((2, 2)))


# ═══════════════════════════════════════════════════════════════════════
# Invertible inputs
# ═══════════════════════════════════════════════════════════════════════


class TestInvertible:

    @pytest.mark.parametrize("rows", INVERTIBLE)
    def test_both_products_are_identity(self, rows):
        a = SquareMatrix(rows)
        a_inv = a.get_inverse()
        assert a_inv @ a == identity(a.size)
        assert a @ a_inv == identity(a.size)

    def test_one_by_one(self):
        assert SquareMatrix([[5.0]]).get_inverse() == SquareMatrix([[0.2]])

    def test_two_by_two_values(self):
        a_inv = SquareMatrix([[2, 7], [4, 6]]).get_inverse()
        assert a_inv == SquareMatrix([[-0.375, 0.4375], [0.25, -0.125]])

    def test_seven_by_seven(self, example_7x7):
        a = SquareMatrix(example_7x7)
        assert a.get_inverse() @ a == identity(7)

    @pytest.mark.parametrize("size", range(1, 9))
    def test_identity_is_self_inverse(self, size):
        assert identity(size).get_inverse() == identity(size)

    def test_matches_numpy(self, well_conditioned):
        a_inv = SquareMatrix(well_conditioned).get_inverse()
        np.testing.assert_allclose(
            a_inv.to_numpy(), np.linalg.inv(well_conditioned), rtol=1e-10, atol=1e-12,
        )

    def test_double_inverse_round_trips(self, well_conditioned):
        a = SquareMatrix(well_conditioned)
        assert a.get_inverse().get_inverse() == a


# ═══════════════════════════════════════════════════════════════════════
# Mutation semantics
# ═══════════════════════════════════════════════════════════════════════


class TestMutation:

    def test_get_inverse_leaves_receiver(self):
        a = SquareMatrix([[2, 7], [4, 6]])
        a.get_inverse()
        np.testing.assert_array_equal(a.to_numpy(), [[2, 7], [4, 6]])

    def test_get_inverse_is_independent(self):
        a = SquareMatrix([[2, 7], [4, 6]])
        a_inv = a.get_inverse()
        a_inv[0, 0] = 100
        assert a.get_inverse()[0, 0] == -0.375

    def test_invert_in_place(self):
        a = SquareMatrix([[2, 7], [4, 6]])
        returned = a.invert()
        assert returned is a
        assert a == SquareMatrix([[-0.375, 0.4375], [0.25, -0.125]])

    def test_invert_twice_restores(self):
        a = SquareMatrix([[2, 7], [4, 6]])
        a.invert().invert()
        assert a == SquareMatrix([[2, 7], [4, 6]])

    def test_failed_invert_leaves_receiver(self):
        a = SquareMatrix([[10, 10], [10, 10]])
        with pytest.raises(DegenerateMatrixError):
            a.invert()
        np.testing.assert_array_equal(a.to_numpy(), [[10, 10], [10, 10]])


# ═══════════════════════════════════════════════════════════════════════
# Degenerate inputs
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerate:

    @pytest.mark.parametrize("rows", DEGENERATE)
    def test_raises(self, rows):
        a = SquareMatrix(rows)
        with pytest.raises(DegenerateMatrixError):
            a.get_inverse()

    def test_diagnostics(self):
        with pytest.raises(DegenerateMatrixError) as excinfo:
            SquareMatrix([[10, 10], [10, 10]]).get_inverse()
        assert excinfo.value.pivot_index == 1
        assert excinfo.value.shape == (2, 4)

    def test_all_zero(self):
        with pytest.raises(DegenerateMatrixError):
            SquareMatrix.zeros(3).get_inverse()
