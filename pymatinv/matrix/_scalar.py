"""
Scalar policy: what zero, equality and reciprocal mean for a numeric kind.

Floating dtypes compare within the FLOATING tolerance tier; integer dtypes
compare exactly and normalize with an integer-only reciprocal.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any
import warnings

import numpy as np
from numpy.typing import NDArray

from pymatinv.core.compute.tolerances import ToleranceTier, select_tolerance
from pymatinv.core.exceptions import NumericalPrecisionWarning
from pymatinv.core.validation import check_dtype


@dataclass(frozen=True)
class ScalarPolicy:
    """
    Comparison and normalization rules for one numpy dtype.

    Attributes:
        dtype: The scalar dtype
        tolerance: Tolerance tier selected for the dtype
    """
    dtype: np.dtype
    tolerance: ToleranceTier

    @property
    def exact(self) -> bool:
        return self.tolerance.exact

    def zero(self) -> Any:
        return self.dtype.type(0)

    def one(self) -> Any:
        return self.dtype.type(1)

    def is_zero(self, x: Any) -> bool:
        """True if x is zero-equivalent under this kind."""
        if self.exact:
            return bool(x == 0)
        return bool(abs(x) <= self.tolerance.atol)

    def equal(self, a: Any, b: Any) -> bool:
        if self.exact:
            return bool(a == b)
        return bool(abs(a - b) <= self.tolerance.atol)

    def arrays_equal(self, a: NDArray[Any], b: NDArray[Any]) -> bool:
        """Cellwise equal() over two arrays of identical shape."""
        if self.exact:
            return bool(np.array_equal(a, b))
        return bool(np.all(np.abs(a - b) <= self.tolerance.atol))

    def reciprocal(self, x: Any) -> Any:
        """
        1 / x in this kind.

        For integer kinds the quotient is truncated toward zero, so only
        unit pivots (+1, -1) give a true reciprocal; anything else yields 0
        and a NumericalPrecisionWarning. Zero yields 0 without a warning of
        its own; row_reduce reports zero pivots itself.
        """
        if not self.exact:
            return self.one() / x

        if x == 0:
            return self.zero()
        if abs(x) != 1:
            warnings.warn(
                f"integer normalization by non-unit pivot {x} truncates to 0",
                NumericalPrecisionWarning,
                stacklevel=3,
            )
        quotient = 1 // x if x > 0 else -(1 // -x)
        return self.dtype.type(quotient)


@lru_cache(maxsize=None)
def _policy_for(dt: np.dtype) -> ScalarPolicy:
    return ScalarPolicy(dtype=dt, tolerance=select_tolerance(dt))


def scalar_policy(dtype: Any) -> ScalarPolicy:
    """
    Look up the policy for a dtype.

    Raises:
        ValidationError: If dtype is not a floating or integer dtype
    """
    return _policy_for(check_dtype(dtype, "dtype"))
