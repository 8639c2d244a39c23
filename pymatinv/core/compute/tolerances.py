"""
Tolerance tiers for matrix comparison.

Defines what "equal" and "zero" mean for each scalar kind:
- Floating kinds: absolute tolerance of 1e-11
- Integer kinds: exact comparison

Used by the scalar policy (pivot search, equality) and the test suite.
"""

from dataclasses import dataclass

import numpy as np

from pymatinv.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for scalar comparison."""
    atol: float
    exact: bool
    name: str
    description: str


# Floating kinds: cells within 1e-11 of each other are equal
FLOATING = ToleranceTier(
    atol=1e-11,
    exact=False,
    name='floating',
    description='Floating point — absolute tolerance 1e-11',
)

# Integer kinds: no tolerance
EXACT = ToleranceTier(
    atol=0.0,
    exact=True,
    name='exact',
    description='Integer — exact equality',
)

MATRIX_TOLERANCE = FLOATING.atol


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier for a numpy dtype."""
    dt = np.dtype(dtype)
    if np.issubdtype(dt, np.floating):
        return FLOATING
    if np.issubdtype(dt, np.integer):
        return EXACT
    raise ValidationError(
        f"unsupported scalar dtype {dt}, expected a floating or integer dtype"
    )
