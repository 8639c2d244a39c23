"""
Input validation utilities for PyMatInv.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatinv.core.exceptions import ValidationError, DimensionError


def check_dtype(dtype: Any, name: str) -> np.dtype:
    """
    Validate that a dtype is a supported scalar kind.

    Args:
        dtype: Anything np.dtype() accepts
        name: Parameter name for error messages

    Returns:
        The normalized numpy dtype

    Raises:
        ValidationError: If dtype is not a floating or (non-bool) integer dtype
    """
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a dtype: {dtype!r}") from e

    if not (np.issubdtype(dt, np.floating) or np.issubdtype(dt, np.integer)):
        raise ValidationError(
            f"{name}: unsupported dtype {dt}, expected a floating or integer dtype"
        )
    return dt


def check_array(
    array: ArrayLike,
    name: str,
    dtype: Any = np.float64,
) -> NDArray[Any]:
    """
    Validate and convert input to a numpy array of the requested dtype.

    Accepts any array-like and converts to numpy array. Rejects ragged
    nesting and inputs that result in object or other non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target scalar dtype (floating or integer)

    Returns:
        numpy.ndarray with the requested dtype (always a fresh copy)

    Raises:
        DimensionError: If nested sequences are ragged
        ValidationError: If input cannot be converted to numeric array,
            contains NaN or Inf, or holds non-integral values for an
            integer dtype
    """
    dt = check_dtype(dtype, "dtype")

    try:
        result = np.asarray(array)
    except ValueError as e:
        # numpy refuses inhomogeneous nesting with ValueError
        raise DimensionError(f"{name}: ragged rows: {e}") from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if result.dtype != np.bool_ and not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    check_finite(result, name)

    if np.issubdtype(dt, np.integer) and np.issubdtype(result.dtype, np.floating):
        if not np.all(result == np.trunc(result)):
            raise ValidationError(
                f"{name}: non-integral values cannot be stored as {dt}"
            )

    return np.array(result, dtype=dt, copy=True)


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_scalar(value: Any, name: str, dtype: Any) -> Any:
    """
    Validate a single value for storage in a matrix of the given dtype.

    Applies the same rules as check_array, so an integer matrix refuses
    1.5 instead of truncating it.

    Returns:
        The value as a numpy scalar of dtype

    Raises:
        ValidationError: If value is non-numeric, non-finite, or not
            representable in dtype
        DimensionError: If value is not a scalar
    """
    result = check_array(value, name, dtype)
    check_ndim(result, 0, name)
    return result[()]


def check_castable(source: Any, target: np.dtype, name: str) -> None:
    """
    Verify values of dtype `source` can be written into a `target` array.

    Only same-kind casts are allowed: float into int is refused.

    Raises:
        ValidationError: If the cast would change kind
    """
    if not np.can_cast(source, target, casting='same_kind'):
        raise ValidationError(
            f"{name}: cannot write {np.dtype(source)} values into {target} storage"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[Any], name: str) -> None:
    """
    Verify no axis of the array has length zero.

    Raises:
        DimensionError: If the array has an empty axis
    """
    if array.size == 0:
        raise DimensionError(f"{name}: must not be empty, got shape {array.shape}")


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify an index lies in [0, bound).

    Out-of-range access is a precondition violation, so this raises the
    builtin IndexError rather than a library error. Negative indices are
    not wrapped around.

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexError: If index is outside [0, bound)
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{name}: index must be an integer, got {type(index).__name__}")
    if not 0 <= index < bound:
        raise IndexError(f"{name}: index {index} out of range [0, {bound})")
    return int(index)


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: must be an integer, got {value!r}")
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_range(low: int, high: int, names: tuple[str, str]) -> None:
    """
    Verify low <= high.

    Raises:
        ValidationError: If the range is empty
    """
    if low > high:
        raise ValidationError(
            f"{names[0]} ({low}) must be <= {names[1]} ({high})"
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a shape is square.

    Raises:
        DimensionError: If height != width
    """
    if shape[0] != shape[1]:
        raise DimensionError(
            f"{name}: expected a square matrix, got {shape[0]}x{shape[1]}"
        )


def check_same_height(
    lhs_shape: tuple[int, int],
    rhs_shape: tuple[int, int],
    names: tuple[str, str],
) -> None:
    """
    Verify two shapes have the same height (row count).

    Raises:
        DimensionError: If heights differ
    """
    if lhs_shape[0] != rhs_shape[0]:
        raise DimensionError(
            f"Inconsistent heights: {names[0]}={lhs_shape[0]}, {names[1]}={rhs_shape[0]}"
        )


def check_inner_dimensions(
    lhs_shape: tuple[int, int],
    rhs_shape: tuple[int, int],
) -> None:
    """
    Verify lhs width equals rhs height, as a product requires.

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if lhs_shape[1] != rhs_shape[0]:
        raise DimensionError(
            f"Cannot multiply {lhs_shape[0]}x{lhs_shape[1]} by "
            f"{rhs_shape[0]}x{rhs_shape[1]}: inner dimensions differ"
        )


def check_even_width(shape: tuple[int, int], name: str) -> None:
    """
    Verify a shape has an even width.

    Raises:
        DimensionError: If width is odd
    """
    if shape[1] % 2 != 0:
        raise DimensionError(
            f"{name}: width must be even to take the right half, got {shape[1]}"
        )


def check_same_width(lhs_width: int, rhs_width: int, names: tuple[str, str]) -> None:
    """
    Verify two rows have the same width.

    Raises:
        DimensionError: If widths differ
    """
    if lhs_width != rhs_width:
        raise DimensionError(
            f"Inconsistent widths: {names[0]}={lhs_width}, {names[1]}={rhs_width}"
        )
