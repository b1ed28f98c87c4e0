"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except float64 promotion of numeric input)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from decimal import Decimal
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    InvalidDimensionError,
    NotSquareError,
    ShapeMismatchError,
    ValidationError,
)


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a nested sequence has at least one row and equal, non-zero row lengths.

    numpy would either raise or build an object array for jagged input,
    so this runs on the raw nested sequence before conversion. Every row
    is inspected, not only the first.

    Args:
        rows: Nested sequence (list of lists, tuple of tuples)
        name: Parameter name for error messages

    Raises:
        DimensionError: If there are no rows, a row is empty, or lengths differ
    """
    if len(rows) == 0:
        raise DimensionError(f"{name}: must have at least one row, got 0")

    lengths = []
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not hasattr(row, '__len__'):
            raise DimensionError(
                f"{name}: row {i} is not a sequence ({type(row).__name__})"
            )
        lengths.append(len(row))

    if lengths[0] == 0:
        raise DimensionError(f"{name}: rows must have at least one column, got 0")

    bad = [i for i, n in enumerate(lengths) if n != lengths[0]]
    if bad:
        raise DimensionError(
            f"{name}: jagged rows, row 0 has {lengths[0]} columns but "
            f"row {bad[0]} has {lengths[bad[0]]}"
        )


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Object arrays are accepted only when every entry is a real scalar
    (large ints, Fraction, Decimal). Mixed or non-numeric data,
    non-numeric dtypes, complex numbers and booleans are rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        result = _real_object_array(result, name)

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex entries are not supported")

    return result.astype(np.float64)


def _real_object_array(result: NDArray[Any], name: str) -> NDArray[np.floating[Any]]:
    """
    Convert an object array whose entries are all real scalars.

    numpy keeps ints beyond int64, Fraction and Decimal as objects; these
    are promoted to float64 like any other real input.
    """
    for value in result.ravel():
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (numbers.Real, Decimal)):
            raise ValidationError(
                f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
            )
    try:
        return result.astype(np.float64)
    except (OverflowError, ValueError) as e:
        raise ValidationError(f"{name}: cannot convert to float64: {e}") from e


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
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


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional with at least one row and one column.

    Raises:
        DimensionError: If array is not 2D or has an empty axis
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )
    if array.shape[0] < 1 or array.shape[1] < 1:
        raise DimensionError(
            f"{name}: expected at least 1 row and 1 column, got shape {array.shape}"
        )


def check_square(shape: tuple[int, int], operation: str, name: str) -> None:
    """
    Verify a shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise NotSquareError(
            f"{operation}: {name} must be square, got {rows}x{cols}",
            operation=operation,
            shape=shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical dimensions.

    Raises:
        ShapeMismatchError: If row or column counts differ
    """
    if left != right:
        raise ShapeMismatchError(
            f"{operation}: operands must have the same dimensions, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_conformable(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the inner dimensions of a product agree (left cols == right rows).

    Raises:
        ShapeMismatchError: If left.cols != right.rows
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: columns of A ({left[1]}) must equal rows of B ({right[0]}), "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real, finite scalar and return it as float.

    Raises:
        ValidationError: If value is not a finite real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    result = float(value)
    if not np.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_positive_int(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Accepts Python and numpy integers (not bool). Strings are the
    adapters' business and must be parsed before reaching here.

    Raises:
        InvalidDimensionError: If value is not an integer >= 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise InvalidDimensionError(
            f"{name}: must be a positive integer, got {value!r}",
            value=value,
        )
    if value < 1:
        raise InvalidDimensionError(
            f"{name}: must be a positive integer, got {value}",
            value=value,
        )
    return int(value)


def check_index(index: Any, size: int, name: str) -> int:
    """
    Validate a 0-based row or column index.

    Raises:
        ValidationError: If index is not an integer in [0, size)
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, numbers.Integral):
        raise ValidationError(f"{name}: index must be an integer, got {index!r}")
    if not 0 <= index < size:
        raise ValidationError(f"{name}: index {index} out of range [0, {size})")
    return int(index)
