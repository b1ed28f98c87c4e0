"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_rectangular: row count, empty rows, jagged rows
    - check_array: conversion, dtype coercion, non-numeric rejection
    - check_finite: NaN/Inf detection
    - check_2d: dimensionality and empty axes
    - check_square / check_same_shape / check_conformable: shape preconditions
    - check_scalar / check_positive_int / check_index: scalar arguments
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    InvalidDimensionError,
    NotSquareError,
    ShapeMismatchError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_conformable,
    check_finite,
    check_index,
    check_positive_int,
    check_rectangular,
    check_same_shape,
    check_scalar,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_rectangular
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRectangular:
    """Every row is inspected, not only the first."""

    def test_accepts_rectangular(self):
        check_rectangular([[1, 2, 3], [4, 5, 6]], "A")

    def test_accepts_single_cell(self):
        check_rectangular([[7]], "A")

    def test_rejects_no_rows(self):
        with pytest.raises(DimensionError, match="at least one row"):
            check_rectangular([], "A")

    def test_rejects_empty_row(self):
        with pytest.raises(DimensionError, match="at least one column"):
            check_rectangular([[]], "A")

    def test_rejects_jagged_last_row(self):
        """Shorter row at the end is caught, not just a mismatch in row 1."""
        with pytest.raises(DimensionError, match="row 2 has 1"):
            check_rectangular([[1, 2], [3, 4], [5]], "A")

    def test_rejects_scalar_row(self):
        with pytest.raises(DimensionError, match="not a sequence"):
            check_rectangular([1, 2, 3], "A")

    def test_rejects_string_row(self):
        with pytest.raises(DimensionError, match="not a sequence"):
            check_rectangular(["12", "34"], "A")

    def test_name_in_message(self):
        with pytest.raises(DimensionError, match="^B:"):
            check_rectangular([], "B")


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-real data."""

    def test_nested_list_to_float64(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert result.shape == (2, 2)
        assert result.dtype == np.float64

    def test_int_array_promoted(self):
        result = check_array(np.array([[1, 2]], dtype=np.int32), "A")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        original = np.array([[1.0, 2.0]])
        result = check_array(original, "A")
        result[0, 0] = 99.0
        assert original[0, 0] == 1.0

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([[None, 1]], "A")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"]], "A")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([[True, False]], "A")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([[1 + 2j, 0]], "A")

    def test_int_beyond_int64(self):
        result = check_array([[2**70, 1]], "A")
        assert result.dtype == np.float64
        assert result[0, 0] == float(2**70)

    def test_fraction_and_decimal(self):
        result = check_array([[Fraction(1, 3), Decimal("2.5")]], "A")
        np.testing.assert_array_equal(result, [[1 / 3, 2.5]])

    def test_rejects_fraction_mixed_with_string(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([[Fraction(1, 2), "2"]], "A")

    def test_rejects_int_too_large_for_float64(self):
        with pytest.raises(ValidationError, match="cannot convert to float64"):
            check_array([[10**400]], "A")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_accepts_finite(self):
        check_finite(np.array([[1.0, -2.0]]), "A")

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="1 NaN, 0 Inf"):
            check_finite(np.array([[np.nan, 1.0]]), "A")

    def test_rejects_inf(self):
        with pytest.raises(ValidationError, match="0 NaN, 2 Inf"):
            check_finite(np.array([[np.inf, -np.inf]]), "A")


class TestCheck2D:

    def test_accepts_2d(self):
        check_2d(np.zeros((2, 3)), "A")

    def test_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_2d(np.zeros(3), "A")

    def test_rejects_3d(self):
        with pytest.raises(DimensionError, match="got 3D"):
            check_2d(np.zeros((2, 2, 2)), "A")

    def test_rejects_empty_axis(self):
        with pytest.raises(DimensionError, match="at least 1 row and 1 column"):
            check_2d(np.zeros((0, 3)), "A")


# ═══════════════════════════════════════════════════════════════════════
# Shape preconditions
# ═══════════════════════════════════════════════════════════════════════


class TestShapePreconditions:

    def test_square_accepts(self):
        check_square((3, 3), "determinant", "A")

    def test_square_rejects_with_attributes(self):
        with pytest.raises(NotSquareError) as exc_info:
            check_square((2, 3), "determinant", "A")
        assert exc_info.value.shape == (2, 3)
        assert exc_info.value.operation == "determinant"
        assert "2x3" in str(exc_info.value)

    def test_same_shape_accepts(self):
        check_same_shape((2, 3), (2, 3), "add")

    @pytest.mark.parametrize("right", [(3, 3), (2, 2), (3, 2)])
    def test_same_shape_rejects_rows_or_cols(self, right):
        with pytest.raises(ShapeMismatchError) as exc_info:
            check_same_shape((2, 3), right, "add")
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == right

    def test_conformable_accepts(self):
        check_conformable((2, 3), (3, 5), "multiply")

    def test_conformable_rejects(self):
        with pytest.raises(ShapeMismatchError, match=r"columns of A \(3\) must equal rows of B \(2\)"):
            check_conformable((2, 3), (2, 3), "multiply")


# ═══════════════════════════════════════════════════════════════════════
# Scalar arguments
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    @pytest.mark.parametrize("value", [2, -1.5, np.float64(0.25), np.int64(3)])
    def test_accepts_reals(self, value):
        assert check_scalar(value, "k") == float(value)

    @pytest.mark.parametrize("value", [True, "2", 1 + 1j, None])
    def test_rejects_non_reals(self, value):
        with pytest.raises(ValidationError, match="expected a real number"):
            check_scalar(value, "k")

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_rejects_non_finite(self, value):
        with pytest.raises(ValidationError, match="must be finite"):
            check_scalar(value, "k")


class TestCheckPositiveInt:

    def test_accepts_positive(self):
        assert check_positive_int(4, "rows") == 4

    def test_accepts_numpy_int(self):
        assert check_positive_int(np.int64(2), "rows") == 2

    @pytest.mark.parametrize("value", [0, -3])
    def test_rejects_non_positive(self, value):
        with pytest.raises(InvalidDimensionError) as exc_info:
            check_positive_int(value, "rows")
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", [2.0, "3", True, None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(InvalidDimensionError, match="positive integer"):
            check_positive_int(value, "rows")


class TestCheckIndex:

    def test_accepts_in_range(self):
        assert check_index(2, 3, "row") == 2

    @pytest.mark.parametrize("index", [-1, 3])
    def test_rejects_out_of_range(self, index):
        with pytest.raises(ValidationError, match="out of range"):
            check_index(index, 3, "row")

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            check_index(1.0, 3, "row")
