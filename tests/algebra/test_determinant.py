"""
Tests for determinant() and minor().

The 1x1 and 2x2 base cases and the cofactor expansion for n > 2 are
checked separately.
"""

import warnings

import numpy as np
import pytest

from pymatrix.algebra import Matrix, determinant, identity, minor, transpose
from pymatrix.algebra._cofactor import COFACTOR_WARN_ORDER
from pymatrix.core.exceptions import DimensionError, NotSquareError, ValidationError


class TestBaseCases:

    def test_1x1_is_the_entry(self):
        assert determinant([[-7.5]]) == -7.5

    def test_2x2_formula(self, a2):
        assert determinant(a2) == -2.0

    def test_2x2_singular(self):
        assert determinant([[1, 2], [2, 4]]) == 0.0

    def test_returns_python_float(self, a2):
        assert type(determinant(a2)) is float


class TestCofactorExpansion:

    def test_3x3_worked_example(self, a3):
        assert determinant(a3) == -15.0

    def test_3x3_sign_alternation(self):
        # only the j=1 term survives, so its sign must be negative
        m = [[0, 1, 0], [1, 0, 0], [0, 0, 1]]
        assert determinant(m) == -1.0

    def test_4x4_upper_triangular(self):
        m = np.triu(np.arange(1, 17, dtype=float).reshape(4, 4))
        assert determinant(m) == pytest.approx(1 * 6 * 11 * 16)

    def test_zero_first_row(self):
        assert determinant([[0, 0, 0], [1, 2, 3], [4, 5, 6]]) == 0.0

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
    def test_identity_is_one(self, n):
        assert determinant(identity(n)) == 1.0

    def test_transpose_invariant(self, rng):
        m = Matrix.from_array(rng.standard_normal((5, 5)))
        assert determinant(transpose(m)) == pytest.approx(determinant(m), rel=1e-10)

    def test_row_swap_flips_sign(self, a3):
        swapped = a3.data[[1, 0, 2]]
        assert determinant(swapped) == -determinant(a3)

    def test_matches_numpy(self, rng):
        x = rng.standard_normal((6, 6))
        assert determinant(x) == pytest.approx(np.linalg.det(x), rel=1e-9)

    def test_input_unchanged(self, a3):
        before = a3.tolist()
        determinant(a3)
        assert a3.tolist() == before


class TestPreconditions:

    def test_rejects_2x3(self, rect23):
        with pytest.raises(NotSquareError) as exc_info:
            determinant(rect23)
        assert exc_info.value.shape == (2, 3)
        assert exc_info.value.operation == "determinant"

    def test_rejects_column_vector(self):
        with pytest.raises(NotSquareError):
            determinant([[1], [2]])

    def test_warns_on_large_order(self):
        n = COFACTOR_WARN_ORDER + 1
        # diagonal matrix: every off-diagonal first-row entry is zero,
        # so the expansion stays cheap
        m = np.diag(np.arange(1, n + 1, dtype=float))
        with pytest.warns(RuntimeWarning, match="grows factorially"):
            det = determinant(m)
        assert det == pytest.approx(float(np.prod(np.arange(1, n + 1))))

    def test_no_warning_at_threshold(self):
        m = np.eye(COFACTOR_WARN_ORDER)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            determinant(m)


class TestMinor:

    def test_removes_row_and_column(self, a3):
        assert minor(a3, 0, 1).tolist() == [[-1.0, 1.0], [2.0, 1.0]]

    def test_last_row_and_column(self, a3):
        assert minor(a3, 2, 2).tolist() == [[1.0, 0.0], [-1.0, 3.0]]

    def test_rectangular(self, rect23):
        assert minor(rect23, 1, 0).tolist() == [[2.0, 3.0]]

    def test_rejects_single_row(self):
        with pytest.raises(DimensionError, match="at least 2 rows"):
            minor([[1, 2, 3]], 0, 0)

    def test_rejects_out_of_range(self, a3):
        with pytest.raises(ValidationError, match="out of range"):
            minor(a3, 3, 0)
