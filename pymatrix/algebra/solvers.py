"""
Matrix operations.

Pure functions over Matrix values: add(), subtract(), scalar_multiply(),
transpose(), multiply(), determinant(), inverse(), identity(), minor().
Each validates its own preconditions before computing and returns a new
Matrix (or a float for determinant). Inputs are never modified.

evaluate() dispatches by operation name and wraps the value in a
MatrixSolution with timing and the warnings the operation raised; it is
the entry point used by the command-line adapter.
"""

from __future__ import annotations

import warnings
from typing import Any, Union

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.operations import (
    ALL_OPERATIONS,
    BINARY_OPERATIONS,
    OP_ADD,
    OP_DETERMINANT,
    OP_INVERSE,
    OP_MULTIPLY,
    OP_SCALAR_MULTIPLY,
    OP_SUBTRACT,
    OP_TRANSPOSE,
)
from pymatrix.core.result import Result
from pymatrix.core.validation import (
    check_conformable,
    check_index,
    check_positive_int,
    check_same_shape,
    check_scalar,
    check_square,
)
from pymatrix.algebra._cofactor import (
    COFACTOR_WARN_ORDER,
    cofactor_array,
    det_cofactor,
    minor_array,
)
from pymatrix.algebra.design import Matrix
from pymatrix.algebra.solution import MatrixParams, MatrixSolution


MatrixLike = Union[ArrayLike, Matrix]


def _ensure_matrix(data: MatrixLike, name: str) -> Matrix:
    """Convert raw array to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix.from_array(data, name=name)


def _large_order_warning(m: Matrix, operation: str) -> str | None:
    if m.rows > COFACTOR_WARN_ORDER:
        return (
            f"{operation}: cofactor expansion on a {m.rows}x{m.cols} matrix "
            f"grows factorially with the order and may be very slow"
        )
    return None


def _determinant(a: Matrix, warn_list: list[str]) -> float:
    check_square(a.shape, OP_DETERMINANT, 'A')
    message = _large_order_warning(a, OP_DETERMINANT)
    if message is not None:
        warn_list.append(message)
    return det_cofactor(a.data)


def _inverse(a: Matrix, warn_list: list[str]) -> Matrix:
    check_square(a.shape, OP_INVERSE, 'A')
    message = _large_order_warning(a, OP_INVERSE)
    if message is not None:
        warn_list.append(message)

    x = a.data
    det = det_cofactor(x)
    if det == 0:
        raise SingularMatrixError(
            f"{OP_INVERSE}: matrix is singular (determinant is 0), it has no inverse",
            matrix_name='A',
            determinant=det,
            shape=a.shape,
        )

    n = a.rows
    if n == 1:
        adjugate = np.ones((1, 1))
    elif n == 2:
        adjugate = np.array([
            [x[1, 1], -x[0, 1]],
            [-x[1, 0], x[0, 0]],
        ])
    else:
        adjugate = cofactor_array(x).T

    return Matrix._build(adjugate * (1.0 / det))


def add(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Elementwise sum A + B.

    Raises
    ------
    ShapeMismatchError
        If A and B do not have identical dimensions.
    """
    a = _ensure_matrix(a, 'A')
    b = _ensure_matrix(b, 'B')
    check_same_shape(a.shape, b.shape, OP_ADD)
    return Matrix._build(a.data + b.data)


def scalar_multiply(a: MatrixLike, k: float) -> Matrix:
    """Every entry of A multiplied by the real scalar k."""
    a = _ensure_matrix(a, 'A')
    k = check_scalar(k, 'k')
    return Matrix._build(a.data * k)


def subtract(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Elementwise difference A - B, computed as A + (-1)B.

    Raises
    ------
    ShapeMismatchError
        If A and B do not have identical dimensions.
    """
    a = _ensure_matrix(a, 'A')
    b = _ensure_matrix(b, 'B')
    check_same_shape(a.shape, b.shape, OP_SUBTRACT)
    return add(a, scalar_multiply(b, -1))


def transpose(a: MatrixLike) -> Matrix:
    """A' with dimensions (cols x rows); result[j][i] == A[i][j]."""
    a = _ensure_matrix(a, 'A')
    return Matrix._build(a.data.T)


def multiply(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Matrix product A x B of shape (A.rows x B.cols).

    Raises
    ------
    ShapeMismatchError
        If A.cols != B.rows.
    """
    a = _ensure_matrix(a, 'A')
    b = _ensure_matrix(b, 'B')
    check_conformable(a.shape, b.shape, OP_MULTIPLY)
    return Matrix._build(a.data @ b.data)


def determinant(a: MatrixLike) -> float:
    """
    Determinant by recursive cofactor expansion along the first row.

    1x1 and 2x2 are computed directly; larger orders expand into
    (n-1)x(n-1) minors with alternating signs.

    Raises
    ------
    NotSquareError
        If A is not square.
    """
    warn_list: list[str] = []
    value = _determinant(_ensure_matrix(a, 'A'), warn_list)
    for message in warn_list:
        warnings.warn(message, RuntimeWarning, stacklevel=2)
    return value


def inverse(a: MatrixLike) -> Matrix:
    """
    Inverse as adjugate / determinant.

    The singularity test is exact: only a determinant of exactly 0.0 is
    rejected. Nearly singular input yields a (possibly huge) inverse.

    Raises
    ------
    NotSquareError
        If A is not square. Checked before the determinant is computed.
    SingularMatrixError
        If det(A) == 0.
    """
    warn_list: list[str] = []
    value = _inverse(_ensure_matrix(a, 'A'), warn_list)
    for message in warn_list:
        warnings.warn(message, RuntimeWarning, stacklevel=2)
    return value


def identity(n: int) -> Matrix:
    """
    The n x n identity matrix.

    Raises
    ------
    InvalidDimensionError
        If n is not a positive integer.
    """
    n = check_positive_int(n, 'n')
    return Matrix._build(np.eye(n))


def minor(a: MatrixLike, row: int, col: int) -> Matrix:
    """
    Submatrix of A with row ``row`` and column ``col`` removed.

    Raises
    ------
    DimensionError
        If A has a single row or column (the minor would be empty).
    ValidationError
        If an index is out of range.
    """
    a = _ensure_matrix(a, 'A')
    if a.rows < 2 or a.cols < 2:
        raise DimensionError(
            f"minor: A must have at least 2 rows and 2 columns, got {a.rows}x{a.cols}"
        )
    row = check_index(row, a.rows, 'row')
    col = check_index(col, a.cols, 'col')
    return Matrix._build(minor_array(a.data, row, col))


def evaluate(
    operation: str,
    a: MatrixLike,
    b: MatrixLike | None = None,
    *,
    scalar: float | None = None,
) -> MatrixSolution:
    """
    Run one operation by name.

    Parameters
    ----------
    operation : str
        'add', 'subtract', 'multiply', 'transpose', 'determinant',
        'inverse' or 'scalar_multiply'.
    a : array-like or Matrix
        First (or only) operand.
    b : array-like or Matrix, optional
        Second operand. Required for binary operations, rejected otherwise.
    scalar : float, optional
        Multiplier for 'scalar_multiply'.

    Returns
    -------
    MatrixSolution wrapping the Matrix or float result.

    Raises
    ------
    ValidationError
        Unknown operation or wrong operand arity, plus anything the
        operation itself raises.
    """
    if operation not in ALL_OPERATIONS:
        raise ValidationError(
            f"Unknown operation: {operation!r}. "
            f"Must be one of {sorted(ALL_OPERATIONS)}"
        )

    if operation in BINARY_OPERATIONS and b is None:
        raise ValidationError(f"{operation}: requires a second matrix B")
    if operation not in BINARY_OPERATIONS and b is not None:
        raise ValidationError(f"{operation}: takes a single matrix, got B as well")
    if operation == OP_SCALAR_MULTIPLY and scalar is None:
        raise ValidationError(f"{operation}: requires a scalar")
    if operation != OP_SCALAR_MULTIPLY and scalar is not None:
        raise ValidationError(f"{operation}: does not take a scalar")

    timer = Timer()
    timer.start()

    with timer.section('validation'):
        operands = [_ensure_matrix(a, 'A')]
        if b is not None:
            operands.append(_ensure_matrix(b, 'B'))

    warn_list: list[str] = []
    with timer.section(operation):
        value = _dispatch(operation, operands, scalar, warn_list)

    timer.stop()

    for message in warn_list:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    info: dict[str, Any] = {
        'operation': operation,
        'shapes': [m.shape for m in operands],
        'result_shape': value.shape if isinstance(value, Matrix) else None,
    }
    if scalar is not None:
        info['scalar'] = float(scalar)

    result = Result(
        params=MatrixParams(value=value, operation=operation),
        info=info,
        timing=timer.result(),
        backend_name='cpu_cofactor',
        warnings=tuple(warn_list),
    )
    return MatrixSolution(_result=result)


def _dispatch(
    operation: str,
    operands: list[Matrix],
    scalar: float | None,
    warn_list: list[str],
) -> Matrix | float:
    a = operands[0]
    if operation == OP_ADD:
        return add(a, operands[1])
    if operation == OP_SUBTRACT:
        return subtract(a, operands[1])
    if operation == OP_MULTIPLY:
        return multiply(a, operands[1])
    if operation == OP_TRANSPOSE:
        return transpose(a)
    if operation == OP_DETERMINANT:
        return _determinant(a, warn_list)
    if operation == OP_INVERSE:
        return _inverse(a, warn_list)
    return scalar_multiply(a, scalar)
