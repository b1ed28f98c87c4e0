"""
Dense matrix algebra.

Public API:
    Matrix                  - Immutable matrix value type
    add(a, b)               - Elementwise sum
    subtract(a, b)          - Elementwise difference
    scalar_multiply(a, k)   - Scale every entry
    transpose(a)            - Swap rows and columns
    multiply(a, b)          - Matrix product
    determinant(a)          - Cofactor-expansion determinant
    inverse(a)              - Adjugate / determinant
    identity(n)             - n x n identity
    minor(a, i, j)          - Remove row i and column j
    evaluate(op, a, b)      - Dispatch by operation name
"""

from pymatrix.algebra.design import Matrix
from pymatrix.algebra.solution import MatrixParams, MatrixSolution
from pymatrix.algebra.solvers import (
    add,
    subtract,
    scalar_multiply,
    transpose,
    multiply,
    determinant,
    inverse,
    identity,
    minor,
    evaluate,
)

__all__ = [
    "add",
    "subtract",
    "scalar_multiply",
    "transpose",
    "multiply",
    "determinant",
    "inverse",
    "identity",
    "minor",
    "evaluate",
    "Matrix",
    "MatrixParams",
    "MatrixSolution",
]
