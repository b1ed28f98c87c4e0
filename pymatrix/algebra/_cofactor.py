"""
Cofactor expansion kernels.

Plain recursive implementations operating on validated float64 arrays.
No pivoting: cost is O(n!) in the order of the matrix, which is fine for
the small matrices this package targets. Callers warn past
COFACTOR_WARN_ORDER.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

# Orders above this trigger a RuntimeWarning (11! ~ 4e7 recursive calls)
COFACTOR_WARN_ORDER = 10


def minor_array(a: NDArray[np.floating[Any]], row: int, col: int) -> NDArray[np.floating[Any]]:
    """Submatrix of ``a`` with ``row`` and ``col`` removed."""
    return np.delete(np.delete(a, row, axis=0), col, axis=1)


def cofactor_sign(row: int, col: int) -> float:
    return 1.0 if (row + col) % 2 == 0 else -1.0


def det_cofactor(a: NDArray[np.floating[Any]]) -> float:
    """
    Determinant by cofactor expansion along the first row.

    Args:
        a: Square float64 array, order >= 1

    Returns:
        Determinant as a Python float
    """
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    det = 0.0
    for j in range(n):
        if a[0, j] == 0.0:
            # term vanishes; skip the recursive call
            continue
        det += cofactor_sign(0, j) * float(a[0, j]) * det_cofactor(minor_array(a, 0, j))
    return det


def cofactor_array(a: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Matrix of cofactors, C[i, j] = (-1)^(i+j) * det(minor(a, i, j)).

    Args:
        a: Square float64 array, order >= 2

    Returns:
        Array of the same shape as ``a``
    """
    n = a.shape[0]
    c = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            c[i, j] = cofactor_sign(i, j) * det_cofactor(minor_array(a, i, j))
    return c
