"""
Matrix: immutable value type for dense real matrices.

Wraps a read-only float64 array of shape (rows, cols) and provides
validation and metadata for the algebra pipeline. Follows the PyMatrix
Design pattern: build through a classmethod, never through __init__.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import ToleranceTier, DEFAULT_TOLERANCE
from pymatrix.core.exceptions import DimensionError
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_rectangular,
)


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Dense real matrix (rows x cols), row-major. Immutable after construction.

    Two matrices with identical shape and entries are equal and hash
    equal; there is no identity beyond value.

    Construction:
        Matrix.from_array([[1, 2], [3, 4]])
        Matrix.from_array(np.eye(3))
    """
    _data: NDArray[np.floating[Any]]
    _rows: int
    _cols: int

    @classmethod
    def from_array(cls, data: ArrayLike | Matrix, *, name: str = 'matrix') -> Matrix:
        """
        Build a Matrix from array-like data.

        Parameters
        ----------
        data : array-like or Matrix
            Nested sequence of rows or a 2D numpy array. A Matrix is
            returned unchanged.
        name : str
            Parameter name used in error messages.

        Raises
        ------
        DimensionError
            Empty, jagged, or not two-dimensional input.
        ValidationError
            Non-numeric, complex, or non-finite entries.
        """
        if isinstance(data, Matrix):
            return data

        if not isinstance(data, np.ndarray):
            if isinstance(data, (str, bytes)) or not hasattr(data, '__len__'):
                raise DimensionError(
                    f"{name}: expected a sequence of rows, got {type(data).__name__}"
                )
            check_rectangular(data, name)

        array = check_array(data, name)
        check_2d(array, name)
        check_finite(array, name)
        return cls._build(array)

    @classmethod
    def _build(cls, array: NDArray) -> Matrix:
        """Internal builder: freeze an already validated float64 2D array."""
        frozen = np.array(array, dtype=np.float64, copy=True)
        frozen.setflags(write=False)
        rows, cols = frozen.shape
        return cls(_data=frozen, _rows=rows, _cols=cols)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only entries, shape (rows, cols)."""
        return self._data

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """Dimensions (ordo) as (rows, cols)."""
        return (self._rows, self._cols)

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    def tolist(self) -> list[list[float]]:
        """Entries as a fresh nested list of Python floats."""
        return self._data.tolist()

    def allclose(self, other: ArrayLike | Matrix, tolerance: ToleranceTier = DEFAULT_TOLERANCE) -> bool:
        """Same shape and entries equal within the given tolerance tier."""
        other = Matrix.from_array(other, name='other')
        if other.shape != self.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol))

    def __getitem__(self, key):
        # m[i] -> read-only row, m[i][j] and m[i, j] -> entry
        return self._data[key]

    def __len__(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0 so hashing agrees with __eq__
        return hash((self.shape, (self._data + 0.0).tobytes()))

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._cols}, {self.tolist()})"
