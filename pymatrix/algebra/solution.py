"""
Algebra solution types.

Contains the parameter payload and user-facing solution wrapper returned
by evaluate().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymatrix.core.result import Result
from pymatrix.algebra.design import Matrix


@dataclass(frozen=True)
class MatrixParams:
    """
    Parameter payload for one evaluated operation.

    value is a Matrix for every operation except determinant, where it
    is a float.
    """
    value: Matrix | float
    operation: str


@dataclass
class MatrixSolution:
    """
    User-facing result of evaluate().

    Wraps Result[MatrixParams] and provides convenient accessors.
    """
    _result: Result[MatrixParams]

    @property
    def value(self) -> Matrix | float:
        """The computed Matrix or scalar."""
        return self._result.params.value

    @property
    def operation(self) -> str:
        return self._result.params.operation

    @property
    def is_scalar(self) -> bool:
        """True when the operation produced a number rather than a Matrix."""
        return not isinstance(self._result.params.value, Matrix)

    @property
    def matrix(self) -> Matrix | None:
        """The result Matrix, or None for scalar results."""
        value = self._result.params.value
        return value if isinstance(value, Matrix) else None

    @property
    def scalar(self) -> float | None:
        """The result scalar, or None for Matrix results."""
        value = self._result.params.value
        return None if isinstance(value, Matrix) else value

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def result(self) -> Result[MatrixParams]:
        """The underlying Result envelope."""
        return self._result

    def __repr__(self) -> str:
        if self.is_scalar:
            return f"MatrixSolution({self.operation}, value={self.value!r})"
        m = self.matrix
        return f"MatrixSolution({self.operation}, {m.rows}x{m.cols})"
