"""
Core infrastructure for PyMatrix.

Shared abstractions and utilities used by the algebra module and the
command-line adapter.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and ErrorKind taxonomy
    validation: Input validators
    operations: Operation name constants
    compute: Timing and tolerance tiers
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    ErrorKind,
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    NotSquareError,
    InvalidDimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "ErrorKind",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "NotSquareError",
    "InvalidDimensionError",
    "NumericalError",
    "SingularMatrixError",
]
