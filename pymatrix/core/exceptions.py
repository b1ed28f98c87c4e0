"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Every exception carries an ErrorKind so that
adapters can map a failure to one fixed message template without
inspecting the exception class.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import Enum


class ErrorKind(Enum):
    """Taxonomy of invalid-input conditions. None of them are retriable."""
    SHAPE_MISMATCH = 'shape_mismatch'
    NOT_SQUARE = 'not_square'
    SINGULAR = 'singular'
    INVALID_DIMENSION = 'invalid_dimension'
    INVALID_INPUT = 'invalid_input'


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    kind: ErrorKind = ErrorKind.INVALID_INPUT


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised for jagged rows, empty matrices, or arrays that are not 2D.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand dimensions violate an operation's shape precondition.

    Attributes:
        operation: Name of the operation that rejected the operands
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """
    kind = ErrorKind.SHAPE_MISMATCH

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    A square matrix was required but a non-square one was given.

    Attributes:
        operation: Name of the operation that requires a square matrix
        shape: Shape of the offending matrix
    """
    kind = ErrorKind.NOT_SQUARE

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class InvalidDimensionError(ValidationError):
    """
    A requested row or column count is not a positive integer.

    Attributes:
        value: The rejected value, as received
    """
    kind = ErrorKind.INVALID_DIMENSION

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from the values of the entries rather
    than from the shape of the operands.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular (determinant exactly zero).

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed
        shape: Shape of the matrix
    """
    kind = ErrorKind.SINGULAR

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.shape = shape
