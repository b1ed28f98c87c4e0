"""
PyMatrix: elementary dense matrix arithmetic for Python.

Addition, subtraction, scalar and matrix multiplication, transpose,
determinant and inverse over small real matrices, with fail-fast shape
validation and a line-prompt command-line front end.

Submodules:
    algebra: Matrix value type and operations
    core: Exceptions, validation, result envelope
    cli: Command-line adapter
"""

__version__ = "0.1.0"

from pymatrix import algebra
from pymatrix.algebra import (
    Matrix,
    add,
    subtract,
    scalar_multiply,
    transpose,
    multiply,
    determinant,
    inverse,
    identity,
    evaluate,
)

__all__ = [
    "__version__",
    "algebra",
    "Matrix",
    "add",
    "subtract",
    "scalar_multiply",
    "transpose",
    "multiply",
    "determinant",
    "inverse",
    "identity",
    "evaluate",
]
