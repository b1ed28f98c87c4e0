"""
Rendering of results and errors for the command-line adapter.
"""

from pymatrix.algebra.design import Matrix
from pymatrix.core.exceptions import ErrorKind, PyMatrixError

DEFAULT_DECIMALS = 2

# One fixed headline per error kind; the exception message adds detail
ERROR_TEMPLATES = {
    ErrorKind.SHAPE_MISMATCH: "the dimensions of the matrices do not fit this operation.",
    ErrorKind.NOT_SQUARE: "this operation requires a square matrix.",
    ErrorKind.SINGULAR: "the matrix is singular and has no inverse.",
    ErrorKind.INVALID_DIMENSION: "rows and columns must be positive integers.",
    ErrorKind.INVALID_INPUT: "invalid input.",
}


def format_number(value: float, decimals: int = DEFAULT_DECIMALS) -> str:
    """Whole numbers without a fractional part, others to ``decimals`` places."""
    value = float(value) + 0.0
    if value.is_integer():
        return str(int(value))
    text = f"{value:.{decimals}f}"
    # -0.001 at 2 places would otherwise print as -0.00
    if float(text) == 0.0:
        text = text.lstrip('-')
    return text


def format_matrix(matrix: Matrix, decimals: int = DEFAULT_DECIMALS) -> str:
    """Right-aligned grid, one row per line, columns separated by two spaces."""
    cells = [[format_number(v, decimals) for v in row] for row in matrix]
    width = max(len(c) for row in cells for c in row)
    return "\n".join("  ".join(c.rjust(width) for c in row) for row in cells)


def format_value(value: Matrix | float, decimals: int = DEFAULT_DECIMALS) -> str:
    if isinstance(value, Matrix):
        return format_matrix(value, decimals)
    return format_number(value, decimals)


def format_error(error: PyMatrixError) -> str:
    """Headline for the error's kind followed by its detailed message."""
    headline = ERROR_TEMPLATES[error.kind]
    return f"Error: {headline}\n  {error}"
