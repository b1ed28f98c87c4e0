"""
Text parsing for the command-line adapter.

Dimensions are strict: anything but two positive integers is rejected.
Cells are lenient: an empty or unparsable cell becomes 0.0, the same as
an untouched input box.
"""

import math
import re

from pymatrix.core.exceptions import InvalidDimensionError, ValidationError
from pymatrix.core.validation import check_positive_int

_DIMENSION_SEPARATOR = re.compile(r'\s*[xX\s,]\s*')


def parse_dimension(text: str, name: str) -> int:
    """Parse one row or column count."""
    token = text.strip()
    try:
        value = int(token)
    except ValueError:
        raise InvalidDimensionError(
            f"{name}: must be a positive integer, got {text!r}",
            value=text,
        ) from None
    return check_positive_int(value, name)


def parse_dimensions(text: str, name: str) -> tuple[int, int]:
    """
    Parse an ordo given as ``"rows cols"`` (also ``"rows x cols"``).

    Raises:
        InvalidDimensionError: Not exactly two positive integers
    """
    parts = [p for p in _DIMENSION_SEPARATOR.split(text.strip()) if p]
    if len(parts) != 2:
        raise InvalidDimensionError(
            f"{name}: expected two positive integers 'rows cols', got {text!r}",
            value=text,
        )
    rows = parse_dimension(parts[0], f"{name} rows")
    cols = parse_dimension(parts[1], f"{name} columns")
    return rows, cols


def split_cells(text: str) -> list[str]:
    """
    Split a row into cell texts.

    With commas present each comma ends one cell, so ``"1,,2"`` keeps an
    empty middle cell. Otherwise cells are separated by whitespace.
    """
    text = text.strip()
    if not text:
        return []
    if ',' in text:
        return [c.strip() for c in text.split(',')]
    return text.split()


def parse_cell(text: str) -> float:
    """A finite float, or 0.0 for empty or unparsable text."""
    try:
        value = float(text.strip())
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def parse_row(text: str, cols: int, name: str) -> list[float]:
    """
    Parse one line of cells separated by commas or whitespace.

    Missing trailing cells are treated as empty (0.0).

    Raises:
        ValidationError: More cells than columns
    """
    cells = split_cells(text)
    if len(cells) > cols:
        raise ValidationError(
            f"{name}: expected at most {cols} values, got {len(cells)}"
        )
    values = [parse_cell(c) for c in cells]
    values.extend([0.0] * (cols - len(values)))
    return values


def parse_matrix_literal(text: str) -> list[list[float]]:
    """
    Parse ``"1 2; 3 4"`` into rows. Rows are separated by ``;``.

    Row lengths are not reconciled here; a jagged literal is reported by
    Matrix validation.
    """
    rows = []
    for chunk in text.split(';'):
        if not chunk.strip():
            continue
        rows.append([parse_cell(c) for c in split_cells(chunk)])
    return rows
