"""
Operation name constants for PyMatrix.

This module is the SINGLE SOURCE OF TRUTH for operation names.
Adapters and the evaluate() dispatcher import from here, never use
raw strings.

Usage:
    from pymatrix.core.operations import OP_INVERSE, BINARY_OPERATIONS

    if name in BINARY_OPERATIONS:
        b = read_matrix('B')
"""

OP_ADD = 'add'
OP_SUBTRACT = 'subtract'
OP_MULTIPLY = 'multiply'
OP_TRANSPOSE = 'transpose'
OP_DETERMINANT = 'determinant'
OP_INVERSE = 'inverse'
OP_SCALAR_MULTIPLY = 'scalar_multiply'

# Operations taking two matrices
BINARY_OPERATIONS = frozenset({OP_ADD, OP_SUBTRACT, OP_MULTIPLY})

# Operations taking one matrix (scalar_multiply also needs a scalar)
UNARY_OPERATIONS = frozenset({
    OP_TRANSPOSE,
    OP_DETERMINANT,
    OP_INVERSE,
    OP_SCALAR_MULTIPLY,
})

# Operations defined only on square matrices
SQUARE_OPERATIONS = frozenset({OP_DETERMINANT, OP_INVERSE})

# The fixed set offered by the adapters
ADAPTER_OPERATIONS = (
    OP_ADD,
    OP_SUBTRACT,
    OP_MULTIPLY,
    OP_TRANSPOSE,
    OP_DETERMINANT,
    OP_INVERSE,
)

ALL_OPERATIONS = BINARY_OPERATIONS | UNARY_OPERATIONS

__all__ = [
    'OP_ADD',
    'OP_SUBTRACT',
    'OP_MULTIPLY',
    'OP_TRANSPOSE',
    'OP_DETERMINANT',
    'OP_INVERSE',
    'OP_SCALAR_MULTIPLY',
    'BINARY_OPERATIONS',
    'UNARY_OPERATIONS',
    'SQUARE_OPERATIONS',
    'ADAPTER_OPERATIONS',
    'ALL_OPERATIONS',
]
