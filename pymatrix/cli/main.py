"""
Command-line front end.

Evaluates one operation, either on literal matrices given as options or
on matrices typed in at a line prompt:

    pymatrix multiply --a "1 2; 3 4" --b "5 6; 7 8"
    pymatrix inverse --interactive
    pymatrix scalar_multiply --a "1 2; 3 4" --scalar 2

Errors raised by the core are caught here and rendered with one fixed
headline per ErrorKind.
"""

import argparse
import sys

from pymatrix import __version__
from pymatrix.algebra.design import Matrix
from pymatrix.algebra.solvers import evaluate
from pymatrix.cli._format import DEFAULT_DECIMALS, format_error, format_value
from pymatrix.cli._parsing import parse_dimensions, parse_matrix_literal, parse_row
from pymatrix.core.exceptions import PyMatrixError, ValidationError
from pymatrix.core.operations import (
    ADAPTER_OPERATIONS,
    BINARY_OPERATIONS,
    OP_MULTIPLY,
    OP_SCALAR_MULTIPLY,
    SQUARE_OPERATIONS,
)
from pymatrix.core.validation import (
    check_conformable,
    check_same_shape,
    check_square,
)

CLI_OPERATIONS = ADAPTER_OPERATIONS + (OP_SCALAR_MULTIPLY,)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pymatrix',
        description='Elementary matrix arithmetic: add, subtract, multiply, '
                    'transpose, determinant, inverse, scalar_multiply',
    )
    parser.add_argument(
        'operation',
        choices=CLI_OPERATIONS,
        help='Operation to evaluate',
    )
    parser.add_argument(
        '--a', '-a',
        metavar='ROWS',
        help='Matrix A, rows separated by ";" and cells by spaces, e.g. "1 2; 3 4"',
    )
    parser.add_argument(
        '--b', '-b',
        metavar='ROWS',
        help='Matrix B for add, subtract and multiply',
    )
    parser.add_argument(
        '--scalar', '-k',
        type=float,
        metavar='K',
        help='Real multiplier for scalar_multiply',
    )
    parser.add_argument(
        '--interactive', '-i',
        action='store_true',
        help='Prompt for dimensions and cells instead of reading --a/--b',
    )
    parser.add_argument(
        '--decimals', '-d',
        type=int,
        default=DEFAULT_DECIMALS,
        help=f'Decimal places for non-integer results (default {DEFAULT_DECIMALS})',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def prompt_matrix(name: str, rows: int, cols: int) -> Matrix:
    """Read ``rows`` lines of ``cols`` cells from the prompt."""
    print(f"Enter the {rows} row(s) of matrix {name}, {cols} value(s) per row:")
    data = [
        parse_row(input(f"  {name} row {i + 1}: "), cols, f"{name} row {i + 1}")
        for i in range(rows)
    ]
    return Matrix.from_array(data, name=name)


def prompt_operands(operation: str) -> tuple[Matrix, Matrix | None]:
    """
    Ask for the ordo of each operand, check it fits the operation, then
    ask for the cells.

    Shape preconditions are checked on the dimensions alone so that no
    cells are typed in for an operation that cannot run.
    """
    shape_a = parse_dimensions(input("Dimensions of matrix A (rows cols): "), 'A')
    if operation in SQUARE_OPERATIONS:
        check_square(shape_a, operation, 'A')

    shape_b = None
    if operation in BINARY_OPERATIONS:
        shape_b = parse_dimensions(input("Dimensions of matrix B (rows cols): "), 'B')
        if operation == OP_MULTIPLY:
            check_conformable(shape_a, shape_b, operation)
        else:
            check_same_shape(shape_a, shape_b, operation)

    a = prompt_matrix('A', *shape_a)
    b = prompt_matrix('B', *shape_b) if shape_b is not None else None
    return a, b


def literal_operands(operation: str, a_text: str | None, b_text: str | None) -> tuple[Matrix, Matrix | None]:
    if a_text is None:
        raise ValidationError(f"{operation}: matrix A is required (--a or --interactive)")
    a = Matrix.from_array(parse_matrix_literal(a_text), name='A')

    if operation in BINARY_OPERATIONS:
        if b_text is None:
            raise ValidationError(f"{operation}: matrix B is required (--b)")
        return a, Matrix.from_array(parse_matrix_literal(b_text), name='B')

    if b_text is not None:
        raise ValidationError(f"{operation}: takes a single matrix, got --b as well")
    return a, None


def check_options(args: argparse.Namespace) -> None:
    """
    Reject option combinations that would otherwise be ignored.

    Runs before any prompt so that nothing is typed in for a command that
    cannot run.
    """
    operation = args.operation
    if operation == OP_SCALAR_MULTIPLY and args.scalar is None:
        raise ValidationError(f"{operation}: requires a scalar (--scalar)")
    if operation != OP_SCALAR_MULTIPLY and args.scalar is not None:
        raise ValidationError(f"{operation}: does not take a scalar, got --scalar")
    if args.interactive:
        given = [flag for flag, text in (('--a', args.a), ('--b', args.b)) if text is not None]
        if given:
            raise ValidationError(
                f"{operation}: --interactive reads matrices from the prompt, "
                f"got {' and '.join(given)} as well"
            )
    elif args.a is None and args.b is not None:
        raise ValidationError(f"{operation}: matrix A is required (--a), got only --b")


def run(args: argparse.Namespace) -> int:
    try:
        check_options(args)
        if args.interactive or args.a is None:
            a, b = prompt_operands(args.operation)
        else:
            a, b = literal_operands(args.operation, args.a, args.b)
        solution = evaluate(args.operation, a, b, scalar=args.scalar)
    except PyMatrixError as e:
        print(format_error(e), file=sys.stderr)
        return 1
    except EOFError:
        print("Error: input ended before all values were entered.", file=sys.stderr)
        return 1

    print(f"Result of {args.operation}:")
    print(format_value(solution.value, args.decimals))
    for message in solution.warnings:
        print(f"Warning: {message}", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.decimals < 0:
        parser.error(f"--decimals must be >= 0, got {args.decimals}")
    return run(args)


if __name__ == '__main__':
    sys.exit(main())
