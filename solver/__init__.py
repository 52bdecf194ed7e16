"""PolySolver: reduce and solve polynomial equations of degree 0 to 2."""

from solver.engine import report_lines, solve_polynomial
from solver.errors import (
    BadArgumentsError,
    EmptyInputError,
    EquationError,
    InvalidTermError,
    InvalidTermFormatError,
    MalformedEquationError,
)

__all__ = [
    "solve_polynomial",
    "report_lines",
    "EquationError",
    "BadArgumentsError",
    "EmptyInputError",
    "MalformedEquationError",
    "InvalidTermError",
    "InvalidTermFormatError",
]
