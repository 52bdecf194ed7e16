"""
PolySolver — command-line entry point.

Usage:  python main.py "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"
"""

import logging
import sys

from solver import BadArgumentsError, EquationError, report_lines, solve_polynomial
from solver.config import get_settings

logger = logging.getLogger("polysolver")


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings["log_level"], logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if len(argv) != 1:
            raise BadArgumentsError(
                f"Expected exactly one equation argument, got {len(argv)}."
            )
        result = solve_polynomial(argv[0], settings)
    except EquationError as e:
        logger.debug("rejected input %r", argv)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in report_lines(result):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
