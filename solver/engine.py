"""Polynomial equation solver for degrees 0, 1 and 2."""

"""
Parses a single-variable polynomial equation such as "5 * x^2 + 4 * x = 4",
reduces it to ``P(x) = 0`` and solves it with floating-point arithmetic.
Every call returns a result dict with the reduced form, the degree, the
solutions and a step-by-step trail of how they were obtained.
"""

import logging
import math
import sys
import time
from datetime import datetime

import numpy as np

from solver.config import get_settings
from solver.numerical import _fmt_complex, _fmt_num, verify_roots
from solver.parsing import combine_sides, parse_expression, preprocess
from solver.polynomial import accumulate, degree, reduced_form, to_dense

logger = logging.getLogger(__name__)

# Only the discriminant is compared against an epsilon; coefficients are
# pruned on exact zero.
DISCRIMINANT_EPSILON = sys.float_info.epsilon

MAX_SOLVABLE_DEGREE = 2

_DEGREE_NAMES = {
    0: "constant",
    1: "linear",
    2: "quadratic",
    3: "cubic",
    4: "quartic",
    5: "quintic",
}


def _degree_name(deg: int) -> str:
    """Return the conventional name for a polynomial of the given degree."""
    return _DEGREE_NAMES.get(deg, f"degree-{deg} polynomial")


# ── Degree-specific solvers ─────────────────────────────────────────────
#
# Each returns (status, roots, answer_lines, step).  *roots* holds floats
# or complex numbers; *answer_lines* are the printed result lines.

def _solve_constant(coefficients: dict, fmt) -> tuple:
    if 0 not in coefficients:
        # Everything cancelled: nothing is reported beyond the degree.
        return "trivial", [], [], {
            "description": "Every term cancelled",
            "expression": "0 = 0",
            "explanation": "All coefficients cancel out, leaving no term to examine.",
        }
    c = coefficients[0]
    if c == 0.0:
        return "infinite_solutions", [], ["Infinity possible solution"], {
            "description": "Check the constant",
            "expression": "0 = 0",
            "explanation": "The equation is always true, so every x is a solution.",
        }
    return "no_solution", [], ["No solution"], {
        "description": "Check the constant",
        "expression": f"{fmt(c)} = 0",
        "explanation": f"{fmt(c)} = 0 is never true, so no value of x satisfies it.",
    }


def _solve_linear(coefficients: dict, fmt) -> tuple:
    b = coefficients[1]
    c = coefficients.get(0, 0.0)
    root = -c / b
    return "one_solution", [root], ["The solution is:", fmt(root)], {
        "description": "Isolate x",
        "expression": f"x = -({fmt(c)}) / {fmt(b)}",
        "explanation": f"Move the constant to the right and divide by {fmt(b)}.",
    }


def _quadratic_coefficients(coefficients: dict) -> tuple:
    return coefficients[2], coefficients.get(1, 0.0), coefficients.get(0, 0.0)


def _discriminant(coefficients: dict) -> float:
    a, b, c = _quadratic_coefficients(coefficients)
    return b * b - 4.0 * a * c


def _solve_quadratic(coefficients: dict, fmt) -> tuple:
    a, b, c = _quadratic_coefficients(coefficients)
    discriminant = _discriminant(coefficients)
    step = {
        "description": "Compute the discriminant",
        "expression": f"Δ = b² - 4ac = {fmt(discriminant)}",
        "explanation": f"With a = {fmt(a)}, b = {fmt(b)}, c = {fmt(c)}.",
    }

    if discriminant > 0.0:
        sqrt_d = math.sqrt(discriminant)
        root1 = (-b + sqrt_d) / (2.0 * a)
        root2 = (-b - sqrt_d) / (2.0 * a)
        lines = [
            "The discriminant is strictly positive, the two solutions are:",
            fmt(root1),
            fmt(root2),
        ]
        return "two_real_solutions", [root1, root2], lines, step

    if abs(discriminant) < DISCRIMINANT_EPSILON:
        root = -b / (2.0 * a)
        return "one_solution", [root], ["The solution is:", fmt(root)], step

    real_part = -b / (2.0 * a)
    imaginary_part = math.sqrt(abs(discriminant)) / abs(2.0 * a)
    lines = [
        "The discriminant is strictly negative, the two complex solutions are:",
        fmt.complex(real_part, imaginary_part),
        fmt.complex(real_part, -imaginary_part),
    ]
    roots = [complex(real_part, imaginary_part), complex(real_part, -imaginary_part)]
    return "two_complex_solutions", roots, lines, step


class _Formatter:
    """Bind the configured precision to the number formatters."""

    def __init__(self, max_decimals=None):
        self.max_decimals = max_decimals

    def __call__(self, value: float) -> str:
        return _fmt_num(value, self.max_decimals)

    def complex(self, real: float, imag: float) -> str:
        return _fmt_complex(real, imag, self.max_decimals)


# ── Main public entry point ─────────────────────────────────────────────

def solve_polynomial(equation_str: str, settings: dict = None) -> dict:
    """
    Reduce and solve a polynomial equation in ``x``.

    Returns a dict with:
      - equation, reduced_form, degree, coefficients
      - status, roots, solutions, discriminant, final_answer
      - steps, verification_steps, summary

    Raises a ``solver.errors.EquationError`` (a ``ValueError``) on bad input.
    """
    t_start = time.perf_counter()
    settings = get_settings() if settings is None else settings
    fmt = _Formatter(settings.get("max_decimals"))

    left_raw, right_raw = preprocess(equation_str)
    combined = combine_sides(left_raw, right_raw)
    terms = list(parse_expression(combined))
    coefficients = accumulate(terms)
    deg = degree(coefficients)
    reduced = reduced_form(coefficients)
    logger.debug("reduced %r to %r (degree %d)", equation_str, reduced, deg)

    steps = [
        {
            "description": "Starting with the original equation",
            "expression": f"{left_raw or '0'} = {right_raw or '0'}",
            "explanation": "Whitespace is removed and the variable is read case-insensitively.",
        },
        {
            "description": "Move every term to the left side",
            "expression": f"{combined or '0'} = 0",
            "explanation": "Each term of the right side changes sign as it crosses the '='.",
        },
        {
            "description": "Combine like terms",
            "expression": reduced,
            "explanation": f"This is a {_degree_name(deg)} equation (degree {deg}).",
        },
    ]

    discriminant = None
    if deg == 0:
        status, roots, lines, step = _solve_constant(coefficients, fmt)
    elif deg == 1:
        status, roots, lines, step = _solve_linear(coefficients, fmt)
    elif deg == MAX_SOLVABLE_DEGREE:
        status, roots, lines, step = _solve_quadratic(coefficients, fmt)
        discriminant = _discriminant(coefficients)
    else:
        status, roots = "unsolvable", []
        lines = ["The polynomial degree is strictly greater than 2, I can't solve."]
        step = {
            "description": "Classify the degree",
            "expression": reduced,
            "explanation": f"A {_degree_name(deg)} equation is beyond what this solver handles.",
        }
    steps.append(step)

    for i, s in enumerate(steps, 1):
        s["step_number"] = i

    verification_steps = []
    if settings.get("verify_roots", True) and roots:
        verification_steps = verify_roots(to_dense(coefficients), roots)
        for check in verification_steps:
            if not check["ok"]:
                logger.warning("root %s leaves residual %g", check["root"], check["residual"])

    runtime_ms = round((time.perf_counter() - t_start) * 1000, 2)
    return {
        "equation": equation_str,
        "reduced_form": reduced,
        "degree": deg,
        "coefficients": dict(coefficients),
        "status": status,
        "roots": roots,
        "solutions": lines[1:] if len(lines) > 1 else [],
        "discriminant": discriminant,
        "final_answer": "\n".join(lines),
        "steps": steps,
        "verification_steps": verification_steps,
        "summary": {
            "runtime_ms": runtime_ms,
            "total_steps": len(steps),
            "verification_steps": len(verification_steps),
            "validation_status": "pass" if all(v["ok"] for v in verification_steps) else "fail",
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "library": f"NumPy {np.__version__}",
        },
    }


def report_lines(result: dict) -> list:
    """The text report printed by the command line, one entry per line."""
    lines = [
        f"Reduced form: {result['reduced_form']}",
        f"Polynomial degree: {result['degree']}",
    ]
    if result["final_answer"]:
        lines.extend(result["final_answer"].split("\n"))
    return lines
