"""Sparse coefficient maps: accumulation, reduced form and degree."""

import logging
import math
from typing import Iterable

import numpy as np

from solver.errors import EquationError
from solver.numerical import _fmt_num
from solver.parsing import Term

logger = logging.getLogger(__name__)

# exponent -> coefficient, never holding an exact 0.0 once accumulated
CoefficientMap = dict[int, float]

# Largest exponent handed to numpy.power; above it only the parity is kept.
_MAX_POWER = 2 ** 52


def accumulate(terms: Iterable[Term]) -> CoefficientMap:
    """Sum term values per exponent and drop entries that cancel exactly."""
    coefficients: CoefficientMap = {}
    for term in terms:
        coefficients[term.key] = coefficients.get(term.key, 0.0) + term.value
    for exp, c in coefficients.items():
        if not math.isfinite(c):
            raise EquationError(f"Coefficient of x^{exp} overflows a floating-point number.")
    pruned = {exp: c for exp, c in coefficients.items() if c != 0.0}
    logger.debug("coefficients %r (pruned %d)", pruned, len(coefficients) - len(pruned))
    return pruned


def degree(coefficients: CoefficientMap) -> int:
    """Highest exponent present, ``0`` for an empty map."""
    return max(coefficients, default=0)


def _format_term(exponent: int, coeff: float) -> str:
    sign = "-" if coeff < 0 else "+"
    magnitude = _fmt_num(abs(coeff))
    if exponent == 0:
        return f"{sign} {magnitude}"
    if exponent == 1:
        return f"{sign} {magnitude} x"
    return f"{sign} {magnitude} x^{exponent}"


def reduced_form(coefficients: CoefficientMap) -> str:
    """Render e.g. ``{2: 5.0, 1: 4.0, 0: -4.0}`` as ``+ 5 x^2 + 4 x - 4 = 0``."""
    if not coefficients:
        return "0 = 0"
    terms = [_format_term(exp, coefficients[exp])
             for exp in sorted(coefficients, reverse=True)]
    return f"{' '.join(terms)} = 0"


def to_dense(coefficients: CoefficientMap) -> list[float]:
    """Coefficients from the highest exponent down, zero-filled.

    This is the ordering ``numpy.polyval`` expects.  Only meant for the
    solvable degrees; use ``evaluate`` for arbitrary maps.
    """
    if not coefficients:
        return [0.0]
    top = degree(coefficients)
    return [coefficients.get(exp, 0.0) for exp in range(top, -1, -1)]


def evaluate(coefficients: CoefficientMap, x):
    """P(x) straight from the sparse map, one power per stored exponent.

    Works on scalars and NumPy arrays; overflow yields ``inf``/``nan``
    rather than a warning.
    """
    x = np.asarray(x, dtype=float)
    y = np.zeros_like(x)
    with np.errstate(over="ignore", invalid="ignore"):
        for exp, c in coefficients.items():
            if exp > _MAX_POWER:
                exp = _MAX_POWER + exp % 2
            y = y + c * np.power(x, float(exp))
    return y
