"""Turn an equation string into a stream of signed terms.

The pipeline is split in small steps so each one can be tested alone:

    preprocess     "5 * X^2 = 4"        -> ("5*x^2", "4")
    combine_sides  ("5*x^2", "4")       -> "+5*x^2-4"
    iter_tokens    "+5*x^2-4"           -> "+5*x^2", "-4"
    parse_term     "+5*x^2"             -> Term(+1, 5.0, True, 2)

Terms follow the grammar::

    term          := sign? number? variable_part?
    sign          := '+' | '-'
    number        := digits '.' digits? | '.' digits | digits
    variable_part := '*'? 'x' ('^' digits)?
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterator

from solver.errors import (
    EmptyInputError,
    InvalidTermError,
    InvalidTermFormatError,
    MalformedEquationError,
)

logger = logging.getLogger(__name__)

SIGNS = "+-"
DIGITS = frozenset("0123456789")
VARIABLE = "x"


@dataclass(frozen=True)
class Term:
    """One signed monomial, e.g. ``-3x^2`` is ``Term(-1, 3.0, True, 2)``."""

    sign: int
    magnitude: float
    has_variable: bool
    exponent: int

    @property
    def value(self) -> float:
        return self.sign * self.magnitude

    @property
    def key(self) -> int:
        """Exponent slot the term contributes to."""
        return self.exponent if self.has_variable else 0


# ── Preprocessing ───────────────────────────────────────────────────────

def preprocess(equation_str: str) -> tuple[str, str]:
    """Strip whitespace, lowercase and split on '='.

    Returns the raw ``(left, right)`` pair; either side may be empty.
    """
    compact = "".join(equation_str.split()).lower()
    if not compact:
        raise EmptyInputError("Equation is empty.")

    parts = compact.split("=")
    if len(parts) != 2:
        raise MalformedEquationError(
            "Equation must contain exactly one '=' sign. Example: 2 * x^2 + 3 * x = 7"
        )
    return parts[0], parts[1]


def _with_sign(side: str) -> str:
    if side and side[0] not in SIGNS:
        return "+" + side
    return side


def _negate_token(token: str) -> str:
    if token.startswith("-"):
        return "+" + token[1:]
    if token.startswith("+"):
        return "-" + token[1:]
    return "-" + token


def combine_sides(left_raw: str, right_raw: str) -> str:
    """Move every right-hand term to the left, i.e. build ``left - right``.

    Each right-hand term is negated on its own, so only the leading sign
    of a term is ever flipped.  A right side of exactly ``"0"`` adds
    nothing.
    """
    combined = _with_sign(left_raw)
    if right_raw == "0":
        return combined
    return combined + "".join(_negate_token(tok) for tok in iter_tokens(right_raw))


# ── Tokenizing ──────────────────────────────────────────────────────────

def iter_tokens(expression: str) -> Iterator[str]:
    """Yield one substring per term, left to right.

    A token starts at a sign (or at the start of *expression*) and runs
    up to, but not including, the next sign.  A sign with no body before
    the next sign or the end (the first "+" of "++x") is skipped.
    """
    start = 0
    for i in range(1, len(expression) + 1):
        if i < len(expression) and expression[i] not in SIGNS:
            continue
        token = expression[start:i]
        if token and token not in SIGNS:
            yield token
        start = i


# ── Term parsing ────────────────────────────────────────────────────────

class _TermScanner:
    """Recursive-descent matcher for a single term token."""

    def __init__(self, token: str):
        self.token = token
        self.pos = 0

    def _peek(self) -> str:
        return self.token[self.pos] if self.pos < len(self.token) else ""

    def _digits(self) -> str:
        start = self.pos
        while self._peek() in DIGITS:
            self.pos += 1
        return self.token[start:self.pos]

    def _fail(self):
        raise InvalidTermError(self.token)

    def at_end(self) -> bool:
        return self.pos >= len(self.token)

    def sign(self) -> int:
        ch = self._peek()
        if ch in ("+", "-"):
            self.pos += 1
            return -1 if ch == "-" else 1
        return 1

    def number(self):
        """Return the unsigned coefficient, or None when there is none."""
        start = self.pos
        whole = self._digits()
        if self._peek() == ".":
            self.pos += 1
            frac = self._digits()
            if not whole and not frac:
                self._fail()
        elif not whole:
            return None
        value = float(self.token[start:self.pos])
        if not math.isfinite(value):
            # too many digits for a double
            self._fail()
        return value

    def variable_part(self) -> tuple[bool, int]:
        """Return ``(has_variable, exponent)``."""
        if self._peek() == "*":
            self.pos += 1
            if self._peek() != VARIABLE:
                self._fail()
        if self._peek() != VARIABLE:
            return False, 0
        self.pos += 1
        if self._peek() != "^":
            return True, 1
        self.pos += 1
        digits = self._digits()
        if not digits:
            self._fail()
        return True, int(digits)


def parse_term(token: str) -> Term:
    """Parse one token produced by ``iter_tokens`` into a ``Term``."""
    scanner = _TermScanner(token)
    sign = scanner.sign()
    magnitude = scanner.number()
    has_variable, exponent = scanner.variable_part()

    if not scanner.at_end() or (magnitude is None and not has_variable):
        raise InvalidTermError(token)
    if not has_variable and exponent != 0:
        raise InvalidTermFormatError(token)

    return Term(sign, 1.0 if magnitude is None else magnitude, has_variable, exponent)


def parse_expression(expression: str) -> Iterator[Term]:
    """Lazily parse every term of an already-combined expression."""
    for token in iter_tokens(expression):
        yield parse_term(token)

