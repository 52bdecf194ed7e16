"""Exceptions raised by the polynomial pipeline.

All of them derive from ``ValueError`` so callers that already guard the
solver with ``except ValueError`` keep working.
"""


class EquationError(ValueError):
    """Base class for every input error reported to the user."""


class BadArgumentsError(EquationError):
    """The command line did not carry exactly one equation."""


class EmptyInputError(EquationError):
    """The equation is empty once whitespace is removed."""


class MalformedEquationError(EquationError):
    """The equation does not contain exactly one '=' sign."""


class InvalidTermError(EquationError):
    """A term does not match the term grammar."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f"Invalid term: {term!r}")


class InvalidTermFormatError(EquationError):
    """A constant term carries an exponent."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f"Invalid term format: {term!r}")
