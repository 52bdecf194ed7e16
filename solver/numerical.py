"""Number rendering and root verification using NumPy."""

import numpy as np

# Relative tolerance used when substituting a root back into P(x).
RESIDUAL_TOLERANCE = 1e-9


# ── Numeric formatting helpers ──────────────────────────────────────────

def _fmt_num(value: float, max_decimals=None) -> str:
    """Format a float as a plain decimal string.

    - Shortest digits that round-trip (``0.5833333333333334``).
    - Never uses exponent notation (``0.00001`` not ``1e-05``).
    - Integers without a decimal point (``7`` not ``7.0``).
    - ``-0`` is printed as ``0``.
    - With *max_decimals*, rounds first and strips trailing zeros.
    """
    value = float(value)
    if max_decimals is not None:
        value = round(value, max_decimals)
    value += 0.0
    return np.format_float_positional(value, trim="-")


def _fmt_complex(real: float, imag: float, max_decimals=None) -> str:
    """``a + bi`` / ``a - bi`` with *imag* taken as a signed value."""
    op = "-" if imag < 0 else "+"
    return f"{_fmt_num(real, max_decimals)} {op} {_fmt_num(abs(imag), max_decimals)}i"


# ── Verification ────────────────────────────────────────────────────────

def verify_roots(dense_coefficients, roots) -> list:
    """Substitute each root back into the polynomial.

    *dense_coefficients* is ordered highest exponent first (see
    ``solver.polynomial.to_dense``); *roots* may be real or complex.
    Returns one ``{"root", "residual", "ok"}`` dict per root.
    """
    coeffs = np.asarray(dense_coefficients, dtype=float)
    steps = []
    for root in roots:
        residual = abs(np.polyval(coeffs, root))
        # Size of the largest partial sum, so big coefficients get a
        # proportionally larger tolerance.
        scale = max(1.0, float(np.polyval(np.abs(coeffs), abs(root))))
        if isinstance(root, complex):
            label = _fmt_complex(root.real, root.imag)
        else:
            label = _fmt_num(root)
        steps.append({
            "root": label,
            "residual": float(residual),
            "ok": bool(residual <= RESIDUAL_TOLERANCE * scale),
        })
    return steps
