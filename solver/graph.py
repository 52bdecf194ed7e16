"""
Graph builder for PolySolver.

Produces a dark-themed matplotlib Figure of the reduced polynomial
``P(x) = 0`` with its real roots marked.  Used by the HTTP API to
return a PNG next to the text report.
"""

import numpy as np
from matplotlib.figure import Figure

from solver.polynomial import evaluate

# ── palette ────────────────────────────────────────────────────────────────
C_BG       = "#0f0f0f"
C_AX       = "#181818"
C_GRID     = "#252525"
C_TICK     = "#666666"
C_SPINE    = "#333333"
C_LINE1    = "#1a8cff"   # P(x)
C_DOT      = "#4caf50"   # real root
C_TEXT     = "#cccccc"

_FORMS = {
    0: "c = 0",
    1: "bx + c = 0",
    2: "ax² + bx + c = 0",
}

_CASES = {
    "trivial": (
        "Identity — Everything Cancels",
        "Every term cancelled, leaving 0 = 0.\n"
        "No coefficient is left to examine.",
    ),
    "infinite_solutions": (
        "Identity — Infinitely Many Solutions",
        "The equation reduces to 0 = 0, which is always true.\n"
        "Every real number is a solution.",
    ),
    "no_solution": (
        "Contradiction — No Solution",
        "The equation reduces to a non-zero constant equal to 0.\n"
        "No value of x can satisfy it.",
    ),
    "one_solution": (
        "One Real Solution",
        "The curve touches the x-axis exactly once.",
    ),
    "two_real_solutions": (
        "Two Real Solutions (Δ > 0)",
        "The parabola crosses the x-axis twice.\n"
        "x = (-b ± √Δ) / 2a",
    ),
    "two_complex_solutions": (
        "Two Complex Solutions (Δ < 0)",
        "The parabola never reaches the x-axis.\n"
        "The roots are the complex conjugates (-b ± i√|Δ|) / 2a.",
    ),
    "unsolvable": (
        "Degree Above 2 — Not Solved",
        "Only constant, linear and quadratic equations are solved.",
    ),
}


def _style_axes(ax, fig):
    fig.patch.set_facecolor(C_BG)
    ax.set_facecolor(C_AX)
    ax.tick_params(colors=C_TICK, labelsize=9)
    ax.xaxis.label.set_color(C_TEXT)
    ax.yaxis.label.set_color(C_TEXT)
    ax.title.set_color(C_TEXT)
    for spine in ax.spines.values():
        spine.set_edgecolor(C_SPINE)
    ax.grid(True, color=C_GRID, linewidth=0.8, linestyle="--", alpha=0.7)
    ax.axhline(0, color=C_SPINE, linewidth=0.8)
    ax.axvline(0, color=C_SPINE, linewidth=0.8)


def analyze_result(result: dict) -> dict:
    """
    Return a dict describing the mathematical case of *result*.

    Keys: case, case_label, form, description, degree, graphable.
    """
    deg = result["degree"]
    case = result["status"]
    label, description = _CASES[case]
    return {
        "case":        case,
        "case_label":  label,
        "form":        _FORMS.get(deg, f"degree-{deg} polynomial = 0"),
        "description": description,
        "degree":      deg,
        "graphable":   bool(result["coefficients"]),
    }


def _real_roots(result: dict) -> list:
    return [r for r in result.get("roots", []) if not isinstance(r, complex)]


def _x_window(result: dict) -> tuple:
    """Pick an x range that shows every real root, or the vertex."""
    roots = _real_roots(result)
    coefficients = result["coefficients"]
    if roots:
        lo, hi = min(roots), max(roots)
    elif result["degree"] == 2:
        lo = hi = -coefficients.get(1, 0.0) / (2.0 * coefficients[2])
    else:
        lo = hi = 0.0
    pad = max((hi - lo) * 0.5, 5.0)
    return lo - pad, hi + pad


def build_figure(result: dict, points: int = 400):
    """
    Build and return a dark-themed matplotlib Figure for *result*.
    Returns None when there is nothing to plot (every term cancelled).
    """
    analysis = analyze_result(result)
    if not analysis["graphable"]:
        return None

    x_lo, x_hi = _x_window(result)
    x_range = np.linspace(x_lo, x_hi, points)
    y = evaluate(result["coefficients"], x_range)

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.plot(x_range, y, color=C_LINE1, linewidth=2,
            label=f"P(x): {result['reduced_form']}")

    roots = _real_roots(result)
    if roots:
        ax.scatter(roots, [0.0] * len(roots), color=C_DOT, s=80, zorder=5,
                   label="Real roots: " + ", ".join(f"{r:g}" for r in roots))
        for r in roots:
            ax.axvline(r, color=C_DOT, linewidth=1, linestyle=":", alpha=0.6)

    ax.set_title(analysis["case_label"], color=C_TEXT, fontsize=10)
    ax.set_xlabel("x", color=C_TEXT)
    ax.set_ylabel("P(x)", color=C_TEXT)

    # Clip y-axis to avoid extreme values
    y_finite = y[np.isfinite(y)]
    if len(y_finite):
        ylo, yhi = np.percentile(y_finite, 2), np.percentile(y_finite, 98)
        pad = max((yhi - ylo) * 0.2, 1.0)
        ax.set_ylim(min(ylo, 0.0) - pad, max(yhi, 0.0) + pad)

    ax.legend(fontsize=8, facecolor="#1e1e1e", edgecolor=C_SPINE,
              labelcolor=C_TEXT)
    fig.tight_layout(pad=1.2)
    return fig
