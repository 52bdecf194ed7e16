"""Tests for number rendering and NumPy root verification."""

import pytest

from solver.numerical import _fmt_complex, _fmt_num, verify_roots


# ── _fmt_num helper ──────────────────────────────────────────────────────

class TestFmtNum:
    def test_integer(self):
        assert _fmt_num(7.0) == "7"

    def test_clean_decimal(self):
        assert _fmt_num(2.5) == "2.5"

    def test_shortest_round_trip(self):
        assert _fmt_num(2 / 3) == "0.6666666666666666"
        assert float(_fmt_num(0.1 + 0.2)) == 0.1 + 0.2

    def test_no_exponent_notation(self):
        assert _fmt_num(1e-05) == "0.00001"
        assert _fmt_num(1e20) == "100000000000000000000"

    def test_negative_zero(self):
        assert _fmt_num(-0.0) == "0"

    def test_max_decimals(self):
        assert _fmt_num(2 / 3, 3) == "0.667"
        assert _fmt_num(1.50000, 4) == "1.5"
        assert _fmt_num(-0.0001, 2) == "0"


class TestFmtComplex:
    def test_positive_imaginary(self):
        assert _fmt_complex(-1.0, 2.0) == "-1 + 2i"

    def test_negative_imaginary(self):
        assert _fmt_complex(0.5, -0.25) == "0.5 - 0.25i"


# ── verify_roots ────────────────────────────────────────────────────────

class TestVerifyRoots:
    def test_real_roots(self):
        # x² - 1
        steps = verify_roots([1.0, 0.0, -1.0], [1.0, -1.0])
        assert [s["root"] for s in steps] == ["1", "-1"]
        assert all(s["ok"] for s in steps)
        assert all(s["residual"] == 0.0 for s in steps)

    def test_complex_roots(self):
        steps = verify_roots([1.0, 0.0, 1.0], [1j, -1j])
        assert [s["root"] for s in steps] == ["0 + 1i", "0 - 1i"]
        assert all(s["ok"] for s in steps)

    def test_wrong_root_is_flagged(self):
        steps = verify_roots([1.0, -3.0], [2.0])
        assert steps[0]["ok"] is False
        assert steps[0]["residual"] == pytest.approx(1.0)

    def test_no_roots(self):
        assert verify_roots([1.0, 0.0, 1.0], []) == []
