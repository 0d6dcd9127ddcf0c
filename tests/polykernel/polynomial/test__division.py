"""Tests for polynomial division."""

import hypothesis
import sympy

from polykernel.expression import compare, expand, is_undefined
from polykernel.polynomial import degree, divide, quot, remainder
from polykernel.testing.strategies import integer_polynomials

x, y, a = sympy.symbols("x y a")


class TestDivide:
    """Tests for divide()."""

    def test_exact_division(self):
        """(x^2 + 3x + 2) / (x + 1) = x + 2 with remainder 0."""
        assert divide(x, x**2 + 3 * x + 2, x + 1) == (x + 2, 0)

    def test_cubic(self):
        """(x^3 - 1) / (x - 1) = x^2 + x + 1."""
        assert divide(x, x**3 - 1, x - 1) == (x**2 + x + 1, 0)

    def test_division_with_remainder(self):
        """(x^2 + 1) / (x - 1) = x + 1 with remainder 2."""
        assert divide(x, x**2 + 1, x - 1) == (x + 1, 2)

    def test_non_monic_divisor(self):
        q, r = divide(x, x**2, 2 * x + 1)
        assert q == x / 2 - sympy.Rational(1, 4)
        assert r == sympy.Rational(1, 4)

    def test_dividend_smaller_degree(self):
        """When deg(u) < deg(v), quotient is 0, remainder is u."""
        assert divide(x, 2 * x + 1, x**2) == (0, 2 * x + 1)

    def test_scalar_divisor(self):
        """Divisor of degree 0 divides every coefficient."""
        assert divide(x, 4 * x**2 + 2, sympy.Integer(2)) == (2 * x**2 + 1, 0)

    def test_divisor_free_of_symbol(self):
        assert divide(x, x**2, y) == (x**2 / y, 0)

    def test_unexpanded_dividend(self):
        assert divide(x, (x + 1) * (x + 2), x + 1) == (x + 2, 0)

    def test_symbolic_coefficients(self):
        u = a * x**3 + x + 1
        v = 2 * x**2 + a
        q, r = divide(x, u, v)
        assert expand(q * v + r) == expand(u)
        assert compare(degree(x, r), degree(x, v)) < 0

    def test_undefined_dividend(self):
        q, r = divide(x, sympy.sin(x), x + 1)
        assert is_undefined(q)
        assert is_undefined(r)

    def test_undefined_divisor(self):
        q, r = divide(x, x + 1, sympy.sin(x))
        assert is_undefined(q)
        assert is_undefined(r)

    @hypothesis.given(
        integer_polynomials(x, max_degree=6),
        integer_polynomials(x, min_degree=1, max_degree=3),
    )
    @hypothesis.settings(max_examples=50, deadline=None)
    def test_division_identity(self, u, v):
        q, r = divide(x, u, v)
        assert expand(q * v + r - u) == 0
        assert compare(degree(x, r), degree(x, v)) < 0


class TestQuotRemainder:
    """Tests for quot() and remainder()."""

    def test_quot(self):
        assert quot(x, x**2 + 1, x - 1) == x + 1

    def test_remainder(self):
        assert remainder(x, x**2 + 1, x - 1) == 2
