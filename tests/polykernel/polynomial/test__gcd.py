"""Tests for polynomial GCD and extended GCD."""

import hypothesis
import sympy

from polykernel.expression import expand
from polykernel.polynomial import (
    extended_gcd,
    gcd,
    leading_coefficient,
    remainder,
)
from polykernel.testing.strategies import integer_polynomials

x = sympy.Symbol("x")


class TestGcd:
    """Tests for gcd()."""

    def test_common_linear_factor(self):
        assert gcd(x, x**2 - 1, x - 1) == x - 1

    def test_shared_root(self):
        """(x-1)(x-2) and (x-2)(x+2) share x - 2."""
        assert gcd(x, x**2 - 3 * x + 2, x**2 - 4) == x - 2

    def test_coprime(self):
        assert gcd(x, x**2 + 1, x) == 1

    def test_both_zero(self):
        assert gcd(x, sympy.Integer(0), sympy.Integer(0)) == 0

    def test_second_zero_is_monic_first(self):
        assert gcd(x, 2 * x**2 + 4 * x, sympy.Integer(0)) == x**2 + 2 * x

    def test_first_zero_is_monic_second(self):
        assert gcd(x, sympy.Integer(0), 3 * x - 3) == x - 1

    def test_constants(self):
        assert gcd(x, sympy.Integer(6), sympy.Integer(4)) == 1

    def test_symmetric(self):
        u = x**3 - x
        v = x**2 + 2 * x + 1
        assert gcd(x, u, v) == gcd(x, v, u) == x + 1

    @hypothesis.given(
        integer_polynomials(x, max_degree=4),
        integer_polynomials(x, max_degree=4),
    )
    @hypothesis.settings(max_examples=30, deadline=None)
    def test_divides_both(self, u, v):
        g = gcd(x, u, v)
        assert leading_coefficient(x, g) == 1
        assert remainder(x, u, g) == 0
        assert remainder(x, v, g) == 0


class TestExtendedGcd:
    """Tests for extended_gcd()."""

    def test_both_zero(self):
        zero = sympy.Integer(0)
        assert extended_gcd(x, zero, zero) == (0, 0, 0)

    def test_divisor_is_gcd(self):
        assert extended_gcd(x, x**2 - 1, x - 1) == (x - 1, 0, 1)

    def test_coprime(self):
        assert extended_gcd(x, x**2 + 1, x) == (1, 1, -x)

    def test_normalized(self):
        g, a, b = extended_gcd(x, 2 * x**2 - 2, 4 * x - 4)
        assert g == x - 1
        assert expand(a * (2 * x**2 - 2) + b * (4 * x - 4)) == g

    @hypothesis.given(
        integer_polynomials(x, max_degree=4),
        integer_polynomials(x, max_degree=4),
    )
    @hypothesis.settings(max_examples=30, deadline=None)
    def test_bezout_identity(self, u, v):
        g, a, b = extended_gcd(x, u, v)
        assert expand(a * u + b * v) == g
        assert g == gcd(x, u, v)
