"""Tests for numeric-coefficient single-variable specializations."""

import pytest
import sympy

from polykernel.expression import is_undefined, negative_infinity
from polykernel.polynomial import (
    DegreeError,
    coefficient_degree_monomial_sv,
    coefficient_monomial_sv,
    coefficient_sv,
    coefficients,
    coefficients_sv,
    degree,
    degree_monomial_sv,
    degree_sv,
    is_monomial_sv,
    is_polynomial,
    is_polynomial_sv,
    leading_coefficient_degree_sv,
    leading_coefficient_sv,
)

x, a = sympy.symbols("x a")


class TestClassification:
    """Tests for is_monomial_sv() and is_polynomial_sv()."""

    def test_numeric_monomial(self):
        assert is_monomial_sv(x, 3 * x**2)

    def test_symbolic_coefficient_rejected(self):
        assert not is_monomial_sv(x, a * x)

    def test_polynomial(self):
        assert is_polynomial_sv(x, x**2 + 1)

    def test_symbolic_constant_rejected(self):
        """The general form accepts a, the specialization does not."""
        assert is_polynomial(x, x**2 + a)
        assert not is_polynomial_sv(x, x**2 + a)


class TestDegree:
    """Tests for degree_monomial_sv() and degree_sv()."""

    def test_monomial(self):
        assert degree_monomial_sv(x, -4 * x**3) == 3

    def test_polynomial(self):
        assert degree_sv(x, 3 * x**2 + 2 * x) == 2

    def test_zero(self):
        assert degree_sv(x, sympy.Integer(0)) is negative_infinity

    def test_symbolic_coefficient(self):
        assert degree(x, a * x) == 1
        assert is_undefined(degree_sv(x, a * x))


class TestCoefficient:
    """Tests for the coefficient specializations."""

    def test_coefficient_monomial(self):
        assert coefficient_monomial_sv(x, -4 * x**3) == -4

    def test_coefficient_monomial_symbolic(self):
        assert is_undefined(coefficient_monomial_sv(x, a * x))

    def test_coefficient_degree_zero(self):
        assert coefficient_degree_monomial_sv(x, sympy.Integer(0)) == (
            0,
            negative_infinity,
        )

    def test_coefficient_degree(self):
        assert coefficient_degree_monomial_sv(x, 5 * x**2) == (5, 2)

    def test_coefficient(self):
        assert coefficient_sv(x, 1, 3 * x**2 + 2 * x + 1) == 2

    def test_leading_coefficient_degree(self):
        assert leading_coefficient_degree_sv(x, 3 * x**2 + 2 * x + 1) == (3, 2)

    def test_leading_coefficient(self):
        assert leading_coefficient_sv(x, 7 * x) == 7


class TestCoefficients:
    """Tests for coefficients_sv()."""

    def test_dense_vector(self):
        assert coefficients_sv(x, 3 * x**2 + 1) == (1, 0, 3)

    def test_symbolic_terms_dropped(self):
        assert coefficients(x, 3 * x**2 + a) == (a, 0, 3)
        assert coefficients_sv(x, 3 * x**2 + a) == (0, 0, 3)

    def test_no_terms_raises(self):
        with pytest.raises(DegreeError):
            coefficients_sv(x, a)
