"""Polynomial algebra over symbolic expressions.

Structural queries (classification, degree, coefficients) and univariate
algorithms (division, basis re-expansion, GCD) over SymPy expressions, with
a numeric bridge to NumPy power series.
"""

from ._degree_error import DegreeError
from ._domain_error import DomainError
from ._polynomial import (
    coefficient,
    coefficient_degree_monomial,
    coefficients,
    collect_terms,
    collect_terms_monomial,
    collect_terms_monomial_mv,
    collect_terms_mv,
    degree,
    degree_monomial,
    degree_monomial_mv,
    degree_mv,
    divide,
    extended_gcd,
    gcd,
    is_monomial,
    is_monomial_mv,
    is_polynomial,
    is_polynomial_mv,
    leading_coefficient,
    leading_coefficient_degree,
    polynomial_expansion,
    quot,
    remainder,
    symbols,
    total_degree,
    variables,
)
from ._polynomial_array import (
    polynomial_from_expression,
    polynomial_to_expression,
)
from ._polynomial_error import PolynomialError
from ._single_variable_polynomial import (
    coefficient_degree_monomial_sv,
    coefficient_monomial_sv,
    coefficient_sv,
    coefficients_sv,
    degree_monomial_sv,
    degree_sv,
    is_monomial_sv,
    is_polynomial_sv,
    leading_coefficient_degree_sv,
    leading_coefficient_sv,
)

__all__ = [
    # Exceptions
    "DegreeError",
    "DomainError",
    "PolynomialError",
    # Variables
    "symbols",
    "variables",
    # Classification
    "is_monomial",
    "is_monomial_mv",
    "is_polynomial",
    "is_polynomial_mv",
    # Degree
    "degree",
    "degree_monomial",
    "degree_monomial_mv",
    "degree_mv",
    "total_degree",
    # Coefficients
    "coefficient",
    "coefficient_degree_monomial",
    "coefficients",
    "leading_coefficient",
    "leading_coefficient_degree",
    # Like terms
    "collect_terms",
    "collect_terms_monomial",
    "collect_terms_monomial_mv",
    "collect_terms_mv",
    # Division
    "divide",
    "polynomial_expansion",
    "quot",
    "remainder",
    # GCD
    "extended_gcd",
    "gcd",
    # Single variable
    "coefficient_degree_monomial_sv",
    "coefficient_monomial_sv",
    "coefficient_sv",
    "coefficients_sv",
    "degree_monomial_sv",
    "degree_sv",
    "is_monomial_sv",
    "is_polynomial_sv",
    "leading_coefficient_degree_sv",
    "leading_coefficient_sv",
    # Numeric
    "polynomial_from_expression",
    "polynomial_to_expression",
]
