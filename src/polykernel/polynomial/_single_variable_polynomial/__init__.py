from ._single_variable_polynomial_classify import (
    is_monomial_sv,
    is_polynomial_sv,
)
from ._single_variable_polynomial_coefficient import (
    coefficient_degree_monomial_sv,
    coefficient_monomial_sv,
    coefficient_sv,
    coefficients_sv,
    leading_coefficient_degree_sv,
    leading_coefficient_sv,
)
from ._single_variable_polynomial_degree import degree_monomial_sv, degree_sv

__all__ = [
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
]
