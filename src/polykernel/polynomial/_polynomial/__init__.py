from ._polynomial_classify import (
    is_monomial,
    is_monomial_mv,
    is_polynomial,
    is_polynomial_mv,
)
from ._polynomial_coefficient import (
    coefficient,
    coefficient_degree_monomial,
    leading_coefficient,
    leading_coefficient_degree,
)
from ._polynomial_coefficients import coefficients
from ._polynomial_collect_terms import (
    collect_terms,
    collect_terms_monomial,
    collect_terms_monomial_mv,
    collect_terms_mv,
)
from ._polynomial_degree import (
    degree,
    degree_monomial,
    degree_monomial_mv,
    degree_mv,
    total_degree,
)
from ._polynomial_divide import divide, quot, remainder
from ._polynomial_expansion import polynomial_expansion
from ._polynomial_gcd import extended_gcd, gcd
from ._variables import symbols, variables

__all__ = [
    "coefficient",
    "coefficient_degree_monomial",
    "coefficients",
    "collect_terms",
    "collect_terms_monomial",
    "collect_terms_monomial_mv",
    "collect_terms_mv",
    "degree",
    "degree_monomial",
    "degree_monomial_mv",
    "degree_mv",
    "divide",
    "extended_gcd",
    "gcd",
    "is_monomial",
    "is_monomial_mv",
    "is_polynomial",
    "is_polynomial_mv",
    "leading_coefficient",
    "leading_coefficient_degree",
    "polynomial_expansion",
    "quot",
    "remainder",
    "symbols",
    "total_degree",
    "variables",
]
