from sympy import Expr

from polykernel.expression import (
    is_number,
    is_product,
    is_sum,
    positive_integer_power,
)


def is_monomial_sv(symbol: Expr, x: Expr) -> bool:
    """Check whether ``x`` is a monomial built only from ``symbol`` and numbers.

    Unlike :func:`~polykernel.polynomial.is_monomial`, factors that are free
    of ``symbol`` but not numbers (other symbols, functions) are rejected.
    """
    if x == symbol or is_number(x):
        return True
    match = positive_integer_power(x)
    if match is not None and match[0] == symbol:
        return True
    if is_product(x):
        return all(is_monomial_sv(symbol, a) for a in x.args)
    return False


def is_polynomial_sv(symbol: Expr, x: Expr) -> bool:
    """Check whether ``x`` is a polynomial in ``symbol`` with numeric coefficients."""
    if is_sum(x):
        return all(is_monomial_sv(symbol, a) for a in x.args)
    return is_monomial_sv(symbol, x)
