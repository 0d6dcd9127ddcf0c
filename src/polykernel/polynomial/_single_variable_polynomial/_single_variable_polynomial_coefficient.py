from typing import Tuple

import sympy
from sympy import Expr

from polykernel.expression import (
    is_number,
    is_product,
    is_sum,
    is_undefined,
    maximum,
    negative_infinity,
    number,
    one,
    positive_integer_power,
    undefined,
    zero,
)
from polykernel.polynomial._polynomial._polynomial_coefficients import _dense


def coefficient_monomial_sv(symbol: Expr, x: Expr) -> Expr:
    """Numeric coefficient of a monomial in ``symbol``, or ``nan``."""
    if x == symbol:
        return one
    if is_number(x):
        return x
    match = positive_integer_power(x)
    if match is not None and match[0] == symbol:
        return one
    if is_product(x):
        return sympy.Mul(*(coefficient_monomial_sv(symbol, a) for a in x.args))
    return undefined


def coefficient_degree_monomial_sv(
    symbol: Expr, x: Expr
) -> Tuple[Expr, Expr]:
    """Split a numeric-coefficient monomial into ``(coefficient, degree)``.

    Zero maps to ``(0, -oo)``; anything else that is not a product of
    numbers and powers of ``symbol`` maps to ``(nan, nan)``.
    """
    if x == zero:
        return x, negative_infinity
    if x == symbol:
        return one, one
    if is_number(x):
        return x, zero
    match = positive_integer_power(x)
    if match is not None and match[0] == symbol:
        return one, match[1]
    if is_product(x):
        cds = [coefficient_degree_monomial_sv(symbol, a) for a in x.args]
        return (
            sympy.Mul(*(c for c, _ in cds)),
            sympy.Add(*(d for _, d in cds)),
        )
    return undefined, undefined


def coefficient_sv(symbol: Expr, k: int, x: Expr) -> Expr:
    """Coefficient of ``symbol**k`` in a numeric-coefficient polynomial."""
    ke = number(k)
    c, d = coefficient_degree_monomial_sv(symbol, x)
    if d == ke:
        return c
    if is_sum(x):
        cds = (coefficient_degree_monomial_sv(symbol, a) for a in x.args)
        return sympy.Add(*(c for c, d in cds if d == ke))
    return undefined


def leading_coefficient_degree_sv(symbol: Expr, x: Expr) -> Tuple[Expr, Expr]:
    """Leading coefficient and degree of a numeric-coefficient polynomial."""
    c, d = coefficient_degree_monomial_sv(symbol, x)
    if not is_undefined(d):
        return c, d
    if not is_sum(x):
        return undefined, undefined

    cds = [coefficient_degree_monomial_sv(symbol, a) for a in x.args]
    top = maximum(d for _, d in cds)
    if is_undefined(top):
        return undefined, undefined

    return sympy.Add(*(c for c, d in cds if d == top)), top


def leading_coefficient_sv(symbol: Expr, x: Expr) -> Expr:
    return leading_coefficient_degree_sv(symbol, x)[0]


def coefficients_sv(symbol: Expr, x: Expr) -> Tuple[Expr, ...]:
    """Dense coefficient vector of a numeric-coefficient polynomial.

    Terms that are not products of numbers and powers of ``symbol`` are
    dropped.

    Raises
    ------
    DegreeError
        If ``x`` is the zero polynomial or no term survives.

    Examples
    --------
    >>> coefficients_sv(x, 3*x**2 + 1)
    (1, 0, 3)
    """
    return _dense(symbol, x, fallback=False)
