import sympy
from sympy import Expr

from polykernel.expression import (
    is_number,
    is_product,
    is_sum,
    is_undefined,
    maximum,
    negative_infinity,
    one,
    positive_integer_power,
    undefined,
    zero,
)


def degree_monomial_sv(symbol: Expr, x: Expr) -> Expr:
    """Degree of a numeric-coefficient monomial in ``symbol``.

    Returns ``-oo`` for zero and ``nan`` for anything that is not a product
    of numbers and powers of ``symbol``.
    """
    if x == zero:
        return negative_infinity
    if x == symbol:
        return one
    if is_number(x):
        return zero
    match = positive_integer_power(x)
    if match is not None and match[0] == symbol:
        return match[1]
    if is_product(x):
        return sympy.Add(*(degree_monomial_sv(symbol, a) for a in x.args))
    return undefined


def degree_sv(symbol: Expr, x: Expr) -> Expr:
    """Degree of a numeric-coefficient polynomial in ``symbol``.

    Examples
    --------
    >>> degree_sv(x, 3*x**2 + 2*x)
    2
    >>> degree_sv(x, a*x)
    nan
    """
    d = degree_monomial_sv(symbol, x)
    if not is_undefined(d):
        return d
    if is_sum(x):
        return maximum(degree_monomial_sv(symbol, a) for a in x.args)
    return undefined
