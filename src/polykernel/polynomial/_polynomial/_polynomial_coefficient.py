from typing import Tuple

import sympy
from sympy import Expr

from polykernel.expression import (
    free_of,
    is_number,
    is_product,
    is_sum,
    is_undefined,
    maximum,
    number,
    one,
    positive_integer_power,
    undefined,
    zero,
)


def coefficient_degree_monomial(symbol: Expr, x: Expr) -> Tuple[Expr, Expr]:
    """Split a monomial into its coefficient and its degree in ``symbol``.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    x : Expr
        Monomial.

    Returns
    -------
    coefficient : Expr
        Factor of ``x`` free of ``symbol``.
    degree : Expr
        Exponent of ``symbol`` in ``x``.

    Both are ``nan`` if ``x`` is not a monomial in ``symbol``.
    """
    if is_undefined(x):
        return undefined, undefined
    if x == symbol:
        return one, one
    if is_number(x):
        return x, zero
    match = positive_integer_power(x)
    if match is not None and match[0] == symbol:
        return one, match[1]
    if is_product(x):
        cds = [coefficient_degree_monomial(symbol, a) for a in x.args]
        return (
            sympy.Mul(*(c for c, _ in cds)),
            sympy.Add(*(d for _, d in cds)),
        )
    if free_of(symbol, x):
        return x, zero
    return undefined, undefined


def coefficient(symbol: Expr, k: int, x: Expr) -> Expr:
    """Return the coefficient of ``symbol**k`` in ``x``.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    k : int
        Exponent.
    x : Expr
        Polynomial in expanded form.

    Returns
    -------
    Expr
        Sum of the coefficients of the terms of degree ``k``; zero if there
        are none, ``nan`` if ``x`` is neither a monomial nor a sum.

    Examples
    --------
    >>> coefficient(x, 1, x**2 + 3*a*x + 2)
    3*a
    """
    ke = number(k)
    c, d = coefficient_degree_monomial(symbol, x)
    if d == ke:
        return c
    if is_sum(x):
        cds = (coefficient_degree_monomial(symbol, a) for a in x.args)
        return sympy.Add(*(c for c, d in cds if d == ke))
    return undefined


def leading_coefficient_degree(symbol: Expr, x: Expr) -> Tuple[Expr, Expr]:
    """Return the leading coefficient and the degree of ``x``.

    Terms tied for the highest degree have their coefficients summed.
    Returns ``(nan, nan)`` if ``x`` is not a polynomial in ``symbol``.
    """
    c, d = coefficient_degree_monomial(symbol, x)
    if not is_undefined(d):
        return c, d
    if not is_sum(x):
        return undefined, undefined

    cds = [coefficient_degree_monomial(symbol, a) for a in x.args]
    top = maximum(d for _, d in cds)
    if is_undefined(top):
        return undefined, undefined

    return sympy.Add(*(c for c, d in cds if d == top)), top


def leading_coefficient(symbol: Expr, x: Expr) -> Expr:
    """Coefficient of the highest power of ``symbol`` in ``x``."""
    return leading_coefficient_degree(symbol, x)[0]
