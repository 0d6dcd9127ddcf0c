from typing import AbstractSet

import sympy
from sympy import Expr

from polykernel.expression import (
    free_of,
    free_of_set,
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

from ._variables import variables


def degree_monomial(symbol: Expr, x: Expr) -> Expr:
    """Return the degree of a monomial in ``symbol``.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    x : Expr
        Monomial.

    Returns
    -------
    Expr
        Nonnegative integer degree, ``-oo`` for the zero expression, or
        ``nan`` if ``x`` is not a monomial in ``symbol``.
    """
    if is_undefined(x):
        return undefined
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
        return sympy.Add(*(degree_monomial(symbol, a) for a in x.args))
    if free_of(symbol, x):
        return zero
    return undefined


def degree_monomial_mv(symbols: AbstractSet[Expr], x: Expr) -> Expr:
    """Total degree of a monomial in the variables of ``symbols``."""
    if is_undefined(x):
        return undefined
    if x == zero:
        return negative_infinity
    if x in symbols:
        return one
    if is_number(x):
        return zero
    match = positive_integer_power(x)
    if match is not None and match[0] in symbols:
        return match[1]
    if is_product(x):
        return sympy.Add(*(degree_monomial_mv(symbols, a) for a in x.args))
    if free_of_set(symbols, x):
        return zero
    return undefined


def degree(symbol: Expr, x: Expr) -> Expr:
    """Return the degree of a polynomial in ``symbol``.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    x : Expr
        Polynomial in expanded form.

    Returns
    -------
    Expr
        Highest exponent of ``symbol``; ``-oo`` for the zero polynomial and
        ``nan`` if ``x`` is not a polynomial in ``symbol``.

    Notes
    -----
    For a sum, a single addend that is not a monomial makes the whole degree
    undefined.

    Examples
    --------
    >>> degree(x, x**3 + 2*x + 5)
    3
    """
    d = degree_monomial(symbol, x)
    if not is_undefined(d):
        return d
    if is_sum(x):
        return maximum(degree_monomial(symbol, a) for a in x.args)
    return undefined


def degree_mv(symbols: AbstractSet[Expr], x: Expr) -> Expr:
    """Total degree of a polynomial in the variables of ``symbols``."""
    d = degree_monomial_mv(symbols, x)
    if not is_undefined(d):
        return d
    if is_sum(x):
        return maximum(degree_monomial_mv(symbols, a) for a in x.args)
    return undefined


def total_degree(x: Expr) -> Expr:
    """Total degree of ``x`` over all of its :func:`variables`.

    Examples
    --------
    >>> total_degree(x**2*y + x*y**3)
    4
    """
    return degree_mv(variables(x), x)
