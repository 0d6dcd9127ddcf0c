from typing import AbstractSet

from sympy import Expr

from polykernel.expression import (
    free_of,
    free_of_set,
    is_number,
    is_product,
    is_sum,
    is_undefined,
    positive_integer_power,
)


def is_monomial(symbol: Expr, x: Expr) -> bool:
    """Check whether ``x`` is a monomial in ``symbol``.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    x : Expr
        Expression to classify.

    Returns
    -------
    bool
        True if ``x`` is ``symbol``, a number, ``symbol**n`` for a positive
        integer ``n``, a product of monomials, or free of ``symbol``.
    """
    if is_undefined(x):
        return False
    if x == symbol or is_number(x):
        return True
    match = positive_integer_power(x)
    if match is not None and match[0] == symbol:
        return True
    if is_product(x):
        return all(is_monomial(symbol, a) for a in x.args)
    return free_of(symbol, x)


def is_monomial_mv(symbols: AbstractSet[Expr], x: Expr) -> bool:
    """Multivariate :func:`is_monomial` over a variable set."""
    if is_undefined(x):
        return False
    if x in symbols or is_number(x):
        return True
    match = positive_integer_power(x)
    if match is not None and match[0] in symbols:
        return True
    if is_product(x):
        return all(is_monomial_mv(symbols, a) for a in x.args)
    return free_of_set(symbols, x)


def is_polynomial(symbol: Expr, x: Expr) -> bool:
    """Check whether ``x`` is a polynomial in ``symbol``.

    A polynomial is a sum of monomials, or a single monomial.

    Examples
    --------
    >>> is_polynomial(x, x**2 + 2*x + 1)
    True
    >>> is_polynomial(x, 1/x)
    False
    """
    if is_sum(x):
        return all(is_monomial(symbol, a) for a in x.args)
    return is_monomial(symbol, x)


def is_polynomial_mv(symbols: AbstractSet[Expr], x: Expr) -> bool:
    """Multivariate :func:`is_polynomial` over a variable set."""
    if is_sum(x):
        return all(is_monomial_mv(symbols, a) for a in x.args)
    return is_monomial_mv(symbols, x)
