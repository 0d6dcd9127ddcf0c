import functools
from typing import AbstractSet, Callable, Dict, List, Tuple

import sympy
from sympy import Expr

from polykernel.expression import (
    free_of,
    free_of_set,
    is_number,
    is_product,
    is_sum,
    is_undefined,
    one,
    positive_integer_power,
    undefined,
)


def _combine(a: Tuple[Expr, Expr], b: Tuple[Expr, Expr]) -> Tuple[Expr, Expr]:
    return a[0] * b[0], a[1] * b[1]


def collect_terms_monomial(symbol: Expr, x: Expr) -> Tuple[Expr, Expr]:
    """Split a monomial into ``(coefficient, variable_part)``.

    The variable part is the bare power of ``symbol`` (``one`` for a term
    free of ``symbol``). Returns ``(nan, nan)`` if ``x`` is not a monomial.
    """
    if is_undefined(x):
        return undefined, undefined
    if x == symbol:
        return one, x
    if is_number(x):
        return x, one
    match = positive_integer_power(x)
    if match is not None and match[0] == symbol:
        return one, x
    if is_product(x):
        return functools.reduce(
            _combine, (collect_terms_monomial(symbol, a) for a in x.args)
        )
    if free_of(symbol, x):
        return x, one
    return undefined, undefined


def collect_terms_monomial_mv(
    symbols: AbstractSet[Expr], x: Expr
) -> Tuple[Expr, Expr]:
    """Multivariate :func:`collect_terms_monomial` over a variable set."""
    if is_undefined(x):
        return undefined, undefined
    if x in symbols:
        return one, x
    if is_number(x):
        return x, one
    match = positive_integer_power(x)
    if match is not None and match[0] in symbols:
        return one, x
    if is_product(x):
        return functools.reduce(
            _combine, (collect_terms_monomial_mv(symbols, a) for a in x.args)
        )
    if free_of_set(symbols, x):
        return x, one
    return undefined, undefined


def _collect(
    split: Callable[[Expr], Tuple[Expr, Expr]], x: Expr
) -> Expr:
    if is_sum(x):
        # dicts keep insertion order: groups come out in order of first
        # appearance
        groups: Dict[Expr, List[Expr]] = {}
        for a in x.args:
            c, v = split(a)
            groups.setdefault(v, []).append(c)
        return sympy.Add(*(sympy.Add(*cs) * v for v, cs in groups.items()))

    c, v = split(x)
    if is_undefined(c):
        return undefined
    return c * v


def collect_terms(symbol: Expr, x: Expr) -> Expr:
    """Collect like terms of a polynomial in ``symbol``.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    x : Expr
        Polynomial in ``symbol``.

    Returns
    -------
    Expr
        ``x`` with terms sharing a power of ``symbol`` merged into a single
        ``coefficient * symbol**k`` term, or ``nan`` if ``x`` is not a
        polynomial in ``symbol``.

    Examples
    --------
    >>> collect_terms(x, a*x + b*x + c)
    c + x*(a + b)
    """
    return _collect(functools.partial(collect_terms_monomial, symbol), x)


def collect_terms_mv(symbols: AbstractSet[Expr], x: Expr) -> Expr:
    """Collect like terms by their joint variable part over ``symbols``."""
    return _collect(functools.partial(collect_terms_monomial_mv, symbols), x)
