import logging
from typing import Tuple

from sympy import Expr

from polykernel.expression import (
    compare,
    expand,
    is_undefined,
    one,
    undefined,
    zero,
)

from ._polynomial_coefficient import leading_coefficient
from ._polynomial_degree import degree

logger = logging.getLogger(__name__)


def divide(symbol: Expr, u: Expr, v: Expr) -> Tuple[Expr, Expr]:
    """Divide polynomial u by v, returning quotient and remainder.

    Computes quotient and remainder such that ``u = v * quotient +
    remainder``, where ``degree(symbol, remainder) < degree(symbol, v)``.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    u : Expr
        Dividend polynomial.
    v : Expr
        Divisor polynomial, nonzero.

    Returns
    -------
    quotient : Expr
        Quotient of division, expanded.
    remainder : Expr
        Remainder of division, expanded.

    Notes
    -----
    If ``v`` has degree less than one in ``symbol`` it is treated as a
    scalar: the result is ``(expand(u / v), 0)``.

    If the degree of ``v`` or of the dividend is undefined, both results are
    ``nan``.

    Examples
    --------
    >>> divide(x, x**2 + 3*x + 2, x + 1)
    (x + 2, 0)
    """
    u = expand(u)
    v = expand(v)

    n = degree(symbol, v)
    if is_undefined(n) or is_undefined(u):
        return undefined, undefined
    if compare(n, one) < 0:
        return expand(u / v), zero

    lcv = leading_coefficient(symbol, v)
    w = v - lcv * symbol**n

    q = zero
    r = u
    while True:
        m = degree(symbol, r)
        if is_undefined(m):
            return undefined, undefined
        if compare(m, n) < 0:
            break

        lcr = leading_coefficient(symbol, r)
        s = lcr / lcv
        z = symbol ** (m - n)
        q = q + s * z
        r = expand((r - lcr * symbol**m) - w * s * z)

        logger.debug("divide: degree %s -> remainder %s", m, r)

    return expand(q), r


def quot(symbol: Expr, u: Expr, v: Expr) -> Expr:
    """Quotient of the polynomial division of ``u`` by ``v``."""
    return divide(symbol, u, v)[0]


def remainder(symbol: Expr, u: Expr, v: Expr) -> Expr:
    """Remainder of the polynomial division of ``u`` by ``v``."""
    return divide(symbol, u, v)[1]
