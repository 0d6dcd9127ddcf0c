import logging
from typing import Tuple

from sympy import Expr

from polykernel.expression import expand, is_undefined, one, undefined, zero

from ._polynomial_coefficient import leading_coefficient
from ._polynomial_divide import divide, remainder

logger = logging.getLogger(__name__)


def gcd(symbol: Expr, u: Expr, v: Expr) -> Expr:
    """Greatest common divisor of two univariate polynomials.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    u, v : Expr
        Polynomials in ``symbol``.

    Returns
    -------
    Expr
        Monic greatest common divisor, or zero if both ``u`` and ``v`` are
        zero.
        ``nan`` if a remainder is undefined, e.g. when ``u`` or ``v`` is not a
        polynomial in ``symbol``.

    Notes
    -----
    Uses the Euclidean remainder sequence. Intermediate remainders are
    expanded by :func:`divide`, so coefficients stay canonical.

    Examples
    --------
    >>> gcd(x, x**2 - 1, x - 1)
    x - 1
    """
    x, y = expand(u), expand(v)
    if x == zero and y == zero:
        return zero

    while y != zero:
        x, y = y, remainder(symbol, x, y)
        if is_undefined(y):
            return undefined
        logger.debug("gcd: remainder %s", y)

    return expand(x / leading_coefficient(symbol, x))


def extended_gcd(symbol: Expr, u: Expr, v: Expr) -> Tuple[Expr, Expr, Expr]:
    """Greatest common divisor with Bezout coefficients.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    u, v : Expr
        Polynomials in ``symbol``.

    Returns
    -------
    g : Expr
        Monic greatest common divisor.
    a, b : Expr
        Bezout coefficients with ``expand(a*u + b*v) == g``.

    All three are zero if both ``u`` and ``v`` are zero, and ``nan`` if a
    remainder is undefined.

    Examples
    --------
    >>> extended_gcd(x, x**2 + 1, x)
    (1, 1, -x)
    """
    x, y = expand(u), expand(v)
    if x == zero and y == zero:
        return zero, zero, zero

    # invariants: a0*u + b0*v == x and a1*u + b1*v == y
    a0, a1 = one, zero
    b0, b1 = zero, one
    while y != zero:
        q, r = divide(symbol, x, y)
        if is_undefined(r):
            return undefined, undefined, undefined
        x, y = y, r
        a0, a1 = a1, expand(a0 - q * a1)
        b0, b1 = b1, expand(b0 - q * b1)
        logger.debug("extended_gcd: remainder %s", y)

    c = leading_coefficient(symbol, x)

    return expand(x / c), expand(a0 / c), expand(b0 / c)
