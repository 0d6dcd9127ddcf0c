from sympy import Expr

from polykernel.expression import (
    compare,
    expand,
    is_undefined,
    one,
    undefined,
    zero,
)

from ._polynomial_collect_terms import collect_terms
from ._polynomial_degree import degree
from ._polynomial_divide import divide


def polynomial_expansion(symbol: Expr, t: Expr, u: Expr, v: Expr) -> Expr:
    """Rewrite ``u`` as a polynomial in ``t`` with base ``v``.

    Repeated division by ``v`` produces digits ``r_k`` (each of degree less
    than ``v`` in ``symbol``) such that ``u = sum r_k * v**k``. The result is
    ``sum r_k * t**k`` with like powers of ``t`` collected.

    Parameters
    ----------
    symbol : Expr
        Indeterminate of ``u`` and ``v``.
    t : Expr
        New indeterminate standing for ``v``.
    u : Expr
        Polynomial to re-expand.
    v : Expr
        Base polynomial, of degree at least one in ``symbol``.

    Returns
    -------
    Expr
        Polynomial in ``t`` whose coefficients are polynomials in ``symbol``.
        ``nan`` if ``v`` has degree less than one in ``symbol`` or either
        input is not a polynomial in it.

    Examples
    --------
    >>> polynomial_expansion(x, t, x**2, x + 1)
    t**2 - 2*t + 1
    """
    n = degree(symbol, expand(v))
    if is_undefined(n) or compare(n, one) < 0:
        return undefined

    def expansion(x: Expr) -> Expr:
        if x == zero:
            return zero
        q, r = divide(symbol, x, v)
        if is_undefined(q):
            return undefined
        return expand(t * expansion(q) + r)

    return collect_terms(t, expansion(u))
