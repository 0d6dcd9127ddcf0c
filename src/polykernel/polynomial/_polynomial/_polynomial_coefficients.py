import functools
from typing import List, Tuple

from sympy import Expr

from polykernel.expression import (
    free_of,
    is_number,
    is_product,
    is_sum,
    is_undefined,
    one,
    positive_integer_power,
    zero,
)
from polykernel.polynomial._degree_error import DegreeError

_Terms = List[Tuple[int, Expr]]


def _convolve(a: _Terms, b: _Terms) -> _Terms:
    return [(o1 + o2, e1 * e2) for o1, e1 in a for o2, e2 in b]


def _collect(symbol: Expr, x: Expr, fallback: bool) -> _Terms:
    # (exponent, coefficient) pairs of x, one per term; unmatched shapes
    # contribute nothing
    if is_undefined(x):
        return []
    if x == symbol:
        return [(1, one)]
    if is_number(x):
        return [(0, x)]
    match = positive_integer_power(x)
    if match is not None and match[0] == symbol:
        return [(int(match[1]), one)]
    if is_sum(x):
        return [t for a in x.args for t in _collect(symbol, a, fallback)]
    if is_product(x):
        return functools.reduce(
            _convolve, (_collect(symbol, a, fallback) for a in x.args)
        )
    if fallback and free_of(symbol, x):
        return [(0, x)]
    return []


def _dense(symbol: Expr, x: Expr, fallback: bool) -> Tuple[Expr, ...]:
    if x == zero:
        raise DegreeError("Zero polynomial has no coefficient vector")

    terms = _collect(symbol, x, fallback)
    if not terms:
        raise DegreeError(f"{x} has no terms as a polynomial in {symbol}")

    n = max(o for o, _ in terms)

    buckets = [zero] * (n + 1)
    for o, e in terms:
        buckets[o] = buckets[o] + e

    return tuple(buckets)


def coefficients(symbol: Expr, x: Expr) -> Tuple[Expr, ...]:
    """Return the dense coefficient vector of ``x`` in ``symbol``.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    x : Expr
        Polynomial in ``symbol``. Products of sums are multiplied out term by
        term, so ``x`` does not need to be expanded.

    Returns
    -------
    tuple of Expr
        Coefficients in ascending order. Entry ``k`` is the coefficient of
        ``symbol**k``, zero where the power does not occur.

    Raises
    ------
    DegreeError
        If ``x`` is the zero polynomial or has no term that is a monomial in
        ``symbol``.

    Examples
    --------
    >>> coefficients(x, x**3 + 2*x + 5)
    (5, 2, 0, 1)
    """
    return _dense(symbol, x, fallback=True)
