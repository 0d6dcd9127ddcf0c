from typing import Optional, Tuple

from sympy import Expr


def is_number(x: Expr) -> bool:
    """True for finite numeric literals (integers, rationals, floats).

    ``nan`` and the infinities are numbers to SymPy but are sentinels here,
    so they are excluded.
    """
    return bool(x.is_Number and x.is_finite)


def is_sum(x: Expr) -> bool:
    return bool(x.is_Add)


def is_product(x: Expr) -> bool:
    return bool(x.is_Mul)


def is_power(x: Expr) -> bool:
    return bool(x.is_Pow)


def positive_integer_power(x: Expr) -> Optional[Tuple[Expr, Expr]]:
    """Match ``base**n`` with ``n`` a literal positive integer.

    Returns
    -------
    tuple or None
        ``(base, n)`` on a match, ``None`` otherwise.
    """
    if not x.is_Pow:
        return None
    base, exponent = x.args
    if exponent.is_Integer and exponent.is_positive:
        return base, exponent
    return None
