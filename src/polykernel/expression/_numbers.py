from typing import Iterable

from sympy import Expr

from ._constants import negative_infinity, undefined


def is_undefined(x: Expr) -> bool:
    return x is undefined


def compare(a: Expr, b: Expr) -> int:
    """Three-way comparison of degree values.

    Degree values are nonnegative integers or ``-oo``; ``-oo`` sorts below
    every integer.

    Returns
    -------
    int
        ``-1``, ``0`` or ``1``.

    Raises
    ------
    TypeError
        If either argument is undefined.
    """
    if is_undefined(a) or is_undefined(b):
        raise TypeError("Undefined degree values are not comparable")
    if a == b:
        return 0
    return -1 if bool(a < b) else 1


def maximum(values: Iterable[Expr]) -> Expr:
    """Maximum of degree values.

    A single undefined value makes the result undefined. The maximum of no
    values is ``-oo``.
    """
    result = negative_infinity
    for value in values:
        if is_undefined(value):
            return undefined
        if compare(value, result) > 0:
            result = value
    return result
