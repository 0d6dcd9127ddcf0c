import sympy
from sympy import Expr, S

zero: Expr = S.Zero
one: Expr = S.One

# Degree/coefficient that is not well-defined. Absorbing under + - * / **.
undefined: Expr = S.NaN

# Degree of the zero polynomial.
negative_infinity: Expr = S.NegativeInfinity


def number(k: int) -> Expr:
    """Integer literal as an expression."""
    return sympy.Integer(k)
