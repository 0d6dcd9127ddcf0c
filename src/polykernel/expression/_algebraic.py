import sympy
from sympy import Expr


def expand(x: Expr) -> Expr:
    """Distribute products over sums into canonical sum-of-products form."""
    return sympy.expand(x)
