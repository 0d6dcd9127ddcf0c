import math

import sympy
from numpy.polynomial import Polynomial
from sympy import Expr

from polykernel.polynomial._domain_error import DomainError


def polynomial_to_expression(symbol: Expr, p: Polynomial) -> Expr:
    """Convert a numeric power series back to a symbolic polynomial.

    Parameters
    ----------
    symbol : Expr
        Indeterminate of the result.
    p : numpy.polynomial.Polynomial
        Polynomial to convert. A non-default domain/window mapping is
        folded into the coefficients first.

    Returns
    -------
    Expr
        ``sum coef[k] * symbol**k``. Integral coefficients become exact
        integers, the others floats.

    Raises
    ------
    DomainError
        If a coefficient is not finite.
    """
    terms = []
    for k, value in enumerate(p.convert().coef.tolist()):
        if not math.isfinite(value):
            raise DomainError(
                f"Coefficient of {symbol}**{k} is not finite: {value}"
            )
        if value.is_integer():
            c = sympy.Integer(int(value))
        else:
            c = sympy.Float(value)
        terms.append(c * symbol**k)

    return sympy.Add(*terms)
