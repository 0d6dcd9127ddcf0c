import warnings

import numpy
from numpy.polynomial import Polynomial
from sympy import Expr

from polykernel.polynomial._domain_error import DomainError
from polykernel.polynomial._polynomial._polynomial_coefficients import (
    coefficients,
)

# Largest magnitude below which every integer is exact in float64.
_EXACT_INTEGER_LIMIT = 2**53


def polynomial_from_expression(symbol: Expr, x: Expr) -> Polynomial:
    """Convert a symbolic polynomial to a numeric power series.

    Parameters
    ----------
    symbol : Expr
        Indeterminate.
    x : Expr
        Polynomial in ``symbol`` whose coefficients are real numbers.

    Returns
    -------
    numpy.polynomial.Polynomial
        Dense power-basis polynomial with float64 coefficients; ``coef[k]``
        is the coefficient of ``symbol**k``.

    Raises
    ------
    DomainError
        If a coefficient is not a real number (e.g. it involves another
        symbol).
    DegreeError
        If ``x`` is the zero polynomial.

    Examples
    --------
    >>> polynomial_from_expression(x, x**3 + 2*x + 5).coef
    array([5., 2., 0., 1.])
    """
    cs = coefficients(symbol, x)

    values = []
    for k, c in enumerate(cs):
        if not (c.is_number and c.is_real):
            raise DomainError(
                f"Coefficient of {symbol}**{k} is not a real number: {c}"
            )
        values.append(float(c))

    if any(c.is_Integer and abs(c) > _EXACT_INTEGER_LIMIT for c in cs):
        warnings.warn(
            "Integer coefficients larger than 2**53 are not exactly "
            "representable in float64 and may lose precision.",
            RuntimeWarning,
            stacklevel=2,
        )

    return Polynomial(numpy.array(values, dtype=numpy.float64))
