"""Expression collaborators backed by SymPy.

Expressions are ``sympy.Expr`` trees. This package names the handful of
capabilities the polynomial kernel relies on: variant recognition, the
``free_of`` predicates, the extended degree order, canonical expansion and
the distinguished constants.
"""

from ._algebraic import expand
from ._constants import negative_infinity, number, one, undefined, zero
from ._numbers import compare, is_undefined, maximum
from ._patterns import (
    is_number,
    is_power,
    is_product,
    is_sum,
    positive_integer_power,
)
from ._structure import free_of, free_of_set

__all__ = [
    "compare",
    "expand",
    "free_of",
    "free_of_set",
    "is_number",
    "is_power",
    "is_product",
    "is_sum",
    "is_undefined",
    "maximum",
    "negative_infinity",
    "number",
    "one",
    "positive_integer_power",
    "undefined",
    "zero",
]
