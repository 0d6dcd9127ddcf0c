"""Hypothesis strategies for polynomial testing."""

from ._integer_polynomials import integer_polynomials
from ._nonzero_integers import nonzero_integers

__all__ = [
    "integer_polynomials",
    "nonzero_integers",
]
