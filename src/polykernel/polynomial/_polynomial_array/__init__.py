from ._polynomial_from_expression import polynomial_from_expression
from ._polynomial_to_expression import polynomial_to_expression

__all__ = [
    "polynomial_from_expression",
    "polynomial_to_expression",
]
