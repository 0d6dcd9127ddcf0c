"""polykernel: polynomial algebra over symbolic expressions."""

from . import expression, polynomial

__all__ = [
    "expression",
    "polynomial",
]

__version__ = "0.1.0"
