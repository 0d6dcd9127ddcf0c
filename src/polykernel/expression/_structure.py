from typing import AbstractSet

from sympy import Expr, preorder_traversal


def free_of(symbol: Expr, x: Expr) -> bool:
    """True iff no sub-expression of ``x`` structurally equals ``symbol``."""
    return all(node != symbol for node in preorder_traversal(x))


def free_of_set(symbols: AbstractSet[Expr], x: Expr) -> bool:
    """True iff no sub-expression of ``x`` is a member of ``symbols``."""
    return all(node not in symbols for node in preorder_traversal(x))
