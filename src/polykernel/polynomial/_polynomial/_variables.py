from typing import FrozenSet, Iterable

from sympy import Expr

from polykernel.expression import (
    is_number,
    is_power,
    is_product,
    is_sum,
    is_undefined,
    positive_integer_power,
)


def symbols(xs: Iterable[Expr]) -> FrozenSet[Expr]:
    """Build a variable set from expressions.

    Members are compared by structural equality, so duplicates collapse.
    """
    return frozenset(xs)


def variables(x: Expr) -> FrozenSet[Expr]:
    """Return the indeterminates appearing in an expression.

    Parameters
    ----------
    x : Expr
        Input expression.

    Returns
    -------
    frozenset of Expr
        Atomic sub-expressions of ``x``.

    Notes
    -----
    A positive-integer power contributes its base, any other power is kept
    whole. Factors of a product that are themselves sums are kept whole, so
    an unexpanded ``(a + b)*c`` has the variables ``{a + b, c}``.

    Examples
    --------
    >>> a, b, c = sympy.symbols("a b c")
    >>> variables(a**2 + b*c + 3)
    frozenset({a, b, c})
    """
    found = set()

    def visit(y: Expr) -> None:
        if is_number(y) or is_undefined(y):
            return
        match = positive_integer_power(y)
        if match is not None:
            found.add(match[0])
        elif is_power(y):
            found.add(y)
        elif is_sum(y):
            for a in y.args:
                visit(a)
        elif is_product(y):
            for a in y.args:
                if is_sum(a):
                    found.add(a)
                else:
                    visit(a)
        else:
            found.add(y)

    visit(x)

    return frozenset(found)
