"""Testing utilities for polynomial algebra.

The strategies are built on Hypothesis, which is not a runtime dependency of
polykernel; install it with the ``testing`` extra
(``pip install polykernel[testing]``).

Example usage:

    import hypothesis
    import sympy

    from polykernel.polynomial import degree
    from polykernel.testing.strategies import integer_polynomials

    x = sympy.Symbol("x")

    @hypothesis.given(integer_polynomials(x, max_degree=4))
    def test_degree_bounded(p):
        assert degree(x, p) <= 4
"""

from . import strategies

__all__ = [
    "strategies",
]
