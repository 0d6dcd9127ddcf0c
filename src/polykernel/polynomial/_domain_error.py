from ._polynomial_error import PolynomialError


class DomainError(PolynomialError):
    """Operation outside valid domain.

    Raised when a coefficient cannot be represented numerically, e.g. when
    converting a polynomial with symbolic coefficients to floating point.
    """

    pass
