class PolynomialError(Exception):
    """Base class for polynomial errors."""

    pass
