class PolynomialError(Exception):
    """Base exception for polynomial coefficient errors."""

    pass
