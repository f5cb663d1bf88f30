"""Hypothesis strategies for polynomial root finding tests."""

from ._coefficients import coefficients
from ._complex_numbers import complex_numbers
from ._integers_as_floats import integers_as_floats
from ._real_numbers import real_numbers
from ._separated_real_roots import separated_real_roots

__all__ = [
    # Numeric strategies
    "real_numbers",
    "integers_as_floats",
    # Complex strategies
    "complex_numbers",
    # Polynomial strategies
    "coefficients",
    "separated_real_roots",
]
