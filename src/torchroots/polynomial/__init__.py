"""
Coefficient-vector helpers for the root finders.

Coefficients are tensors in ascending order of powers: ``coeffs[..., i]`` is
the coefficient of x^i.

Evaluation:
    polynomial_evaluate, polynomial_derivative

Construction:
    descending_to_ascending, polynomial_from_roots, polynomial_trim

Exceptions:
    PolynomialError, DegreeError
"""

from torchroots.polynomial._degree_error import DegreeError
from torchroots.polynomial._descending_to_ascending import (
    descending_to_ascending,
)
from torchroots.polynomial._polynomial_derivative import polynomial_derivative
from torchroots.polynomial._polynomial_error import PolynomialError
from torchroots.polynomial._polynomial_evaluate import polynomial_evaluate
from torchroots.polynomial._polynomial_from_roots import polynomial_from_roots
from torchroots.polynomial._polynomial_trim import polynomial_trim

__all__ = [
    "DegreeError",
    "PolynomialError",
    "descending_to_ascending",
    "polynomial_derivative",
    "polynomial_evaluate",
    "polynomial_from_roots",
    "polynomial_trim",
]
