"""
Polynomial root finding.

Closed forms:
    solve_linear, solve_quadratic, solve_monic_quadratic

Cubics:
    solve_cubic_newton_factor, solve_cubic_cardano,
    solve_cubic_durand_kerner, solve_cubic_aberth_ehrlich,
    solve_cubic_closed_form, solve_monic_cubic_closed_form

Quartics:
    solve_quartic_durand_kerner, solve_quartic_aberth_ehrlich,
    solve_quartic_closed_form, solve_monic_quartic_closed_form

Any degree:
    durand_kerner, aberth_ehrlich, solve_polynomial

Real roots of real polynomials:
    newton_raphson, bisection
"""

from ._aberth_ehrlich import aberth_ehrlich
from ._bisection import bisection
from ._convergence import MAXITER, residual_tolerance, smallest_subnormal
from ._durand_kerner import durand_kerner
from ._exceptions import BracketError, RootFindingError, RootFindingWarning
from ._newton_raphson import newton_raphson
from ._solve_cubic import (
    solve_cubic_aberth_ehrlich,
    solve_cubic_cardano,
    solve_cubic_durand_kerner,
    solve_cubic_newton_factor,
)
from ._solve_cubic_closed_form import (
    solve_cubic_closed_form,
    solve_monic_cubic_closed_form,
)
from ._solve_linear import solve_linear
from ._solve_polynomial import solve_polynomial
from ._solve_quadratic import solve_monic_quadratic, solve_quadratic
from ._solve_quartic import (
    solve_quartic_aberth_ehrlich,
    solve_quartic_durand_kerner,
)
from ._solve_quartic_closed_form import (
    solve_monic_quartic_closed_form,
    solve_quartic_closed_form,
)

__all__ = [
    "MAXITER",
    "aberth_ehrlich",
    "bisection",
    "durand_kerner",
    "newton_raphson",
    "residual_tolerance",
    "smallest_subnormal",
    "solve_cubic_aberth_ehrlich",
    "solve_cubic_cardano",
    "solve_cubic_closed_form",
    "solve_cubic_durand_kerner",
    "solve_cubic_newton_factor",
    "solve_linear",
    "solve_monic_cubic_closed_form",
    "solve_monic_quadratic",
    "solve_monic_quartic_closed_form",
    "solve_polynomial",
    "solve_quadratic",
    "solve_quartic_aberth_ehrlich",
    "solve_quartic_closed_form",
    "solve_quartic_durand_kerner",
    "BracketError",
    "RootFindingError",
    "RootFindingWarning",
]
