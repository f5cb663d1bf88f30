from torch import Tensor

from torchroots.polynomial import descending_to_ascending, polynomial_trim

from ._aberth_ehrlich import aberth_ehrlich
from ._convergence import MAXITER
from ._durand_kerner import durand_kerner
from ._solve_cubic import (
    _monic,
    solve_cubic_aberth_ehrlich,
    solve_cubic_cardano,
    solve_cubic_durand_kerner,
    solve_cubic_newton_factor,
)
from ._solve_cubic_closed_form import solve_cubic_closed_form
from ._solve_linear import _roots, solve_linear
from ._solve_quadratic import solve_quadratic
from ._solve_quartic import (
    solve_quartic_aberth_ehrlich,
    solve_quartic_durand_kerner,
)
from ._solve_quartic_closed_form import solve_quartic_closed_form

_CUBIC_METHODS = {
    "auto": solve_cubic_newton_factor,
    "newton_factor": solve_cubic_newton_factor,
    "cardano": solve_cubic_cardano,
    "closed_form": solve_cubic_closed_form,
    "durand_kerner": solve_cubic_durand_kerner,
    "aberth_ehrlich": solve_cubic_aberth_ehrlich,
}

_QUARTIC_METHODS = {
    "auto": solve_quartic_aberth_ehrlich,
    "closed_form": solve_quartic_closed_form,
    "durand_kerner": solve_quartic_durand_kerner,
    "aberth_ehrlich": solve_quartic_aberth_ehrlich,
}

_GENERAL_METHODS = {
    "auto": aberth_ehrlich,
    "durand_kerner": durand_kerner,
    "aberth_ehrlich": aberth_ehrlich,
}

_ALL_METHODS = sorted(set(_CUBIC_METHODS) | set(_GENERAL_METHODS))

# Solvers taking an iteration budget
_ITERATIVE = {
    solve_cubic_durand_kerner,
    solve_cubic_aberth_ehrlich,
    solve_quartic_durand_kerner,
    solve_quartic_aberth_ehrlich,
    durand_kerner,
    aberth_ehrlich,
}


def solve_polynomial(
    *coefficients: float | Tensor,
    method: str = "auto",
    maxiter: int = MAXITER,
) -> Tensor:
    """All roots of a real polynomial given leading coefficient first.

    Zero leading coefficients are dropped, then the solver is picked by the
    remaining degree: closed forms for degrees 1 and 2, ``method`` for
    degree 3 and above.

    Parameters
    ----------
    *coefficients : float or Tensor
        Coefficients in descending order of powers, e.g. ``(1, -6, 11, -6)``
        for x^3 - 6x^2 + 11x - 6.
    method : str, default="auto"
        Solver for degree 3 and above:

        - ``"auto"``: ``"newton_factor"`` for cubics, ``"aberth_ehrlich"``
          otherwise
        - ``"newton_factor"``, ``"cardano"``: cubics only
        - ``"closed_form"``: cubics and quartics
        - ``"durand_kerner"``, ``"aberth_ehrlich"``: any degree

        Ignored for degrees 0 to 2.
    maxiter : int, default=100
        Maximum number of sweeps of the iterative methods.

    Returns
    -------
    Tensor
        Complex roots, shape (degree,). Empty for a constant polynomial.

    Raises
    ------
    ValueError
        If ``method`` is unknown or does not apply to the degree, or no
        coefficients are given.

    Examples
    --------
    >>> solve_polynomial(0.0, 1.0, 0.0, -1.0)  # x^2 - 1
    tensor([ 1.+0.j, -1.+0.j], dtype=torch.complex128)
    """
    if method not in _ALL_METHODS:
        raise ValueError(
            f"Unknown method {method!r}. Expected one of {_ALL_METHODS}."
        )

    coeffs = polynomial_trim(descending_to_ascending(*coefficients))
    degree = coeffs.shape[-1] - 1

    if degree == 0:
        return _roots()

    # Back to leading-first scalars for the closed forms
    leading_first = coeffs.flip(-1).tolist()

    if degree == 1:
        return solve_linear(*leading_first)

    if degree == 2:
        return solve_quadratic(*leading_first)

    if degree == 3:
        methods = _CUBIC_METHODS
    elif degree == 4:
        methods = _QUARTIC_METHODS
    else:
        methods = _GENERAL_METHODS

    if method not in methods:
        raise ValueError(
            f"Method {method!r} does not apply to degree {degree}. "
            f"Expected one of {sorted(methods)}."
        )

    solver = methods[method]
    kwargs = {"maxiter": maxiter} if solver in _ITERATIVE else {}

    if degree > 4:
        return solver(_monic(*leading_first), **kwargs)

    return solver(*leading_first, **kwargs)
