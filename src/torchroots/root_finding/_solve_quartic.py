"""Quartic polynomial root solvers."""

from torch import Tensor

from ._aberth_ehrlich import aberth_ehrlich
from ._convergence import MAXITER
from ._durand_kerner import durand_kerner
from ._solve_cubic import (
    _monic,
    solve_cubic_aberth_ehrlich,
    solve_cubic_durand_kerner,
)


def solve_quartic_durand_kerner(
    a4: float | Tensor,
    a3: float | Tensor,
    a2: float | Tensor,
    a1: float | Tensor,
    a0: float | Tensor,
    *,
    maxiter: int = MAXITER,
) -> Tensor:
    """Roots of a4 * x^4 + a3 * x^3 + a2 * x^2 + a1 * x + a0 by Durand-Kerner.

    Parameters
    ----------
    a4, a3, a2, a1, a0 : float or Tensor
        Coefficients, leading first.
    maxiter : int, default=100
        Maximum number of sweeps.

    Returns
    -------
    Tensor
        Complex roots, shape (4,). A zero ``a4`` is handed to
        :func:`solve_cubic_durand_kerner`.

    Examples
    --------
    >>> roots = solve_quartic_durand_kerner(1.0, 0.0, 0.0, 0.0, 1.0)
    >>> [round(r, 9) for r in roots.abs().tolist()]
    [1.0, 1.0, 1.0, 1.0]
    """
    if float(a4) == 0.0:
        return solve_cubic_durand_kerner(a3, a2, a1, a0, maxiter=maxiter)

    return durand_kerner(_monic(a4, a3, a2, a1, a0), maxiter=maxiter)


def solve_quartic_aberth_ehrlich(
    a4: float | Tensor,
    a3: float | Tensor,
    a2: float | Tensor,
    a1: float | Tensor,
    a0: float | Tensor,
    *,
    maxiter: int = MAXITER,
) -> Tensor:
    """Roots of a4 * x^4 + a3 * x^3 + a2 * x^2 + a1 * x + a0 by Aberth-Ehrlich.

    Same contract as :func:`solve_quartic_durand_kerner`; a zero ``a4`` is
    handed to :func:`solve_cubic_aberth_ehrlich`.
    """
    if float(a4) == 0.0:
        return solve_cubic_aberth_ehrlich(a3, a2, a1, a0, maxiter=maxiter)

    return aberth_ehrlich(_monic(a4, a3, a2, a1, a0), maxiter=maxiter)
