"""Bisection real root finding for polynomials."""

import torch
from torch import Tensor

from torchroots.polynomial import polynomial_evaluate

from ._convergence import MAXITER


def bisection(
    coeffs: Tensor,
    lower: Tensor | float,
    upper: Tensor | float,
    *,
    allowed_error: float = 0.0,
    maxiter: int = MAXITER,
) -> Tensor:
    """
    Find a real root of a polynomial inside ``[lower, upper]`` by bisection.

    Each step halves the interval, keeping the half whose lower endpoint has
    the same sign as f(lower). Slower than Newton-Raphson but cannot diverge.

    Parameters
    ----------
    coeffs : Tensor
        Real coefficients in ascending order, shape ``(..., N)``.
    lower : Tensor or float
        Lower end of the bracket. Broadcasts against ``coeffs.shape[:-1]``.
    upper : Tensor or float
        Upper end of the bracket.
    allowed_error : float, default=0.0
        A midpoint with ``|f(x)| < allowed_error`` is accepted as a root.
    maxiter : int, default=100
        Maximum bisection steps.

    Returns
    -------
    Tensor
        Roots, NaN where the midpoint kept changing for ``maxiter`` steps.

    Notes
    -----
    The bracket must contain a sign change of f; no check is made. Callers
    establish the bracket first, see ``solve_cubic_newton_factor``.

    Examples
    --------
    >>> coeffs = torch.tensor([-2.0, 0.0, 1.0], dtype=torch.float64)
    >>> f"{float(bisection(coeffs, 0.0, 2.0)):.6f}"
    '1.414214'
    """
    if not coeffs.is_floating_point():
        coeffs = coeffs.to(torch.get_default_dtype())

    batch_shape = coeffs.shape[:-1]
    lower = torch.as_tensor(lower, dtype=coeffs.dtype, device=coeffs.device)
    upper = torch.as_tensor(upper, dtype=coeffs.dtype, device=coeffs.device)
    lower, upper = torch.broadcast_tensors(
        lower.expand(batch_shape) if lower.dim() == 0 else lower,
        upper.expand(batch_shape) if upper.dim() == 0 else upper,
    )

    x_prev = lower.clone()
    f_lower = polynomial_evaluate(coeffs, lower)

    converged = torch.zeros(lower.shape, dtype=torch.bool, device=lower.device)
    result = torch.full_like(lower, float("nan"))

    for _ in range(maxiter):
        x = (lower + upper) / 2.0
        fx = polynomial_evaluate(coeffs, x)

        newly_converged = (x == x_prev) | (torch.abs(fx) < allowed_error)
        newly_converged = newly_converged & ~converged

        result = torch.where(newly_converged, x, result)
        converged = converged | newly_converged

        if torch.all(converged):
            break

        # Keep the bracket on the sign change
        same_sign = torch.sign(fx) == torch.sign(f_lower)
        lower = torch.where(same_sign, x, lower)
        f_lower = torch.where(same_sign, fx, f_lower)
        upper = torch.where(same_sign, upper, x)
        x_prev = x

    return result
