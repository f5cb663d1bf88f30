"""Newton-Raphson real root finding for polynomials."""

import torch
from torch import Tensor

from torchroots.polynomial import polynomial_derivative, polynomial_evaluate

from ._convergence import MAXITER

# Start point with an almost zero chance of having f'(x) = 0.
NEWTON_SEED = 0.1232232323234


def newton_raphson(
    coeffs: Tensor,
    *,
    allowed_error: float = 0.0,
    maxiter: int = MAXITER,
) -> Tensor:
    """
    Find a real root of a polynomial using the Newton-Raphson method.

    Newton's method uses the iteration x_{n+1} = x_n - f(x_n) / f'(x_n),
    starting from the fixed seed ``0.1232232323234``. It converges
    quadratically near simple roots but may diverge or cycle, in which case
    NaN is returned so the caller can fall back to a bracketing method.

    Parameters
    ----------
    coeffs : Tensor
        Real coefficients in ascending order, shape ``(..., N)``.
    allowed_error : float, default=0.0
        Absolute error on f(x) that is accepted as a root.
    maxiter : int, default=100
        Maximum iterations.

    Returns
    -------
    Tensor
        Roots with shape ``coeffs.shape[:-1]``. An element is NaN when
        neither the update stopped changing x nor ``|f(x)| <= allowed_error``
        within ``maxiter`` iterations.

    Examples
    --------
    Find the root of 2x - 4 = 0:

    >>> import torch
    >>> from torchroots.root_finding import newton_raphson
    >>> float(newton_raphson(torch.tensor([-4.0, 2.0], dtype=torch.float64)))
    2.0

    Batched root-finding (x^2 - 2 and x^2 - 3):

    >>> coeffs = torch.tensor(
    ...     [[-2.0, 0.0, 1.0], [-3.0, 0.0, 1.0]], dtype=torch.float64
    ... )
    >>> [f"{v:.4f}" for v in newton_raphson(coeffs).tolist()]
    ['1.4142', '1.7321']

    See Also
    --------
    bisection : bracketed fallback that cannot diverge
    """
    if not coeffs.is_floating_point():
        coeffs = coeffs.to(torch.get_default_dtype())

    batch_shape = coeffs.shape[:-1]
    deriv_coeffs = polynomial_derivative(coeffs)

    x = torch.full(
        batch_shape, NEWTON_SEED, dtype=coeffs.dtype, device=coeffs.device
    )

    # Track which elements have converged; the rest stay NaN
    converged = torch.zeros(batch_shape, dtype=torch.bool, device=x.device)
    result = torch.full_like(x, float("nan"))

    for _ in range(maxiter):
        fx = polynomial_evaluate(coeffs, x)
        x_new = x - fx / polynomial_evaluate(deriv_coeffs, x)

        newly_converged = (x_new == x) | (torch.abs(fx) <= allowed_error)
        newly_converged = newly_converged & ~converged

        result = torch.where(newly_converged, x, result)
        converged = converged | newly_converged

        if torch.all(converged):
            break

        x = torch.where(converged, x, x_new)

    return result
