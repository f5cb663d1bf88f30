"""Durand-Kerner (Weierstrass) polynomial root finding algorithm."""

import math

import torch
from torch import Tensor

from torchroots.polynomial import polynomial_evaluate

from ._aberth_ehrlich import _empty_roots, _get_initial_roots, _normalize
from ._convergence import MAXITER, snap_subnormal_to_zero


def durand_kerner(
    coeffs: Tensor,
    *,
    maxiter: int = MAXITER,
) -> Tensor:
    """Find all roots of a polynomial using Durand-Kerner iteration.

    Each root estimate is moved by the polynomial value divided by the
    product of its distances to all other estimates. No derivative is
    needed; convergence is quadratic near simple roots.

    Parameters
    ----------
    coeffs : Tensor
        Polynomial coefficients in ascending order of powers, shape (..., N).
        The leading coefficient is divided out first.
    maxiter : int, default=100
        Maximum number of sweeps over all roots.

    Returns
    -------
    Tensor
        Complex roots, shape (..., N-1), in the order of their initial
        guesses. Empty in the last dimension for a constant polynomial.

    Raises
    ------
    DegreeError
        If there are no coefficients, or the leading coefficient is zero.

    Examples
    --------
    Roots of x^4 + 1 all lie on the unit circle:

    >>> import torch
    >>> from torchroots.root_finding import durand_kerner
    >>> coeffs = torch.tensor([1.0, 0.0, 0.0, 0.0, 1.0], dtype=torch.float64)
    >>> [f"{v:.6f}" for v in durand_kerner(coeffs).abs().tolist()]
    ['1.000000', '1.000000', '1.000000', '1.000000']

    Notes
    -----
    For each root in turn, ``z_k <- z_k - p(z_k) / prod_{j != k} (z_k - z_j)``,
    reusing roots already updated in the same sweep. A sweep that moves no
    root ends the iteration.

    See Also
    --------
    aberth_ehrlich : faster convergence using the derivative
    """
    coeffs_norm = _normalize(coeffs)

    batch_shape = coeffs_norm.shape[:-1]
    n = coeffs_norm.shape[-1]
    degree = n - 1

    if degree == 0:
        return _empty_roots(coeffs_norm)

    z = _get_initial_roots(coeffs_norm, degree)

    batch_size = math.prod(batch_shape)
    z_flat = z.reshape(batch_size, degree).clone()
    coeffs_flat = coeffs_norm.reshape(batch_size, n)

    for _ in range(maxiter):
        max_delta = torch.zeros(
            batch_size, dtype=z_flat.real.dtype, device=z_flat.device
        )

        for k in range(degree):
            z_k = z_flat[:, k]

            z_diff = z_k.unsqueeze(-1) - torch.cat(
                [z_flat[:, :k], z_flat[:, k + 1 :]], dim=-1
            )
            correction = polynomial_evaluate(coeffs_flat, z_k)
            z_new = z_k - correction / z_diff.prod(dim=-1)

            # Change actually applied, zero once z_k stops moving
            max_delta = torch.fmax(max_delta, (z_new - z_k).abs())
            z_flat[:, k] = z_new

        if torch.all(max_delta == 0):
            break

    roots = snap_subnormal_to_zero(z_flat)

    return roots.reshape(*batch_shape, degree)
