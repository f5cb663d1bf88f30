"""Aberth-Ehrlich polynomial root finding algorithm."""

import math

import torch
from torch import Tensor

from torchroots.polynomial import (
    DegreeError,
    polynomial_derivative,
    polynomial_evaluate,
)

from ._complex import rotate
from ._convergence import MAXITER, snap_subnormal_to_zero

# Seed rotation step numerator; the step 350.123 / degree (radians) keeps
# seeds off the real axis and off the roots of unity.
SEED_ROTATION = 350.123


def _complex_dtype(coeffs: Tensor) -> torch.dtype:
    if coeffs.is_complex():
        return coeffs.dtype
    return (
        torch.complex128 if coeffs.dtype == torch.float64 else torch.complex64
    )


def _normalize(coeffs: Tensor) -> Tensor:
    """Validate coefficients and divide by the leading coefficient.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients shape (..., N) in ascending order.

    Returns
    -------
    Tensor
        Monic complex coefficients, shape (..., N).
    """
    if coeffs.dim() == 0 or coeffs.shape[-1] == 0:
        raise DegreeError("Polynomial must have at least one coefficient")

    cdtype = _complex_dtype(coeffs)
    leading = coeffs[..., -1:].to(cdtype)

    if torch.any(leading == 0):
        raise DegreeError(
            "Leading coefficient must be non-zero for root finding. "
            "Use polynomial_trim first to remove zero leading coefficients."
        )

    return coeffs.to(cdtype) / leading


def _get_initial_roots(coeffs_norm: Tensor, degree: int) -> Tensor:
    """Compute initial root guesses.

    The first guess is ``sqrt(radius) + i * cbrt(radius)`` with
    ``radius = 1 + max|c_i|``, neither real nor a root of unity. The others
    are that point rotated by multiples of ``350.123 / degree`` radians.

    Parameters
    ----------
    coeffs_norm : Tensor
        Normalized coefficients (monic polynomial), shape (..., N).
    degree : int
        Polynomial degree.

    Returns
    -------
    Tensor
        Initial root guesses, shape (..., degree).
    """
    radius = coeffs_norm.abs().amax(dim=-1, keepdim=True) + 1.0
    p0 = torch.complex(torch.sqrt(radius), radius.pow(1.0 / 3.0))

    angles = (SEED_ROTATION / degree) * torch.arange(
        degree, device=coeffs_norm.device, dtype=radius.dtype
    )

    return rotate(p0, angles)


def _empty_roots(coeffs_norm: Tensor) -> Tensor:
    return torch.empty(
        *coeffs_norm.shape[:-1],
        0,
        dtype=coeffs_norm.dtype,
        device=coeffs_norm.device,
    )


def aberth_ehrlich(
    coeffs: Tensor,
    *,
    maxiter: int = MAXITER,
) -> Tensor:
    """Find all roots of a polynomial using Aberth-Ehrlich iteration.

    The Aberth-Ehrlich method is an iterative algorithm that simultaneously
    refines all roots of a polynomial. It is O(n^2) per sweep and converges
    cubically near simple roots, faster than Durand-Kerner, at the cost of
    evaluating the derivative.

    The algorithm combines Newton's method with an Aberth correction term
    that repels roots from each other, preventing multiple roots from
    converging to the same location.

    Parameters
    ----------
    coeffs : Tensor
        Polynomial coefficients in ascending order of powers, shape (..., N).
        Represents c_0 + c_1*x + c_2*x^2 + ... + c_{N-1}*x^{N-1}.
        The polynomial degree is N-1. Usually monic (c_{N-1} = 1); other
        leading coefficients are divided out first.
    maxiter : int, default=100
        Maximum number of sweeps over all roots.

    Returns
    -------
    Tensor
        Complex roots, shape (..., N-1). Always complex even if all roots
        are real. For float64 input, returns complex128; for float32,
        returns complex64. For complex input, preserves dtype.

    Raises
    ------
    DegreeError
        If there are no coefficients, or the leading coefficient is zero.

    Examples
    --------
    Find roots of x^2 - 5x + 6 = (x-2)(x-3):

    >>> import torch
    >>> from torchroots.root_finding import aberth_ehrlich
    >>> coeffs = torch.tensor([6.0, -5.0, 1.0], dtype=torch.float64)
    >>> roots = aberth_ehrlich(coeffs)
    >>> sorted(roots.real.tolist())  # doctest: +ELLIPSIS
    [2.0..., 3.0...]

    Batched computation:

    >>> coeffs = torch.tensor([
    ...     [2.0, -3.0, 1.0],  # (x-1)(x-2)
    ...     [6.0, -5.0, 1.0],  # (x-2)(x-3)
    ... ], dtype=torch.float64)
    >>> aberth_ehrlich(coeffs).shape
    torch.Size([2, 2])

    Notes
    -----
    **Algorithm**: Within a sweep, for each root estimate z_k in turn:

    1. Newton step: r_k = p(z_k) / p'(z_k)
    2. Aberth correction: s_k = sum_j (1 / (z_k - z_j)) for j != k
    3. Update: z_k <- z_k - r_k / (1 - r_k * s_k)

    Updated estimates are used right away by the following roots of the
    same sweep. Iteration stops when a sweep moves no root at all or after
    ``maxiter`` sweeps. Real and imaginary parts equal to the smallest
    subnormal number are set to zero afterwards.

    See Also
    --------
    durand_kerner : derivative-free simultaneous iteration

    References
    ----------
    .. [1] O. Aberth, "Iteration methods for finding all zeros of a polynomial
           simultaneously", Mathematics of Computation, 27(122):339-344, 1973.
    .. [2] L.W. Ehrlich, "A modified Newton method for polynomials",
           Communications of the ACM, 10(2):107-108, 1967.
    """
    coeffs_norm = _normalize(coeffs)

    batch_shape = coeffs_norm.shape[:-1]
    n = coeffs_norm.shape[-1]  # number of coefficients
    degree = n - 1

    if degree == 0:
        return _empty_roots(coeffs_norm)

    deriv_coeffs = polynomial_derivative(coeffs_norm)

    z = _get_initial_roots(coeffs_norm, degree)

    # Flatten batch for iteration
    batch_size = math.prod(batch_shape)
    z_flat = z.reshape(batch_size, degree).clone()
    coeffs_flat = coeffs_norm.reshape(batch_size, n)
    deriv_flat = deriv_coeffs.reshape(batch_size, degree)

    for _ in range(maxiter):
        max_delta = torch.zeros(
            batch_size, dtype=z_flat.real.dtype, device=z_flat.device
        )

        for k in range(degree):
            z_k = z_flat[:, k]

            # Sum of 1/(z_k - z_j) for j != k
            z_diff = z_k.unsqueeze(-1) - torch.cat(
                [z_flat[:, :k], z_flat[:, k + 1 :]], dim=-1
            )
            correction_sum = z_diff.reciprocal().sum(dim=-1)

            ratio = polynomial_evaluate(coeffs_flat, z_k)
            ratio = ratio / polynomial_evaluate(deriv_flat, z_k)
            delta = ratio / (1.0 - ratio * correction_sum)

            z_flat[:, k] = z_k - delta
            max_delta = torch.fmax(max_delta, delta.abs())

        if torch.all(max_delta == 0):
            break

    roots = snap_subnormal_to_zero(z_flat)

    return roots.reshape(*batch_shape, degree)
