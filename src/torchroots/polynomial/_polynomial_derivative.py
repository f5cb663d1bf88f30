import torch
from torch import Tensor


def polynomial_derivative(coeffs: Tensor, order: int = 1) -> Tensor:
    """Compute derivative of polynomial.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (..., N). Real or complex.
    order : int
        Derivative order (default 1).

    Returns
    -------
    Tensor
        Coefficients of d^n p / dx^n in ascending order. Constant polynomial
        returns [0.0].

    Examples
    --------
    >>> polynomial_derivative(torch.tensor([1.0, 2.0, 3.0]))  # 2 + 6x
    tensor([2., 6.])
    """
    for _ in range(order):
        n = coeffs.shape[-1]
        if n <= 1:
            # Derivative of constant is zero
            return torch.zeros(
                *coeffs.shape[:-1],
                1,
                dtype=coeffs.dtype,
                device=coeffs.device,
            )

        # new_coeffs[i] = (i+1) * old_coeffs[i+1]
        # arange doesn't support complex, build the powers in the real dtype
        real_dtype = coeffs.real.dtype if coeffs.is_complex() else coeffs.dtype
        powers = torch.arange(
            1, n, device=coeffs.device, dtype=real_dtype
        ).to(coeffs.dtype)
        coeffs = coeffs[..., 1:] * powers

    return coeffs
