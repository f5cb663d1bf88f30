import torch
from torch import Tensor


def polynomial_trim(coeffs: Tensor, tol: float = 0.0) -> Tensor:
    """Remove zero leading coefficients.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (..., N).
    tol : float
        Tolerance for considering coefficient as zero.

    Returns
    -------
    Tensor
        Trimmed coefficients with at least one entry.

    Notes
    -----
    For batched polynomials, this trims based on the maximum absolute
    value across the batch for each coefficient position.
    """
    n = coeffs.shape[-1]

    if n <= 1:
        return coeffs

    # A coefficient position is non-zero if any batch element is non-zero
    max_abs = coeffs.abs()
    for _ in range(coeffs.dim() - 1):
        max_abs = max_abs.max(dim=0).values

    mask = max_abs > tol
    if not mask.any():
        # All zeros, return single zero coefficient
        return torch.zeros(
            *coeffs.shape[:-1], 1, dtype=coeffs.dtype, device=coeffs.device
        )

    indices = torch.arange(n, device=coeffs.device)
    last_nonzero = indices[mask].max().item()

    return coeffs[..., : last_nonzero + 1]
