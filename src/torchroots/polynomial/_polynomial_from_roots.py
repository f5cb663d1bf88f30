import torch
from torch import Tensor


def polynomial_from_roots(roots: Tensor) -> Tensor:
    """Construct monic polynomial from its roots.

    Constructs (x - r_0)(x - r_1)...(x - r_{n-1}).

    Parameters
    ----------
    roots : Tensor
        Roots, shape (..., N). Can be complex.

    Returns
    -------
    Tensor
        Monic ascending coefficients with given roots, shape (..., N+1).

    Examples
    --------
    >>> polynomial_from_roots(torch.tensor([1.0, 2.0]))  # x^2 - 3x + 2
    tensor([ 2., -3.,  1.])
    """
    batch_shape = roots.shape[:-1]
    n_roots = roots.shape[-1]

    if n_roots == 0:
        # Empty roots -> constant polynomial 1
        return torch.ones(
            (*batch_shape, 1), dtype=roots.dtype, device=roots.device
        )

    # Start with polynomial (x - r_0) = -r_0 + 1*x
    coeffs = torch.stack(
        [-roots[..., 0], torch.ones_like(roots[..., 0])],
        dim=-1,
    )

    # Multiply by (x - r_i) for each remaining root
    for i in range(1, n_roots):
        root_i = roots[..., i]

        # Shift coefficients (multiply by x)
        shifted = torch.nn.functional.pad(coeffs, (1, 0))

        # Scale original (multiply by -r_i)
        scaled = torch.nn.functional.pad(coeffs, (0, 1)) * (
            -root_i.unsqueeze(-1)
        )

        coeffs = shifted + scaled

    return coeffs
