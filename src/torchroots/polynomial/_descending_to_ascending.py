import torch
from torch import Tensor


def descending_to_ascending(
    *coefficients,
    dtype: torch.dtype = torch.float64,
    device: torch.device | str | None = None,
) -> Tensor:
    """Convert coefficients written leading-first into an ascending tensor.

    The solver entry points take coefficients the way the polynomial is
    written, ``a3 * x^3 + a2 * x^2 + a1 * x + a0`` as ``(a3, a2, a1, a0)``.
    Every evaluation and iteration routine works on ascending vectors where
    index i holds the coefficient of x^i. This is the only place where the
    order is reversed.

    Parameters
    ----------
    *coefficients : float or Tensor
        Coefficients in descending order of powers. Python numbers or
        0-d tensors.
    dtype : torch.dtype, default=torch.float64
        Dtype of the returned tensor.
    device : torch.device or str, optional
        Device of the returned tensor.

    Returns
    -------
    Tensor
        1-D tensor of shape (len(coefficients),) in ascending order.

    Raises
    ------
    ValueError
        If no coefficients are given.

    Examples
    --------
    >>> descending_to_ascending(2.0, -4.0)  # 2x - 4
    tensor([-4.,  2.], dtype=torch.float64)
    """
    if len(coefficients) == 0:
        raise ValueError("At least one coefficient is required")

    return torch.stack(
        [
            torch.as_tensor(c, dtype=dtype, device=device).reshape(())
            for c in reversed(coefficients)
        ]
    )
