import torch
from torch import Tensor


def polynomial_evaluate(coeffs: Tensor, x: Tensor) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (...batch, N).
        ``coeffs[..., i]`` is the coefficient of x^i.
    x : Tensor
        Evaluation points. Must broadcast against the batch shape
        ``coeffs.shape[:-1]``. A batch of polynomials evaluated at
        several points each uses ``coeffs.unsqueeze(-2)``.

    Returns
    -------
    Tensor
        Values p(x), shape is the broadcast of the batch shape of
        ``coeffs`` with ``x.shape``. Real coefficients evaluated at complex
        points give complex values.

    Examples
    --------
    >>> coeffs = torch.tensor([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(coeffs, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    if coeffs.shape[-1] == 0:
        return x * 0.0

    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    n = coeffs.shape[-1]
    # Start with leading coefficient
    result = coeffs[..., -1] * torch.ones_like(x)

    for i in range(n - 2, -1, -1):
        result = result * x + coeffs[..., i]

    return result
