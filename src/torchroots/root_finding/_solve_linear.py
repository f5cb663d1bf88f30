import torch
from torch import Tensor


def _roots(*values: complex) -> Tensor:
    """Pack scalar roots into a 1-D complex128 tensor."""
    return torch.tensor(values, dtype=torch.complex128)


def solve_linear(q1: float | Tensor, q0: float | Tensor) -> Tensor:
    """Root of the linear polynomial q1 * x + q0.

    Parameters
    ----------
    q1 : float or Tensor
        Coefficient of the x term.
    q0 : float or Tensor
        Independent coefficient.

    Returns
    -------
    Tensor
        Complex roots, shape (1,). Empty (shape (0,)) when ``q1 == 0``,
        since the polynomial then has no roots.

    Examples
    --------
    >>> solve_linear(2.0, -4.0)
    tensor([2.+0.j], dtype=torch.complex128)
    """
    q1 = float(q1)
    q0 = float(q0)

    if q1 == 0.0:
        return _roots()

    return _roots(-(q0 / q1))
