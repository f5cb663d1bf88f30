"""Convergence settings for polynomial root finding."""

import torch
from torch import Tensor

# Iteration budget shared by Newton-Raphson, bisection, Durand-Kerner and
# Aberth-Ehrlich.
MAXITER = 100


def residual_tolerance(dtype: torch.dtype) -> float:
    """Return the largest accepted |f(root)| for a coefficient-normalized
    polynomial.

    Parameters
    ----------
    dtype : torch.dtype
        The tensor dtype.

    Returns
    -------
    float
        Residual threshold above which a root is rejected.
    """
    if dtype in (torch.float16, torch.bfloat16, torch.complex32):
        return 1e-2
    elif dtype in (torch.float32, torch.complex64):
        return 1e-4
    else:  # float64 and others
        return 1e-9


def smallest_subnormal(dtype: torch.dtype) -> float:
    """Return the smallest positive (subnormal) value of a floating dtype.

    For float64 this is 2^-1074, for float32 2^-149.
    """
    finfo = torch.finfo(dtype)
    return finfo.tiny * finfo.eps


def snap_subnormal_to_zero(z: Tensor) -> Tensor:
    """Set real or imaginary parts that are one subnormal ulp away from
    zero to exactly zero.

    Parameters
    ----------
    z : Tensor
        Complex tensor of roots.

    Returns
    -------
    Tensor
        Complex tensor with the same shape and dtype.
    """
    threshold = smallest_subnormal(z.real.dtype)
    real = torch.where(z.real.abs() == threshold, 0.0, z.real)
    imag = torch.where(z.imag.abs() == threshold, 0.0, z.imag)
    return torch.complex(real, imag)
