"""Complex helpers missing from torch: principal cube root and rotation."""

import torch
from torch import Tensor


def complex_cbrt(z: Tensor) -> Tensor:
    """Principal complex cube root using polar form.

    The principal cube root has the most positive real component among the
    three cube roots.
    """
    return torch.polar(z.abs().pow(1.0 / 3.0), torch.angle(z) / 3.0)


def rotate(z: Tensor, angle: Tensor | float) -> Tensor:
    """Rotate complex values by ``angle`` radians around the origin.

    ``angle`` broadcasts against ``z``.
    """
    angle = torch.as_tensor(angle, dtype=z.real.dtype, device=z.device)
    cos = torch.cos(angle)
    sin = torch.sin(angle)
    return torch.complex(
        z.real * cos - z.imag * sin, z.imag * cos + z.real * sin
    )
