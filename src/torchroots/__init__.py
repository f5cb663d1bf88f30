"""torchroots: real and complex roots of polynomials with PyTorch."""

from . import polynomial, root_finding

__all__ = [
    "polynomial",
    "root_finding",
]

__version__ = "0.1.0"
