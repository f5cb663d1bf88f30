import math
import sys

from torch import Tensor

from ._solve_linear import _roots, solve_linear

_LARGEST = sys.float_info.max

# Square root of the largest positive number
_SQRT_LARGEST = math.sqrt(_LARGEST)


def solve_quadratic(
    q2: float | Tensor, q1: float | Tensor, q0: float | Tensor
) -> Tensor:
    """All roots of the quadratic polynomial q2 * x^2 + q1 * x + q0.

    Divides through by ``q2`` and calls :func:`solve_monic_quadratic`; a
    zero ``q2`` falls back to :func:`solve_linear`.

    Parameters
    ----------
    q2 : float or Tensor
        Coefficient of the quadratic term.
    q1 : float or Tensor
        Coefficient of the x term.
    q0 : float or Tensor
        Independent coefficient.

    Returns
    -------
    Tensor
        Complex roots, shape (2,) (fewer when ``q2 == 0``).

    Examples
    --------
    >>> solve_quadratic(1.0, -5.0, 6.0)
    tensor([3.+0.j, 2.+0.j], dtype=torch.complex128)
    """
    q2 = float(q2)

    if q2 == 0.0:
        return solve_linear(q1, q0)

    return solve_monic_quadratic(float(q1) / q2, float(q0) / q2)


def solve_monic_quadratic(q1: float | Tensor, q0: float | Tensor) -> Tensor:
    """All roots of the monic quadratic polynomial x^2 + q1 * x + q0.

    The coefficients are rescaled internally when squaring ``q1 / 2`` or
    evaluating ``(q1 / 2)^2 - q0`` would overflow. Rescaling may cost
    accuracy, so it is only done when needed.

    Parameters
    ----------
    q1 : float or Tensor
        Coefficient of the x term.
    q0 : float or Tensor
        Independent coefficient.

    Returns
    -------
    Tensor
        Complex roots, shape (2,). Real roots come in descending order and
        have an imaginary part of exactly zero. A complex conjugate pair is
        returned as ``[-x + iy, -x - iy]``.

    Examples
    --------
    >>> solve_monic_quadratic(0.0, 1.0)
    tensor([0.+1.j, 0.-1.j], dtype=torch.complex128)

    Notes
    -----
    The real roots are computed with the cancellation-free variant: the root
    of larger magnitude ``y = -x - sign(x) * sqrt(x^2 - q0)`` first, the
    other one as ``q0 / y``.
    """
    q1 = float(q1)
    q0 = float(q0)

    # Special cases
    if q0 == 0.0 and q1 == 0.0:
        return _roots(0.0, 0.0)

    if q0 == 0.0:
        # x^2 + q1 * x == x * (x + q1)
        return _roots(max(0.0, -q1), min(0.0, -q1))

    if q1 == 0.0:
        x = math.sqrt(abs(q0))
        if q0 < 0.0:
            # Two real roots, symmetrically around 0
            return _roots(x, -x)
        # Two complex roots, symmetrically around 0
        return _roots(complex(0.0, x), complex(0.0, -x))

    # The general case. Rescale if squaring q1 / 2 or evaluating
    # (q1 / 2)^2 - q0 would overflow.
    rescale = abs(q1) > _SQRT_LARGEST + _SQRT_LARGEST

    if not rescale:
        x = q1 * 0.5  # x * x cannot overflow here
        rescale = q0 < x * x - _LARGEST

    k = 1.0
    if rescale:
        x = abs(q1)
        y = math.sqrt(abs(q0))

        if x > y:
            k = x
            z = 1.0 / x
            a1 = math.copysign(1.0, q1)
            a0 = (q0 * z) * z
        else:
            k = y
            a1 = q1 / y
            a0 = math.copysign(1.0, q0)
    else:
        a1 = q1
        a0 = q0

    # Either a1 or a0 might have underflowed to zero, but not both
    x = a1 * 0.5
    y = x * x - a0

    if y >= 0.0:
        # Two real roots
        y = math.sqrt(y)
        y = -x - y if x > 0.0 else -x + y

        if rescale:
            # Undo the rescaling on the first root before dividing, a0 may
            # have underflowed
            y = y * k
            z = q0 / y
        else:
            z = a0 / y

        return _roots(max(y, z), min(y, z))

    # Complex conjugate pair
    y = math.sqrt(-y)
    return _roots(complex(-x * k, y * k), complex(-x * k, -y * k))
