"""Cubic polynomial root solvers.

All four solvers take the coefficients of a3 * x^3 + a2 * x^2 + a1 * x + a0
leading-first and return a complex tensor with three roots (fewer when
``a3 == 0`` makes the polynomial degenerate).
"""

import math
import warnings

import torch
from torch import Tensor

from torchroots.polynomial import descending_to_ascending, polynomial_evaluate

from ._aberth_ehrlich import aberth_ehrlich
from ._bisection import bisection
from ._complex import complex_cbrt, rotate
from ._convergence import MAXITER, residual_tolerance
from ._durand_kerner import durand_kerner
from ._exceptions import BracketError, RootFindingError, RootFindingWarning
from ._newton_raphson import newton_raphson
from ._solve_linear import _roots
from ._solve_quadratic import solve_quadratic

# Half-width of the symmetric bracket before its first doubling
_BRACKET_START = 64.0
_BRACKET_LIMIT = 1e64


def _format_cubic(a: float, b: float, c: float, d: float) -> str:
    return f"{a!r}x^3 + {b!r}x^2 + {c!r}x + {d!r} = 0"


def _with_zero_root(roots: Tensor) -> Tensor:
    """Add the root x = 0 factored out of a cubic with a zero constant term.

    Real roots stay in descending order; a complex pair stays last.
    """
    zero = torch.zeros(1, dtype=roots.dtype, device=roots.device)
    if torch.all(roots.imag == 0):
        real = torch.cat([zero.real, roots.real])
        return torch.sort(real, descending=True).values.to(roots.dtype)
    return torch.cat([zero, roots])


def _monic(*coefficients) -> Tensor:
    """Ascending complex coefficients divided by the leading one."""
    coeffs = descending_to_ascending(*coefficients)
    return (coeffs / coeffs[-1]).to(torch.complex128)


def _bracket_real_root(coeffs: Tensor) -> float:
    """Find a real root of a cubic by bracketing and bisection.

    The symmetric bracket doubles from [-128, 128] until the polynomial
    changes sign across it.
    """
    lower = -_BRACKET_START
    upper = _BRACKET_START

    while True:
        lower *= 2.0
        upper *= 2.0
        if upper > _BRACKET_LIMIT:
            raise BracketError(
                "cannot find first root for "
                + _format_cubic(*reversed(coeffs.tolist()))
            )
        ends = torch.tensor([lower, upper], dtype=coeffs.dtype)
        f1, f2 = polynomial_evaluate(coeffs, ends).tolist()
        # Opposite signs or a root on the bracket end; NaN never brackets
        if f1 * f2 <= 0.0:
            break

    root = bisection(coeffs, lower, upper).item()
    if math.isnan(root):
        raise RootFindingError(
            "bisection did not converge for "
            + _format_cubic(*reversed(coeffs.tolist()))
        )
    return root


def solve_cubic_newton_factor(
    a3: float | Tensor,
    a2: float | Tensor,
    a1: float | Tensor,
    a0: float | Tensor,
) -> Tensor:
    """Roots of a cubic via Newton-Raphson and deflation to a quadratic.

    The first (real) root is found with Newton-Raphson on the coefficients
    divided by the largest one in magnitude. When Newton-Raphson does not
    converge, or leaves a residual above 1e-9, a :class:`RootFindingWarning`
    is issued and bisection is used instead. The other two roots come from
    the deflated quadratic.

    Parameters
    ----------
    a3 : float or Tensor
        Coefficient of the cubic term.
    a2 : float or Tensor
        Coefficient of the quadratic term.
    a1 : float or Tensor
        Coefficient of the linear term.
    a0 : float or Tensor
        Independent coefficient.

    Returns
    -------
    Tensor
        Complex roots, shape (3,): the Newton root first, then the
        quadratic factor's roots in their own order. With ``a0 == 0`` the
        root 0 is merged into the quadratic's roots in descending order.

    Raises
    ------
    BracketError
        If no sign change is found within [-1e64, 1e64]. Every real cubic
        has a real root, so this signals a broken input such as NaN
        coefficients.
    RootFindingError
        If bisection inside a valid bracket does not converge.

    Examples
    --------
    >>> roots = solve_cubic_newton_factor(1.0, -6.0, 11.0, -6.0)
    >>> sorted(round(r, 9) for r in roots.real.tolist())
    [1.0, 2.0, 3.0]
    """
    a3, a2, a1, a0 = float(a3), float(a2), float(a1), float(a0)

    # a3 == 0 --> quadratic equation
    if a3 == 0.0:
        return solve_quadratic(a2, a1, a0)

    # a0 == 0 --> x * (a3 x^2 + a2 x + a1) = 0
    if a0 == 0.0:
        return _with_zero_root(solve_quadratic(a3, a2, a1))

    scale = max(abs(a3), abs(a2), abs(a1), abs(a0))
    a, b, c, d = a3 / scale, a2 / scale, a1 / scale, a0 / scale
    coeffs = descending_to_ascending(a, b, c, d)

    root = newton_raphson(coeffs).item()
    residual = polynomial_evaluate(
        coeffs, torch.tensor(root, dtype=coeffs.dtype)
    ).item()

    if math.isnan(root) or abs(residual) > residual_tolerance(coeffs.dtype):
        warnings.warn(
            "Newton-Raphson did not converge for "
            f"{_format_cubic(a, b, c, d)}; falling back to bisection",
            RootFindingWarning,
            stacklevel=2,
        )
        root = _bracket_real_root(coeffs)

    # Factor out (x - r): the remaining quadratic is
    # a x^2 + (b + r a) x + (c + r (b + r a))
    quadratic = solve_quadratic(a, b + root * a, c + root * (b + root * a))

    return torch.cat([_roots(root), quadratic])


def solve_cubic_cardano(
    a: float | Tensor,
    b: float | Tensor,
    c: float | Tensor,
    d: float | Tensor,
) -> Tensor:
    """Roots of a cubic a * x^3 + b * x^2 + c * x + d using Cardano's formula.

    Parameters
    ----------
    a : float or Tensor
        Coefficient of the cubic term.
    b : float or Tensor
        Coefficient of the quadratic term.
    c : float or Tensor
        Coefficient of the linear term.
    d : float or Tensor
        Independent coefficient.

    Returns
    -------
    Tensor
        Complex roots, shape (3,), for k = 0, 1, 2. Real roots may carry a
        small nonzero imaginary part from the complex intermediate values.

    Notes
    -----
    With ``D0 = b^2 - 3ac`` and ``D1 = 2b^3 - 9abc + 27a^2 d``, the roots are
    ``x_k = -(C w^k + b + D0 / (C w^k)) / (3a)`` where C is the principal
    cube root of ``(D1 + sqrt(D1^2 - 4 D0^3)) / 2`` and ``w^k`` is a rotation
    by 0, 120 and -120 degrees. If that base is exactly zero, the other sign
    of the square root is used. ``D0 == D1 == 0`` means a triple root.

    Examples
    --------
    >>> roots = solve_cubic_cardano(1.0, -6.0, 11.0, -6.0)
    >>> sorted(round(r, 9) for r in roots.real.tolist())
    [1.0, 2.0, 3.0]
    """
    a, b, c, d = float(a), float(b), float(c), float(d)

    # a == 0 --> quadratic equation
    if a == 0.0:
        return solve_quadratic(b, c, d)

    # d == 0 --> x * (a x^2 + b x + c) = 0
    if d == 0.0:
        return _with_zero_root(solve_quadratic(a, b, c))

    d0 = b * b - 3.0 * a * c
    d1 = 2.0 * b * b * b - 9.0 * a * b * c + 27.0 * a * a * d

    if d0 == 0.0 and d1 == 0.0:
        # Triple root, the root of the linear factor 3a x + b of f''
        root = newton_raphson(descending_to_ascending(3.0 * a, b)).item()
        if math.isnan(root):
            # Newton-Raphson can alternate between two neighbouring floats
            root = -b / (3.0 * a)
        return _roots(root, root, root)

    # The radicand can be negative, take the complex square root
    r = torch.sqrt(
        torch.tensor(d1 * d1 - 4.0 * d0 * d0 * d0, dtype=torch.complex128)
    )
    s = (r + d1) * 0.5
    if s.real == 0.0 and s.imag == 0.0:
        s = (d1 - r) * 0.5

    big_c = complex_cbrt(s)
    angles = torch.tensor(
        [0.0, math.radians(120.0), math.radians(-120.0)], dtype=torch.float64
    )
    c_k = rotate(big_c, angles)

    return (c_k + b + c_k.reciprocal() * d0) * (-1.0 / (3.0 * a))


def solve_cubic_durand_kerner(
    a3: float | Tensor,
    a2: float | Tensor,
    a1: float | Tensor,
    a0: float | Tensor,
    *,
    maxiter: int = MAXITER,
) -> Tensor:
    """Roots of a cubic using the Durand-Kerner iteration.

    Parameters
    ----------
    a3, a2, a1, a0 : float or Tensor
        Coefficients, leading first.
    maxiter : int, default=100
        Maximum number of sweeps.

    Returns
    -------
    Tensor
        Complex roots, shape (3,); :func:`solve_quadratic` is used when
        ``a3 == 0``.

    See Also
    --------
    durand_kerner : general-degree solver
    """
    if float(a3) == 0.0:
        return solve_quadratic(a2, a1, a0)

    return durand_kerner(_monic(a3, a2, a1, a0), maxiter=maxiter)


def solve_cubic_aberth_ehrlich(
    a3: float | Tensor,
    a2: float | Tensor,
    a1: float | Tensor,
    a0: float | Tensor,
    *,
    maxiter: int = MAXITER,
) -> Tensor:
    """Roots of a cubic using the Aberth-Ehrlich iteration.

    Parameters
    ----------
    a3, a2, a1, a0 : float or Tensor
        Coefficients, leading first.
    maxiter : int, default=100
        Maximum number of sweeps.

    Returns
    -------
    Tensor
        Complex roots, shape (3,); :func:`solve_quadratic` is used when
        ``a3 == 0``.

    See Also
    --------
    aberth_ehrlich : general-degree solver
    """
    if float(a3) == 0.0:
        return solve_quadratic(a2, a1, a0)

    return aberth_ehrlich(_monic(a3, a2, a1, a0), maxiter=maxiter)
