"""Closed-form cubic solver with a rescaled, seeded Newton-Raphson root.

Flocke, N. "Algorithm 954: An Accurate and Efficient Cubic and Quartic
Equation Solver for Physical Applications", ACM Transactions on Mathematical
Software 41(4), 2015.
"""

import math

from torch import Tensor

from ._convergence import MAXITER
from ._solve_linear import _roots
from ._solve_quadratic import solve_monic_quadratic, solve_quadratic

_MACHEPS = math.ulp(1.0)

_THIRD = 1.0 / 3.0
_ONE_27TH = 1.0 / 27.0
_TWO_27TH = 2.0 / 27.0

# Newton-Raphson starting point coefficients, classes 1 and 2
_P1, _Q1, _R1, _S1 = 1.09574, 3.23900e-1, 3.23900e-1, 9.57439e-2

# Class 3
_P3, _Q3, _R3, _S3 = 1.14413, 2.75509e-1, 4.45578e-1, 2.59342e-2

# Class 4
_Q4, _S4 = 7.71845e-1, 2.28155e-1

# Classes 5 and 6
_P51, _Q51, _R51, _S51 = 8.78558e-1, 5.71888e-1, 7.11154e-1, 3.22313e-1
_P52, _Q52, _R52, _S52 = 1.92823e-1, 5.66324e-1, 5.05734e-1, 2.64881e-1
_P53, _Q53, _R53, _S53 = 1.19748, 2.83772e-1, 8.37476e-1, 3.56228e-1
_P54, _Q54, _R54, _S54 = 3.45219e-1, 4.01231e-1, 2.07216e-1, 4.45532e-3


def _sign(a: float, b: float) -> float:
    """``a`` with the sign flipped when ``b`` is negative (-0.0 counts as
    non-negative)."""
    return a if b >= 0.0 else -a


def _divide(numerator: float, denominator: float) -> float:
    """IEEE 754 division: dividing by zero gives a signed infinity or NaN."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(
            1.0, denominator
        )
    return numerator / denominator


def _is_real(z: complex) -> bool:
    return z.imag == 0.0


def _rescale(c2: float, c1: float, c0: float) -> tuple[float, ...]:
    """Scale x by k so that the largest of |c2|, sqrt|c1|, cbrt|c0| is 1.

    Returns ``(k, a2, a1, a0)`` where a root of the rescaled cubic times k is
    a root of the unscaled one.
    """
    x = abs(c2)
    y = math.sqrt(abs(c1))
    z = abs(c0) ** _THIRD
    u = max(x, y, z)

    if u == x:
        k = 1.0 / x
        return x, _sign(1.0, c2), (c1 * k) * k, ((c0 * k) * k) * k
    if u == y:
        k = 1.0 / y
        return y, c2 * k, _sign(1.0, c1), ((c0 * k) * k) * k
    k = 1.0 / z
    return z, c2 * k, (c1 * k) * k, _sign(1.0, c0)


def _newton_start(a2: float, a1: float, a0: float, k: float):
    """Starting point and the cubic x^3 + a x^2 + b x + c to iterate on.

    One of a2, a1, a0 is exactly +-1 after rescaling, which selects the
    class of the starting point. Near a triple root the cubic is shifted
    by +-1/3. Returns ``(x, a, b, c, shift)``, or ``(root, None, None, None,
    None)`` when the cubic is a triple root.
    """
    if a0 == 1.0:
        return -_P1 + _Q1 * a1 - a2 * (_R1 - _S1 * a1), a2, a1, a0, 0.0

    if a0 == -1.0:
        return _P1 - _Q1 * a1 - a2 * (_R1 - _S1 * a1), a2, a1, a0, 0.0

    if a1 == 1.0:
        if a0 > 0.0:
            x = a0 * (-_Q4 - _S4 * a2)
        else:
            x = a0 * (-_Q4 + _S4 * a2)
        return x, a2, a1, a0, 0.0

    if a1 == -1.0:
        y = ((-_TWO_27TH * a2) * a2 - _THIRD) * a2
        if a0 < y:
            x = _P3 - _Q3 * a0 - a2 * (_R3 + _S3 * a0)
        else:
            x = -_P3 - _Q3 * a0 - a2 * (_R3 - _S3 * a0)
        return x, a2, a1, a0, 0.0

    # a2 == +-1
    direction = _sign(1.0, a2)
    b = a1 - _THIRD
    c = a0 - direction * _ONE_27TH

    if abs(b) < _MACHEPS and abs(c) < _MACHEPS:
        return -direction * _THIRD * k, None, None, None, None

    if direction > 0.0:
        y = _THIRD * a1 - _TWO_27TH
        if a1 <= _THIRD:
            if a0 > y:
                x = -_P51 - _Q51 * a0 + a1 * (_R51 - _S51 * a0)
            else:
                x = _P52 - _Q52 * a0 - a1 * (_R52 + _S52 * a0)
        elif a0 > y:
            x = -_P53 - _Q53 * a0 + a1 * (_R53 - _S53 * a0)
        else:
            x = _P54 - _Q54 * a0 - a1 * (_R54 + _S54 * a0)
    else:
        y = _TWO_27TH - _THIRD * a1
        if a1 <= _THIRD:
            if a0 < y:
                x = _P51 - _Q51 * a0 - a1 * (_R51 + _S51 * a0)
            else:
                x = -_P52 - _Q52 * a0 + a1 * (_R52 - _S52 * a0)
        elif a0 < y:
            x = _P53 - _Q53 * a0 - a1 * (_R53 + _S53 * a0)
        else:
            x = -_P54 - _Q54 * a0 + a1 * (_R54 - _S54 * a0)

    if abs(b) < 1e-2 and abs(c) < 1e-2:
        # Iterate on the depressed cubic around -a2 / 3
        c = -direction * _THIRD * b + c
        if abs(c) < _MACHEPS:
            c = 0.0
        shift = direction * _THIRD
        return x + shift, 0.0, b, c, shift

    return x, a2, a1, a0, 0.0


def _newton_bisection(x: float, a: float, b: float, c: float) -> float:
    """Real root of x^3 + a x^2 + b x + c from the starting point ``x``.

    Newton-Raphson switches to bisection between the last bracketing
    iterates after the third sign change of the cubic.
    """
    # First step, remembering C(x) for the oscillation check
    z = x + a
    y = x + z
    z = z * x + b
    y = y * x + z
    z = z * x + c
    t = z
    x = x - _divide(z, y)

    lower = upper = 0.0
    oscillations = 0

    for _ in range(MAXITER):
        z = x + a
        y = x + z
        z = z * x + b
        y = y * x + z  # C'(x)
        z = z * x + c  # C(x)

        if z * t < 0.0:
            if z < 0.0:
                oscillations += 1
                lower = x
            else:
                upper = x
            t = z

        step = _divide(z, y)
        x = x - step

        if oscillations > 2:
            break
        if abs(step) <= abs(x) * _MACHEPS:
            return x
    else:
        return x

    width = upper - lower
    while abs(width) > abs(x) * _MACHEPS:
        z = ((x + a) * x + b) * x + c
        if z < 0.0:
            lower = x
        else:
            upper = x
        width = 0.5 * (upper - lower)
        x = lower + width

    return x


def _merge_real(first: float, second: float, root: float) -> list[float]:
    """Insert ``root`` into the descending pair ``first >= second``."""
    return [
        max(first, root),
        max(second, min(first, root)),
        min(second, root),
    ]


def solve_monic_cubic_closed_form(
    c2: float | Tensor,
    c1: float | Tensor,
    c0: float | Tensor,
) -> Tensor:
    """All roots of the monic cubic x^3 + c2 * x^2 + c1 * x + c0.

    The cubic is rescaled so that its largest scaled coefficient is exactly
    one, which makes the method immune to overflow. One real root is found
    by Newton-Raphson from a starting point fitted to the rescaled
    coefficients (with a bisection safeguard), and the other two come from
    a composite deflation of the unscaled cubic into a quadratic.

    Parameters
    ----------
    c2 : float or Tensor
        Coefficient of the quadratic term.
    c1 : float or Tensor
        Coefficient of the linear term.
    c0 : float or Tensor
        Independent coefficient.

    Returns
    -------
    Tensor
        Complex roots, shape (3,). Real roots come first in descending
        order, followed by a complex conjugate pair if there is one.

    Examples
    --------
    >>> roots = solve_monic_cubic_closed_form(-6.0, 11.0, -6.0)
    >>> [round(r, 9) for r in roots.real.tolist()]
    [3.0, 2.0, 1.0]

    Notes
    -----
    Deflation picks forward or backward recurrences per coefficient from
    the magnitudes of the terms of the rescaled cubic at the root, and is
    applied to the unscaled coefficients so that rescaling errors are not
    amplified in the remaining roots.
    """
    c2, c1, c0 = float(c2), float(c1), float(c0)

    if c0 == 0.0:
        k, a2, a1, a0 = 1.0, c2, c1, 0.0
    else:
        # The rescaled coefficients may still underflow to zero
        k, a2, a1, a0 = _rescale(c2, c1, c0)

    if a0 == 0.0 and a1 == 0.0 and a2 == 0.0:
        return _roots(0.0, 0.0, 0.0)

    if a0 == 0.0 and a1 == 0.0:
        # x^2 (x + a2)
        root = -a2 * k
        return _roots(max(root, 0.0), 0.0, min(root, 0.0))

    if a0 == 0.0:
        # x (x^2 + a2 x + a1)
        first, second = solve_monic_quadratic(a2, a1).tolist()
        if _is_real(first):
            return _roots(*_merge_real(first.real * k, second.real * k, 0.0))
        return _roots(0.0, first * k, second * k)

    x, a, b, c, shift = _newton_start(a2, a1, a0, k)
    if a is None:
        return _roots(x, x, x)

    x = _newton_bisection(x, a, b, c) - shift

    # Pick the deflation recurrences from the largest term of the rescaled
    # cubic at x: |x^3| or |a2 x^2| (1), |a1 x| (2), |a0| (3)
    z = abs(x)
    y = z * max(abs(a2), z)
    deflation = 1
    if y < abs(a1):
        y = abs(a1) * z
        deflation = 2
    else:
        y = y * z
    if y < abs(a0):
        deflation = 3

    # Real root of the unscaled cubic
    y = x * k

    if deflation == 1:
        x = _divide(1.0, y)
        t = -c0 * x
        s = (t - c1) * x
    elif deflation == 2:
        s = c2 + y
        t = _divide(-c0, y)
    else:
        s = c2 + y
        t = c1 + s * y

    first, second = solve_monic_quadratic(s, t).tolist()
    if _is_real(first):
        return _roots(*_merge_real(first.real, second.real, y))
    return _roots(y, first, second)


def solve_cubic_closed_form(
    a3: float | Tensor,
    a2: float | Tensor,
    a1: float | Tensor,
    a0: float | Tensor,
) -> Tensor:
    """Roots of a3 * x^3 + a2 * x^2 + a1 * x + a0 in closed form.

    Parameters
    ----------
    a3, a2, a1, a0 : float or Tensor
        Coefficients, leading first.

    Returns
    -------
    Tensor
        Complex roots, shape (3,): real roots in descending order, then a
        complex conjugate pair. :func:`solve_quadratic` is used when
        ``a3 == 0``.

    Examples
    --------
    >>> roots = solve_cubic_closed_form(2.0, 0.0, 0.0, -16.0)
    >>> round(roots[0].real.item(), 9)
    2.0

    See Also
    --------
    solve_monic_cubic_closed_form : the solver for a3 == 1
    """
    a3 = float(a3)

    if a3 == 0.0:
        return solve_quadratic(a2, a1, a0)

    return solve_monic_cubic_closed_form(
        float(a2) / a3, float(a1) / a3, float(a0) / a3
    )
