"""Closed-form quartic solver built on the closed-form cubic.

Flocke, N. "Algorithm 954: An Accurate and Efficient Cubic and Quartic
Equation Solver for Physical Applications", ACM Transactions on Mathematical
Software 41(4), 2015.
"""

import math

from torch import Tensor

from ._convergence import MAXITER
from ._solve_cubic_closed_form import (
    _MACHEPS,
    _divide,
    _is_real,
    _sign,
    solve_cubic_closed_form,
    solve_monic_cubic_closed_form,
)
from ._solve_linear import _roots
from ._solve_quadratic import solve_monic_quadratic


def _rescale(q3: float, q2: float, q1: float, q0: float) -> tuple[float, ...]:
    """Scale x by k so that the largest of |q3|, |q2|^(1/2), |q1|^(1/3),
    |q0|^(1/4) is 1. Returns ``(k, a3, a2, a1, a0)``."""
    s = abs(q3)
    t = math.sqrt(abs(q2))
    u = abs(q1) ** (1.0 / 3.0)
    x = math.sqrt(math.sqrt(abs(q0)))
    y = max(s, t, u, x)

    if y == s:
        k = 1.0 / s
        return (
            s,
            _sign(1.0, q3),
            (q2 * k) * k,
            ((q1 * k) * k) * k,
            (((q0 * k) * k) * k) * k,
        )
    if y == t:
        k = 1.0 / t
        return (
            t,
            q3 * k,
            _sign(1.0, q2),
            ((q1 * k) * k) * k,
            (((q0 * k) * k) * k) * k,
        )
    if y == u:
        k = 1.0 / u
        return (
            u,
            q3 * k,
            (q2 * k) * k,
            _sign(1.0, q1),
            (((q0 * k) * k) * k) * k,
        )
    k = 1.0 / x
    return x, q3 * k, (q2 * k) * k, ((q1 * k) * k) * k, _sign(1.0, q0)


def _with_zero_root(a3: float, a2: float, a1: float, k: float) -> Tensor:
    """Roots of x (x^3 + a3 x^2 + a2 x + a1), scaled by k."""
    first, second, third = solve_monic_cubic_closed_form(a3, a2, a1).tolist()

    if _is_real(first) and _is_real(second):
        x, y, z = first.real * k, second.real * k, third.real * k
        return _roots(
            max(x, 0.0),
            max(y, min(x, 0.0)),
            max(z, min(y, 0.0)),
            min(z, 0.0),
        )

    x = first.real * k
    return _roots(max(x, 0.0), min(x, 0.0), second * k, third * k)


def _biquadratic(a2: float, a0: float, k: float) -> Tensor:
    """Roots of x^4 + a2 x^2 + a0, scaled by k, through y = x^2."""
    first, second = solve_monic_quadratic(a2, a0).tolist()

    if _is_real(first):
        # first >= second
        x, y = first.real, second.real
        if y >= 0.0:
            x = math.sqrt(x) * k
            y = math.sqrt(y) * k
            return _roots(x, y, -y, -x)
        if x >= 0.0:
            x = math.sqrt(x) * k
            y = math.sqrt(-y) * k
            return _roots(x, -x, complex(0.0, y), complex(0.0, -y))
        x = math.sqrt(-x) * k
        y = math.sqrt(-y) * k
        return _roots(
            complex(0.0, y),
            complex(0.0, x),
            complex(0.0, -x),
            complex(0.0, -y),
        )

    # Square roots of the conjugate pair x +- iy
    x = first.real * 0.5
    y = first.imag * 0.5
    z = math.hypot(x, y)
    y = math.sqrt(z - x) * k
    x = math.sqrt(z + x) * k
    return _roots(
        complex(x, y), complex(x, -y), complex(-x, y), complex(-x, -y)
    )


def _evaluate(x: float, a3: float, a2: float, a1: float, a0: float) -> float:
    return (((x + a3) * x + a2) * x + a1) * x + a0


def _newton_start(stationary: float, a3: float, a0: float) -> float:
    """Newton start on the side of a negative minimum away from the
    inflection points around -a3 / 4."""
    if stationary < -a3 * 0.25:
        if stationary > 0.0:
            return -1.0 + _sign(1.0, a0)
        return -2.0
    if stationary < 0.0:
        return 1.0 - _sign(1.0, a0)
    return 2.0


def _real_root(x: float, a3: float, a2: float, a1: float, a0: float) -> float:
    """Real root of the rescaled quartic by Newton-Raphson from ``x``.

    The starting point has Q(x) > 0, so every negative Q(x) is an
    overshoot; after three of them the last iterates on either side are
    bisected instead.
    """
    lower = upper = 0.0
    oscillations = 0
    bisect = False

    for _ in range(MAXITER):
        y = x + a3
        z = x + y
        y = y * x + a2
        z = z * x + y
        y = y * x + a1
        z = z * x + y  # Q'(x)
        y = y * x + a0  # Q(x)

        if y < 0.0:
            oscillations += 1
            lower = x
        else:
            upper = x

        step = _divide(y, z)
        x = x - step

        if oscillations > 2:
            bisect = True
            break
        if abs(step) <= abs(x) * _MACHEPS:
            break

    if bisect:
        width = upper - lower
        while abs(width) > abs(x) * _MACHEPS:
            if _evaluate(x, a3, a2, a1, a0) < 0.0:
                lower = x
            else:
                upper = x
            width = 0.5 * (upper - lower)
            x = lower + width

    return x


def _deflate(
    x: float,
    rescaled: tuple[float, float, float, float],
    unscaled: tuple[float, float, float, float, float],
) -> tuple[float, float, float]:
    """Cubic factor of the unscaled quartic after removing the root x.

    ``x`` is the root of the rescaled quartic; the returned coefficients
    are those of the unscaled one. Forward or backward recurrences are
    picked from the largest term of the rescaled quartic at x.
    """
    a3, a2, a1, a0 = rescaled
    q3, q2, q1, q0, k = unscaled

    z = abs(x)
    y = z * max(abs(a3), z)
    deflation = 1
    if y < abs(a2):
        y = abs(a2) * z
        deflation = 2
    else:
        y = y * z
    if y < abs(a1):
        y = abs(a1) * z
        deflation = 3
    else:
        y = y * z
    if y < abs(a0):
        deflation = 4

    x = x * k

    if deflation == 1:
        z = _divide(1.0, x)
        u = -q0 * z
        t = (u - q1) * z
        s = (t - q2) * z
    elif deflation == 2:
        z = _divide(1.0, x)
        u = -q0 * z
        t = (u - q1) * z
        s = q3 + x
    elif deflation == 3:
        s = q3 + x
        t = q2 + s * x
        u = _divide(-q0, x)
    else:
        s = q3 + x
        t = q2 + s * x
        u = q1 + t * x

    return s, t, u


def _complex_roots(
    a3: float,
    a2: float,
    a1: float,
    a0: float,
    unscaled: tuple[float, float, float, float, float],
) -> Tensor:
    """Two conjugate pairs a +- ic and b +- id of a quartic with no real
    roots."""
    q3, q2, q1, q0, k = unscaled

    s = a3 * 0.5
    t = s * s - a2
    # Q'(-a3 / 4) up to a constant
    u = s * t + a1
    not_zero = abs(u) >= _MACHEPS

    if a3 != 0.0:
        s = a1 / a3
        minimum = a0 > s * s
    else:
        minimum = 4.0 * a0 > a2 * a2

    if not_zero or minimum:
        # Newton-Raphson on the resolvent H(x) for the smaller real part
        x = _sign(2.0, a3)
        positive = negative = 0.0
        oscillations = 0
        bisect = False

        for _ in range(MAXITER):
            h, dh = _resolvent(x, a3, a2, a1, a0)

            if h > 0.0:
                oscillations += 1
                positive = x
            else:
                negative = x

            step = _divide(h, dh)
            x = x - step

            if oscillations > 2:
                bisect = True
                break
            if abs(step) <= abs(x) * _MACHEPS:
                break

        if bisect:
            width = negative - positive
            while abs(width) > abs(x * _MACHEPS):
                h, _ = _resolvent(x, a3, a2, a1, a0)
                if h > 0.0:
                    positive = x
                else:
                    negative = x
                width = 0.5 * (negative - positive)
                x = positive + width

        a = x * k
        b = -0.5 * q3 - a

        # Squared imaginary parts from Q'(a) / Q'''(a) and Q'(b) / Q'''(b)
        x = 4.0 * a + q3
        y = ((x + q3 + q3) * a + q2 + q2) * a + q1
        y = max(_divide(y, x), 0.0)
        x = 4.0 * b + q3
        z = ((x + q3 + q3) * b + q2 + q2) * b + q1
        z = max(_divide(z, x), 0.0)

        c = a * a
        d = b * b
        s = c + y
        t = d + z

        # The pair with the larger modulus keeps its own imaginary part, the
        # other one follows from the product of all four roots, q0
        if s > t:
            c = math.sqrt(y)
            d = math.sqrt(max(_divide(q0, s) - d, 0.0))
        else:
            c = math.sqrt(max(_divide(q0, t) - c, 0.0))
            d = math.sqrt(z)
    else:
        # Both pairs share the real part -q3 / 4
        a = -0.25 * q3
        b = a

        x = (((a + q3) * a + q2) * a + q1) * a + q0
        y = -0.1875 * q3 * q3 + 0.5 * q2
        z = math.sqrt(max(y * y - x, 0.0))
        y = y + _sign(z, y)
        x = _divide(x, y)
        c = math.sqrt(max(y, 0.0))
        d = math.sqrt(max(x, 0.0))

    if a > b:
        return _roots(
            complex(a, c), complex(a, -c), complex(b, d), complex(b, -d)
        )
    if a < b:
        return _roots(
            complex(b, d), complex(b, -d), complex(a, c), complex(a, -c)
        )
    return _roots(complex(a, c), complex(a, -c), complex(a, d), complex(a, -d))


def _resolvent(
    x: float, a3: float, a2: float, a1: float, a0: float
) -> tuple[float, float]:
    """H(x) and H'(x), where H vanishes at the real part of a root pair."""
    a = x + a3
    b = x + a
    c = x + b
    d = x + c
    a = a * x + a2
    b = b * x + a
    c = c * x + b
    a = a * x + a1
    b = b * x + a
    a = a * x + a0
    # a = Q(x), b = Q'(x), c = Q''(x) / 2, d = Q'''(x) / 6
    h = a * d * d - b * c * d + b * b
    dh = 2.0 * d * (4.0 * a - b * d - c * c)
    return h, dh


def solve_monic_quartic_closed_form(
    q3: float | Tensor,
    q2: float | Tensor,
    q1: float | Tensor,
    q0: float | Tensor,
) -> Tensor:
    """All roots of the monic quartic x^4 + q3 x^3 + q2 x^2 + q1 x + q0.

    The quartic is rescaled so that its largest scaled coefficient is
    exactly one. A zero constant term reduces to the closed-form cubic, and
    a quartic in x^2 is solved as a quadratic. Otherwise the stationary
    points (roots of Q', a cubic) tell whether Q has real roots. If it does,
    one is found by Newton-Raphson from a point where Q > 0 and the rest
    come from the cubic left after deflation. If not, the real parts of the
    two conjugate pairs are found on a resolvent and the imaginary parts
    follow from them.

    Parameters
    ----------
    q3 : float or Tensor
        Coefficient of the cubic term.
    q2 : float or Tensor
        Coefficient of the quadratic term.
    q1 : float or Tensor
        Coefficient of the linear term.
    q0 : float or Tensor
        Independent coefficient.

    Returns
    -------
    Tensor
        Complex roots, shape (4,). Real roots come first in descending
        order. Conjugate pairs follow, ordered by descending real part
        and, for equal real parts, by descending imaginary part.

    Examples
    --------
    >>> roots = solve_monic_quartic_closed_form(-10.0, 35.0, -50.0, 24.0)
    >>> [round(r, 9) for r in roots.real.tolist()]
    [4.0, 3.0, 2.0, 1.0]
    """
    q3, q2, q1, q0 = float(q3), float(q2), float(q1), float(q0)

    if q0 == 0.0:
        k, a3, a2, a1, a0 = 1.0, q3, q2, q1, 0.0
    elif q3 == 0.0 and q1 == 0.0:
        k, a3, a2, a1, a0 = 1.0, 0.0, q2, 0.0, q0
    else:
        # The rescaled coefficients may still underflow to zero
        k, a3, a2, a1, a0 = _rescale(q3, q2, q1, q0)

    if a0 == 0.0:
        return _with_zero_root(a3, a2, a1, k)

    if a3 == 0.0 and a1 == 0.0:
        return _biquadratic(a2, a0, k)

    unscaled = (q3, q2, q1, q0, k)

    # Stationary points: Q'(x) / 4 = x^3 + 3/4 a3 x^2 + 1/2 a2 x + 1/4 a1.
    # The first root of the cubic is real; all three are real when the
    # second one is.
    stationary = solve_monic_cubic_closed_form(
        0.75 * a3, 0.5 * a2, 0.25 * a1
    ).tolist()

    s = stationary[0].real
    q_s = _evaluate(s, a3, a2, a1, a0)
    u = 0.0
    q_u = 1.0
    if _is_real(stationary[1]):
        u = stationary[2].real
        q_u = _evaluate(u, a3, a2, a1, a0)

    if q_s < 0.0 and q_u < 0.0:
        # Start from the side of the lower minimum
        if q_s < q_u:
            x = 1.0 - _sign(1.0, a0) if s < 0.0 else 2.0
        else:
            x = -1.0 + _sign(1.0, a0) if u > 0.0 else -2.0
    elif q_s < 0.0:
        x = _newton_start(s, a3, a0)
    elif q_u < 0.0:
        x = _newton_start(u, a3, a0)
    else:
        return _complex_roots(a3, a2, a1, a0, unscaled)

    x = _real_root(x, a3, a2, a1, a0)
    s, t, u = _deflate(x, (a3, a2, a1, a0), unscaled)
    x = x * k

    cubic = solve_monic_cubic_closed_form(s, t, u).tolist()

    if all(_is_real(root) for root in cubic):
        s, t, u = (root.real for root in cubic)
        return _roots(
            max(s, x),
            max(t, min(s, x)),
            max(u, min(t, x)),
            min(u, x),
        )

    s = cubic[0].real
    return _roots(max(s, x), min(s, x), cubic[1], cubic[2])


def solve_quartic_closed_form(
    a4: float | Tensor,
    a3: float | Tensor,
    a2: float | Tensor,
    a1: float | Tensor,
    a0: float | Tensor,
) -> Tensor:
    """Roots of a4 x^4 + a3 x^3 + a2 x^2 + a1 x + a0 in closed form.

    Parameters
    ----------
    a4, a3, a2, a1, a0 : float or Tensor
        Coefficients, leading first.

    Returns
    -------
    Tensor
        Complex roots, shape (4,), ordered as in
        :func:`solve_monic_quartic_closed_form`. A zero ``a4`` is handed to
        :func:`solve_cubic_closed_form`.

    Examples
    --------
    >>> roots = solve_quartic_closed_form(-2.0, 0.0, 0.0, 0.0, 2.0)
    >>> roots.tolist()
    [(1+0j), (-1+0j), 1j, -1j]
    """
    a4 = float(a4)

    if a4 == 0.0:
        return solve_cubic_closed_form(a3, a2, a1, a0)

    return solve_monic_quartic_closed_form(
        float(a3) / a4, float(a2) / a4, float(a1) / a4, float(a0) / a4
    )
