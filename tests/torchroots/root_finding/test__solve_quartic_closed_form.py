import math

import pytest
import torch

from torchroots.root_finding import (
    solve_cubic_closed_form,
    solve_monic_quartic_closed_form,
    solve_quartic_closed_form,
)


def _complex(*values):
    return torch.tensor(values, dtype=torch.complex128)


class TestSolveMonicQuarticClosedForm:
    """Tests for solve_monic_quartic_closed_form."""

    def test_four_real_roots_descending(self):
        """(x - 1)(x - 2)(x - 3)(x - 4)."""
        roots = solve_monic_quartic_closed_form(-10.0, 35.0, -50.0, 24.0)
        assert torch.all(roots.imag == 0)
        torch.testing.assert_close(
            roots, _complex(4.0, 3.0, 2.0, 1.0), atol=1e-10, rtol=0.0
        )

    def test_real_roots_before_pair(self):
        """(x^2 - 1)(x^2 + 2x + 5) = x^4 + 2x^3 + 4x^2 - 2x - 5."""
        roots = solve_monic_quartic_closed_form(2.0, 4.0, -2.0, -5.0)
        torch.testing.assert_close(
            roots,
            _complex(1.0, -1.0, -1 + 2j, -1 - 2j),
            atol=1e-10,
            rtol=0.0,
        )

    def test_two_complex_pairs(self):
        """(x^2 + 1)(x^2 + 2x + 5): pairs by descending real part."""
        roots = solve_monic_quartic_closed_form(2.0, 6.0, 2.0, 5.0)
        torch.testing.assert_close(
            roots, _complex(1j, -1j, -1 + 2j, -1 - 2j), atol=1e-9, rtol=0.0
        )

    def test_pairs_with_equal_real_parts(self):
        """(x^2 + 2x + 2)(x^2 + 2x + 5) has both pairs on Re(x) = -1."""
        torch.testing.assert_close(
            solve_monic_quartic_closed_form(4.0, 11.0, 14.0, 10.0),
            _complex(-1 + 2j, -1 - 2j, -1 + 1j, -1 - 1j),
        )

    @pytest.mark.parametrize(
        "q2, q0, expected",
        [
            # (x^2 - 1)(x^2 - 4)
            (-5.0, 4.0, (2.0, 1.0, -1.0, -2.0)),
            # (x^2 - 4)(x^2 + 1)
            (-3.0, -4.0, (2.0, -2.0, 1j, -1j)),
            # (x^2 + 1)(x^2 + 4)
            (5.0, 4.0, (2j, 1j, -1j, -2j)),
        ],
    )
    def test_biquadratic(self, q2, q0, expected):
        """A quartic in x^2 is solved through its quadratic in y = x^2."""
        torch.testing.assert_close(
            solve_monic_quartic_closed_form(0.0, q2, 0.0, q0),
            _complex(*expected),
        )

    def test_biquadratic_complex_pair(self):
        """x^4 + 1: square roots of the conjugate pair +-i."""
        s = math.sqrt(0.5)
        torch.testing.assert_close(
            solve_monic_quartic_closed_form(0.0, 0.0, 0.0, 1.0),
            _complex(
                complex(s, s), complex(s, -s), complex(-s, s), complex(-s, -s)
            ),
        )

    def test_zero_constant_real(self):
        """x(x - 2)(x - 1)(x + 1): the root 0 is merged in order."""
        torch.testing.assert_close(
            solve_monic_quartic_closed_form(-2.0, -1.0, 2.0, 0.0),
            _complex(2.0, 1.0, 0.0, -1.0),
            atol=1e-12,
            rtol=0.0,
        )

    def test_zero_constant_complex(self):
        """x(x^3 + x - 10): real roots first, then the pair."""
        torch.testing.assert_close(
            solve_monic_quartic_closed_form(0.0, 1.0, -10.0, 0.0),
            _complex(2.0, 0.0, -1 + 2j, -1 - 2j),
            atol=1e-12,
            rtol=0.0,
        )

    def test_all_zero(self):
        """x^4 has the quadruple root 0."""
        torch.testing.assert_close(
            solve_monic_quartic_closed_form(0.0, 0.0, 0.0, 0.0),
            _complex(0.0, 0.0, 0.0, 0.0),
        )

    @pytest.mark.parametrize("scale", [1e-50, 1e50])
    def test_no_overflow(self, scale):
        """(x - s)(x - 2s)(x - 3s)(x - 4s) for s near the float range
        limits after raising to the fourth power."""
        roots = solve_monic_quartic_closed_form(
            -10.0 * scale,
            35.0 * scale**2,
            -50.0 * scale**3,
            24.0 * scale**4,
        )
        assert not torch.any(torch.isnan(roots))
        torch.testing.assert_close(
            roots / scale, _complex(4.0, 3.0, 2.0, 1.0), atol=1e-8, rtol=0.0
        )


class TestSolveQuarticClosedForm:
    """Tests for solve_quartic_closed_form."""

    def test_non_monic(self):
        """-2x^4 + 2 has roots 1, -1, i, -i in that order."""
        torch.testing.assert_close(
            solve_quartic_closed_form(-2.0, 0.0, 0.0, 0.0, 2.0),
            _complex(1.0, -1.0, 1j, -1j),
        )

    def test_scaled_coefficients(self):
        """3(x - 1)(x - 2)(x - 3)(x - 4) has the roots of the monic quartic."""
        torch.testing.assert_close(
            solve_quartic_closed_form(3.0, -30.0, 105.0, -150.0, 72.0),
            _complex(4.0, 3.0, 2.0, 1.0),
            atol=1e-10,
            rtol=0.0,
        )

    @pytest.mark.parametrize(
        "values",
        [
            (1.0, -6.0, 11.0, -6.0),
            (1.0, 0.0, 1.0, -10.0),
            (0.0, 1.0, 0.0, -1.0),
        ],
    )
    def test_zero_leading_coefficient(self, values):
        """a4 == 0 gives exactly the closed-form cubic's roots."""
        assert torch.equal(
            solve_quartic_closed_form(0.0, *values),
            solve_cubic_closed_form(*values),
        )
