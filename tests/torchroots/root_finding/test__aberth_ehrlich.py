import math

import pytest
import torch

from torchroots.polynomial import DegreeError, polynomial_from_roots
from torchroots.root_finding import aberth_ehrlich, durand_kerner
from torchroots.testing import assert_roots_close


class TestAberthEhrlich:
    """Tests for Aberth-Ehrlich polynomial root finding."""

    def test_quadratic_roots(self):
        """Find roots of x^2 - 5x + 6 = (x-2)(x-3)."""
        # Coefficients in ascending order: c_0 + c_1*x + c_2*x^2
        coeffs = torch.tensor([6.0, -5.0, 1.0], dtype=torch.float64)
        roots = aberth_ehrlich(coeffs)

        roots_sorted = torch.sort(roots.real)[0]
        expected = torch.tensor([2.0, 3.0], dtype=torch.float64)
        torch.testing.assert_close(
            roots_sorted, expected, atol=1e-10, rtol=1e-10
        )

    def test_complex_roots(self):
        """Find roots of x^2 + 1 = 0 (roots are +/- i)."""
        coeffs = torch.tensor([1.0, 0.0, 1.0], dtype=torch.float64)
        roots = aberth_ehrlich(coeffs)

        imag_sorted = torch.sort(roots.imag)[0]
        torch.testing.assert_close(
            imag_sorted,
            torch.tensor([-1.0, 1.0], dtype=torch.float64),
            atol=1e-10,
            rtol=1e-10,
        )

    def test_high_degree(self):
        """Chebyshev nodes of degree 10 are recovered."""
        n = 10
        indices = torch.arange(n, dtype=torch.float64)
        roots_true = torch.cos(torch.pi * (2 * indices + 1) / (2 * n))

        roots = aberth_ehrlich(polynomial_from_roots(roots_true))

        assert_roots_close(roots, roots_true, atol=1e-8)

    def test_complex_coefficients(self):
        """(x - i)(x - 2) = x^2 - (2 + i) x + 2i."""
        coeffs = torch.tensor([2j, -2 - 1j, 1.0], dtype=torch.complex128)
        roots = aberth_ehrlich(coeffs)
        assert roots.dtype == torch.complex128
        assert_roots_close(roots, [1j, 2.0], atol=1e-10)

    def test_non_monic(self):
        """The leading coefficient is divided out."""
        coeffs = torch.tensor([12.0, -10.0, 2.0], dtype=torch.float64)
        assert_roots_close(aberth_ehrlich(coeffs), [2.0, 3.0], atol=1e-10)

    def test_batched(self):
        """Aberth-Ehrlich works with batched coefficients."""
        coeffs = torch.tensor(
            [
                [2.0, -3.0, 1.0],  # (x-1)(x-2)
                [6.0, -5.0, 1.0],  # (x-2)(x-3)
                [12.0, -7.0, 1.0],  # (x-3)(x-4)
            ],
            dtype=torch.float64,
        )

        roots = aberth_ehrlich(coeffs)
        assert roots.shape == (3, 2)

        for i, expected in enumerate([[1.0, 2.0], [2.0, 3.0], [3.0, 4.0]]):
            assert_roots_close(roots[i], expected, atol=1e-10)

    def test_multiple_batch_dimensions(self):
        """Batch shape (2, 2) is preserved."""
        coeffs = torch.tensor(
            [[6.0, -5.0, 1.0], [1.0, 0.0, 1.0]], dtype=torch.float64
        ).expand(2, 2, 3)
        assert aberth_ehrlich(coeffs).shape == (2, 2, 2)

    def test_linear_polynomial(self):
        """Find root of ax + b = 0."""
        # 2x + 4 = 0 -> x = -2
        coeffs = torch.tensor([4.0, 2.0], dtype=torch.float64)
        roots = aberth_ehrlich(coeffs)

        assert roots.shape == (1,)
        torch.testing.assert_close(
            roots.real,
            torch.tensor([-2.0], dtype=torch.float64),
            atol=1e-10,
            rtol=1e-10,
        )

    def test_quartic_roots(self):
        """Find roots of (x-1)(x-2)(x-3)(x-4)."""
        coeffs = torch.tensor(
            [24.0, -50.0, 35.0, -10.0, 1.0], dtype=torch.float64
        )
        assert_roots_close(
            aberth_ehrlich(coeffs), [1.0, 2.0, 3.0, 4.0], atol=1e-9
        )

    def test_float32_precision(self):
        """Works with float32 input."""
        coeffs = torch.tensor([6.0, -5.0, 1.0], dtype=torch.float32)
        roots = aberth_ehrlich(coeffs)

        assert roots.dtype == torch.complex64
        assert_roots_close(roots, [2.0, 3.0], atol=1e-4)

    def test_constant_polynomial(self):
        """A nonzero constant has no roots."""
        roots = aberth_ehrlich(torch.tensor([3.0], dtype=torch.float64))
        assert roots.shape == (0,)
        assert roots.dtype == torch.complex128

    def test_empty_raises(self):
        """An empty coefficient vector is rejected."""
        with pytest.raises(DegreeError, match="at least one coefficient"):
            aberth_ehrlich(torch.tensor([], dtype=torch.float64))

    def test_zero_leading_coefficient_raises(self):
        """A zero leading coefficient is rejected."""
        coeffs = torch.tensor([1.0, 2.0, 0.0], dtype=torch.float64)
        with pytest.raises(DegreeError, match="Leading coefficient"):
            aberth_ehrlich(coeffs)

    def test_initial_guesses(self):
        """maxiter=0 returns the rotated seeds, same as Durand-Kerner."""
        coeffs = torch.tensor([6.0, -5.0, 1.0], dtype=torch.float64)
        seeds = aberth_ehrlich(coeffs, maxiter=0)

        # radius = 1 + max |c_i| = 7; the step is 350.123 / 2 radians
        p0 = complex(math.sqrt(7.0), 7.0 ** (1.0 / 3.0))
        expected = torch.tensor(
            [p0, p0 * complex(math.cos(175.0615), math.sin(175.0615))],
            dtype=torch.complex128,
        )
        torch.testing.assert_close(seeds, expected)
        torch.testing.assert_close(durand_kerner(coeffs, maxiter=0), seeds)
