import torch

from torchroots.polynomial import polynomial_trim


class TestPolynomialTrim:
    """Tests for polynomial_trim."""

    def test_drops_zero_leading_coefficients(self):
        """0x^3 + 0x^2 + x - 1 trims to x - 1."""
        coeffs = torch.tensor([-1.0, 1.0, 0.0, 0.0], dtype=torch.float64)
        torch.testing.assert_close(
            polynomial_trim(coeffs),
            torch.tensor([-1.0, 1.0], dtype=torch.float64),
        )

    def test_keeps_zero_constant(self):
        """Zeros below the leading coefficient stay."""
        coeffs = torch.tensor([0.0, 0.0, 2.0], dtype=torch.float64)
        torch.testing.assert_close(polynomial_trim(coeffs), coeffs)

    def test_all_zero(self):
        """The zero polynomial trims to a single zero."""
        coeffs = torch.zeros(4, dtype=torch.float64)
        torch.testing.assert_close(
            polynomial_trim(coeffs), torch.zeros(1, dtype=torch.float64)
        )

    def test_tolerance(self):
        """Coefficients below tol count as zero."""
        coeffs = torch.tensor([1.0, 2.0, 1e-12], dtype=torch.float64)
        assert polynomial_trim(coeffs, tol=1e-10).shape == (2,)

    def test_batched_keeps_longest(self):
        """A batch is trimmed to the longest non-zero polynomial."""
        coeffs = torch.tensor(
            [[1.0, 1.0, 0.0, 0.0], [1.0, 0.0, 3.0, 0.0]], dtype=torch.float64
        )
        assert polynomial_trim(coeffs).shape == (2, 3)
