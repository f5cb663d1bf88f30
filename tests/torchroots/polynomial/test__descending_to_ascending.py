import pytest
import torch

from torchroots.polynomial import descending_to_ascending


class TestDescendingToAscending:
    """Tests for the leading-first to ascending adapter."""

    def test_reverses_order(self):
        """(a3, a2, a1, a0) becomes [a0, a1, a2, a3]."""
        coeffs = descending_to_ascending(1.0, -6.0, 11.0, -6.0)
        torch.testing.assert_close(
            coeffs,
            torch.tensor([-6.0, 11.0, -6.0, 1.0], dtype=torch.float64),
        )

    def test_single_coefficient(self):
        """A constant stays a one-element vector."""
        coeffs = descending_to_ascending(3.0)
        assert coeffs.shape == (1,)
        assert coeffs.item() == 3.0

    def test_accepts_zero_dim_tensors(self):
        """0-d tensors and Python numbers can be mixed."""
        coeffs = descending_to_ascending(torch.tensor(2.0), -4)
        torch.testing.assert_close(
            coeffs, torch.tensor([-4.0, 2.0], dtype=torch.float64)
        )

    def test_default_dtype_is_float64(self):
        """The adapter produces double precision by default."""
        assert descending_to_ascending(1.0, 2.0).dtype == torch.float64

    def test_dtype_argument(self):
        """The dtype can be chosen."""
        coeffs = descending_to_ascending(1.0, 2.0, dtype=torch.complex128)
        assert coeffs.dtype == torch.complex128

    def test_no_coefficients_raises(self):
        """At least one coefficient is required."""
        with pytest.raises(ValueError, match="At least one coefficient"):
            descending_to_ascending()
