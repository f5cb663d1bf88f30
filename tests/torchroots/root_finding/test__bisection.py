import math

import torch

from torchroots.root_finding import bisection


class TestBisection:
    """Tests for bisection on real polynomials."""

    def test_sqrt2(self):
        """x^2 - 2 on [0, 2] converges to sqrt(2)."""
        coeffs = torch.tensor([-2.0, 0.0, 1.0], dtype=torch.float64)
        torch.testing.assert_close(
            bisection(coeffs, 0.0, 2.0),
            torch.tensor(math.sqrt(2.0), dtype=torch.float64),
            atol=1e-14,
            rtol=0.0,
        )

    def test_decreasing_function(self):
        """The bracket may start on the positive side."""
        coeffs = torch.tensor([2.0, 0.0, -1.0], dtype=torch.float64)
        torch.testing.assert_close(
            bisection(coeffs, 0.0, 2.0),
            torch.tensor(math.sqrt(2.0), dtype=torch.float64),
            atol=1e-14,
            rtol=0.0,
        )

    def test_allowed_error_hits_exact_root(self):
        """A midpoint that is an exact root is accepted."""
        # Midpoints of [-128, 128]: 0, 64, 32, 16, 8, 4, 2
        coeffs = torch.tensor([-4.0, 2.0], dtype=torch.float64)
        root = bisection(coeffs, -128.0, 128.0, allowed_error=1e-12)
        assert root.item() == 2.0

    def test_maxiter_exhausted_gives_nan(self):
        """Three halvings cannot pin down sqrt(2)."""
        coeffs = torch.tensor([-2.0, 0.0, 1.0], dtype=torch.float64)
        assert torch.isnan(bisection(coeffs, 0.0, 2.0, maxiter=3))

    def test_batched_brackets(self):
        """Each polynomial gets its own bracket."""
        coeffs = torch.tensor(
            [[-2.0, 0.0, 1.0], [-2.0, 0.0, 1.0]], dtype=torch.float64
        )
        lower = torch.tensor([0.0, -3.0], dtype=torch.float64)
        upper = torch.tensor([2.0, 0.0], dtype=torch.float64)
        torch.testing.assert_close(
            bisection(coeffs, lower, upper),
            torch.tensor(
                [math.sqrt(2.0), -math.sqrt(2.0)], dtype=torch.float64
            ),
            atol=1e-14,
            rtol=0.0,
        )
