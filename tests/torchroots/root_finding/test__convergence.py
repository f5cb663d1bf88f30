import torch

from torchroots.root_finding._convergence import (
    MAXITER,
    residual_tolerance,
    smallest_subnormal,
    snap_subnormal_to_zero,
)


class TestResidualTolerance:
    """Tests for dtype-aware residual tolerances."""

    def test_float64(self):
        """float64 accepts residuals up to 1e-9."""
        assert residual_tolerance(torch.float64) == 1e-9

    def test_float32(self):
        """float32 has a looser threshold."""
        assert residual_tolerance(torch.float32) == 1e-4
        assert residual_tolerance(torch.complex64) == 1e-4

    def test_half_precision(self):
        """float16 and bfloat16 have the loosest threshold."""
        assert residual_tolerance(torch.float16) == 1e-2
        assert residual_tolerance(torch.bfloat16) == 1e-2


class TestSmallestSubnormal:
    """Tests for smallest_subnormal."""

    def test_float64(self):
        """2^-1074 for double precision."""
        assert smallest_subnormal(torch.float64) == 2.0**-1074

    def test_float32(self):
        """2^-149 for single precision."""
        assert smallest_subnormal(torch.float32) == 2.0**-149


class TestSnapSubnormalToZero:
    """Tests for snap_subnormal_to_zero."""

    def test_snaps_both_parts(self):
        """Parts equal to +/- the smallest subnormal become zero."""
        tiny = 2.0**-1074
        z = torch.complex(
            torch.tensor([tiny, -tiny, 1.0], dtype=torch.float64),
            torch.tensor([-tiny, 2.0, tiny], dtype=torch.float64),
        )
        snapped = snap_subnormal_to_zero(z)
        torch.testing.assert_close(
            snapped.real, torch.tensor([0.0, 0.0, 1.0], dtype=torch.float64)
        )
        torch.testing.assert_close(
            snapped.imag, torch.tensor([0.0, 2.0, 0.0], dtype=torch.float64)
        )

    def test_leaves_other_values(self):
        """Twice the smallest subnormal is kept."""
        z = torch.tensor([complex(2.0**-1073, 0.5)], dtype=torch.complex128)
        snapped = snap_subnormal_to_zero(z)
        assert snapped.real.item() == 2.0**-1073
        assert snapped.dtype == torch.complex128


class TestMaxiter:
    """Tests for the shared iteration budget."""

    def test_iteration_budget(self):
        """All iterative routines share a budget of 100."""
        assert MAXITER == 100
