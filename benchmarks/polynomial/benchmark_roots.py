"""Benchmark polynomial root finding.

Times the five cubic methods on a fixed set of cubics, and Durand-Kerner
against Aberth-Ehrlich on random polynomials of growing degree.
"""

import time

import torch

from torchroots.root_finding import (
    aberth_ehrlich,
    durand_kerner,
    solve_cubic_aberth_ehrlich,
    solve_cubic_cardano,
    solve_cubic_closed_form,
    solve_cubic_durand_kerner,
    solve_cubic_newton_factor,
)

CUBIC_METHODS = {
    "newton_factor": solve_cubic_newton_factor,
    "cardano": solve_cubic_cardano,
    "closed_form": solve_cubic_closed_form,
    "durand_kerner": solve_cubic_durand_kerner,
    "aberth_ehrlich": solve_cubic_aberth_ehrlich,
}

# Coefficient values used to build the benchmark cubics
PARAM_VALUES = [1.0, 2.0, 3.0, 4.0, torch.pi, -torch.e, 0.001, 1000.0]


def benchmark_cubic(solver, n_iterations: int = 3) -> float:
    """Benchmark a cubic solver on every cubic from PARAM_VALUES.

    Parameters
    ----------
    solver : callable
        Cubic solver taking ``(a3, a2, a1, a0)``.
    n_iterations : int
        Number of passes over the cubics for timing.

    Returns
    -------
    float
        Average time per cubic in microseconds.
    """
    cubics = [
        (a, b, c, d)
        for a in PARAM_VALUES
        for b in PARAM_VALUES
        for c in PARAM_VALUES
        for d in PARAM_VALUES
    ]

    # Warmup
    for cubic in cubics[:10]:
        _ = solver(*cubic)

    start = time.perf_counter()
    for _ in range(n_iterations):
        for cubic in cubics:
            _ = solver(*cubic)

    elapsed = time.perf_counter() - start
    return elapsed / (n_iterations * len(cubics)) * 1e6  # us


def benchmark_general(
    solver, degree: int, batch_size: int = 64, n_iterations: int = 5
) -> float:
    """Benchmark a general-degree solver on a batch of random polynomials.

    Returns
    -------
    float
        Average time per batch in milliseconds.
    """
    # Random monic polynomials
    coeffs = torch.randn(batch_size, degree + 1, dtype=torch.float64)
    coeffs[..., -1] = 1.0

    # Warmup
    _ = solver(coeffs)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = solver(coeffs)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run the cubic and general-degree benchmarks."""
    print("Cubic Root Finding Benchmark")
    print("=" * 40)
    print(f"{'Method':>16} {'Time (us)':>16}")
    print("-" * 40)
    for name, solver in CUBIC_METHODS.items():
        print(f"{name:>16} {benchmark_cubic(solver):>16.2f}")

    print()
    print("General Degree Benchmark (batch of 64)")
    print("=" * 50)
    print(f"{'Degree':>8} {'Durand-Kerner (ms)':>20} {'Aberth (ms)':>16}")
    print("-" * 50)
    for degree in [4, 8, 16, 32]:
        ms_dk = benchmark_general(durand_kerner, degree)
        ms_aberth = benchmark_general(aberth_ehrlich, degree)
        print(f"{degree:>8} {ms_dk:>20.4f} {ms_aberth:>16.4f}")

    print()
    print("Notes:")
    print("- newton_factor falls back to bisection when Newton diverges")
    print("- Both general solvers run at most 100 sweeps of O(n^2) work")


if __name__ == "__main__":
    main()
