"""Benchmark symbolic polynomial division and GCD.

Every step of the Euclidean remainder sequence re-expands its operands, so
cost grows quickly with degree. This measures division, GCD and extended GCD
on random integer polynomials sharing a known common factor.
"""

import random
import time

import sympy

from polykernel.polynomial import divide, extended_gcd, gcd

x = sympy.Symbol("x")


def random_polynomial(degree: int, rng: random.Random) -> sympy.Expr:
    coeffs = [rng.randint(-9, 9) for _ in range(degree)] + [1]
    return sympy.Add(*(c * x**k for k, c in enumerate(coeffs)))


def benchmark_operation(
    degree: int,
    n_iterations: int = 5,
    operation: str = "gcd",
    seed: int = 0,
) -> float:
    """Benchmark an operation at given degree.

    Parameters
    ----------
    degree : int
        Degree of each cofactor; operands have degree ``2 * degree``.
    n_iterations : int
        Number of iterations for timing.
    operation : str
        'divide', 'gcd', or 'extended_gcd'.
    seed : int
        Seed for the random operands.

    Returns
    -------
    float
        Average time per call in milliseconds.
    """
    rng = random.Random(seed)
    common = random_polynomial(degree, rng)
    u = sympy.expand(common * random_polynomial(degree, rng))
    v = sympy.expand(common * random_polynomial(degree, rng))

    if operation == "divide":
        fn = divide
    elif operation == "gcd":
        fn = gcd
    elif operation == "extended_gcd":
        fn = extended_gcd
    else:
        raise ValueError(f"Unknown operation: {operation}")

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = fn(x, u, v)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run division and GCD benchmarks across degrees."""
    degrees = [1, 2, 4, 6, 8]

    print("Symbolic Polynomial GCD Benchmark")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Divide (ms)':>14} {'GCD (ms)':>14} {'EGCD (ms)':>14}"
    )
    print("-" * 70)

    for degree in degrees:
        ms_divide = benchmark_operation(degree, operation="divide")
        ms_gcd = benchmark_operation(degree, operation="gcd")
        ms_egcd = benchmark_operation(degree, operation="extended_gcd")

        print(
            f"{2 * degree:>8} {ms_divide:>14.4f} {ms_gcd:>14.4f} {ms_egcd:>14.4f}"
        )

    print()
    print("Notes:")
    print("- Operands share a monic common factor of half their degree")
    print("- GCD uses the Euclidean remainder sequence")
    print("- Extended GCD also tracks both Bezout coefficient chains")


if __name__ == "__main__":
    main()
