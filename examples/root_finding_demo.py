"""
Example: Root finding with rootfind

Runs the classical scalar methods on the course's worked examples and then
compares Newton-Raphson with Broyden's method on the intersection of the
unit circle with the diagonal, starting from (2, 1).
"""

import numpy as np

from rootfind import (
    bisect,
    fixed_point,
    newton_raphson,
    newton_scalar,
    secant,
    solve_quasi_newton,
)


def hyperbolic(x):
    return -12.0 + 2.0 * x ** (-3)


def hyperbolic_prime(x):
    return -6.0 * x ** (-4)


def circle_diagonal(x):
    return np.array([x[0] ** 2 + x[1] ** 2 - 1.0, x[0] - x[1]])


def example_scalar_methods():
    """Bisection, fixed point, Newton and secant on one-dimensional problems."""
    print("=" * 60)
    print("Example 1: Scalar root finding")
    print("=" * 60)

    res = bisect(lambda x: x**3, -6.0, 12.0)
    print(f"Bisection root of x^3:        {res.x: .6f} ({res.nit} halvings)")

    res = fixed_point(np.sqrt, 0.1)
    print(f"Fixed point of sqrt from 0.1: {res.x: .6f} ({res.nit} iterations)")

    res = newton_scalar(hyperbolic, hyperbolic_prime, 0.1)
    print(f"Newton root of -12 + 2/x^3:   {res.x: .6f} ({res.nit} iterations)")

    res = secant(hyperbolic, 0.1, 0.2)
    print(f"Secant root of -12 + 2/x^3:   {res.x: .6f} ({res.nit} iterations)")
    print()


def example_newton_vs_broyden():
    """Full Jacobian every step versus rank-one Broyden updates."""
    print("=" * 60)
    print("Example 2: Newton-Raphson vs Broyden")
    print("=" * 60)

    x0 = np.array([2.0, 1.0])
    for name, solver in (("Newton-Raphson", newton_raphson), ("Broyden", solve_quasi_newton)):
        res = solver(circle_diagonal, x0)
        print(f"{name} solution:   {res.solution}")
        print(f"{name} iterations: {res.iterations}")
        print(f"{name} residuals:  {res.nfev} evaluations, |F| = {res.residual_norm:.3e}")
    print()


if __name__ == "__main__":
    example_scalar_methods()
    example_newton_vs_broyden()
