import numpy as np
import pytest

from rootfind.solve import (
    DegenerateStepError,
    InvalidArgumentError,
    bisect,
    fixed_point,
    newton_scalar,
    secant,
)


def hyperbolic(x: float) -> float:
    return -12.0 + 2.0 * x ** (-3)


def hyperbolic_prime(x: float) -> float:
    return -6.0 * x ** (-4)


HYPERBOLIC_ROOT = (1.0 / 6.0) ** (1.0 / 3.0)


def test_bisect_cubic():
    res = bisect(lambda x: x**3, -6.0, 12.0)
    assert res.success
    assert abs(res.x) < 1e-3
    assert res.history[0] == 3.0
    assert len(res.history) == res.nit + 1


def test_bisect_tighter_tolerance_needs_more_steps():
    loose = bisect(np.cos, 0.0, 3.0, tol=1e-3)
    tight = bisect(np.cos, 0.0, 3.0, tol=1e-10)
    assert tight.nit > loose.nit
    assert abs(tight.x - np.pi / 2) < 1e-9


def test_bisect_exact_root_at_endpoint():
    res = bisect(lambda x: x - 2.0, 2.0, 5.0)
    assert res.x == 2.0
    assert res.nit == 0


def test_bisect_exact_root_at_midpoint():
    res = bisect(lambda x: x - 1.0, 0.0, 2.0)
    assert res.x == 1.0
    assert res.fun == 0.0
    assert res.nit == 0


def test_bisect_requires_sign_change():
    with pytest.raises(InvalidArgumentError):
        bisect(lambda x: x**2 + 1.0, -1.0, 1.0)


def test_bisect_requires_ordered_bracket():
    with pytest.raises(InvalidArgumentError):
        bisect(lambda x: x, 1.0, -1.0)


@pytest.mark.parametrize("x0", [0.1, 1.8])
def test_fixed_point_sqrt_from_both_sides(x0):
    res = fixed_point(np.sqrt, x0)
    assert res.success
    assert abs(res.x - 1.0) < 1e-3
    assert res.history[0] == x0


def test_fixed_point_budget_exhaustion():
    res = fixed_point(lambda x: x + 1.0, 0.0, max_iterations=7)
    assert not res.success
    assert res.nit == 7
    assert res.x == 7.0


def test_newton_scalar_hyperbolic_root():
    res = newton_scalar(hyperbolic, hyperbolic_prime, 0.1)
    assert res.success
    assert abs(res.x - HYPERBOLIC_ROOT) < 1e-9
    assert abs(res.fun) < 1e-8


def test_newton_scalar_zero_derivative():
    with pytest.raises(DegenerateStepError):
        newton_scalar(lambda x: x**2 + 1.0, lambda x: 2.0 * x, 0.0)


def test_newton_scalar_budget_exhaustion():
    res = newton_scalar(hyperbolic, hyperbolic_prime, 0.1, max_iterations=1)
    assert not res.success
    assert res.nit == 1


def test_secant_hyperbolic_root():
    res = secant(hyperbolic, 0.1, 0.2)
    assert res.success
    assert abs(res.x - HYPERBOLIC_ROOT) < 1e-4
    assert res.history[:2] == [0.1, 0.2]


def test_secant_flat_function():
    with pytest.raises(DegenerateStepError):
        secant(lambda x: 3.0, 0.0, 1.0)


@pytest.mark.parametrize("tol", [0.0, -1.0])
def test_scalar_methods_validate_tolerance(tol):
    with pytest.raises(InvalidArgumentError):
        fixed_point(np.sqrt, 0.5, tol=tol)
    with pytest.raises(InvalidArgumentError):
        secant(hyperbolic, 0.1, 0.2, tol=tol)
    with pytest.raises(InvalidArgumentError):
        bisect(np.cos, 0.0, 3.0, tol=tol)
