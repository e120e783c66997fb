import numpy as np
import pytest

from rootfind.solve import InvalidArgumentError, SingularJacobianError
from rootfind.solve.utils import COND_LIMIT, approx_jacobian, solve_step


@pytest.mark.parametrize("eps", [1e-4, 1e-6, 1e-8])
def test_forward_jacobian_recovers_linear_map(eps, rng: np.random.Generator):
    A = rng.uniform(-2.0, 2.0, size=(3, 3))
    b = rng.uniform(-1.0, 1.0, size=3)

    def fun(x: np.ndarray) -> np.ndarray:
        return A @ x + b

    x = rng.uniform(-1.0, 1.0, size=3)
    jac = approx_jacobian(fun, x, fun(x), eps=eps)
    assert np.allclose(jac, A, atol=1e-5)


def test_central_jacobian_matches_analytic(circle_system):
    fun, jac_fn = circle_system
    x = np.array([0.3, -1.2])
    jac = approx_jacobian(fun, x, eps=1e-6, method="central")
    assert np.allclose(jac, jac_fn(x), atol=1e-8)


def test_forward_jacobian_evaluates_base_point_when_missing(circle_system):
    fun, jac_fn = circle_system
    x = np.array([2.0, 1.0])
    jac, evals = approx_jacobian(fun, x, return_evals=True)
    assert evals == 3
    assert np.allclose(jac, jac_fn(x), atol=1e-6)


def test_evaluation_counts():
    fun = lambda x: x**2  # noqa: E731
    x = np.ones(4)
    _, forward = approx_jacobian(fun, x, fun(x), return_evals=True)
    _, central = approx_jacobian(fun, x, method="central", return_evals=True)
    assert forward == 4
    assert central == 8


def test_jacobian_does_not_modify_point():
    x = np.array([1.0, 2.0])
    approx_jacobian(lambda v: v**2, x)
    assert np.array_equal(x, [1.0, 2.0])


@pytest.mark.parametrize("eps", [0.0, -1e-8])
def test_jacobian_invalid_eps(eps):
    with pytest.raises(InvalidArgumentError):
        approx_jacobian(lambda x: x, np.array([0.0]), eps=eps)


def test_jacobian_invalid_method():
    with pytest.raises(InvalidArgumentError):
        approx_jacobian(lambda x: x, np.array([0.0]), method="backward")


def test_jacobian_rejects_mismatched_residual_value():
    with pytest.raises(InvalidArgumentError):
        approx_jacobian(lambda x: x, np.array([0.0, 1.0]), np.zeros(3))


def test_solve_step_exact():
    mat = np.array([[3.0, 1.0], [1.0, 2.0]])
    rhs = np.array([9.0, 8.0])
    assert np.allclose(solve_step(mat, rhs), np.linalg.solve(mat, rhs))


def test_solve_step_singular_raises():
    mat = np.array([[1.0, 2.0], [2.0, 4.0]])
    with pytest.raises(SingularJacobianError):
        solve_step(mat, np.ones(2))


def test_solve_step_ill_conditioned_raises():
    mat = np.diag([1.0, 1.0 / (10.0 * COND_LIMIT)])
    with pytest.raises(SingularJacobianError, match="numerically singular"):
        solve_step(mat, np.ones(2))


def test_solve_step_non_finite_raises():
    mat = np.array([[1.0, np.inf], [0.0, 1.0]])
    with pytest.raises(SingularJacobianError, match="non-finite"):
        solve_step(mat, np.ones(2))


def test_solve_step_pinv_fallback():
    mat = np.array([[1.0, 1.0], [1.0, 1.0]])
    vec = np.array([2.0, 2.0])
    step = solve_step(mat, vec, allow_pinv=True)
    assert np.allclose(mat @ step, vec)
    assert np.allclose(step, [1.0, 1.0])
