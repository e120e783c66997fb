"""Broyden's quasi-Newton method for square nonlinear systems."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..diagnostics import assert_finite, assert_secant_condition, is_debug_enabled
from ..logging import get_logger
from .core import (
    DEFAULT_EPS,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Array,
    Residual,
    RootResult,
    Status,
    as_vector,
    check_convergence,
    check_maxiter,
    check_tolerance,
    evaluate,
)
from .errors import DegenerateStepError, InvalidArgumentError
from .utils import approx_jacobian, solve_step

logger = get_logger(__name__)

# Squared step lengths at or below this are treated as zero.
STEP_FLOOR = np.finfo(float).tiny


def broyden_update(jac: Array, step: Array, dfun: Array) -> Array:
    """Return the rank-one ("good") Broyden update of ``jac``.

    ``J + (dF - J s) s^T / (s^T s)``, the smallest change to ``J`` in the
    Frobenius norm that satisfies the secant condition ``J_new s = dF``.
    """
    ss = float(np.dot(step, step))
    if not ss > STEP_FLOOR:
        raise DegenerateStepError(
            f"Step has numerically zero length (s.s = {ss:.3e}); "
            "the Broyden update is undefined"
        )
    return jac + np.outer(dfun - jac @ step, step) / ss


def solve_quasi_newton(
    residual_fn: Residual,
    x0: Array,
    max_iterations: int = DEFAULT_MAXITER,
    tolerance: float = DEFAULT_TOL,
    *,
    eps: float = DEFAULT_EPS,
    jacobian0: Optional[Array] = None,
    allow_pinv: bool = False,
    history: bool = False,
) -> RootResult:
    """Find a root of ``residual_fn`` with Broyden rank-one Jacobian updates.

    The Jacobian is seeded once by forward differences at ``x0`` (or taken
    from ``jacobian0``) and afterwards only corrected by rank-one updates,
    so each iteration costs a single residual evaluation. The loop stops
    when ``||F||_2 <= tolerance`` or after ``max_iterations`` steps; running
    out of iterations is reported through ``status``/``success``, not raised.

    Parameters
    ----------
    residual_fn:
        Maps an n-vector to an n-vector. Exceptions it raises propagate.
    x0:
        Initial guess; copied, never modified.
    max_iterations:
        Iteration budget, ``>= 0``. With 0 the initial residual is reported.
    tolerance:
        Positive bound on the Euclidean norm of the residual.
    eps:
        Finite-difference step for the Jacobian seed.
    jacobian0:
        Optional ``(n, n)`` initial Jacobian replacing the finite-difference
        seed.
    allow_pinv:
        Use a least-squares step instead of raising
        :class:`~rootfind.solve.errors.SingularJacobianError`.
    history:
        Record every iterate, ``x0`` included, in ``result.history``.

    Raises
    ------
    InvalidArgumentError
        Malformed configuration or dimension mismatch.
    SingularJacobianError
        The linear system of an iteration is numerically singular.
    DegenerateStepError
        An iteration produced a step of zero length.
    """
    tol = check_tolerance(tolerance)
    maxiter = check_maxiter(max_iterations)
    x = as_vector(x0)
    n = x.size
    debug = is_debug_enabled()
    hist: list[Array] = []
    if history:
        hist.append(x.copy())

    fx = evaluate(residual_fn, x)
    nfev = 1
    if debug:
        assert_finite(fx, "residual")
    if jacobian0 is None:
        jac, evals = approx_jacobian(residual_fn, x, fx, eps=eps, return_evals=True)
        nfev += int(evals)
    else:
        jac = np.array(jacobian0, dtype=float)
        if jac.shape != (n, n):
            raise InvalidArgumentError(
                f"jacobian0 must have shape {(n, n)}, got {jac.shape}"
            )
    res_norm = float(np.linalg.norm(fx))
    logger.debug("broyden: n=%d, |F(x0)|=%.3e, tol=%.1e", n, res_norm, tol)

    nit = 0
    while not check_convergence(res_norm, tol) and nit < maxiter:
        x_new = x + solve_step(jac, -fx, allow_pinv=allow_pinv)
        step = x_new - x
        if not float(np.dot(step, step)) > STEP_FLOOR:
            raise DegenerateStepError(
                f"Iteration {nit + 1} produced a zero-length step at "
                f"|F|={res_norm:.3e}"
            )
        fx_new = evaluate(residual_fn, x_new)
        nfev += 1
        if debug:
            assert_finite(fx_new, "residual")
        dfun = fx_new - fx
        jac = broyden_update(jac, step, dfun)
        if debug:
            assert_secant_condition(jac, step, dfun)
        x = x_new
        fx = fx_new
        res_norm = float(np.linalg.norm(fx))
        nit += 1
        if history:
            hist.append(x.copy())
        logger.debug("broyden: iteration %d, |F|=%.3e", nit, res_norm)

    if check_convergence(res_norm, tol):
        status = Status.CONVERGED
        message = "Residual tolerance satisfied."
    else:
        status = Status.MAX_ITER
        message = "Maximum iterations reached."
        logger.info(
            "broyden: stopped after %d iterations with |F|=%.3e > %.1e",
            nit,
            res_norm,
            tol,
        )
    return RootResult(
        x=x,
        fun=fx,
        residual_norm=res_norm,
        nit=nit,
        status=status,
        success=status is Status.CONVERGED,
        message=message,
        nfev=nfev,
        history=hist,
    )


broyden = solve_quasi_newton


__all__ = ["STEP_FLOOR", "broyden", "broyden_update", "solve_quasi_newton"]
