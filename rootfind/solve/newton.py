"""Newton-Raphson iteration for square nonlinear systems."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..logging import get_logger
from .core import (
    DEFAULT_EPS,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Array,
    Jacobian,
    Residual,
    RootResult,
    Status,
    as_vector,
    check_convergence,
    check_maxiter,
    check_tolerance,
    evaluate,
)
from .errors import InvalidArgumentError
from .utils import approx_jacobian, solve_step

logger = get_logger(__name__)


def _compute_jacobian(
    residual_fn: Residual,
    jacobian: Optional[Jacobian],
    x: Array,
    fx: Array,
    eps: float,
) -> tuple[Array, int, int]:
    if jacobian is not None:
        jac = np.asarray(jacobian(x), dtype=float)
        if jac.shape != (x.size, x.size):
            raise InvalidArgumentError(
                f"jacobian returned shape {jac.shape}, expected {(x.size, x.size)}"
            )
        return jac, 0, 1
    jac, evals = approx_jacobian(residual_fn, x, fx, eps=eps, return_evals=True)
    return jac, int(evals), 0


def newton_raphson(
    residual_fn: Residual,
    x0: Array,
    max_iterations: int = DEFAULT_MAXITER,
    tolerance: float = DEFAULT_TOL,
    *,
    jacobian: Optional[Jacobian] = None,
    eps: float = DEFAULT_EPS,
    allow_pinv: bool = False,
    history: bool = False,
) -> RootResult:
    """Newton-Raphson with an analytic or finite-difference Jacobian.

    The Jacobian is re-evaluated at every iterate, from ``jacobian(x)`` when
    given and by forward differences otherwise. Termination and failure
    conventions match :func:`~rootfind.solve.quasi_newton.solve_quasi_newton`.
    """
    tol = check_tolerance(tolerance)
    maxiter = check_maxiter(max_iterations)
    if not eps > 0:
        raise InvalidArgumentError(f"eps must be positive, got {eps}")
    x = as_vector(x0)
    hist: list[Array] = []
    if history:
        hist.append(x.copy())
    fx = evaluate(residual_fn, x)
    nfev = 1
    njev = 0
    res_norm = float(np.linalg.norm(fx))
    nit = 0

    while not check_convergence(res_norm, tol) and nit < maxiter:
        jac, jac_fev, jac_jev = _compute_jacobian(residual_fn, jacobian, x, fx, eps)
        nfev += jac_fev
        njev += jac_jev
        x = x + solve_step(jac, -fx, allow_pinv=allow_pinv)
        fx = evaluate(residual_fn, x)
        nfev += 1
        res_norm = float(np.linalg.norm(fx))
        nit += 1
        if history:
            hist.append(x.copy())
        logger.debug("newton: iteration %d, |F|=%.3e", nit, res_norm)

    if check_convergence(res_norm, tol):
        status = Status.CONVERGED
        message = "Residual tolerance satisfied."
    else:
        status = Status.MAX_ITER
        message = "Maximum iterations reached."
        logger.info("newton: stopped after %d iterations with |F|=%.3e", nit, res_norm)
    return RootResult(
        x=x,
        fun=fx,
        residual_norm=res_norm,
        nit=nit,
        status=status,
        success=status is Status.CONVERGED,
        message=message,
        nfev=nfev,
        njev=njev,
        history=hist,
    )


__all__ = ["newton_raphson"]
