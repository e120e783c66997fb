"""Finite-difference Jacobians and the dense linear-solve step.

These helpers are pure NumPy and deterministic; they are shared by the
quasi-Newton and Newton-Raphson solvers.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..logging import get_logger
from .core import DEFAULT_EPS, Array, Residual, evaluate
from .errors import InvalidArgumentError, SingularJacobianError

logger = get_logger(__name__)

# Largest condition number for which a solve still carries a significant digit.
COND_LIMIT = 1.0 / np.finfo(float).eps


def approx_jacobian(
    fun: Residual,
    x: Array,
    fx: Optional[Array] = None,
    eps: float = DEFAULT_EPS,
    method: str = "forward",
    return_evals: bool = False,
) -> Array | tuple[Array, int]:
    """Approximate the Jacobian of ``fun`` at ``x`` by finite differences.

    Parameters
    ----------
    fun:
        Residual mapping an n-vector to an n-vector.
    x:
        Point where the Jacobian is approximated.
    fx:
        Residual already evaluated at ``x``. Only used by the forward
        scheme; evaluated here when omitted.
    eps:
        Perturbation size, strictly positive.
    method:
        ``"forward"`` for ``(F(x + eps e_i) - F(x)) / eps`` or ``"central"``
        for ``(F(x + eps e_i) - F(x - eps e_i)) / (2 eps)``.
    return_evals:
        Also return the number of residual evaluations performed.
    """
    if not eps > 0:
        raise InvalidArgumentError(f"eps must be positive, got {eps}")
    if method not in ("forward", "central"):
        raise InvalidArgumentError(
            f"method must be 'forward' or 'central', got {method!r}"
        )
    x = np.asarray(x, dtype=float)
    n = x.size
    evals = 0
    if method == "forward":
        if fx is None:
            fx = evaluate(fun, x)
            evals += 1
        else:
            fx = np.asarray(fx, dtype=float)
            if fx.shape != x.shape:
                raise InvalidArgumentError(
                    f"fx has shape {fx.shape}, expected {x.shape}"
                )
    jac = np.zeros((n, n), dtype=float)
    for i in range(n):
        ei = np.zeros_like(x)
        ei[i] = eps
        if method == "forward":
            jac[:, i] = (evaluate(fun, x + ei) - fx) / eps
            evals += 1
        else:
            f_plus = evaluate(fun, x + ei)
            f_minus = evaluate(fun, x - ei)
            evals += 2
            jac[:, i] = (f_plus - f_minus) / (2.0 * eps)
    if return_evals:
        return jac, evals
    return jac


def solve_step(jac: Array, rhs: Array, allow_pinv: bool = False) -> Array:
    """Solve ``jac @ step = rhs`` for a square Jacobian.

    Raises :class:`SingularJacobianError` when the matrix is singular,
    contains non-finite entries, or is too ill-conditioned for the solve to
    carry any precision. With ``allow_pinv`` a singular system falls back to
    the minimum-norm least-squares step instead.
    """
    if not np.all(np.isfinite(jac)):
        raise SingularJacobianError("Jacobian approximation contains non-finite entries")
    with np.errstate(divide="ignore", invalid="ignore"):
        cond = float(np.linalg.cond(jac))
    if np.isfinite(cond) and cond <= COND_LIMIT:
        try:
            return np.linalg.solve(jac, rhs)
        except np.linalg.LinAlgError as exc:
            if not allow_pinv:
                raise SingularJacobianError(str(exc)) from exc
    elif not allow_pinv:
        raise SingularJacobianError(
            f"Jacobian approximation is numerically singular (cond={cond:.3e})"
        )
    logger.warning("Singular Jacobian (cond=%.3e); using least-squares step", cond)
    step, *_ = np.linalg.lstsq(jac, rhs, rcond=None)
    return step


__all__ = ["COND_LIMIT", "approx_jacobian", "solve_step"]
