"""Numeric self-checks used by the solvers in debug mode."""

from __future__ import annotations

import numpy as np


def assert_finite(values: np.ndarray, name: str = "array") -> None:
    """
    Assert that every entry of ``values`` is finite.

    Raises
    ------
    ValueError
        If any entry is NaN or infinite.
    """
    values = np.asarray(values)
    if not np.all(np.isfinite(values)):
        bad = int(np.count_nonzero(~np.isfinite(values)))
        raise ValueError(f"{name} contains {bad} non-finite value(s).")


def secant_residual(jac: np.ndarray, step: np.ndarray, dfun: np.ndarray) -> float:
    """
    Return the relative violation of the secant condition ``jac @ step == dfun``.

    Parameters
    ----------
    jac:
        Updated Jacobian approximation, shape (n, n).
    step:
        Step taken by the iterate, shape (n,).
    dfun:
        Change in the residual over that step, shape (n,).
    """
    scale = max(float(np.linalg.norm(dfun)), float(np.linalg.norm(jac @ step)), 1.0)
    return float(np.linalg.norm(jac @ step - dfun)) / scale


def assert_secant_condition(
    jac: np.ndarray,
    step: np.ndarray,
    dfun: np.ndarray,
    rtol: float = 1e-6,
) -> None:
    """
    Assert that a quasi-Newton update reproduces the observed residual change.

    Raises
    ------
    ValueError
        If the relative violation exceeds ``rtol``.
    """
    violation = secant_residual(jac, step, dfun)
    if violation > rtol:
        raise ValueError(
            f"Jacobian update violates the secant condition "
            f"(relative error {violation:.3e} > {rtol:.1e})."
        )


__all__ = ["assert_finite", "secant_residual", "assert_secant_condition"]
