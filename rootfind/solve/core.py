"""Core interfaces shared across the root-finding algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List

import numpy as np

from .errors import InvalidArgumentError

Array = np.ndarray
Residual = Callable[[Array], Array]
Jacobian = Callable[[Array], Array]
ScalarFunction = Callable[[float], float]

DEFAULT_TOL = 1e-8
DEFAULT_EPS = 1e-8
DEFAULT_MAXITER = 100


class Status(Enum):
    """Termination status of a solve that did not raise."""

    CONVERGED = "converged"
    MAX_ITER = "max_iter"


@dataclass
class RootResult:
    """Standard result object returned by the multivariate solvers."""

    x: Array
    fun: Array
    residual_norm: float
    nit: int
    status: Status
    success: bool
    message: str
    nfev: int
    njev: int = 0
    history: List[Array] = field(default_factory=list)

    @property
    def solution(self) -> Array:
        return self.x

    @property
    def iterations(self) -> int:
        return self.nit


@dataclass
class ScalarResult:
    """Result of a one-dimensional root search."""

    x: float
    fun: float
    nit: int
    success: bool
    message: str
    history: List[float] = field(default_factory=list)


def check_convergence(residual_norm: float, tol: float) -> bool:
    """Return True if the residual norm satisfies the tolerance."""
    return residual_norm <= tol


def check_tolerance(tol: float, name: str = "tolerance") -> float:
    tol = float(tol)
    if not tol > 0:
        raise InvalidArgumentError(f"{name} must be positive, got {tol}")
    return tol


def check_maxiter(maxiter: int) -> int:
    if int(maxiter) != maxiter or maxiter < 0:
        raise InvalidArgumentError(
            f"max_iterations must be a non-negative integer, got {maxiter}"
        )
    return int(maxiter)


def as_vector(x0: Array) -> Array:
    """Return a float copy of ``x0``, validated as a non-empty 1-D vector."""
    x = np.array(x0, dtype=float)
    if x.ndim != 1:
        raise InvalidArgumentError(f"x0 must be one-dimensional, got shape {x.shape}")
    if x.size == 0:
        raise InvalidArgumentError("x0 must contain at least one component")
    return x


def evaluate(fun: Residual, x: Array) -> Array:
    """Evaluate a residual and check it maps R^n to R^n."""
    fx = np.asarray(fun(x), dtype=float)
    if fx.shape != x.shape:
        raise InvalidArgumentError(
            f"residual returned shape {fx.shape} for input of shape {x.shape}; "
            "the system must be square"
        )
    return fx


__all__ = [
    "Array",
    "Residual",
    "Jacobian",
    "ScalarFunction",
    "DEFAULT_TOL",
    "DEFAULT_EPS",
    "DEFAULT_MAXITER",
    "Status",
    "RootResult",
    "ScalarResult",
    "check_convergence",
    "check_tolerance",
    "check_maxiter",
    "as_vector",
    "evaluate",
]
