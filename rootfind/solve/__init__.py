"""Deterministic root-finding algorithms for rootfind.

Example
-------
>>> import numpy as np
>>> from rootfind.solve import solve_quasi_newton
>>> def circle_diagonal(x):
...     return np.array([x[0] ** 2 + x[1] ** 2 - 1.0, x[0] - x[1]])
>>> res = solve_quasi_newton(circle_diagonal, np.array([2.0, 1.0]))
>>> res.success
True
>>> np.round(res.solution, 4)
array([0.7071, 0.7071])
"""

from .core import (
    DEFAULT_EPS,
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    RootResult,
    ScalarResult,
    Status,
    check_convergence,
)
from .errors import (
    DegenerateStepError,
    InvalidArgumentError,
    RootFindingError,
    SingularJacobianError,
)
from .newton import newton_raphson
from .quasi_newton import broyden, broyden_update, solve_quasi_newton
from .scalar import bisect, fixed_point, newton_scalar, secant
from .utils import approx_jacobian, solve_step

__all__ = [
    "DEFAULT_EPS",
    "DEFAULT_MAXITER",
    "DEFAULT_TOL",
    "RootResult",
    "ScalarResult",
    "Status",
    "check_convergence",
    "RootFindingError",
    "InvalidArgumentError",
    "SingularJacobianError",
    "DegenerateStepError",
    "approx_jacobian",
    "solve_step",
    "broyden",
    "broyden_update",
    "solve_quasi_newton",
    "newton_raphson",
    "bisect",
    "fixed_point",
    "newton_scalar",
    "secant",
]
