"""One-dimensional root finders: bisection, fixed point, Newton and secant.

All functions return a :class:`~rootfind.solve.core.ScalarResult` whose
``history`` holds every iterate in order. As with the multivariate solvers,
exhausting the iteration budget is a normal return with ``success=False``.
"""

from __future__ import annotations

import numpy as np

from ..logging import get_logger
from .core import ScalarFunction, ScalarResult, check_maxiter, check_tolerance
from .errors import DegenerateStepError, InvalidArgumentError

logger = get_logger(__name__)


def bisect(f: ScalarFunction, a: float, b: float, tol: float = 1e-4) -> ScalarResult:
    """Locate a sign change of ``f`` inside ``[a, b]``.

    Starts at the midpoint and moves by a half-width that is halved every
    step, towards ``b`` while ``f`` keeps the sign it has at ``a``. Stops
    once the half-width drops to ``tol`` or ``f`` hits zero exactly.
    """
    tol = check_tolerance(tol, "tol")
    a = float(a)
    b = float(b)
    if not a < b:
        raise InvalidArgumentError(f"bracket must satisfy a < b, got [{a}, {b}]")
    fa = float(f(a))
    fb = float(f(b))
    for end, fend in ((a, fa), (b, fb)):
        if fend == 0.0:
            return ScalarResult(
                x=end, fun=0.0, nit=0, success=True, message="Exact root.", history=[end]
            )
    if np.sign(fa) == np.sign(fb):
        raise InvalidArgumentError(
            f"f(a) and f(b) must differ in sign, got f({a})={fa}, f({b})={fb}"
        )

    s = np.sign(fa)
    x = 0.5 * (a + b)
    d = 0.5 * (b - a)
    fx = float(f(x))
    hist = [x]
    nit = 0
    while d > tol and fx != 0.0:
        d *= 0.5
        if np.sign(fx) == s:
            x += d
        else:
            x -= d
        fx = float(f(x))
        hist.append(x)
        nit += 1
    message = "Exact root found." if fx == 0.0 else "Bracket width below tolerance."
    return ScalarResult(x=x, fun=fx, nit=nit, success=True, message=message, history=hist)


def fixed_point(
    g: ScalarFunction, x0: float, tol: float = 1e-4, max_iterations: int = 100
) -> ScalarResult:
    """Iterate ``x <- g(x)`` until successive iterates differ by at most ``tol``."""
    tol = check_tolerance(tol, "tol")
    maxiter = check_maxiter(max_iterations)
    x = float(x0)
    hist = [x]
    err = np.inf
    nit = 0
    while err > tol and nit < maxiter:
        x_new = float(g(x))
        err = abs(x_new - x)
        x = x_new
        hist.append(x)
        nit += 1
    success = err <= tol
    if not success:
        logger.info("fixed_point: no fixed point within %d iterations", nit)
    return ScalarResult(
        x=x,
        fun=x - float(g(x)),
        nit=nit,
        success=success,
        message="Step size below tolerance." if success else "Maximum iterations reached.",
        history=hist,
    )


def newton_scalar(
    f: ScalarFunction,
    fprime: ScalarFunction,
    x0: float,
    tol: float = 1e-8,
    max_iterations: int = 100,
) -> ScalarResult:
    """Newton's method for a scalar equation with a known derivative."""
    tol = check_tolerance(tol, "tol")
    maxiter = check_maxiter(max_iterations)
    x = float(x0)
    hist = [x]
    fx = float(f(x))
    nit = 0
    while abs(fx) >= tol and nit < maxiter:
        dfx = float(fprime(x))
        if abs(dfx) < np.finfo(float).eps:
            raise DegenerateStepError(f"Derivative too close to zero at x={x}")
        x = x - fx / dfx
        fx = float(f(x))
        hist.append(x)
        nit += 1
    success = abs(fx) < tol
    return ScalarResult(
        x=x,
        fun=fx,
        nit=nit,
        success=success,
        message="Residual tolerance satisfied." if success else "Maximum iterations reached.",
        history=hist,
    )


def secant(
    f: ScalarFunction,
    x0: float,
    x1: float,
    tol: float = 1e-4,
    max_iterations: int = 20,
) -> ScalarResult:
    """Secant method started from the two points ``x0`` and ``x1``."""
    tol = check_tolerance(tol, "tol")
    maxiter = check_maxiter(max_iterations)
    x_prev = float(x0)
    x = float(x1)
    f_prev = float(f(x_prev))
    fx = float(f(x))
    hist = [x_prev, x]
    err = np.inf
    nit = 0
    while err > tol and nit < maxiter:
        if fx == f_prev:
            raise DegenerateStepError(
                f"Secant slope is zero: f({x_prev}) == f({x}) == {fx}"
            )
        x_new = x - fx * (x - x_prev) / (fx - f_prev)
        err = abs(x_new - x)
        x_prev, f_prev = x, fx
        x = x_new
        fx = float(f(x))
        hist.append(x)
        nit += 1
    success = err <= tol
    return ScalarResult(
        x=x,
        fun=fx,
        nit=nit,
        success=success,
        message="Step size below tolerance." if success else "Maximum iterations reached.",
        history=hist,
    )


__all__ = ["bisect", "fixed_point", "newton_scalar", "secant"]
