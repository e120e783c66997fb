"""rootfind - quasi-Newton and classical root finding on NumPy arrays."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Root finding
from .solve import (
    DegenerateStepError,
    InvalidArgumentError,
    RootFindingError,
    RootResult,
    ScalarResult,
    SingularJacobianError,
    Status,
    approx_jacobian,
    bisect,
    broyden,
    broyden_update,
    fixed_point,
    newton_raphson,
    newton_scalar,
    secant,
    solve_quasi_newton,
    solve_step,
)

__all__ = [
    "__version__",
    # Root finding
    "solve_quasi_newton",
    "broyden",
    "broyden_update",
    "newton_raphson",
    "approx_jacobian",
    "solve_step",
    "bisect",
    "fixed_point",
    "newton_scalar",
    "secant",
    "RootResult",
    "ScalarResult",
    "Status",
    # Errors
    "RootFindingError",
    "InvalidArgumentError",
    "SingularJacobianError",
    "DegenerateStepError",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
