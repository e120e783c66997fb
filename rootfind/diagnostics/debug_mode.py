"""Debug mode flag for rootfind solvers.

When enabled, the quasi-Newton solver verifies every Jacobian update
against the secant condition and rejects non-finite residuals. The flag is
read from ``ROOTFIND_DEBUG`` at import time.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "ROOTFIND_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


def is_debug_enabled() -> bool:
    """Return whether solver self-checks are currently enabled."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable solver self-checks.

    Parameters
    ----------
    enabled:
        New value of the flag; overrides ``ROOTFIND_DEBUG``.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily set debug mode, restoring the previous value on exit.

    Example
    -------
    >>> import numpy as np
    >>> from rootfind import debug_context, solve_quasi_newton
    >>> with debug_context(True):
    ...     res = solve_quasi_newton(lambda x: x - 1.0, np.array([3.0]))
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = previous


__all__ = ["is_debug_enabled", "set_debug_enabled", "debug_context"]
