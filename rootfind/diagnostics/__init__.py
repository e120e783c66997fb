"""Diagnostics and debugging utilities for rootfind."""

from .core import assert_finite, assert_secant_condition, secant_residual
from .debug_mode import debug_context, is_debug_enabled, set_debug_enabled

__all__ = [
    "assert_finite",
    "secant_residual",
    "assert_secant_condition",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
