"""Pytest configuration and shared fixtures for rootfind tests.

Provides a seeded NumPy generator and resets process-wide solver state
(debug flag, log level) around every test.
"""

import logging
import os

import numpy as np
import pytest

from rootfind.diagnostics import is_debug_enabled, set_debug_enabled
from rootfind.logging import set_log_level


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG seeded from ``TEST_RNG_SEED`` (default 0)."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_global_state():
    """Undo debug-mode and log-level changes made by a test."""
    debug = is_debug_enabled()
    yield
    set_debug_enabled(debug)
    set_log_level(logging.WARNING)


def circle_diagonal(x: np.ndarray) -> np.ndarray:
    return np.array([x[0] ** 2 + x[1] ** 2 - 1.0, x[0] - x[1]])


def circle_diagonal_jacobian(x: np.ndarray) -> np.ndarray:
    return np.array([[2.0 * x[0], 2.0 * x[1]], [1.0, -1.0]])


@pytest.fixture
def circle_system():
    """Unit circle intersected with the diagonal; roots at +-(1/sqrt2, 1/sqrt2)."""
    return circle_diagonal, circle_diagonal_jacobian
