"""Error taxonomy for the root-finding solvers.

Every error derives from :class:`RootFindingError` and from the builtin (or
NumPy) exception a caller would naturally catch for the same condition, so
``except ValueError`` keeps catching malformed input and
``except np.linalg.LinAlgError`` keeps catching singular systems.
"""

from __future__ import annotations

import numpy as np


class RootFindingError(Exception):
    """Base class for all errors raised by :mod:`rootfind.solve`."""


class InvalidArgumentError(RootFindingError, ValueError):
    """Malformed configuration or inconsistent problem dimensions."""


class SingularJacobianError(RootFindingError, np.linalg.LinAlgError):
    """The Jacobian approximation is numerically singular."""


class DegenerateStepError(RootFindingError, ArithmeticError):
    """A step of (numerically) zero length makes the update undefined."""


__all__ = [
    "RootFindingError",
    "InvalidArgumentError",
    "SingularJacobianError",
    "DegenerateStepError",
]
