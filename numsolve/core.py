"""
Result types, exceptions and defaults shared by every numsolve routine.

Only the routines that can detect a failure meaningfully return a
:data:`SolverResult`; the others (Newton, secant, golden section and
Nelder-Mead) return their last iterate as a plain value. A
:class:`Success` carries the solution, a :class:`Failure` carries a
:class:`FailureKind` and a human-readable reason. Either can be turned into
ordinary exception flow with ``unwrap()``.

References:
    - Press et al., *Numerical Recipes*, 3rd ed. (2007), chapters 9 and 10
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

import numpy as np

Array = np.ndarray
ScalarFunction = Callable[[float], float]
VectorFunction = Callable[[Array], float]

DEFAULT_TOL = 1e-10
DEFAULT_MAX_ITER = 100
DEFAULT_STEP = 1e-6


class FailureKind(Enum):
    """Reason a reporting solver gave up."""

    NON_CONVERGENCE = "non_convergence"
    INVALID_BRACKET = "invalid_bracket"


class SolverError(RuntimeError):
    """Raised by :meth:`Failure.unwrap`.

    Attributes:
        kind: The :class:`FailureKind` of the failed run.
        last: Last iterate reached before giving up, if any.
    """

    def __init__(
        self, message: str, kind: FailureKind, last: Optional[float] = None
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.last = last


class NonConvergenceError(SolverError):
    """The iteration budget ran out before the convergence test held."""


class InvalidBracketError(SolverError):
    """The interval does not contain a sign change."""


_ERRORS = {
    FailureKind.NON_CONVERGENCE: NonConvergenceError,
    FailureKind.INVALID_BRACKET: InvalidBracketError,
}


@dataclass(frozen=True)
class Success:
    """Converged solver outcome."""

    value: float
    nit: int = 0

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> float:
        return self.value


@dataclass(frozen=True)
class Failure:
    """
    Failed solver outcome.

    Attributes:
        kind: Category of the failure.
        message: Description naming the method and the cause.
        nit: Iterations completed before giving up.
        last: Last iterate, when the method produced one.
    """

    kind: FailureKind
    message: str
    nit: int = 0
    last: Optional[float] = None

    @property
    def ok(self) -> bool:
        return False

    def error(self) -> SolverError:
        """Build the exception matching :attr:`kind`."""
        return _ERRORS[self.kind](self.message, self.kind, self.last)

    def unwrap(self) -> float:
        raise self.error()


SolverResult = Union[Success, Failure]


def check_tolerance(tol: float, name: str = "tol") -> float:
    """Return ``tol`` as a float, raising ValueError unless finite and > 0."""
    tol = float(tol)
    if not (math.isfinite(tol) and tol > 0):
        raise ValueError(f"{name} must be positive, got {tol}")
    return tol


def check_max_iter(max_iter: int) -> int:
    if int(max_iter) != max_iter or max_iter <= 0:
        raise ValueError(f"max_iter must be a positive integer, got {max_iter}")
    return int(max_iter)


def check_interval(a: float, b: float) -> tuple[float, float]:
    """Return the endpoints as floats, raising ValueError if not finite."""
    a, b = float(a), float(b)
    if not (math.isfinite(a) and math.isfinite(b)):
        raise ValueError(f"interval endpoints must be finite, got ({a}, {b})")
    return a, b


__all__ = [
    "Array",
    "DEFAULT_MAX_ITER",
    "DEFAULT_STEP",
    "DEFAULT_TOL",
    "Failure",
    "FailureKind",
    "InvalidBracketError",
    "NonConvergenceError",
    "ScalarFunction",
    "SolverError",
    "SolverResult",
    "Success",
    "VectorFunction",
    "check_interval",
    "check_max_iter",
    "check_tolerance",
]
