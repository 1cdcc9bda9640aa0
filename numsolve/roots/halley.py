"""Halley's method, the cubically convergent second-order root finder."""

from __future__ import annotations

import logging

from ..core import (
    DEFAULT_MAX_ITER,
    DEFAULT_STEP,
    DEFAULT_TOL,
    Failure,
    FailureKind,
    ScalarFunction,
    SolverResult,
    Success,
    check_max_iter,
    check_tolerance,
)
from ..differentiate import CentralStencil
from ..logging import get_logger, verbose_logging

logger = get_logger(__name__)


def halley(
    f: ScalarFunction,
    df: ScalarFunction,
    d2f: ScalarFunction,
    x0: float,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
    verbose: bool = False,
) -> SolverResult:
    """Solve ``f(x) = 0`` with Halley's update.

    ``x <- x - 2 f f' / (2 f'^2 - f f'')``, stopping once ``|f(x)| < tol``.

    Args:
        f: Function whose root is sought.
        df: First derivative of ``f``.
        d2f: Second derivative of ``f``.
        x0: Initial guess.
        tol: Residual tolerance.
        max_iter: Maximum number of iterations.
        verbose: Log every iterate at INFO instead of DEBUG, letting INFO
            through the module logger for the duration of the call.

    Returns:
        ``Success`` with the root, or ``Failure(NON_CONVERGENCE)`` holding the
        last iterate when the budget runs out or the update is undefined.
    """
    tol = check_tolerance(tol)
    max_iter = check_max_iter(max_iter)
    level = logging.INFO if verbose else logging.DEBUG
    x = float(x0)
    with verbose_logging(logger, verbose):
        for nit in range(max_iter):
            fx = f(x)
            logger.log(level, "halley it=%d x=%.17g f(x)=%.3e", nit, x, fx)
            if abs(fx) < tol:
                return Success(x, nit)
            dfx = df(x)
            denom = 2.0 * dfx * dfx - fx * d2f(x)
            if denom == 0.0:
                message = f"Halley step undefined at x={x!r}: 2f'^2 - f f'' == 0."
                logger.log(level, message)
                return Failure(FailureKind.NON_CONVERGENCE, message, nit, x)
            x -= 2.0 * fx * dfx / denom

        message = f"Halley's method did not converge within {max_iter} iterations."
        logger.log(level, message)
        return Failure(FailureKind.NON_CONVERGENCE, message, max_iter, x)


def halley_numeric(
    f: ScalarFunction,
    x0: float,
    tol: float = DEFAULT_TOL,
    h: float = DEFAULT_STEP,
    max_iter: int = DEFAULT_MAX_ITER,
    verbose: bool = False,
) -> SolverResult:
    """Halley's method with ``f'`` and ``f''`` from a three-point stencil.

    Each iterate costs exactly three evaluations of ``f``: at ``x - h``,
    ``x`` and ``x + h``.
    """
    stencil = CentralStencil(f, h)
    return halley(
        stencil.value,
        stencil.first,
        stencil.second,
        x0,
        tol=tol,
        max_iter=max_iter,
        verbose=verbose,
    )


__all__ = ["halley", "halley_numeric"]
