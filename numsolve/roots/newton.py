"""Newton's method for scalar equations ``f(x) = 0``."""

from __future__ import annotations

from ..core import (
    DEFAULT_MAX_ITER,
    DEFAULT_STEP,
    DEFAULT_TOL,
    ScalarFunction,
    check_max_iter,
    check_tolerance,
)
from ..differentiate import CentralDifference
from ..logging import get_logger

logger = get_logger(__name__)


def newton(
    f: ScalarFunction,
    df: ScalarFunction,
    x0: float,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> float:
    """Newton iteration ``x <- x - f(x) / f'(x)``.

    Stops once ``|f(x) / f'(x)| < tol``. Where ``f'(x)`` is exactly zero the
    step is ``f(x)`` itself rather than a Newton step.

    Running out of iterations is not reported: the last iterate is returned
    either way, so check ``abs(f(x))`` if convergence matters.

    Args:
        f: Function whose root is sought.
        df: Derivative of ``f``.
        x0: Initial guess.
        tol: Step-size tolerance.
        max_iter: Maximum number of iterations.

    Returns:
        The last iterate.
    """
    tol = check_tolerance(tol)
    max_iter = check_max_iter(max_iter)
    x = float(x0)
    for nit in range(1, max_iter + 1):
        fx = f(x)
        dfx = df(x)
        step = fx if dfx == 0.0 else fx / dfx
        x -= step
        logger.debug("newton it=%d x=%.17g step=%.3e", nit, x, step)
        if abs(step) < tol:
            return x
    logger.debug("newton: max_iter=%d reached at x=%.17g", max_iter, x)
    return x


def newton_numeric(
    f: ScalarFunction,
    x0: float,
    tol: float = DEFAULT_TOL,
    h: float = DEFAULT_STEP,
    max_iter: int = DEFAULT_MAX_ITER,
) -> float:
    """Newton's method with ``f'`` from a central difference of step ``h``."""
    return newton(f, CentralDifference(f, h), x0, tol=tol, max_iter=max_iter)


__all__ = ["newton", "newton_numeric"]
