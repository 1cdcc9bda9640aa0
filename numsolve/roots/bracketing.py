"""
Root finders driven by two starting points.

Bisection and Ridder's method need a genuine bracket, i.e. ``f(a)`` and
``f(b)`` of opposite sign, and report through :data:`SolverResult`. The
secant method only uses the two points as starting estimates and, like
Newton, returns its last estimate without a convergence verdict.

References:
    - Ridders, C. J. F., "A new algorithm for computing a single root of a
      real continuous function", IEEE Trans. Circuits Syst. 26 (1979)
    - Press et al., *Numerical Recipes*, 3rd ed. (2007), section 9.2
"""

from __future__ import annotations

import math

from ..core import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOL,
    Failure,
    FailureKind,
    ScalarFunction,
    SolverResult,
    Success,
    check_interval,
    check_max_iter,
    check_tolerance,
)
from ..logging import get_logger

logger = get_logger(__name__)


def _straddles(u: float, v: float) -> bool:
    """True when ``u`` and ``v`` are nonzero and of opposite sign."""
    return (u < 0.0 < v) or (v < 0.0 < u)


def bisection(
    f: ScalarFunction, a: float, b: float, tol: float = DEFAULT_TOL
) -> SolverResult:
    """Bisect ``[a, b]`` down to width ``tol``.

    The number of halvings is fixed in advance at ``ceil(log2((b - a) / tol))``
    and the midpoint of the final bracket is returned, so the result lies
    within ``tol / 2`` of a root whenever ``f(a)`` and ``f(b)`` differ in sign.
    If a midpoint leaves neither half with a sign change the run stops with
    ``Failure(INVALID_BRACKET)``. A bracket already narrower than ``tol``
    is checked for a sign change before its midpoint is accepted.
    """
    tol = check_tolerance(tol)
    a, b = check_interval(a, b)
    if a > b:
        a, b = b, a
    fa, fb = f(a), f(b)
    if fa == 0.0:
        return Success(a)
    if fb == 0.0:
        return Success(b)

    width = b - a
    n = max(math.ceil(math.log2(width / tol)), 0) if width > 0 else 0
    if n == 0 and not _straddles(fa, fb):
        message = f"Root not bracketed: f({a!r})={fa!r} and f({b!r})={fb!r}."
        logger.debug("bisection: %s", message)
        return Failure(FailureKind.INVALID_BRACKET, message, 0, 0.5 * (a + b))
    for nit in range(1, n + 1):
        m = 0.5 * (a + b)
        fm = f(m)
        if fm == 0.0:
            return Success(m, nit)
        if _straddles(fa, fm):
            b, fb = m, fm
        elif _straddles(fm, fb):
            a, fa = m, fm
        else:
            message = (
                f"No sign change on either side of x={m!r}: "
                f"f(a)={fa!r}, f(m)={fm!r}, f(b)={fb!r}."
            )
            logger.debug("bisection: %s", message)
            return Failure(FailureKind.INVALID_BRACKET, message, nit, m)
        logger.debug("bisection it=%d bracket=[%.17g, %.17g]", nit, a, b)
    return Success(0.5 * (a + b), n)


def secant(
    f: ScalarFunction,
    a: float,
    b: float,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> float:
    """Secant iteration from the starting estimates ``a`` and ``b``.

    ``c = a - f(a) (a - b) / (f(a) - f(b))``, then ``(a, b) <- (b, c)``, until
    successive estimates differ by less than ``tol``. No bracket is needed and
    convergence is not guaranteed; the latest estimate is returned in every
    case. When ``f(a) == f(b)`` the secant line is flat and the iteration
    stops at the current estimate.
    """
    tol = check_tolerance(tol)
    max_iter = check_max_iter(max_iter)
    a, b = check_interval(a, b)
    fa, fb = f(a), f(b)
    for nit in range(1, max_iter + 1):
        if fa == fb:
            logger.debug("secant: flat secant at it=%d, stopping at x=%.17g", nit, b)
            return b
        c = a - fa * (a - b) / (fa - fb)
        a, fa = b, fb
        b, fb = c, f(c)
        logger.debug("secant it=%d x=%.17g", nit, b)
        if abs(b - a) < tol:
            return b
    logger.debug("secant: max_iter=%d reached at x=%.17g", max_iter, b)
    return b


def ridder(
    f: ScalarFunction,
    a: float,
    b: float,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> SolverResult:
    """Ridder's method on the bracket ``[a, b]``.

    Each step evaluates the midpoint ``c`` and the exponentially corrected
    estimate ``x = c + sign(f(a) - f(b)) (c - a) f(c) / sqrt(f(c)^2 - f(a) f(b))``,
    then keeps the tightest sub-bracket that still changes sign. Converged
    when ``|x - x_prev| <= tol * max(|x|, 1)``.

    Returns:
        ``Success`` with the root (an endpoint if ``f`` vanishes there),
        ``Failure(INVALID_BRACKET)`` if ``f(a)`` and ``f(b)`` share a sign, or
        ``Failure(NON_CONVERGENCE)`` once ``max_iter`` steps are used up.
    """
    tol = check_tolerance(tol)
    max_iter = check_max_iter(max_iter)
    a, b = check_interval(a, b)
    fa, fb = f(a), f(b)
    if fa == 0.0:
        return Success(a)
    if fb == 0.0:
        return Success(b)
    if not _straddles(fa, fb):
        message = f"Root not bracketed: f({a!r})={fa!r} and f({b!r})={fb!r}."
        logger.debug("ridder: %s", message)
        return Failure(FailureKind.INVALID_BRACKET, message)

    x_prev = math.nan
    for nit in range(1, max_iter + 1):
        c = 0.5 * (a + b)
        fc = f(c)
        s = math.sqrt(fc * fc - fa * fb)
        if s == 0.0:
            x = a - fa * (b - a) / (fb - fa)
        else:
            x = c + math.copysign(1.0, fa - fb) * (c - a) * fc / s
        logger.debug("ridder it=%d x=%.17g bracket=[%.17g, %.17g]", nit, x, a, b)
        if abs(x - x_prev) <= tol * max(abs(x), 1.0):
            return Success(x, nit)
        x_prev = x

        fx = f(x)
        if fx == 0.0:
            return Success(x, nit)
        if _straddles(fc, fx):
            a, fa, b, fb = c, fc, x, fx
        elif _straddles(fa, fx):
            b, fb = x, fx
        elif _straddles(fb, fx):
            a, fa = x, fx
        else:
            message = f"Bracket lost at x={x!r}: f(x)={fx!r} matches both ends."
            logger.debug("ridder: %s", message)
            return Failure(FailureKind.INVALID_BRACKET, message, nit, x)

    message = f"Ridder's method did not converge within {max_iter} iterations."
    logger.debug(message)
    return Failure(FailureKind.NON_CONVERGENCE, message, max_iter, x_prev)


__all__ = ["bisection", "ridder", "secant"]
