"""Golden-section search for the minimum of a unimodal scalar function."""

from __future__ import annotations

import math

from ..core import DEFAULT_TOL, ScalarFunction, check_interval, check_tolerance
from ..logging import get_logger

logger = get_logger(__name__)

INVPHI = (math.sqrt(5.0) - 1.0) / 2.0  # 1 / phi
INVPHI2 = (3.0 - math.sqrt(5.0)) / 2.0  # 1 / phi^2


def golden_section_steps(width: float, tol: float) -> int:
    """Number of steps that shrink a bracket of ``width`` below ``tol``."""
    if width <= tol:
        return 0
    return math.ceil(math.log(tol / width) / math.log(INVPHI))


def golden_section(
    f: ScalarFunction, a: float, b: float, tol: float = DEFAULT_TOL
) -> float:
    """Minimize ``f`` on ``[a, b]`` by golden-section search.

    ``f`` must be unimodal on the interval; otherwise a local minimum (or
    any point) may come back. The step count is fixed up front by
    :func:`golden_section_steps`, and every step after the first two probes
    costs exactly one evaluation of ``f``.

    Args:
        f: Function to minimize.
        a, b: Interval ends, in any order.
        tol: Final bracket width.

    Returns:
        Midpoint of the final sub-bracket holding the lower probe value.
    """
    tol = check_tolerance(tol)
    a, b = check_interval(a, b)
    a, b = min(a, b), max(a, b)
    h = b - a
    n = golden_section_steps(h, tol)
    if n == 0:
        return 0.5 * (a + b)

    c = a + INVPHI2 * h
    d = a + INVPHI * h
    yc, yd = f(c), f(d)
    for _ in range(n):
        h *= INVPHI
        if yc < yd:
            b, d, yd = d, c, yc
            c = a + INVPHI2 * h
            yc = f(c)
        else:
            a, c, yc = c, d, yd
            d = a + INVPHI * h
            yd = f(d)
    logger.debug("golden_section: %d steps, bracket=[%.17g, %.17g]", n, a, b)

    if yc < yd:
        return 0.5 * (a + d)
    return 0.5 * (c + b)


__all__ = ["INVPHI", "INVPHI2", "golden_section", "golden_section_steps"]
