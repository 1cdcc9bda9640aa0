"""
Nelder-Mead downhill simplex minimization.

Derivative-free minimization of ``f: R^n -> R``. Each iteration replaces the
worst of ``n + 1`` vertices by a reflected, expanded or contracted point, or
shrinks the whole simplex towards the best vertex. The run ends when the
vertex values or the vertex positions agree to within ``tol``; running out
of iterations is not treated as a failure.

References:
    - Nelder, J. A. & Mead, R., "A simplex method for function
      minimization", Computer Journal 7 (1965)
    - Lagarias, J. C. et al., "Convergence properties of the Nelder-Mead
      simplex method in low dimensions", SIAM J. Optim. 9 (1998)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core import (
    DEFAULT_TOL,
    Array,
    VectorFunction,
    check_max_iter,
    check_tolerance,
)
from ..logging import get_logger, verbose_logging
from .simplex import (
    Vertex,
    centroid,
    initial_simplex,
    mean_distance,
    sort_simplex,
    value_spread,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class NelderMeadCoefficients:
    """Transformation coefficients of the simplex."""

    reflection: float = 1.0
    expansion: float = 2.0
    contraction: float = 0.5
    shrink: float = 0.5

    def __post_init__(self) -> None:
        """Validate the standard Nelder-Mead coefficient ranges."""
        if self.reflection <= 0:
            raise ValueError(f"reflection must be positive, got {self.reflection}.")
        if self.expansion <= max(1.0, self.reflection):
            raise ValueError(
                "expansion must exceed 1 and the reflection coefficient, "
                f"got {self.expansion}."
            )
        if not 0 < self.contraction < 1:
            raise ValueError(f"contraction must lie in (0, 1), got {self.contraction}.")
        if not 0 < self.shrink < 1:
            raise ValueError(f"shrink must lie in (0, 1), got {self.shrink}.")


def _format_simplex(simplex: list[Vertex]) -> str:
    return "\n".join(f"  {v.x} -> {v.value!r}" for v in simplex)


def nelder_mead(
    f: VectorFunction,
    x0: Array,
    simplex_size: float,
    tol: float = DEFAULT_TOL,
    max_iter: int = 1000,
    verbose: bool = False,
    coefficients: Optional[NelderMeadCoefficients] = None,
) -> tuple[Array, float]:
    """Minimize ``f`` starting from a right-angled simplex at ``x0``.

    Args:
        f: Objective taking a 1-D array and returning a float.
        x0: Starting point, also the first simplex vertex.
        simplex_size: Offset of the other vertices along each axis.
        tol: Threshold for both the standard deviation of the vertex values
            and the mean distance between vertices.
        max_iter: Maximum number of iterations.
        verbose: Log the simplex, centroid and every trial point at INFO
            instead of DEBUG, letting INFO through the module logger for the
            duration of the call.
        coefficients: Reflection, expansion, contraction and shrink
            coefficients; defaults to ``(1, 2, 0.5, 0.5)``.

    Returns:
        ``(x, f(x))`` for the best vertex found.
    """
    x0 = np.asarray(x0, dtype=float)
    if x0.ndim != 1 or x0.size == 0:
        raise ValueError(f"x0 must be a non-empty 1-D array, got shape {x0.shape}")
    simplex_size = check_tolerance(simplex_size, "simplex_size")
    tol = check_tolerance(tol)
    max_iter = check_max_iter(max_iter)
    coef = coefficients or NelderMeadCoefficients()
    level = logging.INFO if verbose else logging.DEBUG

    with verbose_logging(logger, verbose):
        best = _minimize(f, x0, simplex_size, tol, max_iter, coef, level)
    return best.x.copy(), best.value


def _minimize(
    f: VectorFunction,
    x0: Array,
    simplex_size: float,
    tol: float,
    max_iter: int,
    coef: NelderMeadCoefficients,
    level: int,
) -> Vertex:
    simplex = initial_simplex(f, x0, simplex_size)
    logger.log(level, "Initial simplex:\n%s", _format_simplex(simplex))

    for nit in range(max_iter):
        simplex = sort_simplex(simplex)
        best, second_worst, worst = simplex[0], simplex[-2], simplex[-1]
        if logger.isEnabledFor(level):
            logger.log(
                level, "Iteration %d, sorted simplex:\n%s", nit, _format_simplex(simplex)
            )

        if value_spread(simplex) < tol:
            logger.log(level, "Converged on function values after %d iterations", nit)
            return best
        if mean_distance(simplex) < tol:
            logger.log(level, "Converged on simplex size after %d iterations", nit)
            return best

        center = centroid(simplex)
        logger.log(level, "Centroid: %s", center)
        reflected = Vertex.evaluate(f, center + coef.reflection * (center - worst.x))
        logger.log(level, "Reflection: %s -> %r", reflected.x, reflected.value)

        if best.value <= reflected.value < second_worst.value:
            simplex[-1] = reflected
            continue

        if reflected.value < best.value:
            expanded = Vertex.evaluate(
                f, center + coef.expansion * (reflected.x - center)
            )
            logger.log(level, "Expansion: %s -> %r", expanded.x, expanded.value)
            simplex[-1] = expanded if expanded.value <= reflected.value else reflected
            continue

        contracted = Vertex.evaluate(f, center + coef.contraction * (worst.x - center))
        logger.log(level, "Contraction: %s -> %r", contracted.x, contracted.value)
        if contracted.value < worst.value:
            simplex[-1] = contracted
            continue

        logger.log(level, "Shrinking the whole simplex")
        simplex = [best] + [
            Vertex.evaluate(f, best.x + coef.shrink * (v.x - best.x))
            for v in simplex[1:]
        ]

    logger.log(level, "Maximum number of iterations (%d) reached", max_iter)
    return sort_simplex(simplex)[0]


__all__ = ["NelderMeadCoefficients", "nelder_mead"]
