"""Central finite-difference adapters for scalar functions.

The adapters have the same call shape as an analytic derivative, so a
solver written against ``df(x)`` runs unchanged on a numeric estimate.
"""

from __future__ import annotations

from typing import Optional

from .core import ScalarFunction, check_tolerance


class CentralDifference:
    """First derivative ``(f(x + h) - f(x - h)) / (2 h)``.

    Parameters
    ----------
    fun:
        Scalar function to differentiate.
    step:
        Perturbation size ``h``.
    """

    def __init__(self, fun: ScalarFunction, step: float) -> None:
        self.fun = fun
        self.step = check_tolerance(step, "step")

    def __call__(self, x: float) -> float:
        h = self.step
        return (self.fun(x + h) - self.fun(x - h)) / (2.0 * h)

    def __repr__(self) -> str:
        return f"CentralDifference(step={self.step!r})"


class CentralStencil:
    """Three-point stencil serving ``f``, ``f'`` and ``f''`` at one point.

    ``f(x - h)``, ``f(x)`` and ``f(x + h)`` are evaluated once for the most
    recent ``x``; :meth:`value`, :meth:`first` and :meth:`second` at that
    same ``x`` reuse them. Asking for a different ``x`` re-evaluates.

    Parameters
    ----------
    fun:
        Scalar function to differentiate.
    step:
        Perturbation size ``h``.
    """

    def __init__(self, fun: ScalarFunction, step: float) -> None:
        self.fun = fun
        self.step = check_tolerance(step, "step")
        self._x: Optional[float] = None
        self._points = (0.0, 0.0, 0.0)
        self.nfev = 0

    def _evaluate(self, x: float) -> tuple[float, float, float]:
        if self._x is None or x != self._x:
            h = self.step
            self._points = (self.fun(x - h), self.fun(x), self.fun(x + h))
            self._x = x
            self.nfev += 3
        return self._points

    def value(self, x: float) -> float:
        return self._evaluate(x)[1]

    def first(self, x: float) -> float:
        f_minus, _, f_plus = self._evaluate(x)
        return (f_plus - f_minus) / (2.0 * self.step)

    def second(self, x: float) -> float:
        f_minus, f_mid, f_plus = self._evaluate(x)
        return (f_plus - 2.0 * f_mid + f_minus) / self.step**2


__all__ = ["CentralDifference", "CentralStencil"]
