"""Scalar root finders for ``f(x) = 0``.

Example
-------
>>> import math
>>> from numsolve.roots import newton, ridder
>>> round(newton(lambda x: x * x - 2.0, lambda x: 2.0 * x, 1.5), 12)
1.414213562373
>>> ridder(math.cos, 0.0, 3.0).ok
True
"""

from .bracketing import bisection, ridder, secant
from .halley import halley, halley_numeric
from .newton import newton, newton_numeric

__all__ = [
    "bisection",
    "halley",
    "halley_numeric",
    "newton",
    "newton_numeric",
    "ridder",
    "secant",
]
