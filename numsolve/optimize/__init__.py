"""Derivative-free minimizers.

Example
-------
>>> import numpy as np
>>> from numsolve.optimize import golden_section, nelder_mead
>>> round(golden_section(lambda x: (x - 2.0) ** 2, -5.0, 5.0, tol=1e-8), 6)
2.0
>>> def rosen(x):
...     return (1 - x[0])**2 + 100 * (x[1] - x[0]**2)**2
>>> x, fx = nelder_mead(rosen, np.array([2.0, -1.0]), 0.1, tol=1e-10)
>>> bool(np.allclose(x, [1.0, 1.0], atol=1e-4))
True
"""

from .golden import golden_section, golden_section_steps
from .nelder_mead import NelderMeadCoefficients, nelder_mead
from .simplex import Vertex

__all__ = [
    "NelderMeadCoefficients",
    "Vertex",
    "golden_section",
    "golden_section_steps",
    "nelder_mead",
]
