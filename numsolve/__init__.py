"""numsolve - iterative root finders and minimizers for scalar and vector functions."""

__version__ = "0.1.0"

from .core import (
    DEFAULT_MAX_ITER,
    DEFAULT_STEP,
    DEFAULT_TOL,
    Failure,
    FailureKind,
    InvalidBracketError,
    NonConvergenceError,
    SolverError,
    SolverResult,
    Success,
)
from .differentiate import CentralDifference, CentralStencil
from .logging import configure_logging, get_logger, set_log_level
from .optimize import (
    NelderMeadCoefficients,
    Vertex,
    golden_section,
    golden_section_steps,
    nelder_mead,
)
from .roots import (
    bisection,
    halley,
    halley_numeric,
    newton,
    newton_numeric,
    ridder,
    secant,
)

__all__ = [
    "__version__",
    "DEFAULT_MAX_ITER",
    "DEFAULT_STEP",
    "DEFAULT_TOL",
    "CentralDifference",
    "CentralStencil",
    "Failure",
    "FailureKind",
    "InvalidBracketError",
    "NelderMeadCoefficients",
    "NonConvergenceError",
    "SolverError",
    "SolverResult",
    "Success",
    "Vertex",
    "bisection",
    "configure_logging",
    "get_logger",
    "golden_section",
    "golden_section_steps",
    "halley",
    "halley_numeric",
    "nelder_mead",
    "newton",
    "newton_numeric",
    "ridder",
    "secant",
    "set_log_level",
]
