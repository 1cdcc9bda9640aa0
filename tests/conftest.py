"""Pytest configuration and shared fixtures for numsolve tests.

This module provides:
- A deterministic numpy RNG for randomized property checks
- The reference problem ``f(x) = sin(x)/x + exp(x)`` with its derivatives
- The Rosenbrock function
"""

import math
import os
from types import SimpleNamespace

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


def _sinc_exp(x: float) -> float:
    if x == 0.0:
        return 2.0
    return math.sin(x) / x + math.exp(x)


def _sinc_exp_d1(x: float) -> float:
    if x == 0.0:
        return 1.0
    return math.exp(x) + math.cos(x) / x - math.sin(x) / x**2


def _sinc_exp_d2(x: float) -> float:
    if x == 0.0:
        return 2.0 / 3.0
    x2 = x * x
    return math.exp(x) - (x2 - 2.0) * math.sin(x) / x**3 - 2.0 * math.cos(x) / x2


@pytest.fixture(scope="session")
def sinc_exp() -> SimpleNamespace:
    """``sin(x)/x + exp(x)`` with analytic derivatives and known extrema.

    ``root`` and ``root2`` are the two roots nearest the origin and
    ``minimum`` the local minimum on ``[-7, -1]``, to 18 significant digits.
    """
    return SimpleNamespace(
        f=_sinc_exp,
        df=_sinc_exp_d1,
        d2f=_sinc_exp_d2,
        root=-3.26650043678562449,
        root2=-6.27133405258685308,
        minimum=-4.54295618675514754,
    )


@pytest.fixture(scope="session")
def rosenbrock():
    def fun(x: np.ndarray) -> float:
        return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2

    return fun


class CallCounter:
    """Wrap a function, count its evaluations and record where they happen."""

    def __init__(self, fun):
        self.fun = fun
        self.calls = 0
        self.points = []

    def __call__(self, x):
        self.calls += 1
        self.points.append(np.array(x, dtype=float))
        return self.fun(x)


@pytest.fixture
def counted():
    return CallCounter
