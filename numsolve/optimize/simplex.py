"""Simplex bookkeeping for the Nelder-Mead optimizer.

A simplex is a list of ``n + 1`` :class:`Vertex` records in n dimensions.
The helpers here never mutate their input; every geometric update builds a
new vertex.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..core import Array, VectorFunction


@dataclass(frozen=True, eq=False)
class Vertex:
    """Simplex vertex: position and cached objective value."""

    x: Array
    value: float

    @classmethod
    def evaluate(cls, fun: VectorFunction, x: Array) -> "Vertex":
        return cls(x, float(fun(x)))


def initial_simplex(fun: VectorFunction, x0: Array, size: float) -> list[Vertex]:
    """Return ``x0`` and ``x0 + size * e_i`` for each axis ``i``, evaluated."""
    x0 = np.asarray(x0, dtype=float)
    simplex = [Vertex.evaluate(fun, x0.copy())]
    for i in range(x0.size):
        x = x0.copy()
        x[i] += size
        simplex.append(Vertex.evaluate(fun, x))
    return simplex


def sort_simplex(simplex: Sequence[Vertex]) -> list[Vertex]:
    """New list ordered by ascending value; ties keep their order."""
    return sorted(simplex, key=lambda v: v.value)


def value_spread(simplex: Sequence[Vertex]) -> float:
    """Population standard deviation of the vertex values."""
    return float(np.std([v.value for v in simplex]))


def mean_distance(simplex: Sequence[Vertex]) -> float:
    """Sum of ``||x_i - x_j||`` over ordered pairs ``i != j``, over ``N^2``."""
    points = np.stack([v.x for v in simplex])
    diffs = points[:, None, :] - points[None, :, :]
    return float(np.linalg.norm(diffs, axis=-1).sum() / len(simplex) ** 2)


def centroid(simplex: Sequence[Vertex]) -> Array:
    """Mean position of every vertex except the last (worst)."""
    return np.mean([v.x for v in simplex[:-1]], axis=0)


__all__ = [
    "Vertex",
    "centroid",
    "initial_simplex",
    "mean_distance",
    "sort_simplex",
    "value_spread",
]
