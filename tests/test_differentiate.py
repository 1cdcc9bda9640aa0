import math

import pytest

from numsolve.differentiate import CentralDifference, CentralStencil


def test_central_difference_matches_cubic():
    df = CentralDifference(lambda x: x**3, step=1e-5)
    assert df(2.0) == pytest.approx(12.0, rel=1e-8)


def test_central_difference_is_exact_for_quadratics():
    df = CentralDifference(lambda x: 3.0 * x * x - x, step=0.5)
    assert df(1.0) == pytest.approx(5.0, abs=1e-12)


def test_central_difference_invalid_step():
    with pytest.raises(ValueError):
        CentralDifference(math.sin, step=0.0)


def test_stencil_derivatives(sinc_exp):
    stencil = CentralStencil(sinc_exp.f, step=1e-4)
    x = -2.0
    assert stencil.value(x) == sinc_exp.f(x)
    assert stencil.first(x) == pytest.approx(sinc_exp.df(x), rel=1e-6)
    assert stencil.second(x) == pytest.approx(sinc_exp.d2f(x), rel=1e-5)


def test_stencil_evaluates_three_points_per_location(counted):
    f = counted(math.exp)
    stencil = CentralStencil(f, step=1e-3)
    stencil.value(0.5)
    stencil.first(0.5)
    stencil.second(0.5)
    assert f.calls == 3
    assert stencil.nfev == 3

    stencil.second(0.75)
    stencil.value(0.75)
    assert f.calls == 6


def test_stencil_invalid_step():
    with pytest.raises(ValueError, match="step"):
        CentralStencil(math.exp, step=-1.0)
