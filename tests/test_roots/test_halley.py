import pytest

from numsolve import (
    Failure,
    FailureKind,
    NonConvergenceError,
    Success,
    halley,
    halley_numeric,
)


def test_halley_sqrt_two():
    res = halley(lambda x: x * x - 2.0, lambda x: 2.0 * x, lambda x: 2.0, 1.5)
    assert isinstance(res, Success)
    assert res.value == pytest.approx(2.0**0.5, abs=1e-10)
    assert res.nit <= 4


def test_halley_reference_problem(sinc_exp):
    res = halley(sinc_exp.f, sinc_exp.df, sinc_exp.d2f, -3.0, tol=1e-10)
    assert res.ok
    assert res.value == pytest.approx(sinc_exp.root, abs=1e-9)
    assert abs(sinc_exp.f(res.value)) < 1e-10


def test_halley_from_positive_start_lands_on_a_root(sinc_exp):
    res = halley(sinc_exp.f, sinc_exp.df, sinc_exp.d2f, 1.0, tol=1e-10, max_iter=100)
    x = res.unwrap()
    assert abs(sinc_exp.f(x)) < 1e-10
    assert min(abs(x - sinc_exp.root), abs(x - sinc_exp.root2)) < 1e-8


def test_halley_numeric_reference_problem(sinc_exp):
    res = halley_numeric(sinc_exp.f, -3.0, tol=1e-10, h=1e-6)
    assert res.ok
    assert res.value == pytest.approx(sinc_exp.root, abs=1e-9)


def test_halley_numeric_costs_three_evaluations_per_iterate(counted, sinc_exp):
    f = counted(sinc_exp.f)
    res = halley_numeric(f, -3.0, tol=1e-10, h=1e-5)
    assert res.ok
    assert f.calls == 3 * (res.nit + 1)


def test_halley_reports_non_convergence():
    res = halley(lambda x: x * x + 1.0, lambda x: 2.0 * x, lambda x: 2.0, 1.0, max_iter=10)
    assert isinstance(res, Failure)
    assert res.kind is FailureKind.NON_CONVERGENCE
    assert res.nit == 10
    assert isinstance(res.last, float)
    with pytest.raises(NonConvergenceError, match="did not converge"):
        res.unwrap()


def test_halley_numeric_reports_non_convergence():
    res = halley_numeric(lambda x: x * x + 1.0, 1.0, max_iter=10)
    assert not res.ok
    assert res.kind is FailureKind.NON_CONVERGENCE


def test_halley_undefined_step_is_a_failure():
    res = halley(lambda x: 1.0, lambda x: 0.0, lambda x: 0.0, 0.0)
    assert isinstance(res, Failure)
    assert res.kind is FailureKind.NON_CONVERGENCE
    assert "undefined" in res.message
    assert res.last == 0.0


def test_halley_root_at_start():
    res = halley(lambda x: x - 1.0, lambda x: 1.0, lambda x: 0.0, 1.0)
    assert res == Success(1.0, 0)


def test_halley_rejects_invalid_tolerance():
    with pytest.raises(ValueError):
        halley(lambda x: x, lambda x: 1.0, lambda x: 0.0, 1.0, tol=0.0)
