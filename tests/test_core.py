import math

import pytest

from numsolve.core import (
    Failure,
    FailureKind,
    InvalidBracketError,
    NonConvergenceError,
    SolverError,
    Success,
    check_interval,
    check_max_iter,
    check_tolerance,
)


def test_success_unwrap_returns_value():
    res = Success(1.25, nit=3)
    assert res.ok
    assert res.unwrap() == 1.25
    assert res.nit == 3


@pytest.mark.parametrize(
    "kind, error",
    [
        (FailureKind.NON_CONVERGENCE, NonConvergenceError),
        (FailureKind.INVALID_BRACKET, InvalidBracketError),
    ],
)
def test_failure_unwrap_raises_matching_error(kind, error):
    res = Failure(kind, "gave up", nit=7, last=0.5)
    assert not res.ok
    with pytest.raises(error, match="gave up") as excinfo:
        res.unwrap()
    assert isinstance(excinfo.value, SolverError)
    assert isinstance(excinfo.value, RuntimeError)
    assert excinfo.value.kind is kind
    assert excinfo.value.last == 0.5


def test_results_are_immutable():
    res = Success(1.0)
    with pytest.raises(AttributeError):
        res.value = 2.0


def test_results_support_pattern_matching():
    def describe(res):
        match res:
            case Success(value=v):
                return f"root {v}"
            case Failure(kind=FailureKind.INVALID_BRACKET):
                return "bad bracket"
            case Failure():
                return "no convergence"

    assert describe(Success(2.0)) == "root 2.0"
    assert describe(Failure(FailureKind.INVALID_BRACKET, "")) == "bad bracket"
    assert describe(Failure(FailureKind.NON_CONVERGENCE, "")) == "no convergence"


@pytest.mark.parametrize("tol", [0.0, -1e-3, math.inf, math.nan])
def test_check_tolerance_rejects(tol):
    with pytest.raises(ValueError):
        check_tolerance(tol)


def test_check_tolerance_names_argument():
    with pytest.raises(ValueError, match="step must be positive"):
        check_tolerance(0.0, "step")


@pytest.mark.parametrize("max_iter", [0, -5, 2.5])
def test_check_max_iter_rejects(max_iter):
    with pytest.raises(ValueError):
        check_max_iter(max_iter)


def test_check_interval():
    assert check_interval(1, 2) == (1.0, 2.0)
    with pytest.raises(ValueError):
        check_interval(0.0, math.inf)
