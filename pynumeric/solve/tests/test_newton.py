import pytest

from pynumeric.exception import (DerivativeTooSmallError, NotConvergedError,
                                 SolverError)
from pynumeric.solve import RootResult, newton_raphson
from .scalar_tst_functions import (f_quad, df_quad, F_QUAD_ROOT, f_golden,
                                   df_golden, F_GOLDEN_ROOT, f_cubic,
                                   df_cubic, f_cos, df_cos, F_COS_ROOT)


# ======================================================================

@pytest.mark.parametrize("f, df, x0, exact", [
    (f_quad, df_quad, 1.0, F_QUAD_ROOT),
    (f_quad, df_quad, -1.0, -F_QUAD_ROOT),
    (f_golden, df_golden, 1.0, F_GOLDEN_ROOT),
    (f_cos, df_cos, 0.0, F_COS_ROOT)])
def test_newton_raphson_converges(f, df, x0, exact):
    x = newton_raphson(f, df, x0)
    assert x == pytest.approx(exact, abs=1e-10)
    assert isinstance(x, float)


def test_newton_raphson_func_args():
    x = newton_raphson(f_cubic, df_cubic, 1.0, func_args=(27.0,))
    assert x == pytest.approx(3.0, abs=1e-10)


def test_newton_raphson_stationary_start():
    # f'(0) = 0 for x^2 - 4.
    with pytest.raises(DerivativeTooSmallError) as exc_info:
        newton_raphson(f_quad, df_quad, 0.0)

    err = exc_info.value
    assert isinstance(err, SolverError)
    assert err.flag == 1
    assert err.x == 0.0
    assert err.iterations == 1


def test_newton_raphson_small_derivative_uses_tol():
    # |f'(x0)| = 1e-6 is fine at the default tolerance but not when
    # tol is larger.
    def f(x):
        return 1e-6 * (x - 1.0)

    def df(x):
        return 1e-6

    assert newton_raphson(f, df, 0.0) == pytest.approx(1.0)
    with pytest.raises(DerivativeTooSmallError):
        newton_raphson(f, df, 0.0, tol=1e-5)


def test_newton_raphson_not_converged():
    with pytest.raises(NotConvergedError) as exc_info:
        newton_raphson(f_quad, df_quad, 1.0, maxits=3)

    err = exc_info.value
    assert err.flag == 2
    assert err.iterations == 3
    assert "iteration limit" in str(err)


def test_newton_raphson_oscillates_without_converging():
    # Classic two-cycle: x^3 - 2x + 2 from x0 = 0 alternates 0, 1, 0...
    def f(x):
        return x ** 3 - 2 * x + 2

    def df(x):
        return 3 * x ** 2 - 2

    with pytest.raises(NotConvergedError):
        newton_raphson(f, df, 0.0)


def test_newton_raphson_full_output():
    x, res = newton_raphson(f_quad, df_quad, 1.0, full_output=True)
    assert isinstance(res, RootResult)
    assert res.root == x
    assert res.converged
    assert res.flag == 0
    assert res.fevals == 2 * res.iterations
    assert 1 < res.iterations < 10


def test_newton_raphson_verbose(capsys):
    newton_raphson(f_quad, df_quad, 1.0, verbose=True)
    out = capsys.readouterr().out
    assert out.startswith("Newton-Raphson Root:")
    assert "... Iteration 1: x = 1.0" in out
    assert out.rstrip().endswith("Converged.")


@pytest.mark.parametrize("kwargs", [{'tol': 0.0}, {'tol': -1e-3},
                                    {'maxits': 0}])
def test_newton_raphson_bad_parameters(kwargs):
    with pytest.raises(ValueError):
        newton_raphson(f_quad, df_quad, 1.0, **kwargs)


def test_newton_raphson_repeatable():
    x1 = newton_raphson(f_golden, df_golden, 3.0)
    x2 = newton_raphson(f_golden, df_golden, 3.0)
    assert x1 == x2
