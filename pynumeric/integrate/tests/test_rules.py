import math

import numpy as np
import pytest
from scipy.integrate import quad

from pynumeric.exception import InvalidSubdivisionError
from pynumeric.integrate import simpson, trapezoid


# ======================================================================

def _square(x):
    return x ** 2


def _poly(x, c0, c1, c2, c3):
    return c0 + c1 * x + c2 * x ** 2 + c3 * x ** 3


# ----------------------------------------------------------------------

@pytest.mark.parametrize("rule", [trapezoid, simpson])
def test_square_integral(rule):
    assert rule(_square, 0.0, 2.0) == pytest.approx(8 / 3, abs=1e-3)


def test_simpson_more_accurate_than_trapezoid():
    exact = 8 / 3
    for n in (10, 100, 1000):
        err_trap = abs(trapezoid(_square, 0.0, 2.0, n) - exact)
        err_simp = abs(simpson(_square, 0.0, 2.0, n) - exact)
        assert err_simp < err_trap


@pytest.mark.parametrize("coeffs", [(1.0, 0.0, 0.0, 0.0),
                                    (0.0, 1.0, 0.0, 0.0),
                                    (-2.0, 0.5, 3.0, 0.0),
                                    (1.0, -1.0, 2.0, 4.0)])
def test_simpson_exact_up_to_cubic(coeffs):
    a, b = -1.0, 3.0
    c0, c1, c2, c3 = coeffs
    exact = (c0 * (b - a) + c1 * (b ** 2 - a ** 2) / 2 +
             c2 * (b ** 3 - a ** 3) / 3 + c3 * (b ** 4 - a ** 4) / 4)

    # Even the minimum subdivision is exact.
    assert simpson(_poly, a, b, 2, func_args=coeffs) == pytest.approx(
        exact, rel=1e-12, abs=1e-12)
    assert simpson(_poly, a, b, func_args=coeffs) == pytest.approx(
        exact, rel=1e-10, abs=1e-10)


def test_trapezoid_exact_for_linear():
    assert trapezoid(lambda x: 3 * x + 1, 0.0, 2.0, 1) == pytest.approx(8.0)


def test_trapezoid_error_order():
    # Halving h should reduce the error by ~4x.
    exact = 2.0
    err_1 = abs(trapezoid(math.sin, 0.0, math.pi, 50) - exact)
    err_2 = abs(trapezoid(math.sin, 0.0, math.pi, 100) - exact)
    assert err_1 / err_2 == pytest.approx(4.0, rel=1e-2)


@pytest.mark.parametrize("func, a, b", [(math.exp, 0.0, 1.0),
                                        (math.sin, 0.0, math.pi),
                                        (np.cos, -1.0, 2.0),
                                        (lambda x: 1 / (1 + x ** 2),
                                         -5.0, 5.0)])
def test_against_quad(func, a, b):
    ref, _ = quad(func, a, b)
    assert trapezoid(func, a, b) == pytest.approx(ref, rel=1e-5)
    assert simpson(func, a, b) == pytest.approx(ref, rel=1e-10)


@pytest.mark.parametrize("rule", [trapezoid, simpson])
def test_reversed_limits(rule):
    fwd = rule(math.exp, 0.0, 1.0, 100)
    rev = rule(math.exp, 1.0, 0.0, 100)
    assert rev == pytest.approx(-fwd, rel=1e-12)


@pytest.mark.parametrize("rule", [trapezoid, simpson])
def test_evaluation_count(rule):
    calls = []

    def f(x):
        calls.append(x)
        return x

    rule(f, 0.0, 1.0, 8)
    assert len(calls) == 9
    assert sorted(calls) == pytest.approx([i / 8 for i in range(9)])


@pytest.mark.parametrize("n", [1, 3, 999])
def test_simpson_odd_subdivisions(n):
    with pytest.raises(InvalidSubdivisionError) as exc_info:
        simpson(_square, 0.0, 2.0, n)

    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.n == n


def test_trapezoid_zero_subdivisions():
    with pytest.raises(ZeroDivisionError):
        trapezoid(_square, 0.0, 2.0, 0)


@pytest.mark.parametrize("rule", [trapezoid, simpson])
def test_repeatable(rule):
    assert rule(math.exp, 0.0, 1.0) == rule(math.exp, 0.0, 1.0)
