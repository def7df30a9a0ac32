from __future__ import annotations

import operator
import warnings

from pynumeric.defaults import DEFAULT_MAXITS, DEFAULT_TOL
from pynumeric.exception import InvalidBracketError
from pynumeric.solve.result import RootResult
from pynumeric.types import ScalarFunc


# Last updated: 19 October 2026.


# ======================================================================

def bisect_root(func: ScalarFunc, x_a: float, x_b: float, *,
                func_args=(), tol: float = DEFAULT_TOL,
                maxits: int = DEFAULT_MAXITS, full_output: bool = False,
                verbose: bool = False) -> float | tuple[float, RootResult]:
    # noinspection PyUnresolvedReferences
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [x_a, x_b]` by the bisection method. For bisection to work
    :math:`f(x)` must change sign across the interval, i.e.
    ``func(x_a)`` and ``func(x_b)`` must not have the same sign.

    Examples
    --------
    >>> f = lambda x: x**2 - 4
    >>> round(bisect_root(f, 0.0, 5.0), 6)
    2.0
    >>> f = lambda x: (2*x - 1)*(x - 3)
    >>> bisect_root(f, 0, 1)  # Only 1 it. (soln was in centre).
    0.5

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.
    x_a, x_b : float
        Each end of the search interval.
    func_args : optional
        Extra arguments passed to `func`.
    tol : float, default = 1e-10
        End search when :math:`|f(x_m)| < tol` or when the interval
        width :math:`|x_b - x_a| < tol`, whichever happens first.
    maxits : int, default = 100
        Maximum number of iterations.
    full_output : bool, default = False
        If ``True``, return ``(x_m, RootResult)``.
    verbose : bool, default = False
        If ``True``, print progress statements.

    Returns
    -------
    x_m : float
        Best estimate of root found i.e. :math:`f(x_m) \approx 0`.
    result : RootResult
        Only when ``full_output=True``.

    Raises
    ------
    ValueError
        If `tol` <= 0 or `maxits` < 1.
    InvalidBracketError
        If ``func(x_a) * func(x_b) > 0``.

    Warns
    -----
    RuntimeWarning
        If `maxits` is reached before either stopping test is met.  In
        this case the midpoint of the current interval is returned
        anyway; unlike `newton_raphson` this is not an error, as the
        error in the root remains bounded by the interval width.
    """
    if tol <= 0:
        raise ValueError(f"tol too small ({tol:g} <= 0).")

    maxits = operator.index(maxits)
    if maxits < 1:
        raise ValueError("maxits must be greater than 0.")

    if verbose:
        print("Bisecting Root:")

    f_a, f_b = func(x_a, *func_args), func(x_b, *func_args)
    fevals = 2
    if f_a * f_b > 0:
        raise InvalidBracketError(
            "f(x_a) and f(x_b) must have opposite signs.",
            x_a=x_a, x_b=x_b, f_a=f_a, f_b=f_b)

    for it in range(1, maxits + 1):
        # Compute midpoint.
        x_m = (x_a + x_b) / 2
        f_m = func(x_m, *func_args)
        fevals += 1

        if verbose:
            print(f"... Iteration {it}: x = [{x_a}, {x_m}, {x_b}], "
                  f"f = [{f_a}, {f_m}, {f_b}]")

        # Check stopping criteria.
        if abs(f_m) < tol or abs(x_b - x_a) < tol:
            x_m = float(x_m)
            if full_output:
                return x_m, RootResult(x_m, it, fevals, True)
            return x_m

        # Check which side root is on, narrow interval.  Only f_a is
        # needed for this; f_b is carried along for reporting.
        if f_a * f_m < 0:
            x_b, f_b = x_m, f_m
        else:
            x_a, f_a = x_m, f_m

    x_m = float((x_a + x_b) / 2)
    warnings.warn(f"bisect_root() reached {maxits} iteration limit, "
                  f"returning midpoint of [{x_a}, {x_b}].", RuntimeWarning)
    if full_output:
        return x_m, RootResult(x_m, maxits, fevals, False, flag=1)
    return x_m
