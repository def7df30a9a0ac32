from __future__ import annotations

import operator

from pynumeric.defaults import DEFAULT_MAXITS, DEFAULT_TOL
from pynumeric.exception import DerivativeTooSmallError, NotConvergedError
from pynumeric.solve.result import RootResult
from pynumeric.types import ScalarFunc


# Last updated: 19 October 2026.


# ======================================================================

def newton_raphson(func: ScalarFunc, fprime: ScalarFunc, x0: float, *,
                   func_args=(), tol: float = DEFAULT_TOL,
                   maxits: int = DEFAULT_MAXITS, full_output: bool = False,
                   verbose: bool = False) -> float | tuple[float, RootResult]:
    r"""
    Find a zero of a real function using the Newton-Raphson method,
    iterating :math:`x_{k+1} = x_k - f(x_k) / f'(x_k)` from `x0`.

    Iteration stops when the size of the step :math:`|x_{k+1} - x_k|`
    is less than `tol`.  The residual :math:`|f(x)|` is not used as a
    stopping test.  There is no fallback to bracketing methods;
    convergence is only expected when `x0` is near a simple root.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function :math:`f(x)` for which a root is required.
    fprime : Callable[[float, ...], float]
        Derivative :math:`f'(x)`.
    x0 : float
        Starting point.
    func_args : optional
        Extra arguments passed to `func` and `fprime`.
    tol : float, default = 1e-10
        Converged when the step size is less than `tol`.  Also used as
        the smallest acceptable :math:`|f'(x)|`.
    maxits : int, default = 100
        Maximum number of iterations.
    full_output : bool, default = False
        If ``True``, return ``(x, RootResult)``.
    verbose : bool, default = False
        If ``True``, print progress statements.

    Returns
    -------
    x : float
        Estimated root (first iterate satisfying the step test).
    result : RootResult
        Only when ``full_output=True``.

    Raises
    ------
    ValueError
        If `tol` <= 0 or `maxits` < 1.
    DerivativeTooSmallError
        If :math:`|f'(x)| < tol` at any iterate.
    NotConvergedError
        If `maxits` steps were taken without satisfying the step test.

    Examples
    --------
    >>> round(newton_raphson(lambda x: x**2 - 4, lambda x: 2 * x, 1.0), 12)
    2.0
    """
    if tol <= 0:
        raise ValueError(f"tol too small ({tol:g} <= 0).")

    maxits = operator.index(maxits)
    if maxits < 1:
        raise ValueError("maxits must be greater than 0.")

    if verbose:
        print("Newton-Raphson Root:")

    x = float(x0)
    fevals = 0
    for it in range(1, maxits + 1):
        fx = func(x, *func_args)
        dfx = fprime(x, *func_args)
        fevals += 2

        if verbose:
            print(f"... Iteration {it}: x = {x}, f(x) = {fx}, "
                  f"f'(x) = {dfx}")

        if abs(dfx) < tol:
            raise DerivativeTooSmallError(
                "newton_raphson() failed: derivative too close to zero.",
                details=f"|f'(x)| < tol = {tol:g}.", x=x, fprime=dfx,
                iterations=it)

        x_next = x - fx / dfx

        if abs(x_next - x) < tol:
            if verbose:
                print("... Converged.")
            x_next = float(x_next)
            if full_output:
                return x_next, RootResult(x_next, it, fevals, True)
            return x_next

        x = x_next

    raise NotConvergedError("newton_raphson() failed to converge:",
                            details=f"Reached {maxits} iteration limit.",
                            x=x, iterations=maxits)
