"""
Finite Differences (:mod:`pynumeric.finite_diff`)
=================================================

.. currentmodule:: pynumeric.finite_diff

Fixed-step finite difference estimates of the first derivative
:math:`f'(x)` of a real scalar function.

The default step `h` = 1e-8 balances truncation error against
round-off (cancellation) error for double precision values.  There is
no adaptive step selection.

.. autosummary::
    :toctree:

    backward_diff
    central_diff
    derivative
    forward_diff

"""

from pynumeric.defaults import DEFAULT_STEP
from pynumeric.types import ScalarFunc


# Last updated: 19 October 2026.


# ======================================================================

def forward_diff(func: ScalarFunc, x: float, h: float = DEFAULT_STEP, *,
                 func_args=()) -> float:
    """
    Forward difference ``(f(x + h) - f(x)) / h``.  First order
    accurate.
    """
    return float((func(x + h, *func_args) - func(x, *func_args)) / h)


def backward_diff(func: ScalarFunc, x: float, h: float = DEFAULT_STEP, *,
                  func_args=()) -> float:
    """
    Backward difference ``(f(x) - f(x - h)) / h``.  First order
    accurate.
    """
    return float((func(x, *func_args) - func(x - h, *func_args)) / h)


def central_diff(func: ScalarFunc, x: float, h: float = DEFAULT_STEP, *,
                 func_args=()) -> float:
    """
    Central difference ``(f(x + h) - f(x - h)) / 2h``.  Second order
    accurate, so normally preferred over the one-sided versions.
    """
    return float((func(x + h, *func_args) - func(x - h, *func_args)) /
                 (2 * h))


_METHODS = {'forward': forward_diff,
            'backward': backward_diff,
            'central': central_diff}


# ----------------------------------------------------------------------

def derivative(func: ScalarFunc, x: float, h: float = DEFAULT_STEP, *,
               method: str = 'central', func_args=()) -> float:
    """
    Estimate :math:`f'(x)` using a finite difference scheme chosen by
    name.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function to differentiate.
    x : float
        Point at which the derivative is required.
    h : float, default = 1e-8
        Step size.
    method : {'central', 'forward', 'backward'}
        Finite difference scheme.  One-sided schemes are useful when
        `func` is not defined on one side of `x`.
    func_args : optional
        Extra arguments passed to `func`.

    Returns
    -------
    float
        Derivative estimate.

    Raises
    ------
    ValueError
        Unknown `method`.
    """
    try:
        scheme = _METHODS[method]
    except KeyError:
        raise ValueError(f"Unknown finite difference method '{method}', "
                         f"expected one of: {', '.join(_METHODS)}.") from None

    return scheme(func, x, h, func_args=func_args)
