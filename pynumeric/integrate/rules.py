"""
Composite Newton-Cotes rules for the definite integral of a scalar
function over equal subintervals.
"""

from pynumeric.defaults import DEFAULT_SUBINTERVALS
from pynumeric.exception import InvalidSubdivisionError
from pynumeric.types import ScalarFunc


# Last updated: 19 October 2026.


# ======================================================================

def trapezoid(func: ScalarFunc, a: float, b: float,
              n: int = DEFAULT_SUBINTERVALS, *, func_args=()) -> float:
    r"""
    Approximate :math:`\int_a^b f(x) dx` using the composite trapezoidal
    rule with `n` equal subintervals of width :math:`h = (b - a) / n`:

    .. math:: h \left[ \frac{f(a) + f(b)}{2} + \sum_{i=1}^{n-1}
              f(a + ih) \right]

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function to integrate.
    a, b : float
        Lower and upper limits of integration.
    n : int, default = 1000
        Number of subintervals.  This is not checked; ``n == 0`` raises
        `ZeroDivisionError` and ``n < 0`` gives a meaningless result.
    func_args : optional
        Extra arguments passed to `func`.

    Returns
    -------
    float
        Approximate integral.

    Examples
    --------
    >>> trapezoid(lambda x: 2 * x, 0.0, 1.0, n=4)
    1.0
    """
    h = (b - a) / n
    total = 0.5 * (func(a, *func_args) + func(b, *func_args))
    for i in range(1, n):
        total += func(a + i * h, *func_args)

    return float(h * total)


# ----------------------------------------------------------------------

def simpson(func: ScalarFunc, a: float, b: float,
            n: int = DEFAULT_SUBINTERVALS, *, func_args=()) -> float:
    r"""
    Approximate :math:`\int_a^b f(x) dx` using the composite Simpson's
    rule with `n` equal subintervals of width :math:`h = (b - a) / n`.
    Interior points are weighted 4 (odd `i`) and 2 (even `i`), the
    end points 1:

    .. math:: \frac{h}{3} \left[ f(a) + f(b) + \sum_{i=1}^{n-1} w_i
              f(a + ih) \right]

    Polynomials up to degree 3 are integrated exactly (to round-off).

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function to integrate.
    a, b : float
        Lower and upper limits of integration.
    n : int, default = 1000
        Number of subintervals, must be even.
    func_args : optional
        Extra arguments passed to `func`.

    Returns
    -------
    float
        Approximate integral.

    Raises
    ------
    InvalidSubdivisionError
        If `n` is odd.
    """
    if n % 2 != 0:
        raise InvalidSubdivisionError(
            "Number of subintervals must be even.", n=n)

    h = (b - a) / n
    total = func(a, *func_args) + func(b, *func_args)
    for i in range(1, n):
        weight = 2 if i % 2 == 0 else 4
        total += weight * func(a + i * h, *func_args)

    return float(h * total / 3)
