"""
Type aliases shared by the algorithms in `pynumeric`.
"""

from collections.abc import Callable

import numpy.typing as npt

# Last updated: 19 October 2026.


# ======================================================================

ScalarFunc = Callable[..., float]
"""
A real function of one real variable ``f(x, *args) -> float``.  Any
callable is accepted (functions, lambdas, bound methods, NumPy ufuncs).

Functions are evaluated many times and may be re-evaluated at the same
point, or have earlier values cached (e.g. bisection keeps the value at
the retained end of the bracket).  They must therefore be
deterministic and free of side effects.  This is not checked.  The
function must also be defined everywhere it is evaluated.
"""

MatrixLike = npt.ArrayLike
"""Two-dimensional array-like of real values (nested lists or
`ndarray`)."""
