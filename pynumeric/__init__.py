"""
.. This module acts as the top-level API documentation.

.. module: pynumeric

Numerical methods for real (double precision) scalar functions and
dense linear systems.

.. autosummary::
    :toctree: generated/

    defaults
    exception
    finite_diff
    integrate
    linalg
    solve
    types

"""

__version__ = "0.1.0"

# ======================================================================

from .defaults import (DEFAULT_MAXITS, DEFAULT_STEP, DEFAULT_SUBINTERVALS,
                       DEFAULT_TOL, PIVOT_TOL)
from .exception import (DerivativeTooSmallError, InvalidBracketError,
                        InvalidSubdivisionError, NotAugmentedSquareError,
                        NotConvergedError, SingularMatrixError, SolverError)
from .finite_diff import (backward_diff, central_diff, derivative,
                          forward_diff)
from .integrate import simpson, trapezoid
from .linalg import gauss_elim, solve_linear
from .solve import RootResult, bisect_root, newton_raphson
