"""
Default parameters used throughout `pynumeric`.  Changing these will
change the results of every algorithm that relies on them, so they are
kept in one place.
"""

# Last updated: 19 October 2026.


# ======================================================================

DEFAULT_TOL = 1e-10
"""Convergence threshold for root finders: step size (Newton-Raphson)
or residual / bracket width (bisection)."""

DEFAULT_MAXITS = 100
"""Iteration limit for root finders."""

DEFAULT_SUBINTERVALS = 1000
"""Number of equal subintervals used by the quadrature rules."""

DEFAULT_STEP = 1e-8
"""Finite difference step.  Balances truncation error against
round-off for double precision; don't change casually."""

PIVOT_TOL = 1e-10
"""Absolute pivot magnitude below which a matrix is considered
singular.  This is not scaled by the matrix entries, so badly scaled
systems may be reported as singular (or not) incorrectly."""
