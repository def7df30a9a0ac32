from typing import NamedTuple


# Last updated: 19 October 2026.


# ======================================================================

class RootResult(NamedTuple):
    """
    Convergence information returned by the root finders when
    ``full_output=True``.

    Attributes
    ----------
    root : float
        Estimated root.
    iterations : int
        Number of iterations performed.
    fevals : int
        Number of function evaluations (including derivative
        evaluations, where used).
    converged : bool
        ``True`` if a stopping test was satisfied.
    flag : int
        ``0`` for a converged result, otherwise a non-zero status code
        matching the `flag` attribute of the equivalent exception.
    """
    root: float
    iterations: int
    fevals: int
    converged: bool
    flag: int = 0
