"""
Exceptions (:mod:`pynumeric.exception`)
=======================================

.. currentmodule:: pynumeric.exception

Exceptions raised by the algorithms in `pynumeric`.  Failures that
occur part-way through an algorithm derive from `SolverError`.
Problems with the inputs that are found before any iteration takes
place derive from `ValueError`.

Both kinds carry optional diagnostic attributes (`flag`, `details`
and anything else relevant to the specific failure) which are listed
when the exception is printed.
"""

# Last updated: 19 October 2026.


# ======================================================================

class _DetailsMixin:
    """
    Attaches `details` and any keyword arguments to the exception as
    attributes, and lists them after the main message.
    """

    def __init__(self, *args, details: str = None, **kwargs):
        super().__init__(*args)
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class SolverError(_DetailsMixin, RuntimeError):
    """
    This exception is raised when an algorithm / solver / etc fails to
    converge or find a solution.  Additional information (optional) is
    included to allow the reason for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result. Typically `flag` != 0 as many error code systems
            assume that `flag` == 0 implies that the solution was
            successful.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        self.flag = flag
        super().__init__(*args, details=details, **kwargs)


class DerivativeTooSmallError(SolverError):
    """
    Newton-Raphson step could not be taken because ``|f'(x)| < tol``.
    Attributes `x`, `fprime` and `iterations` give the point reached.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 1)
        super().__init__(*args, **kwargs)


class NotConvergedError(SolverError):
    """
    Iteration limit reached before the convergence test was satisfied.
    Attributes `x` (last iterate) and `iterations`.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 2)
        super().__init__(*args, **kwargs)


class SingularMatrixError(SolverError):
    """
    Elimination found a pivot smaller than the singularity threshold.
    Attributes `column` and `pivot`.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 3)
        super().__init__(*args, **kwargs)


# ----------------------------------------------------------------------

class InvalidBracketError(_DetailsMixin, ValueError):
    """
    Function values at each end of the interval do not have opposite
    signs.  Attributes `x_a`, `x_b`, `f_a`, `f_b`.
    """


class InvalidSubdivisionError(_DetailsMixin, ValueError):
    """Subinterval count `n` is unsuitable for the rule (e.g. odd)."""


class NotAugmentedSquareError(_DetailsMixin, ValueError):
    """Matrix is not of augmented square shape ``(n, n + 1)``."""
