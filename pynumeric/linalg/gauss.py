from __future__ import annotations

import numpy as np
import numpy.typing as npt

from pynumeric.defaults import PIVOT_TOL
from pynumeric.exception import NotAugmentedSquareError, SingularMatrixError
from pynumeric.types import MatrixLike


# Last updated: 19 October 2026.


# ======================================================================

def gauss_elim(ab: MatrixLike, *, overwrite: bool = False,
               pivot_tol: float = PIVOT_TOL) -> np.ndarray:
    """
    Solve the linear system :math:`Ax = b` given as the augmented
    matrix :math:`[A | b]`, using Gaussian elimination with partial
    pivoting followed by back-substitution.

    Parameters
    ----------
    ab : array_like, shape (n, n + 1)
        Augmented matrix; coefficients `A` in the first `n` columns
        and the right-hand side `b` in the last column.
    overwrite : bool, default = False
        If ``True`` and `ab` is a writable `float64` `ndarray`, the
        elimination is done in place and the contents of `ab` are
        destroyed (upper triangular form on return).  For any other
        input, or if ``False``, a working copy is made and `ab` is
        unchanged.
    pivot_tol : float, default = 1e-10
        Matrix is treated as singular if the absolute value of a pivot
        (after row selection) is less than this.

    Returns
    -------
    x : ndarray, shape (n,)
        Solution vector.

    Raises
    ------
    NotAugmentedSquareError
        If `ab` is not two-dimensional with shape ``(n, n + 1)``,
        including rows of unequal length.
    SingularMatrixError
        If a pivot smaller than `pivot_tol` is found.

    Notes
    -----
    - In each column the pivot is the entry with the largest absolute
      value on or below the diagonal.  Where several are equal the
      uppermost is used.
    - `pivot_tol` is an absolute test that is not scaled by the size
      of the matrix entries.  A badly scaled but otherwise well
      conditioned system (e.g. all entries ~1e-12) will be reported as
      singular; rescale such systems before solving.

    Examples
    --------
    Solve :math:`2x + 3y = 7`, :math:`4x + y = 6`:

    >>> gauss_elim([[2, 3, 7], [4, 1, 6]])
    array([1.1, 1.6])
    """
    if (overwrite and isinstance(ab, np.ndarray) and
            ab.dtype == np.float64 and ab.flags.writeable):
        work = ab
    else:
        try:
            work = np.array(ab, dtype=np.float64)
        except ValueError:
            # Ragged rows.
            raise NotAugmentedSquareError(
                "Matrix must be augmented square, shape (n, n + 1).",
                shape=None, rows=len(ab)) from None

    if work.ndim != 2 or work.shape[1] != work.shape[0] + 1:
        raise NotAugmentedSquareError(
            "Matrix must be augmented square, shape (n, n + 1).",
            shape=work.shape)

    n = work.shape[0]

    # Forward elimination.
    for i in range(n):
        # Partial pivot: argmax returns the first (uppermost) maximum.
        p = i + int(np.argmax(np.abs(work[i:, i])))
        if p != i:
            work[[i, p]] = work[[p, i]]

        pivot = work[i, i]
        if abs(pivot) < pivot_tol:
            raise SingularMatrixError("Matrix is singular or nearly "
                                      "singular.", column=i, pivot=pivot)

        factors = work[i + 1:, i] / pivot
        work[i + 1:, i:] -= np.outer(factors, work[i, i:])

    # Back substitution.
    x = np.empty(n)
    for i in range(n - 1, -1, -1):
        x[i] = (work[i, n] - work[i, i + 1:n] @ x[i + 1:]) / work[i, i]

    return x


# ----------------------------------------------------------------------

def solve_linear(a: MatrixLike, b: npt.ArrayLike, *,
                 pivot_tol: float = PIVOT_TOL) -> np.ndarray:
    """
    Solve :math:`Ax = b` for square `A` using `gauss_elim`.  Neither `a`
    nor `b` are modified.

    Parameters
    ----------
    a : array_like, shape (n, n)
        Coefficient matrix.
    b : array_like, shape (n,)
        Right-hand side.
    pivot_tol : float, default = 1e-10
        See `gauss_elim`.

    Returns
    -------
    x : ndarray, shape (n,)
        Solution vector.
    """
    try:
        a = np.asarray(a, dtype=np.float64)
        b = np.asarray(b, dtype=np.float64)
    except ValueError:
        raise NotAugmentedSquareError(
            "Requires 'a' shape (n, n) and 'b' shape (n,).") from None

    if a.ndim != 2 or a.shape[0] != a.shape[1] or b.shape != (a.shape[0],):
        raise NotAugmentedSquareError(
            "Requires 'a' shape (n, n) and 'b' shape (n,).",
            a_shape=a.shape, b_shape=b.shape)

    # column_stack always returns a new array, safe to overwrite.
    return gauss_elim(np.column_stack((a, b)), overwrite=True,
                      pivot_tol=pivot_tol)
