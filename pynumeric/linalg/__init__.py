"""
==========================================
Linear Algebra (:mod:`pynumeric.linalg`)
==========================================

.. currentmodule:: pynumeric.linalg

Direct solution of dense linear systems.

.. autosummary::
    :toctree:

    gauss_elim
    solve_linear

"""

from .gauss import gauss_elim, solve_linear
