"""
=======================================
Solvers (:mod:`pynumeric.solve`)
=======================================

.. currentmodule:: pynumeric.solve

Functions for finding the roots of real scalar functions.

Functions
---------

.. autosummary::
    :toctree:

    bisect_root
    newton_raphson

Results
-------

.. autosummary::
    :toctree:

    RootResult

"""

from .bisect_root import bisect_root
from .newton import newton_raphson
from .result import RootResult
