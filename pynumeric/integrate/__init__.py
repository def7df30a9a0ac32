"""
===========================================
Integration (:mod:`pynumeric.integrate`)
===========================================

.. currentmodule:: pynumeric.integrate

Numerical integration of real scalar functions over a finite interval.

.. autosummary::
    :toctree:

    simpson
    trapezoid

"""

from .rules import simpson, trapezoid
