#!/usr/bin/env python3

# Examples of root finding, integration, differentiation and the
# solution of a linear system.

from pynumeric import (bisect_root, central_diff, gauss_elim,
                       newton_raphson, simpson, trapezoid, SolverError)


def f(x):
    return x * x - 4


def df_dx(x):
    return 2 * x


# Root finding: x^2 - 4 = 0.
try:
    root = newton_raphson(f, df_dx, 1.0)
    print(f"Root of x² - 4 = 0 using Newton-Raphson: {root:.6f}")
except SolverError as ex:
    print(f"Newton-Raphson failed: {ex}")

try:
    root = bisect_root(f, 0, 5)
    print(f"Root of x² - 4 = 0 using Bisection: {root:.6f}")
except ValueError as ex:
    print(f"Bisection failed: {ex}")

# Integration of x^2 over [0, 2].
integral = trapezoid(lambda x: x * x, 0, 2, 1000)
print(f"∫₀² x² dx using Trapezoidal rule: {integral:.6f} "
      f"(exact: {8.0 / 3:.6f})")

integral = simpson(lambda x: x * x, 0, 2, 1000)
print(f"∫₀² x² dx using Simpson's rule: {integral:.6f} "
      f"(exact: {8.0 / 3:.6f})")

# Differentiation of x^3 at x = 2.
deriv = central_diff(lambda x: x ** 3, 2)
print(f"d/dx(x³) at x=2 using Central Difference: {deriv:.6f} (exact: 12)")

# Linear system 2x + 3y = 7, 4x + y = 6.
ab = [[2, 3, 7],
      [4, 1, 6]]
try:
    x, y = gauss_elim(ab)
    print(f"System: 2x + 3y = 7, 4x + y = 6")
    print(f"Solution: x = {x:.2f}, y = {y:.2f}")
    print(f"Verification: 2({x:.2f}) + 3({y:.2f}) = {2 * x + 3 * y:.2f}")
except (ValueError, SolverError) as ex:
    print(f"Gaussian elimination failed: {ex}")
