import math


# ======================================================================

# Test functions, along with first derivatives and exact roots.

def f_quad(x):
    return x ** 2 - 4


def df_quad(x):
    return 2 * x


F_QUAD_ROOT = 2.0


def f_golden(x):
    return x ** 2 - x - 1


def df_golden(x):
    return 2 * x - 1


F_GOLDEN_ROOT = 1.618033988749895


def f_cubic(x, c):
    """Cubic with a parameter, root at ``x = c ** (1/3)``."""
    return x ** 3 - c


def df_cubic(x, c):
    return 3 * x ** 2


def f_cos(x):
    return math.cos(x) - x


def df_cos(x):
    return -math.sin(x) - 1


F_COS_ROOT = 0.7390851332151607
