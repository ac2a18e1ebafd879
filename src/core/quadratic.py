# core/quadratic.py
import math

from numba import njit

# Leading (and linear) coefficients smaller than this are treated as zero.
QUADRATIC_EPSILON = 1e-12

@njit
def solve_quadratic(a, b, c):
    """
    Solves a*t^2 + b*t + c = 0.

    Returns (has_real_roots, t0, t1) with t0 <= t1. When a is ~0 the
    equation is solved as b*t + c = 0 and the single root is returned twice;
    when b is ~0 as well there is no root.
    """
    if abs(a) < QUADRATIC_EPSILON:
        if abs(b) < QUADRATIC_EPSILON:
            return False, 0.0, 0.0
        t = -c / b
        return True, t, t

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return False, 0.0, 0.0

    sqrt_disc = math.sqrt(discriminant)
    t0 = (-b - sqrt_disc) / (2.0 * a)
    t1 = (-b + sqrt_disc) / (2.0 * a)

    # A negative a flips the order of the two formulas.
    if t0 > t1:
        t0, t1 = t1, t0
    return True, t0, t1
