# core/utils.py
import math

from numba import njit

# Tolerance for the texture-mapping branch tests (seam and mirror decisions).
EPSILON = 1e-4
TWO_PI = 2.0 * math.pi

@njit
def miss():
    """
    The kernel result for a ray that hits nothing:
    (hit, t, px, py, pz, nx, ny, nz, u, v).
    """
    return False, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0

@njit
def clamp_unit(x):
    """
    Clamps x to [-1, 1] so rounding noise never leaves acos's domain.
    """
    return min(1.0, max(-1.0, x))

@njit
def angular_u(cos_angle, z):
    """
    Maps the cosine of the angle around the Y axis to u in [0, 1].
    acos only covers half a turn, so points with z < 0 are mirrored.
    """
    u = math.acos(clamp_unit(cos_angle)) / TWO_PI
    if z < -EPSILON:
        u = 1.0 - u
    return u
