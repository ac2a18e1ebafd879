# geometry/cylinder.py
"""
Cylinder primitive.

In object space the cylinder has radius 1, runs along the Y axis and is
clipped to y in [-1, 1]. It has no end caps: a ray that enters through the
open top or bottom and never crosses the lateral surface misses.
"""
import math

from numba import njit

from core.quadratic import solve_quadratic
from core.utils import EPSILON, angular_u, miss
from geometry.hittable import Geometry

@njit
def cylinder_uv(x, y, z):
    """
    u from the angle around the Y axis (0 on the z = 0 seam), v from the
    height, scaled from [-1, 1] to [0, 1].
    """
    if abs(z) < EPSILON:
        u = 0.0
    else:
        u = angular_u(x, z)  # acos(x / r) / 2pi with r = 1
    v = (y + 1.0) / 2.0
    return u, v

@njit
def hit_cylinder(ex, ey, ez, dx, dy, dz):
    """
    Intersects an object-space ray (origin e, direction d) with the lateral
    surface of the unit cylinder. See Geometry for the returned tuple.
    """
    # x^2 + z^2 = 1: the Y components drop out of the quadratic.
    a = dx * dx + dz * dz                       # x_D^2 + z_D^2
    b = 2.0 * ex * dx + 2.0 * ez * dz           # 2 x_E x_D + 2 z_E z_D
    c = ex * ex + ez * ez - 1.0                 # x_E^2 + z_E^2 - 1

    # A ray parallel to the axis has a = b = 0 and finds no root.
    found, t0, t1 = solve_quadratic(a, b, c)
    if not found or t1 < 0.0:
        return miss()

    t = t1 if t0 < 0.0 else t0
    px = ex + t * dx
    py = ey + t * dy
    pz = ez + t * dz

    if py < -1.0 or py > 1.0:
        return miss()

    # The axis contributes nothing to the gradient: the normal is radial.
    radial = math.sqrt(px * px + pz * pz)
    nx, ny, nz = px / radial, 0.0, pz / radial

    u, v = cylinder_uv(px, py, pz)
    return True, t, px, py, pz, nx, ny, nz, u, v


class Cylinder(Geometry):
    """
    Open unit cylinder along the Y axis, y in [-1, 1].
    """
    kernel = staticmethod(hit_cylinder)
