# geometry/sphere.py
"""
Sphere primitive.

There is no need to store a center or radius: rays are moved into object
space with the inverse model transform, where the sphere is the unit sphere
centered at the origin. Position, orientation and scale (including
non-uniform scale, which gives ellipsoids) all come from the transform.
"""
import math

from numba import njit

from core.quadratic import solve_quadratic
from core.utils import EPSILON, angular_u, clamp_unit, miss
from geometry.hittable import Geometry

@njit
def sphere_uv(x, y, z):
    """
    Spherical texture coordinates of a point on the unit sphere. u goes
    around the Y axis like the cylinder's, v runs from the south pole (0)
    to the north pole (1).
    """
    ring = math.sqrt(x * x + z * z)
    if ring < EPSILON:
        u = 0.0
    else:
        u = angular_u(x / ring, z)
    v = 1.0 - math.acos(clamp_unit(y)) / math.pi
    return u, v

@njit
def hit_sphere(ex, ey, ez, dx, dy, dz):
    """
    Intersects an object-space ray (origin e, direction d) with the unit
    sphere. See Geometry for the layout of the returned tuple.
    """
    # Fundamentals of Computer Graphics, ray-sphere intersection with c = 0, R = 1.
    a = dx * dx + dy * dy + dz * dz             # d.d
    b = 2.0 * (dx * ex + dy * ey + dz * ez)     # 2d.e
    c = ex * ex + ey * ey + ez * ez - 1.0       # e.e - R^2

    found, t0, t1 = solve_quadratic(a, b, c)
    # t0 <= t1, so t1 < 0 means both hits are behind the origin.
    if not found or t1 < 0.0:
        return miss()

    t = t1 if t0 < 0.0 else t0
    px = ex + t * dx
    py = ey + t * dy
    pz = ez + t * dz

    # Centered at the origin, so the point is also the radial direction.
    length = math.sqrt(px * px + py * py + pz * pz)
    nx, ny, nz = px / length, py / length, pz / length

    u, v = sphere_uv(px, py, pz)
    return True, t, px, py, pz, nx, ny, nz, u, v


class Sphere(Geometry):
    """
    Unit sphere at the origin of object space.
    """
    kernel = staticmethod(hit_sphere)
