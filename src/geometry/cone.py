# geometry/cone.py
"""
Cone primitive.

In object space the apex sits at the origin and the base is a disc of
radius 1 on the plane y = -1, so the side obeys x^2 + z^2 - y^2 = 0 for
y in [-1, 0]. Base radius and height are both 1.

The side is tested first. Only when the side quadratic has no root in front
of the ray origin is the base disc (the "extremity") tested, by intersecting
the ray with the plane y = -1.
"""
import math

from numba import njit

from core.plane import plane_hit
from core.quadratic import solve_quadratic
from core.utils import EPSILON, angular_u, miss
from geometry.hittable import Geometry

# A base hit at or beyond this distance from the axis is outside the disc.
CONE_RIM_LIMIT = 1.0001
# Side hits may overshoot [-1, 0] in y by this much.
CONE_HEIGHT_TOLERANCE = 1e-4

@njit
def cone_base_uv(x, z):
    """
    The center of the base disc is the center of the texture map: v is the
    distance from the axis, u the angle around it.
    """
    v = math.sqrt(x * x + z * z)
    if v < EPSILON:
        return 0.0, v
    return angular_u(x / v, z), v

@njit
def cone_side_uv(x, y, z):
    """
    v is the height above the base, u the angle around the axis measured on
    the circle of radius 1 - (y + 1) at that height.
    """
    v = y + 1.0
    ring = 1.0 + (-1.0 * (y + 1.0))
    if abs(ring) < EPSILON:
        return 0.0, v
    return angular_u(x / ring, z), v

@njit
def hit_cone(ex, ey, ez, dx, dy, dz):
    """
    Intersects an object-space ray (origin e, direction d) with the unit
    cone and its base. See Geometry for the returned tuple.
    """
    a = dx * dx + dz * dz - dy * dy                         # x_D^2 + z_D^2 - y_D^2
    b = 2.0 * ex * dx + 2.0 * ez * dz - 2.0 * ey * dy       # 2 x_E x_D + 2 z_E z_D - 2 y_E y_D
    c = ex * ex + ez * ez - ey * ey                         # x_E^2 + z_E^2 - y_E^2

    found, t0, t1 = solve_quadratic(a, b, c)

    if not found or t1 < 0.0:
        # No side hit ahead of the ray; it may still cross the base.
        on_plane, t = plane_hit(ex, ey, ez, dx, dy, dz,
                                0.0, -1.0, 0.0,
                                1.0, -1.0, 0.0,
                                0.0, -1.0, 1.0)
        if not on_plane:
            return miss()

        px = ex + t * dx
        py = ey + t * dy
        pz = ez + t * dz
        if math.sqrt(px * px + pz * pz) >= CONE_RIM_LIMIT:
            # On the base plane, but outside the disc.
            return miss()

        u, v = cone_base_uv(px, pz)
        return True, t, px, py, pz, 0.0, -1.0, 0.0, u, v

    t = t1 if t0 < 0.0 else t0
    px = ex + t * dx
    py = ey + t * dy
    pz = ez + t * dz

    # The quadratic describes a double cone; keep the lower nappe only.
    if py < -1.0 - CONE_HEIGHT_TOLERANCE or py > CONE_HEIGHT_TOLERANCE:
        return miss()

    # Radial direction from the axis, then tilted up: r / h = 1, so the
    # vertical component equals the radial one.
    radial = math.sqrt(px * px + pz * pz)
    if radial > 0.0:
        rx, rz = px / radial, pz / radial
    else:
        rx, rz = 0.0, 0.0
    length = math.sqrt(rx * rx + 1.0 + rz * rz)
    nx, ny, nz = rx / length, 1.0 / length, rz / length

    u, v = cone_side_uv(px, py, pz)
    return True, t, px, py, pz, nx, ny, nz, u, v


class Cone(Geometry):
    """
    Unit cone with its apex at the origin and its base disc on y = -1.
    """
    kernel = staticmethod(hit_cone)
