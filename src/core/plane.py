# core/plane.py
from typing import Optional

from numba import njit

from core.ray import Ray
from core.vector import Vector3

# |n . d| below this means the ray runs parallel to the plane.
PLANE_EPSILON = 1e-8

@njit
def plane_hit(ox, oy, oz, dx, dy, dz,
              p0x, p0y, p0z, p1x, p1y, p1z, p2x, p2y, p2z):
    """
    Ray-plane test for the plane through p0, p1 and p2.

    Returns (hit, t). hit is False when the ray is parallel to the plane,
    when the three points are collinear, or when the plane lies behind the
    ray origin.
    """
    # Plane normal n = (p1 - p0) x (p2 - p0), left unnormalized.
    ux, uy, uz = p1x - p0x, p1y - p0y, p1z - p0z
    vx, vy, vz = p2x - p0x, p2y - p0y, p2z - p0z
    nx = uy * vz - uz * vy
    ny = uz * vx - ux * vz
    nz = ux * vy - uy * vx

    n_len = (nx * nx + ny * ny + nz * nz) ** 0.5
    if n_len < PLANE_EPSILON:
        return False, 0.0

    denom = (nx * dx + ny * dy + nz * dz) / n_len
    if abs(denom) < PLANE_EPSILON:
        return False, 0.0

    t = (nx * (p0x - ox) + ny * (p0y - oy) + nz * (p0z - oz)) / n_len / denom
    if t < 0.0:
        return False, 0.0
    return True, t


def intersect_plane(ray: Ray, p0: Vector3, p1: Vector3, p2: Vector3) -> Optional[Vector3]:
    """
    Returns the point where the ray meets the plane through p0, p1 and p2,
    or None. The ray and the points must be in the same coordinate space.
    """
    o, d = ray.origin, ray.direction
    hit, t = plane_hit(o.x, o.y, o.z, d.x, d.y, d.z,
                       p0.x, p0.y, p0.z, p1.x, p1.y, p1.z, p2.x, p2.y, p2.z)
    if not hit:
        return None
    return ray.at(t)
