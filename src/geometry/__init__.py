# geometry/__init__.py
"""
Ray-primitive intersection.

Each primitive is a canonical shape in its own object space (unit sphere,
unit cylinder, unit cone) placed in the world by a model transform. A query
maps the ray into object space, solves there, and maps the hit back:

    hit = Sphere(position, orientation, scale, material).intersect(ray)

intersect() returns an Intersection or None. intersect_batch() runs the same
test over arrays of rays.
"""
from geometry.batch import BatchResult, intersect_batch
from geometry.cone import Cone
from geometry.cylinder import Cylinder
from geometry.hittable import Geometry, Hittable
from geometry.intersection import Intersection
from geometry.sphere import Sphere

__all__ = [
    "Hittable",
    "Geometry",
    "Intersection",
    "Sphere",
    "Cylinder",
    "Cone",
    "BatchResult",
    "intersect_batch",
]
