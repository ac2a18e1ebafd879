# geometry/hittable.py
import logging
from typing import Optional

import numpy as np

from core.ray import Ray
from core.transform import (VectorLike, build_transform, transform_direction,
                            transform_normal, transform_point)
from core.uv import UV
from core.vector import Vector3
from geometry.intersection import Intersection
from materials.material import DEFAULT_MATERIAL, Material

logger = logging.getLogger(__name__)

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def intersect(self, ray: Ray) -> Optional[Intersection]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")


class Geometry(Hittable):
    """
    A primitive placed in the world by a model transform.

    Subclasses describe a canonical shape in object space through `kernel`,
    a numba-compiled function taking the object-space ray origin and unit
    direction as six floats and returning

        (hit, t, px, py, pz, nx, ny, nz, u, v)

    with the object-space point, object-space normal and texture
    coordinates. This class maps rays in and results out, so a new primitive
    only has to supply its kernel.

    The transform pair is computed once and never changes; the material is
    held by reference and never copied.
    """
    kernel = None

    def __init__(self,
                 position: VectorLike = (0.0, 0.0, 0.0),
                 orientation: VectorLike = (0.0, 0.0, 0.0),
                 scale: VectorLike = (1.0, 1.0, 1.0),
                 material: Optional[Material] = None):
        if self.kernel is None:
            raise NotImplementedError(f"{type(self).__name__} does not define an intersection kernel.")
        self._transform, self._inverse_transform = build_transform(position, orientation, scale)
        self._material = material if material is not None else DEFAULT_MATERIAL
        logger.debug("Created %s position=%s orientation=%s scale=%s material=%r",
                     type(self).__name__, position, orientation, scale, self._material)

    @property
    def transform(self) -> np.ndarray:
        return self._transform

    @property
    def inverse_transform(self) -> np.ndarray:
        return self._inverse_transform

    @property
    def material(self) -> Material:
        return self._material

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """
        Returns the nearest intersection in front of the ray origin, or None.
        """
        # Let's move the ray into object space, where the shape is canonical.
        e = transform_point(self._inverse_transform, ray.origin)
        d = transform_direction(self._inverse_transform, ray.direction)

        # Kernels take a unit direction; t is rescaled to the caller's units.
        length = d.length()
        if length == 0.0:
            return None
        d = d / length

        hit, t, px, py, pz, nx, ny, nz, u, v = self.kernel(e.x, e.y, e.z, d.x, d.y, d.z)
        if not hit:
            return None

        point = transform_point(self._transform, Vector3(px, py, pz))
        normal = transform_normal(self._inverse_transform, Vector3(nx, ny, nz))
        return Intersection(ray, point, normal, UV(u, v), self._material, t / length)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(material={self._material!r})"
