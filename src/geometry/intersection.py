# geometry/intersection.py
from core.ray import Ray
from core.uv import UV
from core.vector import Vector3
from materials.material import Material

class Intersection:
    """
    Records details of a ray-primitive intersection, in world space.
    """
    __slots__ = ("ray", "point", "normal", "uv", "material", "t")

    def __init__(self, ray: Ray, point: Vector3, normal: Vector3,
                 uv: UV, material: Material, t: float = 0.0):
        self.ray = ray              # Ray that produced the hit, echoed back
        self.point = point          # Intersection point
        self.normal = normal        # Unit surface normal at the point
        self.uv = uv                # Texture coordinates
        self.material = material    # Same instance the primitive holds
        self.t = t                  # Ray parameter at intersection

    def __repr__(self) -> str:
        return (f"Intersection(point={self.point!r}, normal={self.normal!r}, "
                f"uv={self.uv!r}, t={self.t})")
