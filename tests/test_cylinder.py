"""Unit tests for cylinder intersection.

Tests cover:
- Lateral hits from outside and inside
- The open ends: rays along the axis and hits outside y in [-1, 1]
- Transformed (scaled, rotated) cylinders
- Texture coordinates on both sides of the seam
"""

import math

import pytest

from core.ray import Ray
from geometry.cylinder import Cylinder, cylinder_uv


class TestCylinderIntersection:
    """Tests for Cylinder.intersect() with the identity transform."""

    def test_side_hit(self):
        """Ray along -X hits the side at (1, 0, 0)."""
        hit = Cylinder().intersect(Ray((2, 0, 0), (-1, 0, 0)))

        assert hit is not None
        assert tuple(hit.point) == pytest.approx((1.0, 0.0, 0.0))
        assert tuple(hit.normal) == pytest.approx((1.0, 0.0, 0.0))
        assert hit.uv.u == pytest.approx(0.0)
        assert hit.uv.v == pytest.approx(0.5)
        assert hit.t == pytest.approx(1.0)

    def test_normal_is_radial_off_center(self):
        """Away from y = 0 the normal still has no Y component."""
        hit = Cylinder().intersect(Ray((0, 0.5, 5), (0, 0, -1)))

        assert hit is not None
        assert tuple(hit.point) == pytest.approx((0.0, 0.5, 1.0))
        assert tuple(hit.normal) == pytest.approx((0.0, 0.0, 1.0))

    def test_parallel_to_axis_outside_radius(self):
        """A ray parallel to Y beyond the radius never meets the side."""
        assert Cylinder().intersect(Ray((2, 5, 0), (0, -1, 0))) is None

    def test_along_axis_through_open_ends(self):
        """There are no caps: a ray down the axis passes straight through."""
        assert Cylinder().intersect(Ray((0, 5, 0), (0, -1, 0))) is None

    def test_inside_parallel_to_axis(self):
        """Inside the tube and parallel to it: still no intersection."""
        assert Cylinder().intersect(Ray((0.5, 0, 0.5), (0, 1, 0))) is None

    def test_above_clip_range(self):
        """The infinite cylinder is hit at y = 3, which is clipped."""
        assert Cylinder().intersect(Ray((2, 3, 0), (-1, 0, 0))) is None

    def test_below_clip_range(self):
        assert Cylinder().intersect(Ray((2, -1.5, 0), (-1, 0, 0))) is None

    def test_at_clip_boundary(self):
        """y = 1 exactly is still on the cylinder."""
        hit = Cylinder().intersect(Ray((2, 1, 0), (-1, 0, 0)))
        assert hit is not None
        assert hit.uv.v == pytest.approx(1.0)

    def test_behind_ray(self):
        assert Cylinder().intersect(Ray((2, 0, 0), (1, 0, 0))) is None

    def test_origin_inside(self):
        """From the axis only the forward root is valid."""
        hit = Cylinder().intersect(Ray((0, 0, 0), (1, 0, 0)))

        assert hit is not None
        assert hit.t == pytest.approx(1.0)
        assert tuple(hit.point) == pytest.approx((1.0, 0.0, 0.0))
        assert tuple(hit.normal) == pytest.approx((1.0, 0.0, 0.0))

    def test_oblique_ray_through_open_end(self):
        """Enters through the top, leaves through the side below y = -1."""
        assert Cylinder().intersect(Ray((0, 2, 0), (0.25, -1, 0))) is None


class TestTransformedCylinder:
    """Tests for cylinders placed by a non-trivial transform."""

    def test_scaled(self):
        """Radius 2, half-height 3."""
        cylinder = Cylinder(scale=(2, 3, 2))
        hit = cylinder.intersect(Ray((5, 2.5, 0), (-1, 0, 0)))

        assert hit is not None
        assert tuple(hit.point) == pytest.approx((2.0, 2.5, 0.0))
        assert tuple(hit.normal) == pytest.approx((1.0, 0.0, 0.0))
        assert hit.t == pytest.approx(3.0)

    def test_rotated_onto_x_axis(self):
        """A quarter turn about Z lays the cylinder along X."""
        cylinder = Cylinder(orientation=(0, 0, math.pi / 2))
        hit = cylinder.intersect(Ray((0, 5, 0), (0, -1, 0)))

        assert hit is not None
        assert tuple(hit.point) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)
        assert tuple(hit.normal) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)

    def test_short_direction(self):
        """A 1e-7 long direction from the axis still finds the side."""
        hit = Cylinder().intersect(Ray((0, 0, 0), (1e-7, 0, 0)))

        assert hit is not None
        assert tuple(hit.point) == pytest.approx((1.0, 0.0, 0.0))
        assert tuple(hit.normal) == pytest.approx((1.0, 0.0, 0.0))
        assert hit.t == pytest.approx(1e7)

    def test_huge_cylinder(self):
        cylinder = Cylinder(scale=(1e7, 1e7, 1e7))
        hit = cylinder.intersect(Ray((5e7, 0, 0), (-1, 0, 0)))

        assert hit is not None
        assert tuple(hit.point) == pytest.approx((1e7, 0.0, 0.0))
        assert hit.t == pytest.approx(4e7)

    def test_translated(self):
        cylinder = Cylinder(position=(0, 0, -5))
        hit = cylinder.intersect(Ray((0, 0, 0), (0, 0, -1)))

        assert hit is not None
        assert tuple(hit.point) == pytest.approx((0.0, 0.0, -4.0))
        assert tuple(hit.normal) == pytest.approx((0.0, 0.0, 1.0))


class TestCylinderTextureCoordinates:
    """Tests for the cylindrical uv mapping."""

    def test_front(self):
        hit = Cylinder().intersect(Ray((0, 0.5, 5), (0, 0, -1)))
        assert (hit.uv.u, hit.uv.v) == pytest.approx((0.25, 0.75))

    def test_back_is_mirrored(self):
        hit = Cylinder().intersect(Ray((0, -0.5, -5), (0, 0, 1)))
        assert (hit.uv.u, hit.uv.v) == pytest.approx((0.75, 0.25))
        assert tuple(hit.normal) == pytest.approx((0.0, 0.0, -1.0))

    def test_seam_is_zero_on_both_sides(self):
        """u snaps to 0 wherever |z| is within the tolerance."""
        assert cylinder_uv(1.0, 0.0, 0.0) == pytest.approx((0.0, 0.5))
        assert cylinder_uv(-1.0, 0.0, 0.00001) == pytest.approx((0.0, 0.5))

    def test_just_past_seam(self):
        u, _ = cylinder_uv(math.cos(0.1), 0.0, -math.sin(0.1))
        assert u == pytest.approx(1.0 - 0.1 / (2 * math.pi))
